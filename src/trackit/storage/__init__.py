"""trackit storage module.

Exports the JSON file storage, the Track serializer and storage error
types.
"""
from __future__ import annotations

from trackit.storage.errors import DataConversionError
from trackit.storage.serializer import TrackSerializer
from trackit.storage.storage import JsonTrackStorage

__all__ = [
    "DataConversionError",
    "JsonTrackStorage",
    "TrackSerializer",
]
