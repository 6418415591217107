"""Storage error types."""
from __future__ import annotations


class DataConversionError(Exception):
    """Raised when stored data cannot be turned back into a Track.

    The message names the offending entity kind and, where known, the
    field that could not be converted.
    """
