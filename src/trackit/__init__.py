"""trackit: a personal tracker of university contacts, modules, lessons and tasks.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import trackit

    # Load the tracked data (None when the file does not exist yet)
    track = trackit.load_track("data/trackit.json")

    # Run a command against it
    model = trackit.ModelManager(track)
    trackit.CommandParser().parse("M add m/CS2103T n/Software Engineering").execute(model)

    # Save it back
    trackit.save_track(model.track, "data/trackit.json")

    # Report stale module references
    findings = trackit.check(model.track)

    trackit.__version__
    '0.1.0'
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from trackit.model import ModelManager, Track
from trackit.parser import CommandParser

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from trackit.integrity.diagnostics import Diagnostic


def load_track(path: Path | str) -> Track | None:
    """Load a Track from the JSON data file at ``path``.

    Returns
    -------
    Track or None
        The stored data, or ``None`` if the file does not exist.

    Raises
    ------
    trackit.storage.DataConversionError
        If the file holds invalid or inconsistent data.
    """
    from trackit.storage.storage import JsonTrackStorage

    return JsonTrackStorage(path).read()


def save_track(track: Track, path: Path | str) -> None:
    """Write ``track`` to the JSON data file at ``path``."""
    from trackit.storage.storage import JsonTrackStorage

    JsonTrackStorage(path).save(track)


def check(track: Track, module_limit: int | None = None) -> list["Diagnostic"]:
    """Run the integrity rules against ``track``.

    Parameters
    ----------
    track:
        The data to check.
    module_limit:
        Module ceiling to check against; defaults to the configured
        default limit.
    """
    from trackit.config import MODULE_LIMIT
    from trackit.integrity.checker import IntegrityChecker

    limit = module_limit if module_limit is not None else MODULE_LIMIT
    return IntegrityChecker(module_limit=limit).check(track)


__all__ = [
    "__version__",
    "CommandParser",
    "ModelManager",
    "Track",
    "load_track",
    "save_track",
    "check",
]
