"""JSON file storage of the Track."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from trackit.model.track import Track
from trackit.storage.errors import DataConversionError
from trackit.storage.serializer import TrackSerializer

logger = logging.getLogger(__name__)


class JsonTrackStorage:
    """Reads and writes a Track as a JSON document at ``path``.

    Parameters
    ----------
    path:
        Location of the data file.  Parent directories are created on
        the first save.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._serializer = TrackSerializer()

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Track | None:
        """Load the Track, or return ``None`` if the file does not exist.

        Raises
        ------
        DataConversionError
            If the file exists but cannot be read or holds invalid data.
        """
        if not self._path.exists():
            logger.info("Data file %s not found", self._path)
            return None
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DataConversionError(f"Cannot read data file {self._path}: {exc}") from exc
        track = self._serializer.from_json(text)
        logger.debug("Loaded %r from %s", track, self._path)
        return track

    def save(self, track: Track) -> None:
        """Write ``track`` to the data file.

        The document is written to a sibling ``.tmp`` file first and then
        moved over the data file, so an interrupted save leaves the
        previous data intact.

        Raises
        ------
        OSError
            If the file or its parent directories cannot be written.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        staging = self._path.with_name(self._path.name + ".tmp")
        try:
            staging.write_text(self._serializer.to_json(track) + "\n", encoding="utf-8")
            os.replace(staging, self._path)
        except OSError:
            staging.unlink(missing_ok=True)
            raise
        logger.debug("Saved track to %s", self._path)
