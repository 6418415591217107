"""Logic layer: parse a line of input, execute it and persist the result.

``LogicManager`` is the single entry point used by the CLI.  It owns no
data itself; the ``ModelManager`` holds the Track and the storage writes
it back after every command that changed it.
"""
from __future__ import annotations

import logging

from trackit.commands.base import CommandError, CommandResult
from trackit.model.manager import ModelManager
from trackit.parser.parser import CommandParser
from trackit.storage.storage import JsonTrackStorage

logger = logging.getLogger(__name__)

MESSAGE_SAVE_FAILED = "Could not save data to file"


class LogicManager:
    """Runs user commands against a model and saves mutations.

    Parameters
    ----------
    model:
        The model the commands act on.
    storage:
        Where the Track is saved after a mutating command.
    """

    def __init__(self, model: ModelManager, storage: JsonTrackStorage) -> None:
        self._model = model
        self._storage = storage
        self._parser = CommandParser()

    @property
    def model(self) -> ModelManager:
        return self._model

    def execute(self, text: str) -> CommandResult:
        """Parse and execute one command line.

        Raises
        ------
        ParseError
            If ``text`` is not a valid command.
        CommandError
            If the command fails, or its result cannot be saved.
        """
        logger.info("Command: %s", text)
        command = self._parser.parse(text)
        result = command.execute(self._model)
        if result.mutated:
            try:
                self._storage.save(self._model.track)
            except OSError as exc:
                logger.error("Saving to %s failed: %s", self._storage.path, exc)
                raise CommandError(f"{MESSAGE_SAVE_FAILED}: {exc}") from exc
        return result
