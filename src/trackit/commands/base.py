"""Command base types.

A command is a parsed, validated user request.  ``execute`` applies it
to a ``ModelManager`` and returns a ``CommandResult`` describing what to
tell the user and which lists to show.  Expected failures (duplicates,
unknown indices, missing modules, the module ceiling) raise
``CommandError`` with a user-facing message; the model is left as it
was.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar

from trackit.model.manager import ModelManager

E = TypeVar("E")


class CommandError(Exception):
    """Raised when a command cannot be executed against the model."""


@dataclass(frozen=True)
class ResultSection:
    """A titled list of entities to display after a command.

    Parameters
    ----------
    title:
        Heading shown above the list.
    kind:
        One of ``"contact"``, ``"module"``, ``"lesson"``, ``"task"``;
        selects how the entities are rendered.
    items:
        The entities, in display order.  Indices shown to the user are
        one-based positions in this tuple.
    """

    title: str
    kind: str
    items: tuple[Any, ...]


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successfully executed command.

    Parameters
    ----------
    feedback:
        Message for the user.
    mutated:
        True when the command changed tracked data and it should be saved.
    should_exit:
        True when the interactive session should end.
    sections:
        Lists to display below the feedback.
    """

    feedback: str
    mutated: bool = False
    should_exit: bool = False
    sections: tuple[ResultSection, ...] = field(default=())


class Command(ABC):
    """Base class of every trackit command."""

    COMMAND_WORD: ClassVar[str] = ""
    USAGE: ClassVar[str] = ""

    @abstractmethod
    def execute(self, model: ModelManager) -> CommandResult:
        """Apply the command to ``model``.

        Raises
        ------
        CommandError
            If the command cannot be carried out.
        """

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields_text = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields_text})"


def pick(items: Sequence[E], index: int, message: str) -> E:
    """Return ``items[index]`` or raise ``CommandError(message)``."""
    if index < 0 or index >= len(items):
        raise CommandError(message)
    return items[index]
