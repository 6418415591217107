"""Parse error types for the trackit command parser.

A ``ParseError`` carries the user-facing message and, when the command
word was recognised, the usage text of that command so that the CLI can
show how the command should have been written.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParseError(Exception):
    """Raised when command text cannot be turned into a command.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    usage:
        Usage text of the command being parsed, if known.
    """

    message: str
    usage: str | None = field(default=None)

    def __str__(self) -> str:
        if self.usage:
            return f"{self.message}\n{self.usage}"
        return self.message

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (str(self),))


MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
