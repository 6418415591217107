"""trackit parser module.

Exports the ``CommandParser`` class, the argument tokenizer and parse
error types.
"""
from __future__ import annotations

from trackit.parser.errors import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_INDEX,
    MESSAGE_UNKNOWN_COMMAND,
    ParseError,
)
from trackit.parser.parser import ALL_USAGES, CommandParser
from trackit.parser.tokenizer import ArgumentMultimap, Prefix, tokenize

__all__ = [
    "CommandParser",
    "ALL_USAGES",
    "ParseError",
    "MESSAGE_INVALID_COMMAND_FORMAT",
    "MESSAGE_INVALID_INDEX",
    "MESSAGE_UNKNOWN_COMMAND",
    "ArgumentMultimap",
    "Prefix",
    "tokenize",
]
