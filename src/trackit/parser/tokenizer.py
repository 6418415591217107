"""Argument tokenizer for trackit commands.

Command arguments are written as ``PREFIX/value`` pairs, e.g.::

    n/Assignment 1 d/20/11/2026 m/CS2103T r/Focus on chapters 1-3

A prefix only counts when it is at the start of the argument string or
preceded by whitespace, so slashes inside values (dates, remarks) are
left alone.  Text before the first prefix is the *preamble*, used for
indices and module codes (``T edit 2 n/New name``).

Prefixes may repeat.  ``ArgumentMultimap.get_all`` returns every value
in order; ``ArgumentMultimap.get`` returns the last one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final


@dataclass(frozen=True, slots=True)
class Prefix:
    """An argument prefix such as ``n/``."""

    text: str

    def __str__(self) -> str:
        return self.text


PREFIX_NAME: Final[Prefix] = Prefix("n/")
PREFIX_PHONE: Final[Prefix] = Prefix("p/")
PREFIX_EMAIL: Final[Prefix] = Prefix("e/")
PREFIX_ADDRESS: Final[Prefix] = Prefix("a/")
PREFIX_TAG: Final[Prefix] = Prefix("t/")
# Lessons reuse ``t/`` for their type; contacts and lessons never share a command.
PREFIX_TYPE: Final[Prefix] = Prefix("t/")
PREFIX_CODE: Final[Prefix] = Prefix("m/")
PREFIX_DATE: Final[Prefix] = Prefix("d/")
PREFIX_REMARK: Final[Prefix] = Prefix("r/")


@dataclass
class ArgumentMultimap:
    """Values collected for each prefix, plus the preamble."""

    preamble: str = ""
    _values: dict[Prefix, list[str]] = field(default_factory=dict)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get(self, prefix: Prefix) -> str | None:
        """Return the last value given for ``prefix``, or ``None``."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def has_all(self, *prefixes: Prefix) -> bool:
        return all(self.has(p) for p in prefixes)


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Split ``args`` into a preamble and per-prefix values.

    Parameters
    ----------
    args:
        Argument text following the command word.
    prefixes:
        The prefixes recognised by the command being parsed.  Other
        ``x/`` sequences are treated as part of a value.

    Returns
    -------
    ArgumentMultimap
        Trimmed values in the order they appear.
    """
    positions = _find_positions(args, set(prefixes))
    result = ArgumentMultimap()
    end_of_preamble = positions[0][0] if positions else len(args)
    result.preamble = args[:end_of_preamble].strip()
    for i, (start, prefix) in enumerate(positions):
        value_start = start + len(prefix.text)
        value_end = positions[i + 1][0] if i + 1 < len(positions) else len(args)
        result.put(prefix, args[value_start:value_end].strip())
    return result


def _find_positions(args: str, prefixes: set[Prefix]) -> list[tuple[int, Prefix]]:
    found: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        start = args.find(prefix.text)
        while start != -1:
            if start == 0 or args[start - 1].isspace():
                found.append((start, prefix))
            start = args.find(prefix.text, start + 1)
    found.sort(key=lambda item: item[0])
    return found
