"""Diagnostic types for the integrity checker.

A ``Diagnostic`` describes one problem found in stored data that the
Track itself tolerates, such as a task that still refers to a deleted
module.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Severity(Enum):
    """Severity levels for diagnostics."""

    ERROR = auto()
    WARNING = auto()
    INFORMATION = auto()


@dataclass(frozen=True)
class Diagnostic:
    """A single integrity finding.

    Parameters
    ----------
    severity:
        How serious this finding is.
    code:
        A short machine-readable identifier, e.g. ``"TRK001"``.
    message:
        Human-readable description of the problem.
    location:
        The entity the finding is about, e.g. ``"task 3"``.  Positions
        are one-based, matching the unfiltered lists.
    suggestion:
        Optional human-readable fix suggestion.
    rule:
        The rule name that produced this diagnostic.
    """

    severity: Severity
    code: str
    message: str
    location: str
    suggestion: str | None = field(default=None)
    rule: str = field(default="")

    def __str__(self) -> str:
        prefix = f"[{self.code}] {self.severity.name}"
        suggestion_part = f" (hint: {self.suggestion})" if self.suggestion else ""
        return f"{prefix} at {self.location}: {self.message}{suggestion_part}"

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR
