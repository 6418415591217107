"""trackit integrity module.

Exports the ``IntegrityChecker`` and diagnostic types.
"""
from __future__ import annotations

from trackit.integrity.checker import IntegrityChecker
from trackit.integrity.diagnostics import Diagnostic, Severity
from trackit.integrity.rules import DEFAULT_RULES, Rule

__all__ = [
    "IntegrityChecker",
    "Diagnostic",
    "Severity",
    "DEFAULT_RULES",
    "Rule",
]
