"""Integrity checker: cross-entity checks over a loaded ``Track``.

The Track accepts tasks and lessons whose module has since been deleted
and does not bound the number of modules.  The checker reports those
situations so that the user can repair them.

Usage
-----
::

    from trackit.integrity import IntegrityChecker

    diagnostics = IntegrityChecker(module_limit=10).check(track)
    errors = [d for d in diagnostics if d.is_error]
"""
from __future__ import annotations

import logging

from trackit.config import MODULE_LIMIT
from trackit.integrity.diagnostics import Diagnostic, Severity
from trackit.integrity.rules import DEFAULT_RULES, Rule, module_limit_rule
from trackit.model.track import Track

logger = logging.getLogger(__name__)

_SEVERITY_ORDER = {Severity.ERROR: 0, Severity.WARNING: 1, Severity.INFORMATION: 2}


class IntegrityChecker:
    """Runs integrity rules against a Track.

    Parameters
    ----------
    rules:
        Rules to run.  Defaults to ``DEFAULT_RULES``.
    module_limit:
        Module ceiling checked by the TRK003 rule.
    """

    def __init__(self, rules: list[Rule] | None = None, module_limit: int = MODULE_LIMIT) -> None:
        self._rules: list[Rule] = list(rules if rules is not None else DEFAULT_RULES)
        self._rules.append(module_limit_rule(module_limit))

    def check(self, track: Track) -> list[Diagnostic]:
        """Return every finding, errors first, then by rule code."""
        diagnostics: list[Diagnostic] = []
        for rule in self._rules:
            diagnostics.extend(rule(track))
        diagnostics.sort(key=lambda d: (_SEVERITY_ORDER[d.severity], d.code))
        logger.debug("Integrity check produced %d diagnostic(s)", len(diagnostics))
        return diagnostics

    def add_rule(self, rule: Rule) -> None:
        self._rules.append(rule)

    @property
    def rule_count(self) -> int:
        return len(self._rules)
