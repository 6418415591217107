"""Integrity rules run by the ``IntegrityChecker``.

Each rule is a callable that accepts a ``Track`` and returns a list of
``Diagnostic`` objects.  Rule codes use the ``TRK`` prefix:

    TRK001  Task refers to a module that is not tracked
    TRK002  Lesson refers to a module that is not tracked
    TRK003  More modules than the configured limit
    TRK004  Contact tag looks like a module code that is not tracked
"""
from __future__ import annotations

from collections.abc import Callable

from trackit.integrity.diagnostics import Diagnostic, Severity
from trackit.model.fields import Code
from trackit.model.track import Track

Rule = Callable[[Track], list[Diagnostic]]


# ---------------------------------------------------------------------------
# TRK001: stale task module references
# ---------------------------------------------------------------------------

def rule_task_module_exists(track: Track) -> list[Diagnostic]:
    """TRK001: A task's module code should name a tracked module."""
    diagnostics: list[Diagnostic] = []
    for position, task in enumerate(track.tasks, start=1):
        if task.code is not None and not track.has_module_code(task.code):
            diagnostics.append(Diagnostic(
                Severity.WARNING,
                "TRK001",
                f"Task {task.name.value!r} refers to module {task.code} which is not tracked",
                f"task {position}",
                suggestion=f"Add module {task.code} or edit the task's module",
                rule="task_module_exists",
            ))
    return diagnostics


# ---------------------------------------------------------------------------
# TRK002: stale lesson module references
# ---------------------------------------------------------------------------

def rule_lesson_module_exists(track: Track) -> list[Diagnostic]:
    """TRK002: A lesson's module code should name a tracked module."""
    diagnostics: list[Diagnostic] = []
    for position, lesson in enumerate(track.lessons, start=1):
        if not track.has_module_code(lesson.code):
            diagnostics.append(Diagnostic(
                Severity.WARNING,
                "TRK002",
                f"{lesson.type.value.capitalize()} of {lesson.code} belongs to a module "
                "that is not tracked",
                f"lesson {position}",
                suggestion=f"Add module {lesson.code} or delete the lesson",
                rule="lesson_module_exists",
            ))
    return diagnostics


# ---------------------------------------------------------------------------
# TRK003: module ceiling
# ---------------------------------------------------------------------------

def module_limit_rule(limit: int) -> Rule:
    """Build the TRK003 rule for a given module ceiling."""

    def rule_module_limit(track: Track) -> list[Diagnostic]:
        count = len(track.modules)
        if count <= limit:
            return []
        return [Diagnostic(
            Severity.ERROR,
            "TRK003",
            f"{count} modules are tracked but the limit is {limit}",
            "modules",
            suggestion="Delete modules or raise module_limit in the configuration",
            rule="module_limit",
        )]

    return rule_module_limit


# ---------------------------------------------------------------------------
# TRK004: contact tags naming untracked modules
# ---------------------------------------------------------------------------

def rule_contact_module_tags(track: Track) -> list[Diagnostic]:
    """TRK004: Tags shaped like module codes usually name tracked modules."""
    diagnostics: list[Diagnostic] = []
    for position, contact in enumerate(track.contacts, start=1):
        for tag in contact.sorted_tags():
            if Code.is_valid(tag.value) and not track.has_module_code(Code(tag.value)):
                diagnostics.append(Diagnostic(
                    Severity.INFORMATION,
                    "TRK004",
                    f"Contact {contact.name.value!r} is tagged {tag.value} but no such module is tracked",
                    f"contact {position}",
                    rule="contact_module_tags",
                ))
    return diagnostics


DEFAULT_RULES: list[Rule] = [
    rule_task_module_exists,
    rule_lesson_module_exists,
    rule_contact_module_tags,
]
