"""Predicates used to build filtered views over the Track.

Each predicate is a small frozen dataclass with a ``__call__`` method,
so predicates compare by value (handy in tests) while still being
plain callables that views can apply to entities.  Predicates never
mutate anything and never raise on well-formed entities.

``all_of`` composes predicates with logical AND.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Any, ClassVar, TypeVar

from trackit.model.entities import Contact, Lesson, Task, Weekday
from trackit.model.fields import Code, Tag

T = TypeVar("T")

Predicate = Callable[[T], bool]
Clock = Callable[[], date]


@dataclass(frozen=True)
class ShowAll:
    """Accept every entity."""

    def __call__(self, entity: Any) -> bool:
        return True


@dataclass(frozen=True)
class ShowNone:
    """Reject every entity."""

    def __call__(self, entity: Any) -> bool:
        return False


SHOW_ALL = ShowAll()
SHOW_NONE = ShowNone()


@dataclass(frozen=True)
class AllOf:
    """Accept an entity only when every wrapped predicate accepts it."""

    predicates: tuple[Predicate[Any], ...]

    def __call__(self, entity: Any) -> bool:
        return all(predicate(entity) for predicate in self.predicates)

    @property
    def volatile(self) -> bool:
        return any(is_volatile(p) for p in self.predicates)


def is_volatile(predicate: Predicate[Any]) -> bool:
    """Return True if ``predicate`` may give a different answer on each call.

    Views never cache the result of a volatile predicate.
    """
    return bool(getattr(predicate, "volatile", False))


def all_of(*predicates: Predicate[T]) -> Predicate[T]:
    """Combine ``predicates`` with logical AND.

    ``SHOW_ALL`` members are dropped since they cannot change the
    result; a single remaining predicate is returned unwrapped.
    """
    effective = tuple(p for p in predicates if p != SHOW_ALL)
    if not effective:
        return SHOW_ALL
    if len(effective) == 1:
        return effective[0]
    return AllOf(effective)


# ---------------------------------------------------------------------------
# Lesson predicates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LessonHasCode:
    """Lessons belonging to the module ``code``."""

    code: Code

    def __call__(self, lesson: Lesson) -> bool:
        return lesson.code == self.code


@dataclass(frozen=True)
class LessonOnWeekday:
    """Lessons held on ``weekday``."""

    weekday: Weekday

    @classmethod
    def for_date(cls, day: date) -> "LessonOnWeekday":
        """Build the predicate for the weekday on which ``day`` falls."""
        return cls(Weekday.from_date(day))

    def __call__(self, lesson: Lesson) -> bool:
        return lesson.date.weekday == self.weekday


# ---------------------------------------------------------------------------
# Task predicates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TaskHasCode:
    """Tasks referring to the module ``code``."""

    code: Code

    def __call__(self, task: Task) -> bool:
        return task.code == self.code


@dataclass(frozen=True)
class TaskOnDate:
    """Tasks due exactly on ``day``."""

    day: date

    def __call__(self, task: Task) -> bool:
        return task.date == self.day


@dataclass(frozen=True)
class TaskAfterDate:
    """Tasks due strictly after ``day``."""

    day: date

    def __call__(self, task: Task) -> bool:
        return task.date > self.day


@dataclass(frozen=True)
class TaskIsOverdue:
    """Tasks due strictly before today.

    ``today`` is called on every evaluation, so the same predicate
    instance gives different answers as the clock moves on.  Tests pass
    a fixed clock.
    """

    volatile: ClassVar[bool] = True

    today: Clock = date.today

    def __call__(self, task: Task) -> bool:
        return task.date < self.today()


# ---------------------------------------------------------------------------
# Contact predicates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ContactHasTag:
    """Contacts carrying ``tag``."""

    tag: Tag

    def __call__(self, contact: Contact) -> bool:
        return self.tag in contact.tags
