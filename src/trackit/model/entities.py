"""Entity definitions for the trackit data store.

Every entity is a frozen dataclass: once constructed it never changes,
and editing an entity means building a new one and asking the Track to
replace the old value.

Two comparisons exist for every entity kind and they are kept apart on
purpose:

``==``
    Full value equality, generated by the dataclass.
``is_same_<kind>(other)``
    Identity equality used for uniqueness and lookup.  It compares the
    entity's ``identity_key`` and is weaker than ``==`` for contacts,
    modules and lessons.  For tasks the two coincide.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import ClassVar, Final

from trackit.model.fields import Address, Code, Email, FieldConstraintError, Name, Phone, Tag

DATE_FORMAT: Final[str] = "%d/%m/%Y"
TIME_FORMAT: Final[str] = "%H:%M"

_LESSON_DATETIME_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<day>[A-Za-z]{3})\s+(?P<start>\d{1,2}:\d{2})\s*-\s*(?P<end>\d{1,2}:\d{2})"
)


# ---------------------------------------------------------------------------
# Enums shared across entity types
# ---------------------------------------------------------------------------


class Weekday(Enum):
    """Day of the week on which a weekly lesson takes place.

    Member order follows the calendar week starting on Monday, which is
    also the order used when lessons are sorted.
    """

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def from_date(cls, day: date) -> "Weekday":
        """Return the lesson weekday on which calendar ``day`` falls."""
        return _WEEKDAYS_BY_INDEX[day.weekday()]

    @classmethod
    def from_label(cls, label: str) -> "Weekday":
        """Look up a weekday by its three-letter label, ignoring case.

        Raises
        ------
        FieldConstraintError
            If ``label`` is not a known weekday abbreviation.
        """
        for member in cls:
            if member.value.lower() == label.lower():
                return member
        raise FieldConstraintError(LessonDateTime.MESSAGE_CONSTRAINTS, label)

    @property
    def order(self) -> int:
        return _WEEKDAYS_BY_INDEX.index(self)


_WEEKDAYS_BY_INDEX: Final[tuple[Weekday, ...]] = tuple(Weekday)


class LessonType(Enum):
    """The closed set of lesson kinds a module may schedule."""

    LECTURE = "lecture"
    TUTORIAL = "tutorial"
    LAB = "lab"
    RECITATION = "recitation"
    SECTIONAL = "sectional"

    @classmethod
    def from_label(cls, label: str) -> "LessonType":
        """Look up a lesson type by its lower-case label.

        Raises
        ------
        FieldConstraintError
            If ``label`` does not name a lesson type.
        """
        try:
            return cls(label)
        except ValueError as exc:
            raise FieldConstraintError(LESSON_TYPE_CONSTRAINTS, label) from exc

    def __str__(self) -> str:
        return self.value


LESSON_TYPE_CONSTRAINTS: Final[str] = "Lesson type should be one of: " + ", ".join(
    t.value for t in LessonType
)


# ---------------------------------------------------------------------------
# Lesson schedule
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LessonDateTime:
    """The weekly slot of a lesson: a weekday plus a start and end time.

    The textual form is ``"Mon 17:45-21:00"``.  ``start`` must be
    strictly before ``end``.
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Lesson date should be in the format DAY HH:MM-HH:MM, e.g. Mon 17:45-21:00, "
        "where DAY is one of Mon, Tue, Wed, Thu, Fri, Sat, Sun and the start time "
        "is before the end time"
    )

    weekday: Weekday
    start: time
    end: time

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise FieldConstraintError(self.MESSAGE_CONSTRAINTS, str(self))

    @classmethod
    def parse(cls, text: str) -> "LessonDateTime":
        """Build a ``LessonDateTime`` from its textual form.

        Raises
        ------
        FieldConstraintError
            If ``text`` is malformed or the times are out of order.
        """
        match = _LESSON_DATETIME_RE.fullmatch(text.strip())
        if match is None:
            raise FieldConstraintError(cls.MESSAGE_CONSTRAINTS, text)
        try:
            start = datetime.strptime(match.group("start"), TIME_FORMAT).time()
            end = datetime.strptime(match.group("end"), TIME_FORMAT).time()
        except ValueError as exc:
            raise FieldConstraintError(cls.MESSAGE_CONSTRAINTS, text) from exc
        return cls(weekday=Weekday.from_label(match.group("day")), start=start, end=end)

    @property
    def sort_key(self) -> tuple[int, time]:
        """Return the (weekday, start time) key used to order lessons."""
        return (self.weekday.order, self.start)

    def __str__(self) -> str:
        return (
            f"{self.weekday.value} {self.start.strftime(TIME_FORMAT)}"
            f"-{self.end.strftime(TIME_FORMAT)}"
        )


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Contact:
    """A person tracked by the user, e.g. a tutor or a project teammate.

    Contacts are the same contact when their names match ignoring case.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = field(default_factory=frozenset)

    @property
    def identity_key(self) -> str:
        return self.name.value.casefold()

    def is_same_contact(self, other: "Contact") -> bool:
        """Return True if ``other`` has the same name, ignoring case."""
        return self.identity_key == other.identity_key

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags, key=lambda t: t.value)

    def __str__(self) -> str:
        tags = "".join(str(t) for t in self.sorted_tags())
        return (
            f"{self.name} Phone: {self.phone} Email: {self.email} "
            f"Address: {self.address} Tags: {tags}"
        )


@dataclass(frozen=True, slots=True)
class Module:
    """A university module identified by its code."""

    code: Code
    name: Name
    description: str = ""

    @property
    def identity_key(self) -> Code:
        return self.code

    def is_same_module(self, other: "Module") -> bool:
        """Return True if ``other`` has the same module code."""
        return self.identity_key == other.identity_key

    def __str__(self) -> str:
        return f"{self.code} {self.name}" + (f" ({self.description})" if self.description else "")


@dataclass(frozen=True, slots=True)
class Lesson:
    """A weekly lesson of a module.

    A module has at most one lesson of each ``LessonType``, so the
    identity key is the pair (code, type).
    """

    code: Code
    type: LessonType
    date: LessonDateTime
    address: Address

    @property
    def identity_key(self) -> tuple[Code, LessonType]:
        return (self.code, self.type)

    def is_same_lesson(self, other: "Lesson") -> bool:
        """Return True if ``other`` is the same kind of lesson of the same module."""
        return self.identity_key == other.identity_key

    def __str__(self) -> str:
        return f"{self.code} {self.type.value} {self.date} at {self.address}"


@dataclass(frozen=True, slots=True)
class Task:
    """A piece of work due on a date, optionally tied to a module.

    Tasks carry no separate identity key: two tasks are duplicates only
    when every field matches.
    """

    name: Name
    date: date
    code: Code | None = None
    remark: str = ""

    @property
    def identity_key(self) -> "Task":
        return self

    def is_same_task(self, other: "Task") -> bool:
        """Return True if ``other`` equals this task in every field."""
        return self == other

    def formatted_date(self) -> str:
        return self.date.strftime(DATE_FORMAT)

    def __str__(self) -> str:
        parts = [f"{self.name} Due: {self.formatted_date()}"]
        if self.code is not None:
            parts.append(f"Module: {self.code}")
        if self.remark:
            parts.append(f"Remark: {self.remark}")
        return " ".join(parts)
