"""Field-level parsing helpers shared by the command parsers.

Every helper trims its input, validates it and returns the model value
type.  Validation failures are re-raised as ``ParseError`` with the
constraint message of the field type, so invalid values never reach
the model.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date, datetime
from typing import TypeVar

from trackit.model.entities import DATE_FORMAT, LessonDateTime, LessonType
from trackit.model.fields import Address, Code, Email, FieldConstraintError, Name, Phone, Tag
from trackit.parser.errors import MESSAGE_INVALID_INDEX, ParseError

V = TypeVar("V")

MESSAGE_DATE_CONSTRAINTS = "Dates should be in the format dd/mm/yyyy, e.g. 20/11/2026"


def _build(factory: Callable[[str], V], raw: str) -> V:
    try:
        return factory(raw.strip())
    except FieldConstraintError as exc:
        raise ParseError(str(exc)) from exc


def parse_index(raw: str) -> int:
    """Parse a one-based index and return it zero-based."""
    trimmed = raw.strip()
    if not (trimmed.isascii() and trimmed.isdigit()) or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(trimmed) - 1


def parse_name(raw: str) -> Name:
    return _build(Name, raw)


def parse_phone(raw: str) -> Phone:
    return _build(Phone, raw)


def parse_email(raw: str) -> Email:
    return _build(Email, raw)


def parse_address(raw: str) -> Address:
    return _build(Address, raw)


def parse_tag(raw: str) -> Tag:
    return _build(Tag, raw)


def parse_tags(raws: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(raw) for raw in raws)


def parse_code(raw: str) -> Code:
    """Parse a module code; input is upper-cased first."""
    return _build(Code, raw.upper())


def parse_text(raw: str) -> str:
    """Trim a free-text value such as a remark or a description."""
    return raw.strip()


def parse_date(raw: str) -> date:
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise ParseError(MESSAGE_DATE_CONSTRAINTS) from exc


def parse_lesson_datetime(raw: str) -> LessonDateTime:
    return _build(LessonDateTime.parse, raw)


def parse_lesson_type(raw: str) -> LessonType:
    return _build(LessonType.from_label, raw.lower())
