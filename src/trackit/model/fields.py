"""Validated field value types shared by the trackit entities.

Every field is a frozen dataclass that checks its value on construction
and raises ``FieldConstraintError`` when the value is not acceptable.
Invalid field values therefore never make it into an entity, and never
into the Track.

The ``MESSAGE_CONSTRAINTS`` class attribute on each type is the
user-facing explanation shown by the parser and the storage layer.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Final

_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE_RE: Final[re.Pattern[str]] = re.compile(r"\d{3,}")
_ADDRESS_RE: Final[re.Pattern[str]] = re.compile(r"[^\s].*", re.DOTALL)
_TAG_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")
_CODE_RE: Final[re.Pattern[str]] = re.compile(r"[A-Z]{2,3}\d{4}[A-Z]{0,2}")

_EMAIL_SPECIAL = "+_.-"
_EMAIL_LOCAL_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9+_.\-]*[A-Za-z0-9])?")
_EMAIL_LABEL_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?")


class FieldConstraintError(ValueError):
    """Raised when a field value violates its constraints.

    Parameters
    ----------
    message:
        The constraint description of the offending field type.
    value:
        The rejected raw value.
    """

    def __init__(self, message: str, value: object) -> None:
        super().__init__(message)
        self.value = value


@dataclass(frozen=True, slots=True)
class Name:
    """A person, module or task name."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise FieldConstraintError(self.MESSAGE_CONSTRAINTS, self.value)

    @staticmethod
    def is_valid(value: str) -> bool:
        return _NAME_RE.fullmatch(value) is not None

    def same_as(self, other: "Name") -> bool:
        """Return True if both names match when case is ignored."""
        return self.value.casefold() == other.value.casefold()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Phone:
    """A phone number made of at least three digits."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise FieldConstraintError(self.MESSAGE_CONSTRAINTS, self.value)

    @staticmethod
    def is_valid(value: str) -> bool:
        return _PHONE_RE.fullmatch(value) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Email:
    """An email address of the form ``local-part@domain``."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        f"1. The local-part should only contain alphanumeric characters and these special characters: "
        f"{_EMAIL_SPECIAL}. It may not start or end with a special character.\n"
        "2. The domain name is made up of domain labels separated by periods. Each label starts and "
        "ends with an alphanumeric character and may contain hyphens. The last label is at least "
        "2 characters long."
    )

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise FieldConstraintError(self.MESSAGE_CONSTRAINTS, self.value)

    @staticmethod
    def is_valid(value: str) -> bool:
        local, sep, domain = value.partition("@")
        if not sep or _EMAIL_LOCAL_RE.fullmatch(local) is None:
            return False
        labels = domain.split(".")
        if not all(_EMAIL_LABEL_RE.fullmatch(label) for label in labels):
            return False
        return len(labels[-1]) >= 2

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Address:
    """A postal address or venue; any text not starting with whitespace."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise FieldConstraintError(self.MESSAGE_CONSTRAINTS, self.value)

    @staticmethod
    def is_valid(value: str) -> bool:
        return _ADDRESS_RE.fullmatch(value) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Tag:
    """A single alphanumeric contact tag."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tag names should be alphanumeric"

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise FieldConstraintError(self.MESSAGE_CONSTRAINTS, self.value)

    @staticmethod
    def is_valid(value: str) -> bool:
        return _TAG_RE.fullmatch(value) is not None

    def __str__(self) -> str:
        return f"[{self.value}]"


@dataclass(frozen=True, slots=True)
class Code:
    """A module code such as ``CS2103T``.

    The code is the identity key of a ``Module`` and the foreign
    reference carried by tasks and lessons.
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Module codes should have 2-3 uppercase letters, followed by 4 digits, "
        "and optionally end with 1-2 uppercase letters, e.g. CS2103T"
    )

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise FieldConstraintError(self.MESSAGE_CONSTRAINTS, self.value)

    @staticmethod
    def is_valid(value: str) -> bool:
        return _CODE_RE.fullmatch(value) is not None

    def __str__(self) -> str:
        return self.value
