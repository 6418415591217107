"""Error types raised by the trackit core.

Every failure raised by the Track and its collections is a subclass of
``TrackError`` so that callers can catch the whole family at once.  All
of them are local, recoverable conditions: a mutation that raises one of
these leaves the Track exactly as it was before the call.
"""
from __future__ import annotations


class TrackError(Exception):
    """Base class for all core data-store errors."""


class DuplicateEntityError(TrackError):
    """Raised when an add or replace would create two same-kind entities.

    Parameters
    ----------
    entity:
        The entity whose identity key already exists in the collection.
    """

    def __init__(self, entity: object) -> None:
        self.entity = entity
        super().__init__(f"Operation would result in duplicate {type(entity).__name__}: {entity}")


class EntityNotFoundError(TrackError):
    """Raised when a remove or replace targets an entity that is not stored.

    Parameters
    ----------
    entity:
        The entity that could not be located by identity key.
    """

    def __init__(self, entity: object) -> None:
        self.entity = entity
        super().__init__(f"{type(entity).__name__} not found: {entity}")


class InconsistentSnapshotError(TrackError):
    """Raised when a wholesale reset receives data with an internal collision.

    Parameters
    ----------
    kind:
        Human-readable name of the collection that failed, e.g. ``"Lesson"``.
    first:
        The earlier of the two colliding entities.
    second:
        The later of the two colliding entities.
    """

    def __init__(self, kind: str, first: object, second: object) -> None:
        self.kind = kind
        self.first = first
        self.second = second
        super().__init__(f"{kind} list contains duplicate entities: {first} and {second}")
