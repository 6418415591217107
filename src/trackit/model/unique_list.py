"""Ordered, duplicate-free entity collection.

``UniqueEntityList`` is the single container type behind every
collection in the Track.  It is parameterised by an ``is_same``
function so that each entity kind can define its own identity
equality, independent of full value equality.

Usage
-----
::

    from trackit.model.unique_list import UniqueEntityList

    modules = UniqueEntityList(Module.is_same_module, kind="Module")
    modules.add(cs2103t)
    modules.replace(cs2103t, cs2103t_renamed)   # same code, new name

Every structural change bumps ``revision``, which is how filtered views
know when to recompute.  The list does no locking; callers sharing one
list across threads must serialize access themselves.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from trackit.model.errors import DuplicateEntityError, EntityNotFoundError, InconsistentSnapshotError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SameFn = Callable[[T, T], bool]


class UniqueEntityList(Generic[T]):
    """A list of entities in which no two elements are ``is_same``.

    Parameters
    ----------
    is_same:
        Identity equality for the element type, e.g.
        ``Lesson.is_same_lesson``.
    kind:
        Human-readable element name used in log and error messages.
    """

    def __init__(self, is_same: SameFn[T], kind: str) -> None:
        self._is_same = is_same
        self._kind = kind
        self._items: list[T] = []
        self._revision = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def revision(self) -> int:
        """Counter incremented on every structural change."""
        return self._revision

    def contains(self, entity: T) -> bool:
        """Return True if an element ``is_same`` as ``entity`` is stored."""
        return any(self._is_same(existing, entity) for existing in self._items)

    def find(self, match: Callable[[T], bool]) -> T | None:
        """Return the first element satisfying ``match``, or ``None``."""
        for existing in self._items:
            if match(existing):
                return existing
        return None

    def as_tuple(self) -> tuple[T, ...]:
        return tuple(self._items)

    def __contains__(self, entity: object) -> bool:
        return self.contains(entity)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueEntityList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"UniqueEntityList({self._kind}, {len(self._items)} item(s))"

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, entity: T) -> None:
        """Append ``entity``.

        Raises
        ------
        DuplicateEntityError
            If an element ``is_same`` as ``entity`` is already stored.
        """
        if self.contains(entity):
            raise DuplicateEntityError(entity)
        self._items.append(entity)
        self._changed("add")

    def remove(self, entity: T) -> None:
        """Remove the element that ``is_same`` as ``entity``.

        Raises
        ------
        EntityNotFoundError
            If no such element exists.
        """
        index = self._index_of(entity)
        if index is None:
            raise EntityNotFoundError(entity)
        del self._items[index]
        self._changed("remove")

    def replace(self, target: T, edited: T) -> None:
        """Substitute ``edited`` for ``target`` at the same position.

        Raises
        ------
        EntityNotFoundError
            If ``target`` is not stored.
        DuplicateEntityError
            If ``edited`` is not the same entity as ``target`` but is the
            same as some other stored element.
        """
        index = self._index_of(target)
        if index is None:
            raise EntityNotFoundError(target)
        if not self._is_same(target, edited) and self.contains(edited):
            raise DuplicateEntityError(edited)
        self._items[index] = edited
        self._changed("replace")

    def reset_to(self, entities: Iterable[T]) -> None:
        """Replace the whole backing sequence with ``entities``.

        Raises
        ------
        InconsistentSnapshotError
            If ``entities`` contains two elements that are ``is_same``.
        """
        incoming = list(entities)
        self.check_unique(incoming)
        self._items = incoming
        self._changed("reset")

    def check_unique(self, entities: list[T]) -> None:
        """Raise ``InconsistentSnapshotError`` on the first internal collision."""
        for i, first in enumerate(entities):
            for second in entities[i + 1 :]:
                if self._is_same(first, second):
                    raise InconsistentSnapshotError(self._kind, first, second)

    def sort(self, key: Callable[[T], Any]) -> None:
        """Re-order elements by ``key``; the sort is stable."""
        self._items.sort(key=key)
        self._changed("sort")

    def _index_of(self, entity: T) -> int | None:
        for index, existing in enumerate(self._items):
            if self._is_same(existing, entity):
                return index
        return None

    def _changed(self, operation: str) -> None:
        self._revision += 1
        logger.debug("%s list %s -> %d item(s)", self._kind, operation, len(self._items))
