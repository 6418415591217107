"""Live, predicate-restricted read views over a ``UniqueEntityList``.

A ``FilteredView`` is what the command and presentation layers read.
It is never a snapshot: every read compares the backing list's
``revision`` with the one the cached items were computed from, and
recomputes when the list changed or the predicate was replaced.
Predicates that depend on the wall clock (see ``is_volatile``) are
re-evaluated on every read and never cached.

Views expose only read operations.  All mutation goes through the
``Track``.  Like the Track, views do no locking.
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, TypeVar, overload

from trackit.model.predicates import SHOW_ALL, Predicate, is_volatile
from trackit.model.unique_list import UniqueEntityList

T = TypeVar("T")


class FilteredView(Sequence[T]):
    """Read-only sequence of the backing list's elements that match a predicate.

    Parameters
    ----------
    source:
        The list to project.
    predicate:
        The initial predicate; defaults to ``SHOW_ALL``.
    """

    def __init__(self, source: UniqueEntityList[T], predicate: Predicate[T] = SHOW_ALL) -> None:
        self._source = source
        self._predicate: Predicate[T] = predicate
        self._items: tuple[T, ...] = ()
        self._computed_at: int | None = None

    @property
    def predicate(self) -> Predicate[T]:
        return self._predicate

    def update_filter(self, predicate: Predicate[T]) -> None:
        """Replace the active predicate; the view reflects it immediately."""
        self._predicate = predicate
        self._computed_at = None

    def _current(self) -> tuple[T, ...]:
        if is_volatile(self._predicate) or self._computed_at != self._source.revision:
            self._items = tuple(item for item in self._source if self._predicate(item))
            self._computed_at = self._source.revision
        return self._items

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: Any) -> Any:
        return self._current()[index]

    def __len__(self) -> int:
        return len(self._current())

    def __iter__(self) -> Iterator[T]:
        return iter(self._current())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilteredView):
            return self._current() == other._current()
        if isinstance(other, tuple):
            return self._current() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FilteredView({self._source.kind}, {len(self)} of {len(self._source)})"

