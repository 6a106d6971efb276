"""Immutable, order-preserving sequences with duplicate-elimination helpers."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Self, Sequence, TypeVar, overload

from ulc.kernel.names import Ident

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class OrderedSeq(Sequence[T], Generic[T]):
    """A tuple-backed sequence whose operations all return new sequences.

    Insertion order is always preserved. Duplicates are allowed while a
    sequence is being assembled (``concat`` and ``append`` keep them) and are
    dropped by ``deduplicate`` or ``union``, where the first occurrence of
    each value wins.
    """

    _data: tuple[T, ...] = ()

    @classmethod
    def of(cls, *items: T) -> Self:
        return cls(tuple(items))

    @classmethod
    def empty(cls) -> Self:
        return cls()

    # ---- Sequence contract ----
    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    @overload
    def __getitem__(self, i: int, /) -> T: ...
    @overload
    def __getitem__(self, s: slice, /) -> Self: ...

    def __getitem__(self, idx: int | slice) -> T | Self:
        if isinstance(idx, slice):
            return self.of(*self._data[idx])
        return self._data[idx]

    def __contains__(self, item: object) -> bool:
        return item in self._data

    def __add__(self, other: Iterable[T]) -> Self:
        return self.concat(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"

    # ---- access ----
    def get(self, i: int) -> T:
        return self._data[i]

    @property
    def first(self) -> T:
        return self._data[0]

    @property
    def last(self) -> T:
        return self._data[-1]

    def contains(self, item: T) -> bool:
        return item in self._data

    def index_of(self, item: T) -> int:
        """Position of the first occurrence of ``item``.

        Raises ``ValueError`` if ``item`` is absent, like ``tuple.index``.
        """
        return self._data.index(item)

    def select(self, *indices: int) -> Self:
        """Pick items by position; indices may repeat and appear in any order."""
        return self.of(*(self._data[i] for i in indices))

    # ---- building ----
    def append(self, *items: T) -> Self:
        return self.of(*self._data, *items)

    def concat(self, other: Iterable[T]) -> Self:
        return self.of(*self._data, *other)

    def union(self, other: Iterable[T]) -> Self:
        """Concatenate, then keep only the first occurrence of each value."""
        return self.concat(other).deduplicate()

    # ---- removal ----
    def remove_at(self, *indices: int) -> Self:
        n = len(self._data)
        dropped: set[int] = set()
        for i in indices:
            if not -n <= i < n:
                raise IndexError(f"{type(self).__name__} index out of range: {i}")
            dropped.add(i % n)
        return self.of(*(x for i, x in enumerate(self._data) if i not in dropped))

    def remove_one(self, item: T) -> Self:
        """Drop the first occurrence of ``item``; no-op when it is absent."""
        if item not in self._data:
            return self
        return self.remove_at(self._data.index(item))

    def remove_all(self, item: T) -> Self:
        if item not in self._data:
            return self
        return self.of(*(x for x in self._data if x != item))

    def deduplicate(self) -> Self:
        seen: set[T] = set()
        kept: list[T] = []
        for x in self._data:
            if x not in seen:
                seen.add(x)
                kept.append(x)
        if len(kept) == len(self._data):
            return self
        return self.of(*kept)


class IdentSeq(OrderedSeq[Ident]):
    """Ordered identifiers, as produced by free-variable analysis."""

    def __str__(self) -> str:
        return "[" + ", ".join(str(x) for x in self) + "]"


__all__ = ["IdentSeq", "OrderedSeq"]
