"""Identifiers naming variable binders, including synthetic shadow identifiers."""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass
from functools import total_ordering

from ulc.kernel.errors import ShapeError


@total_ordering
@dataclass(frozen=True)
class Ident:
    """Base class for identifiers.

    Identifiers are compared by identity of the binder they denote and are
    totally ordered by ``(root label, shadow depth)``.
    """

    def __post_init__(self) -> None:
        if type(self) is Ident:
            raise ShapeError("Identifiers must be a Name or a Shadow")

    @property
    def root(self) -> Name:
        raise NotImplementedError

    @property
    def depth(self) -> int:
        return 0

    @property
    def is_shadow(self) -> bool:
        return self.depth > 0

    def sort_key(self) -> tuple[str, int]:
        return self.root.label, self.depth

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ident):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True)
class Name(Ident):
    """A plain, caller-chosen identifier."""

    label: str

    def __post_init__(self) -> None:
        if not isinstance(self.label, str) or not self.label:
            raise ShapeError("Identifier label must be a non-empty string", self.label)

    @property
    def root(self) -> Name:
        return self

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Shadow(Ident):
    """An identifier minted from ``origin`` to keep a binder from capturing.

    A shadow is never equal to its origin, and shadows of the same origin are
    told apart by how deeply they are nested.
    """

    origin: Ident

    def __post_init__(self) -> None:
        if not isinstance(self.origin, Ident):
            raise ShapeError("Shadow origin must be an identifier", self.origin)

    @property
    def root(self) -> Name:
        return self.origin.root

    @property
    def depth(self) -> int:
        return self.origin.depth + 1

    def __str__(self) -> str:
        return f"{self.origin}'"


def fresh_shadow(ident: Ident, avoid: Container[Ident]) -> Shadow:
    """Return the shallowest shadow of ``ident`` that is not in ``avoid``."""

    candidate = Shadow(ident)
    while candidate in avoid:
        candidate = Shadow(candidate)
    return candidate


__all__ = ["Ident", "Name", "Shadow", "fresh_shadow"]
