"""Error types raised by the lambda-calculus kernel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ShapeError(TypeError):
    """An argument does not have the shape an operation requires.

    Raised before any rewriting happens, so no partial result ever escapes.
    """

    message: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is None:
            return self.message
        return f"{self.message}:\n  value = {self.value!r}"


@dataclass
class NameSupplyError(ShapeError):
    """Unshadowing ran out of fresh names before every shadow was replaced."""


@dataclass
class NormalizationError(RuntimeError):
    """Normalization hit its pass budget before reaching a normal form."""

    term: Any
    passes: int

    def __str__(self) -> str:
        return (
            f"Term did not converge after {self.passes} passes:\n"
            f"  last = {self.term}"
        )


__all__ = ["NameSupplyError", "NormalizationError", "ShapeError"]
