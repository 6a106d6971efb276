"""Evaluation entry points for terms built outside the auto-normalizing API."""

from __future__ import annotations

from ulc.kernel.ast import Term, Var
from ulc.kernel.names import Ident
from ulc.kernel.reduce.normalize import normalize
from ulc.kernel.unshadow import unshadow


def evaluate(term: Term, max_passes: int | None = None) -> Term:
    """Fully normalize ``term``; a no-op on terms that are already normal."""

    return normalize(term, max_passes=max_passes)


def full_simplify(
    term: Term, *names: Ident | Var, max_passes: int | None = None
) -> Term:
    """Evaluate ``term``, then replace its shadow binders with ``names``."""

    return unshadow(evaluate(term, max_passes=max_passes), *names)


__all__ = ["evaluate", "full_simplify"]
