"""Eta reduction."""

from __future__ import annotations

from ulc.kernel.ast import App, Lam, Term, Var
from ulc.kernel.free_vars import free_variables


def eta(term: Term) -> tuple[Term, bool]:
    """Contract ``λx. (f x)`` to ``f`` when ``x`` is not free in ``f``."""

    match term:
        case Lam(param, App(f, Var(v))) if (
            v == param and param not in free_variables(f)
        ):
            return f, True
        case _:
            return term, False


__all__ = ["eta"]
