"""Beta reduction."""

from __future__ import annotations

from ulc.kernel.ast import App, Lam, Subst, Term
from ulc.kernel.subst import substitute


def beta(term: Term) -> tuple[Term, bool]:
    """Contract ``term`` if it is a redex ``(λx. body) arg``.

    Returns:
        The contracted term and ``True``, or ``term`` unchanged and ``False``.
    """

    match term:
        case App(Lam(param, body), arg):
            return substitute(body, Subst(param, arg)), True
        case _:
            return term, False


__all__ = ["beta"]
