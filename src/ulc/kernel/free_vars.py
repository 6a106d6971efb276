"""Free-variable analysis."""

from __future__ import annotations

from ulc.kernel.ast import App, Lam, Term, Var
from ulc.kernel.names import Ident
from ulc.kernel.seq import IdentSeq


def free_variables(term: Term) -> IdentSeq:
    """Return the variables of ``term`` not bound by any enclosing binder.

    The result is ordered by first occurrence, function side before argument
    side, and holds no duplicates.
    """

    match term:
        case Var(ident):
            return IdentSeq.of(ident)
        case Lam(param, body):
            return free_variables(body).remove_all(param)
        case App(f, a):
            return free_variables(f).union(free_variables(a))

    raise TypeError(f"Unexpected term in free_variables: {term!r}")


def occurs_free(ident: Ident, term: Term) -> bool:
    """Return ``True`` if ``ident`` occurs unbound somewhere in ``term``."""

    match term:
        case Var(v):
            return v == ident
        case Lam(param, body):
            return param != ident and occurs_free(ident, body)
        case App(f, a):
            return occurs_free(ident, f) or occurs_free(ident, a)

    raise TypeError(f"Unexpected term in occurs_free: {term!r}")


def identifiers(term: Term) -> frozenset[Ident]:
    """Every identifier mentioned in ``term``, free, bound or binding."""

    match term:
        case Var(ident):
            return frozenset((ident,))
        case Lam(param, body):
            return identifiers(body) | {param}
        case App(f, a):
            return identifiers(f) | identifiers(a)

    raise TypeError(f"Unexpected term in identifiers: {term!r}")


__all__ = ["free_variables", "identifiers", "occurs_free"]
