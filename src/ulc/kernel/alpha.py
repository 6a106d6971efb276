"""Alpha-renaming of a single binder."""

from __future__ import annotations

from ulc.kernel.ast import App, Lam, Subst, Term, Var, ident_of
from ulc.kernel.errors import ShapeError
from ulc.kernel.free_vars import occurs_free
from ulc.kernel.names import Ident
from ulc.kernel.subst import substitute


def rename(term: Term, old: Ident | Var, new: Ident | Var) -> tuple[Term, bool]:
    """Rename the first binder of ``old`` to ``new``, along with its bound uses.

    Exactly one binder is renamed per call. Applications are searched function
    side first and only one side is ever modified; callers that want every
    binder of ``old`` renamed must call repeatedly until nothing changes.
    Renaming to a name that occurs free in the binder body raises
    ``ShapeError``, since the free occurrence would be captured.

    Returns:
        The renamed term and whether a binder was found.
    """

    if not isinstance(term, Term):
        raise ShapeError("Renaming applies to terms only", term)
    return _rename(term, ident_of(old), ident_of(new))


def _rename(term: Term, old: Ident, new: Ident) -> tuple[Term, bool]:
    match term:
        case Var():
            return term, False

        case Lam(param, body):
            if param == old:
                if new != old and occurs_free(new, body):
                    raise ShapeError(
                        f"Name {new} is not fresh in the renamed body", term
                    )
                return Lam(new, substitute(body, Subst(old, Var(new)))), True
            body1, changed = _rename(body, old, new)
            return (Lam(param, body1) if changed else term), changed

        case App(f, a):
            f1, changed = _rename(f, old, new)
            if changed:
                return App(f1, a), True
            a1, changed = _rename(a, old, new)
            return (App(f, a1) if changed else term), changed

    raise TypeError(f"Unexpected term in rename: {term!r}")


__all__ = ["rename"]
