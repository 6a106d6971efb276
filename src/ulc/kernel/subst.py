"""Capture-avoiding substitution."""

from __future__ import annotations

import logging

from ulc.kernel.ast import App, Lam, Subst, Term, Var
from ulc.kernel.errors import ShapeError
from ulc.kernel.free_vars import free_variables, identifiers
from ulc.kernel.names import Ident, fresh_shadow
from ulc.kernel.seq import IdentSeq

logger = logging.getLogger(__name__)


def substitute(term: Term, sub: Subst) -> Term:
    """Replace the free occurrences of ``sub.target`` in ``term``.

    Binders that would capture a free variable of the replacement are first
    renamed to a fresh shadow of themselves, so every free variable of the
    replacement stays free in the result.
    """

    if not isinstance(sub, Subst):
        raise ShapeError("Expected a substitution", sub)
    if not isinstance(term, Term):
        raise ShapeError("Substitution applies to terms only", term)
    return _substitute(term, sub, free_variables(sub.replacement))


def _substitute(term: Term, sub: Subst, repl_fvs: IdentSeq) -> Term:
    match term:
        case Var(ident):
            return sub.replacement if ident == sub.target else term

        case App(f, a):
            f1 = _substitute(f, sub, repl_fvs)
            a1 = _substitute(a, sub, repl_fvs)
            if f1 is f and a1 is a:
                return term
            return App(f1, a1)

        case Lam(param, body):
            if param == sub.target:
                return term
            if param in repl_fvs:
                param, body = _shadow_binder(term, sub, repl_fvs)
            body1 = _substitute(body, sub, repl_fvs)
            if body1 is term.body and param == term.param:
                return term
            return Lam(param, body1)

    raise TypeError(f"Unexpected term in substitute: {term!r}")


def _shadow_binder(lam: Lam, sub: Subst, repl_fvs: IdentSeq) -> tuple[Ident, Term]:
    # Deferred import: alpha-renaming is itself defined via substitution.
    from ulc.kernel.alpha import rename

    avoid = identifiers(lam.body) | set(repl_fvs) | {sub.target}
    shadow = fresh_shadow(lam.param, avoid)
    logger.debug("Shadowing binder %s as %s to substitute %s", lam.param, shadow, sub)
    renamed, _ = rename(lam, lam.param, shadow)
    assert isinstance(renamed, Lam)
    return renamed.param, renamed.body


__all__ = ["substitute"]
