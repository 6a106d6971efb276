"""Replacing synthetic shadow binders with caller-chosen names."""

from __future__ import annotations

import logging

from ulc.kernel.alpha import rename
from ulc.kernel.ast import App, Lam, Term, Var, ident_of
from ulc.kernel.errors import NameSupplyError, ShapeError
from ulc.kernel.free_vars import identifiers
from ulc.kernel.names import Ident

logger = logging.getLogger(__name__)


def unshadow(term: Term, *names: Ident | Var) -> Term:
    """Rename each shadow binder in ``term`` to the next of ``names``.

    The term is walked depth-first, function side before argument side, and
    every shadow binder consumes one name. Terms without shadows come back
    unchanged; names left over are ignored.

    Raises:
        ShapeError: a name is not a plain variable, or it already occurs in
            the body it would bind.
        NameSupplyError: ``names`` ran out before every shadow was replaced.
    """

    if not isinstance(term, Term):
        raise ShapeError("Unshadowing applies to terms only", term)
    supply = tuple(_plain_name(n) for n in names)
    result, _ = _unshadow(term, supply)
    return result


def _plain_name(value: Ident | Var) -> Ident:
    ident = ident_of(value)
    if ident.is_shadow:
        raise ShapeError("Fresh names must be plain identifiers", value)
    return ident


def _unshadow(
    term: Term, supply: tuple[Ident, ...]
) -> tuple[Term, tuple[Ident, ...]]:
    match term:
        case Var():
            return term, supply

        case Lam(param, body) if param.is_shadow:
            if not supply:
                raise NameSupplyError("Ran out of fresh names while unshadowing", term)
            name, rest = supply[0], supply[1:]
            if name in identifiers(body):
                raise ShapeError(f"Name {name} is not fresh in the renamed body", term)
            logger.debug("Unshadowing %s as %s", param, name)
            renamed, _ = rename(term, param, name)
            assert isinstance(renamed, Lam)
            body1, rest = _unshadow(renamed.body, rest)
            return Lam(name, body1), rest

        case Lam(param, body):
            body1, rest = _unshadow(body, supply)
            return (term if body1 is body else Lam(param, body1)), rest

        case App(f, a):
            f1, rest = _unshadow(f, supply)
            a1, rest = _unshadow(a, rest)
            if f1 is f and a1 is a:
                return term, rest
            return App(f1, a1), rest

    raise TypeError(f"Unexpected term in unshadow: {term!r}")


__all__ = ["unshadow"]
