"""Bottom-up reduction passes and the normalization driver."""

from __future__ import annotations

import logging

from ulc.kernel.ast import App, Lam, Term, Var
from ulc.kernel.errors import NormalizationError, ShapeError
from ulc.kernel.reduce.beta import beta
from ulc.kernel.reduce.eta import eta

logger = logging.getLogger(__name__)


def reduce_pass(term: Term) -> Term:
    """Run one bottom-up reduction pass over ``term``.

    Children are reduced first. Abstractions then get one eta attempt and
    applications one beta attempt; whatever a beta contraction produces is not
    scanned again until the next pass.
    """

    match term:
        case Var():
            return term

        case Lam(param, body):
            body1 = reduce_pass(body)
            lam = term if body1 is body else Lam(param, body1)
            return eta(lam)[0]

        case App(f, a):
            f1 = reduce_pass(f)
            a1 = reduce_pass(a)
            app = term if f1 is f and a1 is a else App(f1, a1)
            return beta(app)[0]

    raise TypeError(f"Unexpected term in reduce_pass: {term!r}")


def is_normal(term: Term) -> bool:
    """Return ``True`` if a reduction pass leaves ``term`` unchanged."""

    return reduce_pass(term) == term


def normalize(term: Term, max_passes: int | None = None) -> Term:
    """Repeat reduction passes until one leaves the term unchanged.

    Terms without a normal form make this loop forever unless ``max_passes``
    is given, in which case ``NormalizationError`` is raised once that many
    passes have run without reaching a fixpoint. A term that becomes normal
    on the last allowed pass is returned. Traversal is recursive, so
    term depth is bounded by the interpreter's recursion limit.
    """

    if not isinstance(term, Term):
        raise ShapeError("Only terms can be normalized", term)
    if max_passes is not None and max_passes < 1:
        raise ValueError("max_passes must be positive")

    passes = 0
    while True:
        reduced = reduce_pass(term)
        passes += 1
        if reduced == term:
            logger.debug("Reached normal form after %d passes", passes)
            return term
        term = reduced
        if max_passes is not None and passes >= max_passes:
            if is_normal(term):
                logger.debug("Reached normal form on the last of %d passes", passes)
                return term
            logger.warning("No normal form within %d passes", passes)
            raise NormalizationError(term, passes)


__all__ = ["is_normal", "normalize", "reduce_pass"]
