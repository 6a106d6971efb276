"""Auto-normalizing construction helpers.

Terms built through these helpers are always in beta/eta normal form. The raw
dataclass constructors (``Var``, ``Lam``, ``App``) remain available for
building arbitrary, unreduced terms.
"""

from __future__ import annotations

from ulc.kernel.ast import App, Lam, Subst, Term, Var, ident_of
from ulc.kernel.errors import ShapeError
from ulc.kernel.names import Ident, Name
from ulc.kernel.reduce.eta import eta
from ulc.kernel.reduce.normalize import normalize


def variable(ident: Ident | str) -> Var:
    """A variable term; plain strings become ``Name`` identifiers."""

    if isinstance(ident, str):
        return Var(Name(ident))
    return Var(ident)


def _as_term(value: Term | Ident) -> Term:
    if isinstance(value, Ident):
        return Var(value)
    if not isinstance(value, Term):
        raise ShapeError("Expected a term", value)
    return value


def make_abstraction(param: Ident | Var, body: Term | Ident) -> Term:
    """Build ``λparam. body`` and try one eta contraction at the top."""

    return eta(Lam(ident_of(param), _as_term(body)))[0]


def abstract(*parts: Ident | Var | Term, body: Term | Ident | None = None) -> Term:
    """Build a curried abstraction over one or more parameters.

    ``abstract(x, y, b)`` and ``abstract(x, y, body=b)`` both mean
    ``λx. λy. b``. Binders are built innermost first, each with its own eta
    attempt.
    """

    params = list(parts)
    if body is None:
        if not params:
            raise ShapeError("abstract() needs a body")
        body = params.pop()
    if not params:
        raise ShapeError("abstract() needs at least one parameter", body)

    binders = [ident_of(p) for p in params]  # type: ignore[arg-type]
    fn = _as_term(body)
    for param in reversed(binders):
        fn = make_abstraction(param, fn)
    return fn


def make_application(fn: Term, arg: Term | Ident) -> Term:
    """Build ``(fn arg)`` and normalize it."""

    return normalize(App(_as_term(fn), _as_term(arg)))


def apply(fn: Term | Ident, *args: Term | Ident) -> Term:
    """Apply ``fn`` to ``args`` left-associatively, normalizing after each step."""

    if not args:
        raise ShapeError("apply() needs at least one argument", fn)
    result = _as_term(fn)
    for arg in args:
        result = make_application(result, arg)
    return result


def subst_of(target: Ident | Var, replacement: Term | Ident) -> Subst:
    return Subst.of(target, replacement)


def structurally_equal(left: Term, right: Term) -> bool:
    """Syntactic equality down to identifier identity (not alpha-equivalence)."""

    if not isinstance(left, Term) or not isinstance(right, Term):
        raise ShapeError("Structural equality compares terms only", (left, right))
    return left == right


__all__ = [
    "abstract",
    "apply",
    "make_abstraction",
    "make_application",
    "structurally_equal",
    "subst_of",
    "variable",
]
