"""Abstract syntax tree nodes for the untyped lambda calculus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ulc.kernel.errors import ShapeError
from ulc.kernel.names import Ident, Name

if TYPE_CHECKING:
    from ulc.kernel.seq import IdentSeq


@dataclass(frozen=True)
class Term:
    """Base class for all lambda terms.

    Terms are immutable. Dataclass equality is syntactic: two terms are equal
    iff they are the same tree of nodes down to identifier identity, so
    alpha-equivalent terms with different binder names compare unequal.
    """

    # --- Construction sugar ---------------------------------------------------
    def __call__(self, arg: Term | Ident) -> Term:
        """Apply ``self`` to ``arg`` and normalize the result."""
        from ulc.kernel.build import apply

        return apply(self, arg)

    def __getitem__(self, sub: Subst) -> Term:
        """Substitute according to ``sub`` and normalize the result."""
        from ulc.kernel.reduce.normalize import normalize
        from ulc.kernel.subst import substitute

        return normalize(substitute(self, sub))

    # --- Analysis and rewriting -----------------------------------------------
    def free_variables(self) -> IdentSeq:
        from ulc.kernel.free_vars import free_variables

        return free_variables(self)

    def rename(self, old: Ident | Var, new: Ident | Var) -> Term:
        """Rename the first binder of ``old`` (and its bound uses) to ``new``."""
        from ulc.kernel.alpha import rename

        return rename(self, old, new)[0]

    def unshadow(self, *names: Ident | Var) -> Term:
        """Replace shadow binders with ``names``, consumed depth-first."""
        from ulc.kernel.unshadow import unshadow

        return unshadow(self, *names)

    def normalize(self, max_passes: int | None = None) -> Term:
        from ulc.kernel.reduce.normalize import normalize

        return normalize(self, max_passes=max_passes)

    # --- Display --------------------------------------------------------------
    def __str__(self) -> str:
        # Deferred import avoids cycles when pretty-printing dataclass reprs.
        from ulc.kernel.pretty import pretty

        return pretty(self)


def _require_term(value: object, role: str) -> None:
    if not isinstance(value, Term):
        raise ShapeError(f"{role} must be a term", value)


def _require_ident(value: object, role: str) -> None:
    if not isinstance(value, Ident):
        raise ShapeError(f"{role} must be an identifier", value)


@dataclass(frozen=True)
class Var(Term):
    """A variable occurrence."""

    ident: Ident

    def __post_init__(self) -> None:
        _require_ident(self.ident, "Variable")

    @staticmethod
    def named(label: str) -> Var:
        return Var(Name(label))


@dataclass(frozen=True)
class Lam(Term):
    """An abstraction binding ``param`` within ``body``."""

    param: Ident
    body: Term

    def __post_init__(self) -> None:
        _require_ident(self.param, "Abstraction parameter")
        _require_term(self.body, "Abstraction body")


@dataclass(frozen=True)
class App(Term):
    """Function application."""

    func: Term
    arg: Term

    def __post_init__(self) -> None:
        _require_term(self.func, "Applied function")
        _require_term(self.arg, "Application argument")


def ident_of(value: Ident | Var) -> Ident:
    """Accept an identifier or a variable term where a variable is expected."""

    match value:
        case Ident():
            return value
        case Var(ident):
            return ident
    raise ShapeError("Expected a variable or identifier", value)


@dataclass(frozen=True)
class Subst:
    """Replace free occurrences of ``target`` with ``replacement``."""

    target: Ident
    replacement: Term

    def __post_init__(self) -> None:
        _require_ident(self.target, "Substitution target")
        _require_term(self.replacement, "Substitution replacement")

    @staticmethod
    def of(target: Ident | Var, replacement: Term | Ident) -> Subst:
        if isinstance(replacement, Ident):
            replacement = Var(replacement)
        return Subst(ident_of(target), replacement)

    def __str__(self) -> str:
        return f"[{self.target} := {self.replacement}]"


__all__ = ["App", "Lam", "Subst", "Term", "Var", "ident_of"]
