"""Canonical text rendering for lambda terms."""

from __future__ import annotations

from ulc.kernel.ast import App, Lam, Term, Var


def pretty(term: Term) -> str:
    """Render ``term`` in the canonical grammar.

    Variables render as their name (shadows carry one ``'`` per level),
    applications as ``(F A)`` and abstractions as ``[lambda X. B]``.
    """

    match term:
        case Var(ident):
            return str(ident)
        case App(f, a):
            return f"({pretty(f)} {pretty(a)})"
        case Lam(param, body):
            return f"[lambda {param}. {pretty(body)}]"

    raise TypeError(f"Cannot pretty-print unknown term: {term!r}")


__all__ = ["pretty"]
