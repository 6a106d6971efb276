"""Untyped lambda calculus facade: construction, evaluation and rendering."""

from ulc.eval import evaluate, full_simplify
from ulc.kernel.ast import App, Lam, Subst, Term, Var
from ulc.kernel.build import abstract, apply, structurally_equal, subst_of, variable
from ulc.kernel.errors import NameSupplyError, NormalizationError, ShapeError
from ulc.kernel.free_vars import free_variables
from ulc.kernel.names import Ident, Name, Shadow
from ulc.kernel.pretty import pretty

__all__ = [
    "App",
    "Ident",
    "Lam",
    "Name",
    "NameSupplyError",
    "NormalizationError",
    "Shadow",
    "ShapeError",
    "Subst",
    "Term",
    "Var",
    "abstract",
    "apply",
    "evaluate",
    "free_variables",
    "full_simplify",
    "pretty",
    "structurally_equal",
    "subst_of",
    "variable",
]
