import pytest

from ulc.kernel.ast import App, Lam, Subst, Var
from ulc.kernel.build import (
    abstract,
    apply,
    make_abstraction,
    make_application,
    structurally_equal,
    subst_of,
    variable,
)
from ulc.kernel.errors import ShapeError
from ulc.kernel.names import Name, Shadow

x, y, z, f = Name("x"), Name("y"), Name("z"), Name("f")


def test_variable_accepts_strings_and_identifiers() -> None:
    assert variable("x") == Var(x)
    assert variable(Shadow(x)) == Var(Shadow(x))


def test_make_abstraction_tries_eta() -> None:
    assert make_abstraction(x, App(Var(f), Var(x))) == Var(f)
    assert make_abstraction(Var(x), Var(x)) == Lam(x, Var(x))


def test_make_abstraction_only_tries_eta_once_at_the_top() -> None:
    # the body's own redex is left for evaluate()
    body = App(Lam(y, Var(y)), Var(z))
    assert make_abstraction(x, body) == Lam(x, body)


def test_abstract_builds_curried_binders_innermost_first() -> None:
    assert abstract(x, y, Var(x)) == Lam(x, Lam(y, Var(x)))
    assert abstract(x, y, body=Var(x)) == Lam(x, Lam(y, Var(x)))


def test_abstract_eta_contracts_each_binder() -> None:
    # λf. λx. f x  ->  λf. f
    assert abstract(f, x, App(Var(f), Var(x))) == Lam(f, Var(f))


def test_abstract_needs_parameter_and_body() -> None:
    with pytest.raises(ShapeError, match="needs a body"):
        abstract()
    with pytest.raises(ShapeError, match="at least one parameter"):
        abstract(Var(x))


def test_abstract_rejects_compound_parameters() -> None:
    with pytest.raises(ShapeError, match="Expected a variable or identifier"):
        abstract(App(Var(x), Var(y)), Var(x))


def test_make_application_normalizes() -> None:
    assert make_application(Lam(x, Var(x)), Var(z)) == Var(z)
    assert make_application(Var(f), Var(z)) == App(Var(f), Var(z))


def test_apply_is_left_associative() -> None:
    k = Lam(x, Lam(y, Var(x)))
    assert apply(k, z, f) == Var(z)
    assert apply(Var(f), x, y) == App(App(Var(f), Var(x)), Var(y))


def test_apply_needs_an_argument() -> None:
    with pytest.raises(ShapeError, match="at least one argument"):
        apply(Var(f))


def test_apply_rejects_non_terms() -> None:
    with pytest.raises(ShapeError, match="Expected a term"):
        apply(Var(f), "x")  # type: ignore[arg-type]


def test_call_syntax_applies_and_normalizes() -> None:
    assert Lam(x, App(Var(x), Var(x)))(Var(z)) == App(Var(z), Var(z))


def test_subst_of_builds_substitution() -> None:
    assert subst_of(Var(x), Var(y)) == Subst(x, Var(y))


def test_structural_equality() -> None:
    assert structurally_equal(Lam(x, Var(x)), Lam(x, Var(x)))
    assert not structurally_equal(Lam(x, Var(x)), Lam(y, Var(y)))
    with pytest.raises(ShapeError, match="compares terms only"):
        structurally_equal(Var(x), x)  # type: ignore[arg-type]
