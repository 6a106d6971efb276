import pytest

from ulc.eval import evaluate
from ulc.kernel.ast import App, Lam, Subst, Term, Var
from ulc.kernel.build import abstract, apply, variable
from ulc.kernel.free_vars import free_variables, identifiers
from ulc.kernel.names import Name, Shadow
from ulc.kernel.seq import IdentSeq
from ulc.kernel.subst import substitute
from ulc.prelude import I, K, OMEGA_HALF, S, SUCC, church, f, w, x, y, z

SAMPLES: list[Term] = [
    App(App(S, K), K),
    App(App(K, y), z),
    App(SUCC, church(2)),
    App(Lam(x.ident, Lam(y.ident, App(y, x))), y),
    App(OMEGA_HALF, OMEGA_HALF),
    Lam(x.ident, App(App(I, f), x)),
]


@pytest.mark.parametrize("term", SAMPLES, ids=str)
def test_evaluate_is_idempotent(term: Term) -> None:
    once = evaluate(term)
    assert evaluate(once) == once


@pytest.mark.parametrize("closed", [K, S, church(3), OMEGA_HALF])
def test_identity_returns_its_argument(closed: Term) -> None:
    assert apply(abstract(x, x), closed) == closed


@pytest.mark.parametrize("first", [I, S, church(2), App(I, K)])
@pytest.mark.parametrize("second", [K, OMEGA_HALF])
def test_constant_keeps_first_argument(first: Term, second: Term) -> None:
    assert apply(apply(abstract(x, y, x), first), second) == evaluate(first)


def test_substitution_avoids_capture() -> None:
    result = substitute(abstract(y, x), Subst(x.ident, y))
    assert result != abstract(y, y)
    assert y.ident in free_variables(result)
    assert isinstance(result, Lam) and result.param == Shadow(y.ident)


def test_free_variables_of_abstraction() -> None:
    assert free_variables(abstract(x, apply(x, y))) == IdentSeq.of(Name("y"))


@pytest.mark.parametrize("fn", [App(f, y), App(I, f), K])
def test_eta_law_applies_when_parameter_not_free(fn: Term) -> None:
    assert evaluate(Lam(x.ident, App(fn, x))) == evaluate(fn)


def test_eta_law_blocked_when_parameter_free() -> None:
    term = Lam(x.ident, App(App(f, x), x))
    assert evaluate(term) == term


def test_unshadow_consumes_one_name_per_shadow() -> None:
    left = apply(abstract(x, y, x), y)
    right = apply(abstract(x, z, x), z)
    term = App(App(w, left), right)
    shadows = [i for i in identifiers(term) if i.is_shadow]
    assert len(shadows) == 2

    supply = [Name("p"), Name("q"), Name("r")]
    result = term.unshadow(*supply)
    used = identifiers(result)
    assert not any(i.is_shadow for i in used)
    assert [n in used for n in supply] == [True, True, False]


def test_repeated_capture_in_one_reduction() -> None:
    # (λx. λy. λz. z x y) y x  ->  λz. z y x
    pair = abstract(x, y, z, apply(z, x, y))
    assert apply(pair, y, x) == Lam(z.ident, App(App(z, y), x))


def test_shadowed_binder_can_be_applied_away() -> None:
    flip = abstract(x, y, App(y, x))
    assert apply(flip, y) == Lam(Shadow(y.ident), App(Var(Shadow(y.ident)), y))
    assert apply(flip, y, w) == App(w, y)


def test_rendering_after_evaluation() -> None:
    assert str(apply(abstract(x, x), variable("z"))) == "z"
