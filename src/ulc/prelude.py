"""Named variables and a handful of standard combinators."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count, islice
from string import ascii_lowercase

from ulc.kernel.ast import App, Term, Var
from ulc.kernel.build import abstract, apply
from ulc.kernel.names import Name


def iter_letters() -> Iterator[Name]:
    """Yield ``a``..``z``, then ``a1``..``z1``, ``a2``.. without end."""

    for round_ in count():
        suffix = str(round_) if round_ else ""
        for ch in ascii_lowercase:
            yield Name(f"{ch}{suffix}")


def letters(n: int) -> tuple[Name, ...]:
    """The first ``n`` names of ``iter_letters``."""

    if n < 0:
        raise ValueError("Cannot take a negative number of names")
    return tuple(islice(iter_letters(), n))


(a, b, c, d, e, f, g, h, i, j, k, l, m, n, o, p, q, r, s, t, u, v, w, x, y, z) = (
    Var(name) for name in letters(26)
)

# Combinators ------------------------------------------------------------------
I = abstract(x, x)
K = abstract(x, y, x)
KI = abstract(x, y, y)
S = abstract(x, y, z, apply(apply(x, z), apply(y, z)))
B = abstract(f, g, x, apply(f, apply(g, x)))
OMEGA_HALF = abstract(x, App(x, x))

TRUE = K
FALSE = KI

SUCC = abstract(n, f, x, apply(f, apply(apply(n, f), x)))
PLUS = abstract(m, n, f, x, apply(apply(m, f), apply(apply(n, f), x)))


def church(count_: int) -> Term:
    """The Church numeral for ``count_``, in beta/eta normal form."""

    if count_ < 0:
        raise ValueError("Church numerals are non-negative")
    body: Term = x
    for _ in range(count_):
        body = App(f, body)
    return abstract(f, x, body)


def omega_growing() -> Term:
    """``(λx. x x x)(λx. x x x)``, left unreduced; every pass makes it larger."""

    w3 = abstract(x, App(App(x, x), x))
    return App(w3, w3)


__all__ = [
    "B",
    "FALSE",
    "I",
    "K",
    "KI",
    "OMEGA_HALF",
    "PLUS",
    "S",
    "SUCC",
    "TRUE",
    "church",
    "iter_letters",
    "letters",
    "omega_growing",
]
