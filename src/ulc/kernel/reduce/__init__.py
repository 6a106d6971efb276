"""Reduction rules (beta, eta) and the normalization driver."""

from .beta import beta
from .eta import eta
from .normalize import is_normal, normalize, reduce_pass

__all__ = [
    "beta",
    "eta",
    "is_normal",
    "normalize",
    "reduce_pass",
]
