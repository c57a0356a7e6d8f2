"""
Numeric constants and per-precision threshold tables.

The logarithmic constants are embedded as literals rounded from their exact
values; they are never derived at runtime from lower-precision arithmetic.
Functions whose breakpoints depend on the mantissa width look up a
:class:`Precision` table through :func:`precision_for`.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = [
    "loghalf",
    "logtwo",
    "logpi",
    "log2pi",
    "log4pi",
    "Precision",
    "FLOAT32",
    "FLOAT64",
    "precision_for",
]


loghalf = -0.69314718055994530942  # log(1/2)
logtwo = 0.69314718055994530942  # log(2)
logpi = 1.14472988584940017414  # log(pi)
log2pi = 1.83787706640934548356  # log(2 pi)
log4pi = 2.53102424696929079298  # log(4 pi)


@dataclass(frozen=True)
class Precision:
    """Constants and breakpoints for one working floating-point precision."""

    dtype: np.dtype
    loghalf: np.floating
    # log1pexp / logexpm1: direct formula below ``softplus_lo``, asymptotic
    # ``x +/- exp(-x)`` below ``softplus_hi``, identity above.
    softplus_lo: np.floating
    softplus_hi: np.floating
    # Largest float beyond which x*x no longer carries the "+1".
    maxintfloat: np.floating


FLOAT64 = Precision(
    dtype=np.dtype(np.float64),
    loghalf=np.float64(-0.69314718055994530942),
    softplus_lo=np.float64(18.0),
    softplus_hi=np.float64(33.3),
    maxintfloat=np.float64(9007199254740992.0),  # 2**53
)

FLOAT32 = Precision(
    dtype=np.dtype(np.float32),
    loghalf=np.float32(-0.69314718055994530942),
    softplus_lo=np.float32(9.0),
    softplus_hi=np.float32(16.0),
    maxintfloat=np.float32(16777216.0),  # 2**24
)


def precision_for(dtype: np.dtype | type) -> Precision:
    """
    Return the threshold table matching a floating dtype.

    Types of at most 32 bits (``float16``, ``float32``) use the single-precision
    table; wider types (``float64``, ``longdouble``) use the double-precision one.
    """
    dtype = np.dtype(dtype)
    if dtype.kind != "f":
        raise TypeError(f"Expected a floating dtype, got {dtype}.")
    if dtype.itemsize <= 4:
        return FLOAT32
    return FLOAT64
