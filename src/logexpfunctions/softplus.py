"""
The softplus family: ``log(1 + exp(x))`` and its relatives.

The crossover between the direct and asymptotic formulas depends on the
mantissa width, so the breakpoints are taken from the precision table of the
input dtype (see :func:`logexpfunctions.constants.precision_for`).
"""

from __future__ import annotations

import numpy as np

from ._math import _as_float, _select, _unwrap
from .constants import precision_for

__all__ = [
    "log1pexp",
    "logexpm1",
    "log1mexp",
    "log2mexp",
    "softplus",
    "invsoftplus",
]


def log1pexp(x):
    """
    Return ``log(1 + exp(x))`` evaluated carefully for largish ``x``.

    This is also called the softplus transformation, being a smooth
    approximation to ``max(0, x)``. Its inverse is :func:`logexpm1`.

    Parameters
    ----------
    x :
        Real scalar or array.

    Notes
    -----
    Three regimes: ``log1p(exp(x))`` below the low breakpoint, ``x + exp(-x)``
    below the high breakpoint, and ``x`` itself beyond it where the correction
    no longer changes the result. Breakpoints are ``18.0``/``33.3`` in double
    precision and ``9.0``/``16.0`` in single precision.
    """
    x = _as_float(x)
    prec = precision_for(x.dtype)
    out = _select(
        x,
        [
            (x < prec.softplus_lo, lambda v: np.log1p(np.exp(v))),
            (x < prec.softplus_hi, lambda v: v + np.exp(-v)),
        ],
        lambda v: v,
    )
    return _unwrap(out)


def logexpm1(x):
    """
    Return ``log(exp(x) - 1)``, the inverse softplus.

    It is the inverse of :func:`log1pexp` and uses the same breakpoints.
    """
    x = _as_float(x)
    prec = precision_for(x.dtype)
    out = _select(
        x,
        [
            (x <= prec.softplus_lo, lambda v: np.log(np.expm1(v))),
            (x <= prec.softplus_hi, lambda v: v - np.exp(-v)),
        ],
        lambda v: v,
    )
    return _unwrap(out)


def log1mexp(x):
    """
    Return ``log(1 - exp(x))`` for ``x <= 0``.

    See Martin Maechler (2012), "Accurately Computing log(1 - exp(-|a|))".
    Unlike that note there is no negation inside the parentheses.
    """
    x = _as_float(x)
    prec = precision_for(x.dtype)
    out = _select(
        x,
        [(x < prec.loghalf, lambda v: np.log1p(-np.exp(v)))],
        lambda v: np.log(-np.expm1(v)),
    )
    return _unwrap(out)


def log2mexp(x):
    """Return ``log(2 - exp(x))`` evaluated as ``log1p(-expm1(x))``."""
    x = _as_float(x)
    return _unwrap(np.asarray(np.log1p(-np.expm1(x)), dtype=x.dtype))


softplus = log1pexp
invsoftplus = logexpm1
