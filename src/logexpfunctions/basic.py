"""
Elementary log-domain transforms.

All functions work elementwise on numpy arrays and return numpy scalars for
scalar input. Domain errors are not pre-validated: they surface as the NaN or
infinity produced by the underlying logarithm, together with numpy's usual
floating-point warnings.
"""

from __future__ import annotations

import numpy as np

from ._math import _as_float, _promote, _select, _unwrap
from .constants import precision_for

__all__ = ["xlogx", "xlogy", "logistic", "logit", "log1psq"]


def xlogx(x):
    """
    Return ``x * log(x)`` for ``x >= 0``, taking the limit ``0`` at ``x = 0``.

    >>> float(xlogx(0))
    0.0
    """
    x = _as_float(x)
    out = _select(
        x,
        [
            (x > 0, lambda v: v * np.log(v)),
            (x == 0, np.zeros_like),
        ],
        np.log,
    )
    return _unwrap(out)


def xlogy(x, y):
    """
    Return ``x * log(y)`` with the limit ``0`` at ``x = 0`` for any ``y``.

    Both arguments are promoted to a common floating dtype and broadcast.
    """
    x, y = _promote(x, y)
    pos = x > 0
    # The first branch owns exactly ``pos``, so ``y[pos]`` lines up with its input.
    out = _select(
        x,
        [
            (pos, lambda v: v * np.log(y[pos])),
            (x == 0, np.zeros_like),
        ],
        np.log,
    )
    return _unwrap(out)


def logistic(x):
    r"""
    The logistic sigmoid, mapping a real number into ``[0, 1]``.

    .. math:: \sigma(x) = \frac{1}{e^{-x} + 1}

    Saturates to ``0`` or ``1`` for large ``|x|``. Its inverse is :func:`logit`.
    """
    x = _as_float(x)
    with np.errstate(over="ignore"):
        out = 1 / (np.exp(-x) + 1)
    return _unwrap(np.asarray(out, dtype=x.dtype))


def logit(x):
    """
    The log-odds transformation ``log(x / (1 - x))`` for ``0 < x < 1``.

    Returns ``-inf`` at ``0`` and ``inf`` at ``1``. Its inverse is :func:`logistic`.
    """
    x = _as_float(x)
    with np.errstate(divide="ignore"):
        out = np.log(x / (1 - x))
    return _unwrap(np.asarray(out, dtype=x.dtype))


def log1psq(x):
    """Return ``log(1 + x^2)`` evaluated carefully for very small or very large ``|x|``."""
    x = _as_float(x)
    prec = precision_for(x.dtype)
    ax = np.abs(x)
    out = _select(
        ax,
        [(ax < prec.maxintfloat, lambda v: np.log1p(v * v))],
        lambda v: 2 * np.log(v),
    )
    return _unwrap(out)
