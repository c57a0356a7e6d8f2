"""
Log-domain sums and the softmax transformation.

``logaddexp`` and ``logsumexp`` shift by the maximum before exponentiating, so
every argument passed to ``exp`` is non-positive and nothing overflows.
Non-finite values follow fixed rules: NaN dominates, ``+inf`` dominates any
finite value or ``-inf``, and ``-inf`` is absorbed.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable, Optional

import numpy as np

from ._math import _as_float, _promote, _unwrap
from .exceptions import DimensionMismatchError

__all__ = ["logaddexp", "logsumexp", "softmax_inplace", "softmax"]

logger = logging.getLogger(__name__)


def logaddexp(x, y):
    """
    Return ``log(exp(x) + exp(y))``, avoiding intermediate overflow/underflow,
    and handling non-finite values.

    Both arguments are promoted to a common floating dtype and broadcast.
    """
    x, y = _promote(x, y)
    # x or y is  NaN  =>  NaN
    # x or y is +Inf  => +Inf
    # x or y is -Inf  => other value
    out = np.asarray(np.maximum(x, y))
    finite = np.isfinite(x) & np.isfinite(y)
    if finite.any():
        a = out[finite]
        b = np.asarray(np.minimum(x, y))[finite]
        out[finite] = a + np.log1p(np.exp(b - a))
    return _unwrap(out)


def _is_array(X) -> bool:
    return isinstance(X, np.ndarray) or hasattr(X, "__array__")


def _logsumexp_array(X) -> np.floating:
    X = _as_float(X)
    if X.size == 0:
        return X.dtype.type(-np.inf)
    u = X.max()
    if not np.isfinite(u):
        logger.debug("logsumexp: non-finite maximum %r, returning it directly", u)
        return u
    return u + np.log(np.sum(np.exp(X - u)))


def _logsumexp_iter(X: Iterable) -> np.floating:
    items = iter(X)
    try:
        first = next(items)
    except StopIteration:
        return np.float64(-np.inf)
    kind = type(first)

    def step(acc, item):
        if type(item) is not kind:
            raise TypeError(
                f"logsumexp requires elements of a single numeric type, "
                f"got {kind.__name__} and {type(item).__name__}."
            )
        return logaddexp(acc, item)

    return reduce(step, items, _unwrap(_as_float(first)))


def logsumexp(X):
    """
    Compute ``log(sum(exp(X)))`` avoiding intermediate overflow/underflow.

    Parameters
    ----------
    X :
        A numpy array (or array-like exposing ``__array__``) or any iterable of
        real numbers. Arrays are reduced over all elements with a single
        max-shift; other iterables are folded with :func:`logaddexp` and must
        hold elements of one numeric type.

    Returns
    -------
    numpy floating scalar. An empty input gives ``-inf`` (``log(0)``).

    Raises
    ------
    TypeError
        If a non-array iterable mixes element types.
    """
    if _is_array(X):
        return _logsumexp_array(X)
    return _logsumexp_iter(X)


def softmax_inplace(r: np.ndarray, x: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Overwrite ``r`` with the softmax (normalized exponential) of ``x``.

    ``r`` is overwritten with ``exp(x)`` normalized to sum to 1. When ``x`` is
    omitted the transformation is applied to ``r`` in place.

    Parameters
    ----------
    r :
        Floating ndarray receiving the result; must hold as many elements as ``x``.
    x :
        Real ndarray, or ``None`` to use ``r`` itself.

    Raises
    ------
    TypeError
        If ``r`` is not a floating numpy array.
    DimensionMismatchError
        If ``r`` and ``x`` differ in size. ``r`` is left untouched.
    """
    if not isinstance(r, np.ndarray) or r.dtype.kind != "f":
        raise TypeError("softmax_inplace requires a floating numpy array as output.")
    x = r if x is None else np.asarray(x)
    if r.size != x.size:
        logger.debug("softmax_inplace: output size %d, input size %d", r.size, x.size)
        raise DimensionMismatchError("Inconsistent array lengths.")
    if x.size == 0:
        return r

    u = x.max()
    r[...] = np.exp(x - u).reshape(r.shape)
    s = np.sum(r, dtype=np.float64)
    r *= r.dtype.type(1.0 / s)
    return r


def softmax(x) -> np.ndarray:
    """
    Return the softmax transformation of ``x`` in a new float64 array.

    The result is non-negative, sums to 1 within rounding and is unchanged by
    adding a constant to every element of ``x``.
    """
    x = np.asarray(x)
    return softmax_inplace(np.empty(x.shape, dtype=np.float64), x)
