"""
Low-level numerical helpers used throughout the logexpfunctions package.

The functions in this module are intentionally lightweight so they can be
imported by every public module without creating cyclic dependencies.
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple

import numpy as np

__all__ = [
    "_as_float",
    "_promote",
    "_select",
    "_unwrap",
    "_horner",
    "_log1pmx_ker",
]

Branch = Tuple[np.ndarray, Callable[[np.ndarray], np.ndarray]]


def _as_float(x) -> np.ndarray:
    """Convert ``x`` to a floating ndarray (integers and bools become float64)."""
    x = np.asarray(x)
    if x.dtype.kind == "f":
        if x.dtype.itemsize < 4:
            return x.astype(np.float32)
        return x
    if x.dtype.kind in "biu":
        return x.astype(np.float64)
    raise TypeError(f"Expected real numbers, got dtype {x.dtype}.")


def _promote(*args) -> Tuple[np.ndarray, ...]:
    """
    Promote several arguments to one common floating dtype and broadcast them.

    Integer and boolean arguments take the dtype of the floating ones, so
    ``xlogy(2, np.float32(3))`` stays float32. Without any floating argument
    the result is float64.
    """
    arrays = [np.asarray(a) for a in args]
    for a in arrays:
        if a.dtype.kind not in "biuf":
            raise TypeError(f"Expected real numbers, got dtype {a.dtype}.")
    floats = [a.dtype for a in arrays if a.dtype.kind == "f"]
    dtype = np.result_type(*floats) if floats else np.dtype(np.float64)
    if dtype.itemsize < 4:
        dtype = np.dtype(np.float32)
    return tuple(np.broadcast_arrays(*[a.astype(dtype, copy=False) for a in arrays]))


def _select(x: np.ndarray, branches: Sequence[Branch], otherwise: Callable[[np.ndarray], np.ndarray]) -> np.ndarray:
    """
    Evaluate a piecewise function of ``x``.

    Parameters
    ----------
    x :
        Floating ndarray (0-d allowed).
    branches :
        ``(condition, func)`` pairs tested in order. An element is owned by the
        first branch whose condition holds for it.
    otherwise :
        Applied to the elements no branch owns, NaNs included.

    Each ``func`` only ever sees the elements it owns, so a formula that would
    overflow elsewhere in the domain is never evaluated there.
    """
    out = np.empty(x.shape, dtype=x.dtype)
    rest = np.ones(x.shape, dtype=bool)
    for cond, func in branches:
        mask = rest & cond
        if mask.any():
            out[mask] = func(x[mask])
        rest &= ~mask
    if rest.any():
        out[rest] = otherwise(x[rest])
    return out


def _unwrap(out: np.ndarray):
    """Return 0-d results as numpy scalars, arrays unchanged."""
    if out.ndim == 0:
        return out[()]
    return out


def _horner(t: np.ndarray, coeffs: Sequence[float]) -> np.ndarray:
    """Evaluate ``coeffs[0] + coeffs[1]*t + ...`` by nested multiplication."""
    acc = np.full_like(t, coeffs[-1])
    for c in reversed(coeffs[:-1]):
        acc = acc * t + c
    return acc


# Taylor coefficients 2/(2k+3) of the series of log1p(x) - x in r = x/(x+2).
_LOG1PMX_COEFFS = (
    6.66666666666666667e-1,  # 2/3
    4.00000000000000000e-1,  # 2/5
    2.85714285714285714e-1,  # 2/7
    2.22222222222222222e-1,  # 2/9
    1.81818181818181818e-1,  # 2/11
    1.53846153846153846e-1,  # 2/13
    1.33333333333333333e-1,  # 2/15
    1.17647058823529412e-1,  # 2/17
)


def _log1pmx_ker(x: np.ndarray) -> np.ndarray:
    """
    Kernel of ``log1p(x) - x``.

    Accurate to about 2 ulps of float64 for ``-0.227 < x < 0.315``. Evaluated in
    the dtype of ``x`` (float64 for Python numbers).
    """
    x = np.asarray(x)
    r = x / (x + 2.0)
    t = r * r
    w = _horner(t, _LOG1PMX_COEFFS)
    hxsq = 0.5 * x * x
    return r * (hxsq + w * t) - hxsq
