"""
``log1pmx`` and ``logmxp1`` by range reduction onto a single polynomial kernel.

Near the origin ``log1p(x) - x`` loses every significant digit to cancellation.
Inside ``(-0.7, 0.9)`` the argument is mapped by an affine substitution
``u = (x - c) / s`` into the kernel's interval ``(-0.227, 0.315)`` and the
result is corrected by ``log1pmx(c)`` and a linear term, using

    log1pmx(x) = log1pmx(u) + log1pmx(c) - c * u,  1 + x = (1 + c) * (1 + u)

so that ``s = 1 + c``.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from ._math import _as_float, _log1pmx_ker, _select, _unwrap

__all__ = ["log1pmx", "logmxp1"]


class _SubRange(NamedTuple):
    lower: float  # owns x > lower not claimed by an earlier row
    center: float
    scale: float
    offset: float  # log1pmx(center)
    slope: float


_REDUCED_LO = -0.7
_REDUCED_HI = 0.9

_SUBRANGES = (
    _SubRange(0.315, 0.5, 1.5, -9.45348918918356180e-2, -0.5),
    _SubRange(-0.227, 0.0, 1.0, 0.0, 0.0),
    _SubRange(-0.4, -0.25, 0.75, -3.76820724517809274e-2, 0.25),
    _SubRange(-0.6, -0.5, 0.5, -1.93147180559945309e-1, 0.5),
    _SubRange(_REDUCED_LO, -0.625, 0.375, -3.55829253011726237e-1, 0.625),
)


def _remap(sub: _SubRange, shift: float = 0.0):
    """Build the evaluator for one sub-range; ``shift`` moves its centre."""
    center = sub.center + shift

    def evaluate(v: np.ndarray) -> np.ndarray:
        u = (v - center) / sub.scale
        return _log1pmx_ker(u) + sub.offset + sub.slope * u

    return evaluate


def _working(x: np.ndarray) -> np.ndarray:
    """Widen to at least float64; wider types are kept."""
    return x.astype(np.result_type(x.dtype, np.float64), copy=False)


def _naive(v: np.ndarray) -> np.ndarray:
    return np.log1p(v) - v


def _log1pmx_eval(x: np.ndarray) -> np.ndarray:
    # NaN fails both comparisons and takes the naive branch.
    outside = ~((x > _REDUCED_LO) & (x < _REDUCED_HI))
    branches = [(outside, _naive)]
    branches += [(x > sub.lower, _remap(sub)) for sub in _SUBRANGES[:-1]]
    return _select(x, branches, _remap(_SUBRANGES[-1]))


def log1pmx(x):
    """
    Return ``log(1 + x) - x``.

    Uses the naive formula outside ``(-0.7, 0.9)`` and range reduction onto the
    kernel inside it. Accurate to about 2 ulps for all ``x``. float32 inputs are
    evaluated in float64 and rounded back; ``longdouble`` inputs keep their
    dtype throughout, with float64 accuracy inside the reduced interval.
    """
    x = _as_float(x)
    out = _log1pmx_eval(_working(x))
    return _unwrap(out.astype(x.dtype, copy=False))


# Sub-ranges of logmxp1 on (0.3, 0.6] reuse the log1pmx rows shifted by one.
_LOGMXP1_ROWS = (
    (0.4, _remap(_SUBRANGES[4], shift=1.0)),  # u = (x - 0.375) / 0.375
    (0.6, _remap(_SUBRANGES[3], shift=1.0)),  # u = 2 (x - 0.5)
)


def logmxp1(x):
    """Return ``log(x) - x + 1`` carefully evaluated, for ``x > 0``."""
    x = _as_float(x)
    v = _working(x)
    lower = 0.3
    branches = [(v <= lower, lambda w: (np.log(w) + 1.0) - w)]
    for upper, evaluate in _LOGMXP1_ROWS:
        branches.append(((v > lower) & (v <= upper), evaluate))
        lower = upper
    out = _select(v, branches, lambda w: _log1pmx_eval(w - 1.0))
    return _unwrap(out.astype(x.dtype, copy=False))
