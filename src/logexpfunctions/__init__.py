"""
logexpfunctions
---------------

Numerically careful evaluation of log/exp-domain special functions used in
probabilistic and statistical computing: ``xlogx``, ``logistic``, softplus and
its relatives, ``log1pmx``, ``logsumexp`` and ``softmax``.
"""

from __future__ import annotations

from ._version import __version__
from .basic import log1psq, logistic, logit, xlogx, xlogy
from .constants import log2pi, log4pi, loghalf, logpi, logtwo
from .exceptions import DimensionMismatchError
from .range_reduction import log1pmx, logmxp1
from .reductions import logaddexp, logsumexp, softmax, softmax_inplace
from .softplus import invsoftplus, log1mexp, log1pexp, log2mexp, logexpm1, softplus

__all__ = [
    "__version__",
    "DimensionMismatchError",
    "xlogx",
    "xlogy",
    "logistic",
    "logit",
    "log1psq",
    "log1pexp",
    "logexpm1",
    "log1mexp",
    "log2mexp",
    "softplus",
    "invsoftplus",
    "log1pmx",
    "logmxp1",
    "logaddexp",
    "logsumexp",
    "softmax_inplace",
    "softmax",
    "loghalf",
    "logtwo",
    "logpi",
    "log2pi",
    "log4pi",
]
