"""
Quickstart example for the logexpfunctions package.

Run with:

    python examples/quickstart.py
"""

from __future__ import annotations

import numpy as np

from logexpfunctions import log1pexp, log1pmx, logsumexp, softmax


def main() -> None:
    logits = np.array([1000.0, 1001.0, 1002.0])

    print("naive log-sum-exp:", np.log(np.sum(np.exp(logits))))
    print("logsumexp:        ", logsumexp(logits))
    print("softmax:          ", softmax(logits))

    x = np.array([-40.0, 0.0, 20.0, 40.0])
    print("softplus:         ", log1pexp(x))

    small = 1e-9
    print("naive log1p(x)-x: ", np.log1p(small) - small)
    print("log1pmx:          ", log1pmx(small))


if __name__ == "__main__":
    with np.errstate(over="ignore"):
        main()
