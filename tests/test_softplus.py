import numpy as np
import pytest
from numpy.testing import assert_allclose

from logexpfunctions import (
    invsoftplus,
    log1mexp,
    log1pexp,
    log2mexp,
    logexpm1,
    softplus,
)


# log1pexp
def test_log1pexp_matches_numpy_logaddexp():
    x = np.linspace(-50.0, 50.0, 1001)
    assert_allclose(log1pexp(x), np.logaddexp(0.0, x), rtol=1e-14)


def test_log1pexp_extremes():
    assert log1pexp(0.0) == pytest.approx(np.log(2.0), rel=1e-15)
    assert log1pexp(-1000.0) == 0.0
    with np.errstate(over="raise"):
        assert log1pexp(1000.0) == 1000.0
        assert log1pexp(np.float32(1000.0)) == np.float32(1000.0)


def test_log1pexp_precision_breakpoints():
    # Beyond the single-precision cutoff the correction is dropped for float32 only.
    x32 = log1pexp(np.float32(20.0))
    assert x32.dtype == np.float32
    assert x32 == np.float32(20.0)
    x64 = log1pexp(20.0)
    assert x64 != 20.0
    assert_allclose(x64, 20.0 + np.exp(-20.0), rtol=1e-16)

    mid32 = log1pexp(np.float32(12.0))
    assert mid32.dtype == np.float32
    assert_allclose(mid32, 12.0 + np.exp(-12.0), rtol=1e-6)


def test_log1pexp_nan():
    assert np.isnan(log1pexp(np.nan))


# logexpm1
@pytest.mark.parametrize("x", [1e-3, 0.1, 1.0, 5.0, 17.0, 18.0, 25.0, 33.0, 33.3, 40.0])
def test_log1pexp_inverts_logexpm1(x):
    assert_allclose(log1pexp(logexpm1(x)), x, rtol=1e-14)


@pytest.mark.parametrize("x", [0.1, 1.0, 5.0, 17.0, 18.0, 25.0, 33.0, 33.3, 40.0])
def test_logexpm1_inverts_log1pexp(x):
    assert_allclose(logexpm1(log1pexp(x)), x, rtol=1e-13)


def test_logexpm1_values():
    assert_allclose(logexpm1(1.0), np.log(np.expm1(1.0)), rtol=1e-15)
    assert logexpm1(100.0) == 100.0
    with np.errstate(divide="ignore"):
        assert logexpm1(0.0) == -np.inf


def test_logexpm1_float32():
    got = logexpm1(np.array([1.0, 12.0, 20.0], dtype=np.float32))
    assert got.dtype == np.float32
    assert got[2] == np.float32(20.0)
    assert_allclose(got[:2], [np.log(np.expm1(1.0)), 12.0 - np.exp(-12.0)], rtol=1e-6)


def test_aliases():
    assert softplus is log1pexp
    assert invsoftplus is logexpm1


# log1mexp
def test_log1mexp_both_branches():
    x = np.array([-5.0, -1.0, -0.7, -0.69, -0.1, -1e-3])
    assert_allclose(log1mexp(x), np.log(-np.expm1(x)), rtol=1e-13)


def test_log1mexp_tails():
    assert_allclose(log1mexp(-1e-20), np.log(1e-20), rtol=1e-15)
    assert_allclose(log1mexp(-50.0), -np.exp(-50.0), rtol=1e-14)
    assert log1mexp(-np.inf) == 0.0
    with np.errstate(divide="ignore"):
        assert log1mexp(0.0) == -np.inf


def test_log1mexp_positive_is_nan():
    with np.errstate(invalid="ignore"):
        assert np.isnan(log1mexp(1.0))


# log2mexp
def test_log2mexp():
    assert log2mexp(0.0) == 0.0
    assert_allclose(log2mexp(-np.inf), np.log(2.0), rtol=1e-15)
    x = np.array([-5.0, -2.0, -1.0, -0.5, -0.1, 0.1, 0.3, 0.5])
    assert_allclose(log2mexp(x), np.log(2.0 - np.exp(x)), rtol=1e-13)
