import dataclasses
import math

import numpy as np
import pytest

import logexpfunctions
from logexpfunctions.constants import FLOAT32, FLOAT64, Precision, precision_for


def test_log_constants():
    assert logexpfunctions.logtwo == math.log(2.0)
    assert logexpfunctions.loghalf == -logexpfunctions.logtwo
    assert logexpfunctions.logpi == pytest.approx(math.log(math.pi), rel=1e-15)
    assert logexpfunctions.log2pi == pytest.approx(math.log(2.0 * math.pi), rel=1e-15)
    assert logexpfunctions.log4pi == pytest.approx(math.log(4.0 * math.pi), rel=1e-15)


def test_precision_tables_are_typed():
    for name in ("loghalf", "softplus_lo", "softplus_hi", "maxintfloat"):
        assert getattr(FLOAT64, name).dtype == np.float64
        assert getattr(FLOAT32, name).dtype == np.float32
    assert FLOAT32.loghalf == np.float32(math.log(0.5))
    assert FLOAT64.loghalf == logexpfunctions.loghalf
    assert FLOAT64.maxintfloat == 2.0**53
    assert FLOAT32.maxintfloat == 2.0**24


def test_precision_fields_are_the_ones_in_use():
    names = [f.name for f in dataclasses.fields(Precision)]
    assert names == ["dtype", "loghalf", "softplus_lo", "softplus_hi", "maxintfloat"]


def test_precision_breakpoints():
    assert (FLOAT64.softplus_lo, FLOAT64.softplus_hi) == (18.0, 33.3)
    assert (FLOAT32.softplus_lo, FLOAT32.softplus_hi) == (np.float32(9.0), np.float32(16.0))


@pytest.mark.parametrize(
    "dtype, expected",
    [
        (np.float16, FLOAT32),
        (np.float32, FLOAT32),
        (np.float64, FLOAT64),
        (np.longdouble, FLOAT64),
        (float, FLOAT64),
    ],
)
def test_precision_for(dtype, expected):
    assert precision_for(dtype) is expected


def test_precision_for_rejects_integers():
    with pytest.raises(TypeError):
        precision_for(np.int64)
