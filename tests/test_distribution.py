from __future__ import annotations

import math

import numpy as np
import pytest

import poisson_core
from poisson_core import InvalidArgument, Poisson


INVALID_VALUES = [0, 0.0, -1.0, -3, float("nan"), float("inf"), float("-inf"), "3.0", None, True, False, 1 + 2j, [1.0], 10**400]


def test_default_lambda_is_one():
    assert Poisson().lambda_ == 1.0


def test_derived_statistics_at_four():
    d = Poisson(4.0)
    assert d.mean == 4.0
    assert d.mode == 4.0
    assert d.median == 4.0
    assert d.skewness == 0.5
    assert d.kurtosis == 0.25
    assert d.stdev == 2.0
    assert d.variance == 4.0
    assert d.entropy == pytest.approx(2.087, abs=1e-3)


def test_evaluators_at_two():
    d = Poisson(2.0)
    assert d.cdf(0.5) == pytest.approx(0.135, abs=1e-3)
    assert d.cdf(1.5) == pytest.approx(0.406, abs=1e-3)
    assert d.logpmf(3.0) == pytest.approx(-1.712, abs=1e-3)
    assert d.logpmf(2.3) == float("-inf")
    assert d.pmf(3.0) == pytest.approx(0.180, abs=1e-3)
    assert d.pmf(2.3) == 0.0
    assert d.quantile(0.5) == 2.0
    assert math.isnan(d.quantile(1.9))
    assert d.mgf(0.5) == pytest.approx(3.66, abs=1e-2)


@pytest.mark.parametrize("value", INVALID_VALUES)
def test_constructor_rejects_invalid_lambda(value):
    with pytest.raises(InvalidArgument) as ei:
        Poisson(value)
    assert ei.value.value is value or (isinstance(value, float) and math.isnan(value))
    assert repr(value) in str(ei.value)


def test_invalid_argument_is_value_and_type_error():
    with pytest.raises(ValueError):
        Poisson(-1.0)
    with pytest.raises(TypeError):
        Poisson("abc")


@pytest.mark.parametrize("value", INVALID_VALUES)
def test_failed_assignment_keeps_previous_value(value):
    d = Poisson()
    d.lambda_ = 3.0
    with pytest.raises(InvalidArgument):
        d.lambda_ = value
    assert d.lambda_ == 3.0
    assert d.mean == 3.0


def test_assignment_message_names_the_assignment():
    d = Poisson(2.0)
    with pytest.raises(InvalidArgument, match="invalid assignment"):
        d.lambda_ = -1
    with pytest.raises(InvalidArgument, match="invalid argument"):
        Poisson(-1)


def test_accepts_ints_and_numpy_scalars():
    assert Poisson(3).lambda_ == 3.0
    assert isinstance(Poisson(3).lambda_, float)
    assert Poisson(np.float64(2.5)).lambda_ == 2.5
    assert Poisson(np.int64(7)).lambda_ == 7.0
    assert Poisson(1e-300).lambda_ == 1e-300


def test_getter_returns_stored_value():
    d = Poisson(5.54)
    assert d.lambda_ == 5.54
    d.lambda_ = 0.125
    assert d.lambda_ == 0.125


def test_statistics_follow_lambda_updates():
    d = Poisson(1.0)
    for lam in (0.3, 2.0, 9.0, 144.0):
        d.lambda_ = lam
        assert d.mean == d.variance == lam
        assert d.stdev == math.sqrt(lam)
        assert d.skewness == 1.0 / math.sqrt(lam)
        assert d.kurtosis == 1.0 / lam
        assert d.mode == math.floor(lam)
        assert d.entropy == poisson_core.entropy(lam)
        assert d.median == poisson_core.median(lam)


def test_evaluators_read_lambda_at_call_time():
    d = Poisson(2.0)
    before = d.pmf(3.0)
    d.lambda_ = 5.0
    assert d.pmf(3.0) != before
    assert d.pmf(3.0) == poisson_core.pmf(3.0, 5.0)
    assert d.cdf(3.0) == poisson_core.cdf(3.0, 5.0)
    assert d.logpmf(3.0) == poisson_core.logpmf(3.0, 5.0)
    assert d.mgf(0.2) == poisson_core.mgf(0.2, 5.0)
    assert d.quantile(0.9) == poisson_core.quantile(0.9, 5.0)


def test_derived_statistics_are_read_only():
    d = Poisson(2.0)
    for name in ("entropy", "kurtosis", "mean", "median", "mode", "skewness", "stdev", "variance"):
        with pytest.raises(AttributeError):
            setattr(d, name, 1.0)


def test_with_lambda_returns_new_instance():
    d = Poisson(2.0)
    e = d.with_lambda(6.0)
    assert isinstance(e, Poisson)
    assert e is not d
    assert e.lambda_ == 6.0
    assert d.lambda_ == 2.0
    with pytest.raises(InvalidArgument):
        d.with_lambda(0.0)
    assert d.lambda_ == 2.0


def test_repr():
    assert repr(Poisson(2.5)) == "Poisson(lambda_=2.5)"


def test_cdf_properties_on_instance():
    d = Poisson(3.3)
    assert d.cdf(-0.5) == 0.0
    values = [d.cdf(x) for x in np.arange(0.0, 30.0, 0.25)]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert d.cdf(1e4) == pytest.approx(1.0)


def test_quantile_bounds_on_instance():
    d = Poisson(3.3)
    for p in (0.0, 0.01, 0.5, 0.99):
        k = d.quantile(p)
        assert d.cdf(k) >= p
        if k > 0:
            assert d.cdf(k - 1) < p
    assert math.isnan(d.quantile(-0.01))
    assert math.isnan(d.quantile(1.01))


def test_subnormal_lambda_statistics_do_not_raise():
    d = Poisson(1e-310)
    assert d.median == float("-inf")
    assert d.mode == 0.0
    assert d.kurtosis > 0.0


def test_huge_int_assignment_is_rejected_and_keeps_value():
    d = Poisson(3.0)
    with pytest.raises(InvalidArgument):
        d.lambda_ = 10**400
    assert d.lambda_ == 3.0
