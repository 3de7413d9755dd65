"""Unit tests for the inverse error function and normal quantiles."""

import math

import numpy as np
import pytest

from dp_numerics.errors import InvalidArgumentError, StatusCode
from dp_numerics.probability import inverse_error_function, qnorm

QNORM_ACCURACY = 4.5e-4


@pytest.mark.parametrize("y,expected", [
    # True values are pre-calculated.
    (0.24, 0.216),
    (0.9999, 2.751),
    (0.0012, 0.001),
    (0.5, 0.476),
    (0.39, 0.360),
    (0.0067, 0.0059),
])
def test_inverse_error_function_known_values(y, expected) -> None:
    """Approximation stays within 1e-3 of tabulated values."""
    assert inverse_error_function(y) == pytest.approx(expected, abs=1e-3)


def test_inverse_error_function_round_trip() -> None:
    """erf(erfinv(y)) recovers y across the whole domain."""
    rng = np.random.default_rng(20191)
    for y in rng.uniform(-1.0, 1.0, size=1000):
        assert math.erf(inverse_error_function(y)) == pytest.approx(y, abs=1e-3)


def test_inverse_error_function_is_odd() -> None:
    """erfinv(-y) == -erfinv(y)."""
    for y in (0.1, 0.5, 0.93, 0.999999):
        assert inverse_error_function(-y) == -inverse_error_function(y)


def test_inverse_error_function_edge_cases() -> None:
    """Boundary values map to signed infinity and zero."""
    assert inverse_error_function(-1) == -math.inf
    assert inverse_error_function(1) == math.inf
    assert inverse_error_function(0) == 0


@pytest.mark.parametrize("y", [1.5, -1.0000001, math.nan])
def test_inverse_error_function_outside_domain_is_nan(y) -> None:
    """No real preimage exists outside [-1, 1]."""
    assert math.isnan(inverse_error_function(y))


@pytest.mark.parametrize("p", [-0.1, 0.0, 1.0, 2.0, math.nan])
def test_qnorm_invalid_probability(p) -> None:
    """Probabilities outside (0, 1) are rejected with an invalid-argument code."""
    with pytest.raises(InvalidArgumentError) as excinfo:
        qnorm(p)
    assert excinfo.value.code is StatusCode.INVALID_ARGUMENT


@pytest.mark.parametrize("p,exact", [
    (0.0000001, -5.199337582187471),
    (0.00001, -4.264890793922602),
    (0.001, -3.090232306167813),
    (0.05, -1.6448536269514729),
    (0.15, -1.0364333894937896),
    (0.25, -0.6744897501960817),
    (0.35, -0.38532046640756773),
    (0.45, -0.12566134685507402),
    (0.55, 0.12566134685507402),
    (0.65, 0.38532046640756773),
    (0.75, 0.6744897501960817),
    (0.85, 1.0364333894937896),
    (0.95, 1.6448536269514729),
    (0.999, 3.090232306167813),
    (0.99999, 4.264890793922602),
    (0.9999999, 5.199337582187471),
])
def test_qnorm_accuracy(p, exact) -> None:
    """Standard normal quantiles are within 4.5e-4 of the exact values."""
    assert abs(exact - qnorm(p)) <= QNORM_ACCURACY


def test_qnorm_location_and_scale() -> None:
    """Non-standard normals are shifted and scaled standard quantiles."""
    assert qnorm(0.5, mu=3.0, sigma=2.0) == 3.0
    assert qnorm(0.975, mu=1.0, sigma=2.0) == pytest.approx(1.0 + 2.0 * 1.959963984540054, abs=2e-3)


@pytest.mark.parametrize("sigma", [0.0, -1.0, math.inf])
def test_qnorm_rejects_invalid_sigma(sigma) -> None:
    """Scale must be finite and positive."""
    with pytest.raises(InvalidArgumentError):
        qnorm(0.5, sigma=sigma)


def test_invalid_argument_is_a_value_error() -> None:
    """Callers that only know about ValueError still catch bad input."""
    with pytest.raises(ValueError):
        qnorm(0.0)
