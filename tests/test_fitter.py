import numpy as np
import pytest

from conicfit.fitter import (
    FitType,
    fit_coefficients,
    line_integral,
    one_point,
    three_samples,
)

SEGMENT = ((0.5, -1.0), (2.0, 1.5))
CIRCLE_COEFFS = (-2.0, -2.0, 2.0, 1.0, 0.0, 1.0)


def _circle(count, start=0):
    angles = np.linspace(0, 2 * np.pi, count, endpoint=False)
    points = [(1 + 2 * np.cos(t), -1 + 2 * np.sin(t)) for t in angles]
    return points[start:] + points[:start]


def _normalized(coeffs):
    coeffs = np.asarray(coeffs)
    return coeffs / coeffs[3]


def _gauss(segment, m, n):
    (x0, y0), (x1, y1) = segment
    nodes, weights = np.polynomial.legendre.leggauss(6)
    t = (nodes + 1) / 2
    values = (x0 + (x1 - x0) * t) ** m * (y0 + (y1 - y0) * t) ** n
    return float(np.sum(weights / 2 * values))


@pytest.mark.parametrize(
    "m,n", [(a, b) for a in range(5) for b in range(5 - a)]
)
def test_line_integral_matches_quadrature(m, n):
    assert line_integral(SEGMENT, m, n) == pytest.approx(_gauss(SEGMENT, m, n))


@pytest.mark.parametrize("m,n", [(1, 2), (3, 1), (0, 4)])
def test_line_integral_reversal(m, n):
    reverse = (SEGMENT[1], SEGMENT[0])
    assert line_integral(reverse, m, n) == pytest.approx(line_integral(SEGMENT, m, n))


def test_constant_rules_give_one():
    assert line_integral(SEGMENT, 0, 0) == pytest.approx(1.0)
    assert three_samples(SEGMENT, 0, 0) == pytest.approx(1.0)
    assert one_point(SEGMENT, 0, 0) == pytest.approx(1.0)


@pytest.mark.parametrize("m,n", [(1, 0), (0, 1)])
def test_three_samples_exact_for_linear(m, n):
    assert three_samples(SEGMENT, m, n) == pytest.approx(line_integral(SEGMENT, m, n))


def test_one_point_uses_end_only():
    assert one_point(((9.0, 9.0), (2.0, 3.0)), 2, 1) == one_point(
        ((0.0, 0.0), (2.0, 3.0)), 2, 1
    )
    assert one_point(((0.0, 0.0), (2.0, 3.0)), 2, 1) == pytest.approx(2.0**2 * 3.0)


def test_simple_fit_recovers_circle():
    coeffs = fit_coefficients(_circle(40), FitType.SIMPLE)
    assert np.allclose(_normalized(coeffs), CIRCLE_COEFFS, atol=1e-8)


def test_points_always_wrap():
    points = _circle(30)
    simple = fit_coefficients(points, FitType.SIMPLE)
    closed = fit_coefficients(points, FitType.CLOSED)
    assert np.allclose(simple, closed)


@pytest.mark.parametrize(
    "fit_type",
    [
        FitType.CLOSED | FitType.SEGMENT,
        FitType.CLOSED | FitType.MIDPOINT,
        FitType.SEGMENT,
        FitType.MIDPOINT,
    ],
)
def test_integral_fits_approximate_circle(fit_type):
    coeffs = fit_coefficients(_circle(400), fit_type)
    assert np.allclose(_normalized(coeffs), CIRCLE_COEFFS, atol=1e-2)


def test_closed_segment_fit_independent_of_start():
    fit_type = FitType.CLOSED | FitType.SEGMENT
    first = _normalized(fit_coefficients(_circle(50), fit_type))
    second = _normalized(fit_coefficients(_circle(50, start=17), fit_type))
    assert np.allclose(first, second, atol=1e-8)


def test_origin_fit_zeroes_constant_term():
    points = [(1 + np.cos(t), np.sin(t)) for t in np.linspace(0, 6, 25)]
    coeffs = fit_coefficients(points, FitType.ORIGIN | FitType.SEGMENT)
    assert coeffs[0] == 0
    assert len(coeffs) == 6


def test_zero_length_polyline_raises():
    with pytest.raises(ValueError):
        fit_coefficients([(1.0, 2.0)], FitType.SIMPLE)


def test_integer_fit_type_accepted():
    points = _circle(40)
    assert np.allclose(
        fit_coefficients(points, 9), fit_coefficients(points, FitType.CLOSED | FitType.SEGMENT)
    )