"""Least-squares fitting of conic coefficients to a polyline."""

from enum import IntFlag
from math import comb

import numpy as np

from .solver import solve


class FitType(IntFlag):
    """Options of the fit; combine them with ``|``."""

    SIMPLE = 0
    CLOSED = 1
    ORIGIN = 2
    MIDPOINT = 4
    SEGMENT = 8


# Exponents (of x, y) of the monomials 1, x, y, x^2, xy, y^2.
_MONOMIALS = ((0, 0), (1, 0), (0, 1), (2, 0), (1, 1), (0, 2))

# Lower-triangle entries of the gradient matrix as (factor, moment) terms.
_GRADIENT_TERMS = {
    (1, 1): ((1, (0, 0)),),
    (2, 2): ((1, (0, 0)),),
    (3, 1): ((2, (1, 0)),),
    (3, 3): ((4, (2, 0)),),
    (4, 1): ((1, (0, 1)),),
    (4, 2): ((1, (1, 0)),),
    (4, 3): ((2, (1, 1)),),
    (4, 4): ((1, (2, 0)), (1, (0, 2))),
    (5, 2): ((2, (0, 1)),),
    (5, 4): ((2, (1, 1)),),
    (5, 5): ((4, (0, 2)),),
}


def line_integral(segment, m, n):
    """Exact integral of x^m y^n over the segment, parameterized on [0, 1]."""
    (x0, y0), (x1, y1) = segment
    dx, dy = x1 - x0, y1 - y0
    xs = [comb(m, i) * x0 ** (m - i) * dx**i for i in range(m + 1)]
    ys = [comb(n, j) * y0 ** (n - j) * dy**j for j in range(n + 1)]
    product = np.convolve(xs, ys)
    return float(sum(c / (k + 1) for k, c in enumerate(product)))


def three_samples(segment, m, n):
    """Average of x^m y^n at both endpoints and the midpoint."""
    start, end = (np.asarray(p, dtype=float) for p in segment)

    def value(p):
        return p[0] ** m * p[1] ** n

    return float((value(start) + value(end) + value((start + end) / 2)) / 3)


def one_point(segment, m, n):
    """Value of x^m y^n at the end of the segment."""
    x, y = segment[1]
    return float(x**m * y**n)


def _moment_matrices(segments, rule, weighted):
    m = np.zeros((6, 6))
    n = np.zeros((6, 6))
    total = 0.0
    for start, end in segments:
        length = float(np.linalg.norm(end - start))
        total += length
        weight = length if weighted else 1.0
        moments = {
            (a, b): rule((start, end), a, b) * weight
            for a in range(5)
            for b in range(5 - a)
        }
        for i, (ai, bi) in enumerate(_MONOMIALS):
            for j, (aj, bj) in enumerate(_MONOMIALS):
                m[i, j] += moments[(ai + aj, bi + bj)]
        for (i, j), terms in _GRADIENT_TERMS.items():
            value = sum(factor * moments[e] for factor, e in terms)
            n[i, j] += value
            if i != j:
                n[j, i] += value
    return m, n, total


def fit_coefficients(polyline, fit_type, tolerance=1e-8):
    """Coefficients (1, x, y, x^2, xy, y^2) of the conic fitted to the polyline."""
    fit_type = FitType(fit_type)
    points = [np.asarray(p, dtype=float) for p in polyline]

    if FitType.SEGMENT in fit_type:
        rule = line_integral
    elif FitType.MIDPOINT in fit_type:
        rule = three_samples
    else:
        rule = one_point
    only_points = rule is one_point
    wrap = only_points or FitType.CLOSED in fit_type

    if wrap:
        segments = zip(points[-1:] + points[:-1], points)
    else:
        segments = zip(points, points[1:])

    m, n, total = _moment_matrices(segments, rule, not only_points)
    if total == 0:
        raise ValueError("polyline has zero length")

    if FitType.ORIGIN in fit_type:
        m[:, 0] = 0
        m[0, :] = 0

    coeffs = solve(m / total, n / total, tolerance)
    if FitType.ORIGIN in fit_type:
        coeffs[0] = 0
    return tuple(float(c) for c in coeffs)