"""Implicit conic curves: evaluation, distance, classification and fitting."""

import math
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np

from .fitter import fit_coefficients


class ConicType(IntEnum):
    """Kind of curve described by a conic."""

    NO_CURVE = 0
    LINE = 1
    TWO_LINES = 2
    ELLIPSE = 3
    PARABOLA = 4
    HYPERBOLA = 5


@dataclass
class Conic:
    """Conic c0 + c1 x + c2 y + c3 x^2 + c4 xy + c5 y^2 = 0."""

    coeffs: list = field(default_factory=lambda: [0.0] * 6)

    def __post_init__(self):
        self.coeffs = [float(c) for c in self.coeffs]
        if len(self.coeffs) != 6:
            raise ValueError("a conic has exactly 6 coefficients")

    def matrix_form(self):
        """(Q, P, R) such that x^T Q x + P . x + R is the conic's value."""
        c = self.coeffs
        q = np.array([[c[3], c[4] / 2], [c[4] / 2, c[5]]])
        p = np.array([c[1], c[2]])
        return q, p, c[0]

    def eval(self, p):
        """Algebraic value at the point."""
        c = self.coeffs
        x, y = p
        return c[0] + c[1] * x + c[2] * y + c[3] * x * x + c[4] * x * y + c[5] * y * y

    def grad(self, p):
        """Gradient at the point."""
        c = self.coeffs
        x, y = p
        return np.array(
            [c[1] + c[3] * 2 * x + c[4] * y, c[2] + c[4] * x + c[5] * 2 * y]
        )

    def distance(self, p):
        """Taubin's second-order approximation of the distance to the curve."""
        c = self.coeffs
        a = -math.hypot(c[3], c[4] / math.sqrt(2), c[5])
        b = -float(np.linalg.norm(self.grad(p)))
        value = abs(self.eval(p))
        discriminant = b * b - 4 * a * value
        if a == 0:
            return math.nan
        return (-b - math.sqrt(discriminant)) / (2 * a)

    def classify(self, tolerance=1e-8):
        """Type of the curve, with the given tolerance for zero tests."""
        c = self.coeffs
        det = c[3] * c[5] - (c[4] / 2) * (c[4] / 2)
        beta = det * c[0] + (
            c[1] * c[2] * c[4] - c[1] * c[1] * c[5] - c[2] * c[2] * c[3]
        ) / 4

        if abs(beta) >= tolerance:
            if abs(det) < tolerance:
                return ConicType.PARABOLA
            return ConicType.ELLIPSE if det >= tolerance else ConicType.HYPERBOLA

        if abs(det) < tolerance:
            if abs(c[3]) + abs(c[4]) + abs(c[5]) >= tolerance:
                return ConicType.TWO_LINES
            if c[1] * c[1] + c[2] * c[2] < tolerance:
                return ConicType.NO_CURVE
            return ConicType.LINE

        return ConicType.NO_CURVE if det >= tolerance else ConicType.TWO_LINES

    def fit(self, polyline, fit_type, tolerance=1e-8):
        """Replace the coefficients with a fit to the polyline."""
        self.coeffs = list(fit_coefficients(polyline, fit_type, tolerance))