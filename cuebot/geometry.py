"""Plane vector helpers used for shot planning and collision checks."""

from __future__ import annotations

import math

__all__ = ["inner_product", "magnitude", "cos_angle", "line_distance"]


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: a zero denominator yields inf or nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def inner_product(a: float, b: float, c: float, d: float) -> float:
    """Dot product of the vectors (a, b) and (c, d)."""
    return a * c + b * d


def magnitude(a: float, b: float) -> float:
    """Euclidean length of the vector (a, b)."""
    return math.sqrt(a * a + b * b)


def cos_angle(a: float, b: float, c: float, d: float) -> float:
    """Cosine of the angle between (a, b) and (c, d).

    A zero-length vector gives nan, as the angle is undefined.
    """
    return _divide(inner_product(a, b, c, d), magnitude(a, b) * magnitude(c, d))


def line_distance(
    vec_x: float, vec_y: float, pass_x: float, pass_y: float, x0: float, y0: float
) -> float:
    """Signed perpendicular distance from (x0, y0) to a line.

    The line runs along (vec_x, vec_y) through (pass_x, pass_y). The sign tells
    which side of the line the point lies on. A zero direction vector gives
    an infinite or nan result rather than raising.
    """
    c = vec_y * pass_x - vec_x * pass_y
    numerator = vec_y * x0 - vec_x * y0 - c
    denominator = math.sqrt(vec_x * vec_x + vec_y * vec_y)
    return _divide(numerator, denominator)