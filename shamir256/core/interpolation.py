"""Lagrange interpolation over GF(256).

Given points (x_i, y_i) on a polynomial of degree < len(points), the value
at any x is

    f(x) = sum_i y_i * prod_{j != i} (x - x_j) / (x_i - x_j)

where addition and subtraction are both XOR. Points must have distinct
x-coordinates; a duplicate makes a denominator zero and raises
``ZeroDivisionError``.

With fewer points than the polynomial's degree + 1 the result is still
computed but has no relation to the true value.
"""

from typing import Iterable, Tuple

from shamir256.core import gf256

Point = Tuple[int, int]


def interpolate_at(points: Iterable[Point], x: int) -> int:
    """Evaluate the interpolating polynomial of ``points`` at ``x``."""
    points = list(points)
    result = 0

    for i, (xi, yi) in enumerate(points):
        # Lagrange basis polynomial L_i(x)
        basis = 1

        for j, (xj, _) in enumerate(points):
            if i != j:
                numerator = gf256.subtract(x, xj)
                denominator = gf256.subtract(xi, xj)
                basis = gf256.multiply(basis, gf256.divide(numerator, denominator))

        result = gf256.add(result, gf256.multiply(yi, basis))

    return result


def intercept_at_zero(points: Iterable[Point]) -> int:
    """Return the y-intercept of the polynomial through ``points``.

    At x = 0 each numerator (0 - x_j) reduces to x_j.
    """
    points = list(points)
    result = 0

    for i, (xi, yi) in enumerate(points):
        basis = 1
        for j, (xj, _) in enumerate(points):
            if i != j:
                basis = gf256.multiply(basis, gf256.divide(xj, gf256.add(xi, xj)))
        result = gf256.add(result, gf256.multiply(yi, basis))

    return result
