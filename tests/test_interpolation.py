"""Tests for Lagrange interpolation over GF(256)."""

import pytest

from shamir256.core.entropy import SeededEntropySource
from shamir256.core.interpolation import intercept_at_zero, interpolate_at
from shamir256.core.polynomial import evaluate, generate


class TestInterceptAtZero:
    """Tests for y-intercept recovery."""

    @pytest.mark.parametrize(
        "points,expected",
        [
            ([(1, 1), (2, 2), (3, 3)], 0),
            ([(1, 80), (2, 90), (3, 20)], 30),
            ([(1, 43), (2, 22), (3, 86)], 107),
        ],
    )
    def test_known_vectors(self, points, expected):
        assert intercept_at_zero(points) == expected

    def test_single_point_is_constant(self):
        assert intercept_at_zero([(7, 0x99)]) == 0x99

    def test_empty_points(self):
        assert intercept_at_zero([]) == 0

    def test_order_does_not_matter(self):
        points = [(1, 80), (2, 90), (3, 20)]
        assert intercept_at_zero(list(reversed(points))) == 30

    def test_accepts_iterators(self):
        assert intercept_at_zero(iter([(1, 80), (2, 90), (3, 20)])) == 30

    def test_duplicate_x_raises(self):
        with pytest.raises(ZeroDivisionError):
            intercept_at_zero([(1, 80), (1, 90), (3, 20)])

    def test_recovers_constant_term_of_random_polynomials(self):
        entropy = SeededEntropySource(42)
        for k in (1, 2, 3, 5, 8, 16):
            for secret_byte in (0, 1, 0x7F, 0xFF):
                poly = generate(secret_byte, k, entropy)
                points = [(x, evaluate(poly, x)) for x in range(10, 10 + k)]
                assert intercept_at_zero(points) == secret_byte

    def test_extra_points_still_exact(self):
        poly = bytes([0x33, 0x01, 0xF0])
        points = [(x, evaluate(poly, x)) for x in range(1, 9)]
        assert intercept_at_zero(points) == 0x33

    def test_too_few_points_miss_by_top_coefficient(self):
        # Interpolating k-1 points of f leaves f(x) - L(x) = c * prod(x - x_i)
        poly = bytes([0x33, 0x01, 0xF0])
        points = [(2, evaluate(poly, 2)), (5, evaluate(poly, 5))]
        assert intercept_at_zero(points) != 0x33


class TestInterpolateAt:
    """Tests for interpolation at arbitrary x."""

    def test_zero_matches_intercept(self):
        points = [(1, 43), (2, 22), (3, 86)]
        assert interpolate_at(points, 0) == intercept_at_zero(points) == 107

    def test_reproduces_polynomial_everywhere(self):
        poly = bytes([0x12, 0x34, 0x56, 0x78])
        points = [(x, evaluate(poly, x)) for x in (3, 77, 128, 254)]
        for x in range(256):
            assert interpolate_at(points, x) == evaluate(poly, x)

    def test_at_sample_returns_sample(self):
        points = [(1, 80), (2, 90), (3, 20)]
        for x, y in points:
            assert interpolate_at(points, x) == y

    def test_duplicate_x_raises(self):
        with pytest.raises(ZeroDivisionError):
            interpolate_at([(4, 1), (4, 2)], 9)
