"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinear import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def invertible_3x3():
    """Integer matrix with determinant -174."""
    return Matrix([[8, 5, -2], [4, 7, 20], [7, 6, 1]])


@pytest.fixture
def tridiagonal_5x5():
    """Exact 5x5 tridiagonal matrix with determinant 492."""
    rows = [
        [2, 1, 0, 0, 0],
        [1, 3, 1, 0, 0],
        [0, 1, 4, 1, 0],
        [0, 0, 1, 5, 1],
        [0, 0, 0, 1, 6],
    ]
    return Matrix([[Fraction(value) for value in row] for row in rows])


@pytest.fixture
def well_conditioned(rng):
    """Random 6x6 float matrix, diagonally dominant."""
    n = 6
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    return A


class InPlaceRational:
    """Rational scalar whose ``*=`` mutates the left operand."""

    def __init__(self, value):
        self.value = Fraction(value)

    @staticmethod
    def _unwrap(other):
        return other.value if isinstance(other, InPlaceRational) else other

    def __add__(self, other):
        return InPlaceRational(self.value + self._unwrap(other))

    def __sub__(self, other):
        return InPlaceRational(self.value - self._unwrap(other))

    def __mul__(self, other):
        return InPlaceRational(self.value * self._unwrap(other))

    def __truediv__(self, other):
        return InPlaceRational(self.value / self._unwrap(other))

    def __neg__(self):
        return InPlaceRational(-self.value)

    def __imul__(self, other):
        self.value *= self._unwrap(other)
        return self

    def __eq__(self, other):
        return self.value == self._unwrap(other)

    __hash__ = None

    def __repr__(self):
        return f"InPlaceRational({self.value})"


@pytest.fixture
def in_place_rational():
    """Scalar type with a mutating ``__imul__``."""
    return InPlaceRational
