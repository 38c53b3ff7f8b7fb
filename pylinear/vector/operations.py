"""Operations combining several vectors."""

from __future__ import annotations

from typing import Sequence

from pylinear.core.exceptions import (
    CoefficientCountError,
    EmptyVectorListError,
    NotThreeDimensionalError,
    VectorSizeMismatchError,
)
from pylinear.core.protocols import AlgebraicScalar
from pylinear.vector.vector import Vector


def cross_product(u: Vector, v: Vector) -> Vector:
    """
    Cross product of two three dimensional vectors.

    Raises:
        NotThreeDimensionalError: If either operand does not have 3 elements
    """
    if len(u) != 3:
        raise NotThreeDimensionalError("left", len(u))
    if len(v) != 3:
        raise NotThreeDimensionalError("right", len(v))
    return cross_product_unchecked(u, v)


def cross_product_unchecked(u: Vector, v: Vector) -> Vector:
    """Cross product; requires two vectors of size 3."""
    return Vector([
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    ])


def linear_combination(
    vectors: Sequence[Vector],
    coefficients: Sequence[AlgebraicScalar],
) -> Vector:
    """
    Sum of ``coefficients[i] * vectors[i]``.

    Raises:
        CoefficientCountError: If the two sequences have different lengths
        EmptyVectorListError: If no vector is given
        VectorSizeMismatchError: If the vectors do not share one size
    """
    if len(vectors) != len(coefficients):
        raise CoefficientCountError(len(vectors), len(coefficients))
    if not vectors:
        raise EmptyVectorListError()
    size = len(vectors[0])
    for vector in vectors[1:]:
        if len(vector) != size:
            raise VectorSizeMismatchError(size, len(vector))
    return linear_combination_unchecked(vectors, coefficients)


def linear_combination_unchecked(
    vectors: Sequence[Vector],
    coefficients: Sequence[AlgebraicScalar],
) -> Vector:
    """Linear combination; requires matching, non-empty inputs."""
    values = [value * coefficients[0] for value in vectors[0]]
    for vector, coefficient in zip(vectors[1:], coefficients[1:]):
        for index, value in enumerate(vector):
            values[index] = values[index] + value * coefficient
    return Vector(values)
