"""
Input validation utilities for PyLinear.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent reshaping of ragged or empty input
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pylinear.core.exceptions import (
    DimensionError,
    InvalidRangesError,
    NotSameSizeError,
    NotSquareMatrixError,
    RatioOffBoundError,
    SizeMismatchError,
    ValidationError,
)

if TYPE_CHECKING:
    from pylinear.matrix.dimensions import Dimensions
    from pylinear.matrix.matrix import Matrix


def check_rows(rows: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify a 2-D sequence is non-empty and rectangular.

    Args:
        rows: Sequence of rows
        name: Parameter name for error messages

    Returns:
        (width, height)

    Raises:
        ValidationError: If there are no rows or no columns
        DimensionError: If rows have different lengths
    """
    height = len(rows)
    if height == 0:
        raise ValidationError(f"{name}: requires at least one row")
    width = len(rows[0])
    if width == 0:
        raise ValidationError(f"{name}: requires at least one column")
    for index, row in enumerate(rows):
        if len(row) != width:
            raise DimensionError(
                f"{name}: row {index} has {len(row)} elements, expected {width}"
            )
    return width, height


def check_positive_size(value: int, name: str) -> None:
    """
    Verify a size argument is a positive integer.

    Raises:
        ValidationError: If value is not an int or is < 1
    """
    if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 1:
        raise ValidationError(f"{name}: must be at least 1, got {value}")


def check_2d_array(array: NDArray[Any], name: str) -> None:
    """
    Verify a NumPy array is 2-dimensional and non-empty.

    Raises:
        DimensionError: If array is not 2D
        ValidationError: If array has a zero-length axis
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )
    if array.size == 0:
        raise ValidationError(f"{name}: array is empty (shape {array.shape})")


def check_1d_array(array: NDArray[Any], name: str) -> None:
    """
    Verify a NumPy array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_same_dimensions(lhs: Dimensions, rhs: Dimensions) -> None:
    """
    Verify two matrices have identical dimensions.

    Raises:
        NotSameSizeError: If dimensions differ
    """
    if lhs != rhs:
        raise NotSameSizeError(lhs, rhs)


def check_same_length(lhs: int, rhs: int) -> None:
    """
    Verify two vectors have the same length.

    Raises:
        NotSameSizeError: If lengths differ
    """
    if lhs != rhs:
        raise NotSameSizeError(lhs, rhs)


def check_inner_size(lhs: int, rhs: int) -> None:
    """
    Verify inner dimensions of a product agree.

    Raises:
        SizeMismatchError: If lhs != rhs
    """
    if lhs != rhs:
        raise SizeMismatchError(lhs, rhs)


def check_square(matrix: Matrix) -> None:
    """
    Verify a matrix is square.

    Raises:
        NotSquareMatrixError: If width != height
    """
    if not matrix.is_square():
        raise NotSquareMatrixError(matrix.dimensions)


def check_ranges(rows: range, columns: range, dimensions: Dimensions) -> None:
    """
    Verify submatrix ranges are non-empty, contiguous and in bounds.

    Raises:
        InvalidRangesError: If either range is invalid
    """
    for bounds, limit in ((rows, dimensions.height), (columns, dimensions.width)):
        if (
            bounds.step != 1
            or len(bounds) == 0
            or bounds.start < 0
            or bounds.stop > limit
        ):
            raise InvalidRangesError(rows, columns, dimensions)


def check_ratio(ratio) -> None:
    """
    Verify an interpolation ratio lies in [0, 1].

    Raises:
        RatioOffBoundError: If ratio is outside the closed unit interval
    """
    if not 0 <= ratio <= 1:
        raise RatioOffBoundError(ratio)
