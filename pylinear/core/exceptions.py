"""
Exception hierarchy for PyLinear.

All exceptions inherit from PyLinearError to allow catching any
library-specific error. Each failure a checked operation can report has its
own class, carrying the offending sizes as attributes.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pylinear.matrix.dimensions import Dimensions


class PyLinearError(Exception):
    """Base exception for all PyLinear errors."""
    pass


class ValidationError(PyLinearError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix or vector dimensions are incorrect or inconsistent.

    Raised when shapes don't match what an operation requires.
    """
    pass


class NotSameSizeError(DimensionError):
    """
    Element-wise operation on operands of different sizes.

    Attributes:
        lhs: Size of the left operand (Dimensions for matrices, int for vectors)
        rhs: Size of the right operand
    """

    def __init__(
        self,
        lhs: Dimensions | int,
        rhs: Dimensions | int,
        message: str | None = None,
    ):
        if message is None:
            message = f"operands must have the same size, got {lhs} and {rhs}"
        super().__init__(message)
        self.lhs = lhs
        self.rhs = rhs


class SizeMismatchError(DimensionError):
    """
    Inner dimensions do not agree.

    Raised by matrix x vector and matrix x matrix products, and when two
    matrices of different heights are concatenated.

    Attributes:
        lhs: Relevant size of the left operand (e.g. number of columns)
        rhs: Relevant size of the right operand (e.g. vector length)
    """

    def __init__(self, lhs: int, rhs: int, message: str | None = None):
        if message is None:
            message = f"size mismatch: {lhs} != {rhs}"
        super().__init__(message)
        self.lhs = lhs
        self.rhs = rhs


class NotSquareMatrixError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        dimensions: Dimensions of the rejected matrix
    """

    def __init__(self, dimensions: Dimensions, message: str | None = None):
        if message is None:
            message = (
                f"expected a square matrix, got width={dimensions.width}, "
                f"height={dimensions.height}"
            )
        super().__init__(message)
        self.dimensions = dimensions


class InvalidRangesError(DimensionError):
    """
    Submatrix ranges are empty, stepped, or out of bounds.

    Attributes:
        rows: Requested row range
        columns: Requested column range
        dimensions: Dimensions of the source matrix
    """

    def __init__(
        self,
        rows: range,
        columns: range,
        dimensions: Dimensions,
    ):
        super().__init__(
            f"invalid submatrix ranges rows={rows}, columns={columns} "
            f"for a matrix of width={dimensions.width}, height={dimensions.height}"
        )
        self.rows = rows
        self.columns = columns
        self.dimensions = dimensions


class NotThreeDimensionalError(DimensionError):
    """
    Cross product operand is not three dimensional.

    Attributes:
        side: 'left' or 'right'
        size: Actual size of the offending vector
    """

    def __init__(self, side: str, size: int):
        super().__init__(f"{side} vector should be three dimensional, got size {size}")
        self.side = side
        self.size = size


class LinearCombinationError(DimensionError):
    """Base class for invalid linear combination inputs."""
    pass


class CoefficientCountError(LinearCombinationError):
    """
    Number of vectors and coefficients differ.

    Attributes:
        n_vectors: Number of vectors given
        n_coefficients: Number of coefficients given
    """

    def __init__(self, n_vectors: int, n_coefficients: int):
        super().__init__(
            f"got {n_vectors} vectors but {n_coefficients} coefficients"
        )
        self.n_vectors = n_vectors
        self.n_coefficients = n_coefficients


class EmptyVectorListError(LinearCombinationError):
    """No vectors were given to combine."""

    def __init__(self):
        super().__init__("linear combination requires at least one vector")


class VectorSizeMismatchError(LinearCombinationError):
    """
    Vectors to combine do not all have the same size.

    Attributes:
        expected: Size of the first vector
        actual: Size of the first vector that differs
    """

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"all vectors must have size {expected}, found one of size {actual}"
        )
        self.expected = expected
        self.actual = actual


class RatioOffBoundError(ValidationError):
    """
    Interpolation ratio is outside [0, 1].

    Attributes:
        ratio: The rejected ratio
    """

    def __init__(self, ratio):
        super().__init__(f"ratio must be between 0 and 1, got {ratio}")
        self.ratio = ratio


class NumericalError(PyLinearError):
    """
    Numerical computation failed.

    Base class for errors arising from the values themselves rather than
    the shapes of the inputs.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when inversion reduces the matrix to a left block that is not
    the identity.

    Attributes:
        dimensions: Dimensions of the matrix
        rank: Number of pivots found in the matrix, if computed
    """

    def __init__(
        self,
        message: str,
        dimensions: Dimensions | None = None,
        rank: int | None = None,
    ):
        super().__init__(message)
        self.dimensions = dimensions
        self.rank = rank


class ZeroVectorError(NumericalError):
    """Operation needs a vector with a nonzero norm."""
    pass
