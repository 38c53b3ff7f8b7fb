"""
Public entry points for Gaussian elimination.

Every function accepts a Matrix, a nested sequence of rows, or a 2-D NumPy
array, and never modifies its input. Checked functions validate the shape
first; the ``*_unchecked`` variants skip that validation and give
unspecified results on invalid shapes.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import ArrayLike

from pylinear.core.protocols import AlgebraicScalar
from pylinear.core.validation import check_square
from pylinear.matrix.matrix import Matrix
from pylinear.reduction._determinant import determinant_internal
from pylinear.reduction._echelon import (
    reduced_row_echelon_internal,
    row_echelon_internal,
)
from pylinear.reduction._inverse import inverse_internal, rank_internal
from pylinear.reduction.solution import EchelonForm


MatrixLike = Union[Matrix, Sequence[Sequence[AlgebraicScalar]], ArrayLike]


def _ensure_matrix(data: MatrixLike) -> Matrix:
    """Convert raw rows or an array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    if isinstance(data, np.ndarray):
        return Matrix.from_array(data)
    return Matrix(data)


def row_echelon(data: MatrixLike) -> Matrix:
    """
    Row echelon form of a matrix.

    Pivots are scaled to one and every entry below a pivot is zero. The
    pivot is the topmost nonzero entry of the leftmost remaining column.

    Parameters
    ----------
    data : Matrix, nested rows or 2-D array
        Matrix of any shape.

    Returns
    -------
    Matrix
        A new matrix; the input is left unchanged.

    Examples
    --------
    >>> row_echelon([[1, 2], [2, 4]])
    Matrix([[1.0, 2.0], [0.0, 0.0]])
    """
    return row_echelon_form(data).matrix


def row_echelon_form(data: MatrixLike) -> EchelonForm:
    """
    Row echelon form together with the swap count and pivot product.

    Returns
    -------
    EchelonForm
    """
    echelon, swap_count, pivot_factor = row_echelon_internal(_ensure_matrix(data))
    return EchelonForm(matrix=echelon, swap_count=swap_count, pivot_factor=pivot_factor)


def reduced_row_echelon(data: MatrixLike) -> Matrix:
    """
    Reduced row echelon form of a matrix.

    Like row_echelon, with the entries above every pivot cleared as well.
    Reducing an already reduced matrix returns an equal matrix.

    Examples
    --------
    >>> reduced_row_echelon([[1, 2], [3, 4]])
    Matrix([[1.0, 0.0], [0.0, 1.0]])
    """
    return reduced_row_echelon_internal(_ensure_matrix(data))


def determinant(data: MatrixLike) -> AlgebraicScalar:
    """
    Determinant of a square matrix.

    Sizes up to 4x4 use closed-form cofactor expansion; larger matrices are
    reduced to row echelon form.

    Raises
    ------
    NotSquareMatrixError
        If the matrix is not square.

    Examples
    --------
    >>> determinant([[8, 5, -2], [4, 7, 20], [7, 6, 1]])
    -174
    """
    matrix = _ensure_matrix(data)
    check_square(matrix)
    return determinant_internal(matrix)


def determinant_unchecked(data: MatrixLike) -> AlgebraicScalar:
    """Determinant without the squareness check."""
    return determinant_internal(_ensure_matrix(data))


def inverse(data: MatrixLike) -> Matrix:
    """
    Inverse of a square matrix by Gauss-Jordan elimination.

    Raises
    ------
    NotSquareMatrixError
        If the matrix is not square.
    SingularMatrixError
        If the matrix has no inverse.
    """
    matrix = _ensure_matrix(data)
    check_square(matrix)
    return inverse_internal(matrix)


def inverse_unchecked(data: MatrixLike) -> Matrix:
    """
    Inverse without the squareness check.

    Singularity is still reported with SingularMatrixError.
    """
    return inverse_internal(_ensure_matrix(data))


def rank(data: MatrixLike) -> int:
    """
    Rank of a matrix read off its reduced row echelon form.

    Returns the index of the first diagonal entry that is not one, scanning
    up to min(width, height); returns the width when there is none.

    Examples
    --------
    >>> rank([[1, 2, 0, 0], [2, 4, 0, 0], [-1, 2, 1, 1]])
    2
    """
    return rank_internal(_ensure_matrix(data))
