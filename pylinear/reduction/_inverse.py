"""
Gauss-Jordan inversion and rank.

Both reduce to the reduced row echelon form and read the result off the
diagonal: a diagonal entry differing from the multiplicative identity
marks the first column without a pivot.
"""

from __future__ import annotations

from pylinear.core.exceptions import SingularMatrixError
from pylinear.core.scalars import is_zero, one
from pylinear.matrix.matrix import Matrix, identity_like
from pylinear.reduction._echelon import reduced_row_echelon_internal


def _first_missing_pivot(reduced: Matrix, count: int, unit) -> int | None:
    for index in range(count):
        if reduced[index, index] != unit:
            return index
    return None


def _left_block_rank(reduced: Matrix, width: int) -> int:
    """Number of rows with a nonzero entry among the first ``width`` columns."""
    return sum(
        1 for row in range(reduced.height)
        if any(not is_zero(reduced[row, column]) for column in range(width))
    )


def inverse_internal(matrix: Matrix) -> Matrix:
    """
    Invert by reducing ``[A | I]`` to ``[I | A^-1]``.

    Raises:
        SingularMatrixError: If the left block does not reduce to identity.
            Its ``rank`` is the number of pivots found in the left block.
    """
    size = matrix.height
    identity = identity_like(matrix)
    reduced = reduced_row_echelon_internal(Matrix.augmented(matrix, identity))

    missing = _first_missing_pivot(reduced, size, identity[0, 0])
    if missing is not None:
        raise SingularMatrixError(
            f"matrix is singular: no pivot in column {missing} "
            f"of a {matrix.dimensions} matrix",
            dimensions=matrix.dimensions,
            rank=_left_block_rank(reduced, matrix.width),
        )

    return reduced.submatrix(
        rows=range(0, size),
        columns=range(matrix.width, reduced.width),
    )


def rank_internal(matrix: Matrix) -> int:
    """
    Index of the first diagonal entry of the reduced form that is not one.

    When every diagonal entry up to min(width, height) is one the width is
    returned.
    """
    reduced = reduced_row_echelon_internal(matrix)
    count = min(matrix.width, matrix.height)
    missing = _first_missing_pivot(reduced, count, one(matrix[0, 0]))
    if missing is None:
        return matrix.width
    return missing
