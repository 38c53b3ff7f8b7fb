"""
Row-reduction engine.

Gaussian elimination generic over AlgebraicScalar. Zero tests are exact
(``is_zero``), so the result is exact for exact scalar types.

Pivot choice: the topmost row holding a nonzero entry in the leftmost
column that still has one. There is no magnitude-based partial pivoting;
results are reproducible bit for bit, at the price of weaker numerical
stability for floating-point input.
"""

from __future__ import annotations

from pylinear.core.protocols import AlgebraicScalar
from pylinear.core.scalars import is_zero, one
from pylinear.matrix.matrix import Matrix


def _find_pivot(matrix: Matrix, rows_set: int, start_column: int) -> tuple[int, int] | None:
    """First (row, column) with a nonzero entry, scanning columns left to right."""
    for column in range(start_column, matrix.width):
        for row in range(rows_set, matrix.height):
            if not is_zero(matrix[row, column]):
                return row, column
    return None


def _leading_column(matrix: Matrix, row: int) -> int | None:
    for column in range(matrix.width):
        if not is_zero(matrix[row, column]):
            return column
    return None


def row_echelon_internal(matrix: Matrix) -> tuple[Matrix, int, AlgebraicScalar]:
    """
    Reduce a copy of ``matrix`` to row echelon form.

    Every pivot is scaled to the multiplicative identity and every entry
    below a pivot is zero.

    Returns:
        (echelon, swap_count, pivot_factor) where pivot_factor is the
        product of the pivots divided out. When the scan runs out of
        nonzero entries before the last column, the reduction stops early
        and swap_count is reported as 0; the matrix is then rank deficient.
    """
    result = matrix.copy()
    width, height = result.width, result.height
    rows_set = 0
    column = 0
    swap_count = 0
    pivot_factor = one(matrix[0, 0])

    while column < width:
        found = _find_pivot(result, rows_set, column)
        if found is None:
            return result, 0, pivot_factor
        pivot_row, column = found

        if pivot_row != rows_set:
            result.swap_rows(rows_set, pivot_row)
            swap_count += 1

        pivot = result[rows_set, column]
        pivot_factor = pivot_factor * pivot
        for col in range(column, width):
            result[rows_set, col] = result[rows_set, col] / pivot

        pivot = result[rows_set, column]
        for row in range(rows_set + 1, height):
            entry = result[row, column]
            # Zero entries are left untouched so they stay exactly zero
            if is_zero(entry):
                continue
            coeff = entry / pivot
            for col in range(column, width):
                result[row, col] = result[row, col] - coeff * result[rows_set, col]

        rows_set += 1
        column += 1

    return result, swap_count, pivot_factor


def reduced_row_echelon_internal(matrix: Matrix) -> Matrix:
    """
    Reduce a copy of ``matrix`` to reduced row echelon form.

    Starts from row_echelon_internal, then clears the entries above each
    pivot. Applying it to a reduced matrix returns an equal matrix.
    """
    result, _, _ = row_echelon_internal(matrix)
    width = result.width

    for index in range(1, result.height):
        pivot_column = _leading_column(result, index)
        if pivot_column is None:
            continue
        for above in range(index):
            ratio = result[above, pivot_column]
            for col in range(width - 1, pivot_column - 1, -1):
                result[above, col] = result[above, col] - ratio * result[index, col]

    return result
