"""
Determinant engine.

Matrices up to 4x4 use unrolled cofactor expansion on the input
entries: exact, and no intermediate matrix is built. Larger matrices go
through row_echelon_internal and recover the determinant from the pivot
product and the number of row swaps.

Entry layout of the closed forms (row-major):

     0  1        0 1 2         0  1  2  3
     2  3        3 4 5         4  5  6  7
                 6 7 8         8  9 10 11
                              12 13 14 15
"""

from __future__ import annotations

from pylinear.core.protocols import AlgebraicScalar
from pylinear.matrix.matrix import Matrix
from pylinear.reduction._echelon import row_echelon_internal


def determinant_2(a, b, c, d):
    return a * d - b * c


def determinant_3(e0, e1, e2, e3, e4, e5, e6, e7, e8):
    return (
        e0 * determinant_2(e4, e5, e7, e8)
        - e1 * determinant_2(e3, e5, e6, e8)
        + e2 * determinant_2(e3, e4, e6, e7)
    )


def determinant_4(e):
    return (
        e[0] * determinant_3(e[5], e[6], e[7], e[9], e[10], e[11], e[13], e[14], e[15])
        - e[1] * determinant_3(e[4], e[6], e[7], e[8], e[10], e[11], e[12], e[14], e[15])
        + e[2] * determinant_3(e[4], e[5], e[7], e[8], e[9], e[11], e[12], e[13], e[15])
        - e[3] * determinant_3(e[4], e[5], e[6], e[8], e[9], e[10], e[12], e[13], e[14])
    )


def determinant_by_elimination(matrix: Matrix) -> AlgebraicScalar:
    """
    Determinant of a square matrix of any size via row echelon form.

    det(A) = (-1)^swaps * pivot_factor * prod(diag(echelon))

    A rank-deficient matrix has a zero on the echelon diagonal, so the
    product is zero whatever the bookkeeping reports.
    """
    echelon, swap_count, pivot_factor = row_echelon_internal(matrix)
    result = echelon.multiplicative_trace_unchecked()
    result = result * pivot_factor
    if swap_count % 2 == 0:
        return result
    return -result


def determinant_internal(matrix: Matrix) -> AlgebraicScalar:
    """Determinant of a matrix already known to be square."""
    size = matrix.height
    if size == 1:
        return matrix[0, 0]
    entries = [value for row in matrix.rows() for value in row]
    if size == 2:
        return determinant_2(*entries)
    if size == 3:
        return determinant_3(*entries)
    if size == 4:
        return determinant_4(entries)
    return determinant_by_elimination(matrix)
