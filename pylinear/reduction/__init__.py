"""
Gaussian elimination.

Public API:
    row_echelon(A)            - row echelon form
    row_echelon_form(A)       - EchelonForm with swap count and pivot product
    reduced_row_echelon(A)    - reduced row echelon form
    determinant(A)            - determinant of a square matrix
    inverse(A)                - Gauss-Jordan inverse
    rank(A)                   - rank from the reduced form
"""

from pylinear.reduction.solution import EchelonForm
from pylinear.reduction.solvers import (
    determinant,
    determinant_unchecked,
    inverse,
    inverse_unchecked,
    rank,
    reduced_row_echelon,
    row_echelon,
    row_echelon_form,
)

__all__ = [
    "EchelonForm",
    "determinant",
    "determinant_unchecked",
    "inverse",
    "inverse_unchecked",
    "rank",
    "reduced_row_echelon",
    "row_echelon",
    "row_echelon_form",
]
