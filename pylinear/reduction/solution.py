"""
Row reduction result types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pylinear.core.protocols import AlgebraicScalar

if TYPE_CHECKING:
    from pylinear.matrix.matrix import Matrix


@dataclass(frozen=True)
class EchelonForm:
    """
    Result of reducing a matrix to row echelon form.

    Attributes:
        matrix: Echelon matrix (pivots scaled to one, zeros below them)
        swap_count: Number of whole-row swaps performed. Reported as 0 when
            the reduction ran out of pivots before the last column
        pivot_factor: Product of the pivots divided out of their rows
    """
    matrix: Matrix
    swap_count: int
    pivot_factor: AlgebraicScalar

    @property
    def sign(self) -> int:
        """Sign picked up by the determinant from row swaps."""
        return -1 if self.swap_count % 2 else 1
