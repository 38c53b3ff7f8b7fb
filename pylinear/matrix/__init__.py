"""
Matrix module.

Public API:
    Matrix       - dense row-major matrix over an algebraic scalar
    Dimensions   - (width, height) value type
"""

from pylinear.matrix.dimensions import Dimensions
from pylinear.matrix.matrix import Matrix, identity_like

__all__ = [
    "Dimensions",
    "Matrix",
    "identity_like",
]
