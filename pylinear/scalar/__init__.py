"""
Scalar types shipped with PyLinear.

Public API:
    Complex         - complex numbers over an arbitrary field
    Degree, Radian  - angle units for transform constructors
"""

from pylinear.scalar.complex import Complex
from pylinear.scalar.angle import Degree, Radian, as_radian

__all__ = [
    "Complex",
    "Degree",
    "Radian",
    "as_radian",
]
