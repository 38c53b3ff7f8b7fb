"""
Vector module.

Public API:
    Vector                  - dense vector with add/sub/scl, dot and norms
    angle_cos(u, v)         - cosine of the angle between two vectors
    cross_product(u, v)     - cross product of 3D vectors
    linear_combination(vs, cs)
"""

from pylinear.vector.vector import Vector, angle_cos, angle_cos_unchecked
from pylinear.vector.operations import (
    cross_product,
    cross_product_unchecked,
    linear_combination,
    linear_combination_unchecked,
)

__all__ = [
    "Vector",
    "angle_cos",
    "angle_cos_unchecked",
    "cross_product",
    "cross_product_unchecked",
    "linear_combination",
    "linear_combination_unchecked",
]
