"""
Transform matrices for 2D and 3D graphics.

Public API:
    scale_2d, scale_3d, translation_2d, translation_3d
    rotation_x, rotation_y, rotation_z, rotation, from_axis_angle
    extend_identity, projection, view_matrix
"""

from pylinear.transform.constructors import (
    extend_identity,
    from_axis_angle,
    projection,
    rotation,
    rotation_x,
    rotation_y,
    rotation_z,
    scale_2d,
    scale_3d,
    translation_2d,
    translation_3d,
    view_matrix,
)

__all__ = [
    "extend_identity",
    "from_axis_angle",
    "projection",
    "rotation",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "scale_2d",
    "scale_3d",
    "translation_2d",
    "translation_3d",
    "view_matrix",
]
