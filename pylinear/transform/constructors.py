"""
Transform matrix constructors.

Matrices act on column vectors (``M @ v``). Rotation constructors accept
a Degree, a Radian or a bare number taken as radians, and build a 3x3
matrix, or a 4x4 one with ``size=4`` (homogeneous coordinates).
"""

from __future__ import annotations

import math
from typing import Sequence, Union

from pylinear.core.exceptions import NotThreeDimensionalError, ValidationError
from pylinear.core.protocols import AlgebraicScalar
from pylinear.core.scalars import one, zero
from pylinear.core.validation import check_square
from pylinear.matrix.matrix import Matrix
from pylinear.scalar.angle import Degree, Radian, as_radian
from pylinear.vector.operations import cross_product
from pylinear.vector.vector import Vector


Angle = Union[Degree, Radian, float]


def _check_rotation_size(size: int) -> None:
    if size not in (3, 4):
        raise ValidationError(f"size: must be 3 or 4, got {size}")


def _rotation(rows: list[list[float]], size: int) -> Matrix:
    _check_rotation_size(size)
    matrix = Matrix(rows)
    if size == 4:
        return extend_identity(matrix, 4)
    return matrix


def extend_identity(matrix: Matrix, size: int) -> Matrix:
    """
    Embed a square matrix in the top-left corner of a larger identity.

    >>> extend_identity(Matrix([[1, 2], [3, 4]]), 3)
    Matrix([[1, 2, 0], [3, 4, 0], [0, 0, 1]])

    Raises:
        NotSquareMatrixError: If ``matrix`` is not square
        ValidationError: If ``size`` is smaller than the matrix
    """
    check_square(matrix)
    if size < matrix.height:
        raise ValidationError(
            f"size: must be at least {matrix.height}, got {size}"
        )
    unit = one(matrix[0, 0])
    null = zero(unit)
    rows = []
    for index in range(size):
        if index < matrix.height:
            rows.append(list(matrix.row(index)) + [null] * (size - matrix.width))
        else:
            rows.append([unit if col == index else null for col in range(size)])
    return Matrix(rows)


def scale_2d(x: AlgebraicScalar, y: AlgebraicScalar) -> Matrix:
    null = zero(x)
    return Matrix([[x, null], [null, y]])


def scale_3d(x: AlgebraicScalar, y: AlgebraicScalar, z: AlgebraicScalar) -> Matrix:
    null = zero(x)
    return Matrix([[x, null, null], [null, y, null], [null, null, z]])


def translation_2d(x: AlgebraicScalar, y: AlgebraicScalar) -> Matrix:
    """3x3 homogeneous translation."""
    null, unit = zero(x), one(x)
    return Matrix([
        [unit, null, x],
        [null, unit, y],
        [null, null, unit],
    ])


def translation_3d(x: AlgebraicScalar, y: AlgebraicScalar, z: AlgebraicScalar) -> Matrix:
    """4x4 homogeneous translation."""
    null, unit = zero(x), one(x)
    return Matrix([
        [unit, null, null, x],
        [null, unit, null, y],
        [null, null, unit, z],
        [null, null, null, unit],
    ])


def rotation_x(angle: Angle, size: int = 3) -> Matrix:
    sin, cos = as_radian(angle).sin_cos()
    return _rotation([[1.0, 0.0, 0.0], [0.0, cos, -sin], [0.0, sin, cos]], size)


def rotation_y(angle: Angle, size: int = 3) -> Matrix:
    sin, cos = as_radian(angle).sin_cos()
    return _rotation([[cos, 0.0, sin], [0.0, 1.0, 0.0], [-sin, 0.0, cos]], size)


def rotation_z(angle: Angle, size: int = 3) -> Matrix:
    sin, cos = as_radian(angle).sin_cos()
    return _rotation([[cos, -sin, 0.0], [sin, cos, 0.0], [0.0, 0.0, 1.0]], size)


def rotation(x: Angle, y: Angle, z: Angle, size: int = 3) -> Matrix:
    """
    Rotation about x, then y, then z.

    Equal to ``rotation_z(z) @ rotation_y(y) @ rotation_x(x)``.
    """
    sin_x, cos_x = as_radian(x).sin_cos()
    sin_y, cos_y = as_radian(y).sin_cos()
    sin_z, cos_z = as_radian(z).sin_cos()
    return _rotation([
        [
            cos_z * cos_y,
            cos_z * sin_y * sin_x - sin_z * cos_x,
            cos_z * sin_y * cos_x + sin_z * sin_x,
        ],
        [
            sin_z * cos_y,
            sin_z * sin_y * sin_x + cos_z * cos_x,
            sin_z * sin_y * cos_x - cos_z * sin_x,
        ],
        [-sin_y, cos_y * sin_x, cos_y * cos_x],
    ], size)


def from_axis_angle(axis: Sequence[float], angle: Angle, size: int = 3) -> Matrix:
    """
    Rotation by ``angle`` about ``axis`` (Rodrigues' formula).

    The axis is expected to be a unit vector; it is not normalized here.

    Raises:
        NotThreeDimensionalError: If ``axis`` does not have 3 components
    """
    if len(axis) != 3:
        raise NotThreeDimensionalError("axis", len(axis))
    x, y, z = axis
    sin, cos = as_radian(angle).sin_cos()
    osc = 1.0 - cos
    return _rotation([
        [x * x * osc + cos, x * y * osc - z * sin, x * z * osc + y * sin],
        [y * x * osc + z * sin, y * y * osc + cos, y * z * osc - x * sin],
        [z * x * osc - y * sin, z * y * osc + x * sin, z * z * osc + cos],
    ], size)


def projection(fov: Angle, ratio: float, near: float, far: float) -> Matrix:
    """
    Right-handed perspective projection with the Y axis pointing down
    (Vulkan clip space).

    Args:
        fov: Vertical field of view
        ratio: Aspect ratio, width / height
        near: Distance to the near plane
        far: Distance to the far plane
    """
    if near == far:
        raise ValidationError(f"near and far: must differ, got {near}")
    focal = 1.0 / math.tan(as_radian(fov).value / 2.0)
    return Matrix([
        [focal / ratio, 0.0, 0.0, 0.0],
        [0.0, -focal, 0.0, 0.0],
        [0.0, 0.0, -((far + near) / (far - near)), -((2.0 * far * near) / (far - near))],
        [0.0, 0.0, -1.0, 0.0],
    ])


def view_matrix(eye: Vector, target: Vector, up: Vector) -> Matrix:
    """
    View matrix looking from ``eye`` towards ``target``.

    The basis vectors are stored in columns and the translation in the last
    row.

    Raises:
        NotThreeDimensionalError: If a vector does not have 3 components
        ZeroVectorError: If eye == target, or up is parallel to the view
            direction
    """
    forward = (eye - target).normalize()
    right = cross_product(up, forward).normalize()
    upward = -cross_product(right, forward).normalize()
    return Matrix([
        [right[0], upward[0], forward[0], 0.0],
        [right[1], upward[1], forward[1], 0.0],
        [right[2], upward[2], forward[2], 0.0],
        [-eye.dot(right), -eye.dot(upward), -eye.dot(forward), 1.0],
    ])
