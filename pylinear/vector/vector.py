"""
Vector: ordered sequence of algebraic scalars.

Provides element-wise arithmetic, the dot product, the three usual norms
and the cosine of the angle between two vectors. Checked operations raise
NotSameSizeError / ZeroVectorError; ``*_unchecked`` siblings skip the
checks and give unspecified results on invalid input.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.exceptions import ValidationError, ZeroVectorError
from pylinear.core.protocols import AlgebraicScalar
from pylinear.core.scalars import absolute, is_zero, square_root
from pylinear.core.validation import check_1d_array, check_same_length


class Vector:
    """Dense vector of algebraic scalars. Mutable and unhashable."""

    __slots__ = ('_content',)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Sequence[AlgebraicScalar] = ()):
        self._content: list[AlgebraicScalar] = list(values)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        data = np.asarray(array)
        check_1d_array(data, "array")
        return cls(data.tolist())

    def to_numpy(self, dtype=None) -> NDArray[Any]:
        return np.array(self._content, dtype=dtype)

    def copy(self) -> Vector:
        return Vector(self._content)

    __copy__ = copy

    # --- sequence behaviour ---

    def __len__(self) -> int:
        return len(self._content)

    def __iter__(self) -> Iterator[AlgebraicScalar]:
        return iter(self._content)

    def __getitem__(self, index: int) -> AlgebraicScalar:
        return self._content[index]

    def __setitem__(self, index: int, value: AlgebraicScalar) -> None:
        self._content[index] = value

    def get(self, index: int) -> AlgebraicScalar | None:
        """Element at index, or None when out of bounds."""
        if 0 <= index < len(self._content):
            return self._content[index]
        return None

    def append(self, value: AlgebraicScalar) -> None:
        self._content.append(value)

    def __eq__(self, other) -> bool:
        if isinstance(other, Vector):
            other = other._content
        elif isinstance(other, np.ndarray):
            other = other.tolist()
        elif not isinstance(other, Sequence):
            return NotImplemented
        return len(other) == len(self._content) and all(
            a == b for a, b in zip(self._content, other)
        )

    def __repr__(self) -> str:
        return f"Vector({self._content!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._content) + "]"

    # --- element-wise arithmetic ---

    def add(self, other: Vector) -> Vector:
        """
        Element-wise sum.

        Raises:
            NotSameSizeError: If lengths differ
        """
        check_same_length(len(self), len(other))
        return Vector([a + b for a, b in zip(self._content, other._content)])

    def sub(self, other: Vector) -> Vector:
        """
        Element-wise difference.

        Raises:
            NotSameSizeError: If lengths differ
        """
        check_same_length(len(self), len(other))
        return Vector([a - b for a, b in zip(self._content, other._content)])

    def scl(self, scalar: AlgebraicScalar) -> Vector:
        return Vector([value * scalar for value in self._content])

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return NotImplemented
        return self.scl(other)

    def __rmul__(self, other):
        if isinstance(other, Vector):
            return NotImplemented
        return Vector([other * value for value in self._content])

    def __neg__(self) -> Vector:
        return Vector([-value for value in self._content])

    # --- products and norms ---

    def dot(self, other: Vector) -> AlgebraicScalar:
        """
        Dot product (no conjugation of complex operands).

        Raises:
            NotSameSizeError: If lengths differ
            ValidationError: If the vectors are empty
        """
        check_same_length(len(self), len(other))
        if not self._content:
            raise ValidationError("dot: vectors are empty")
        return self.dot_unchecked(other)

    def dot_unchecked(self, other: Vector) -> AlgebraicScalar:
        """Dot product; requires non-empty vectors of the same length."""
        acc = self._content[0] * other._content[0]
        for a, b in zip(self._content[1:], other._content[1:]):
            acc = acc + a * b
        return acc

    def norm_1(self):
        """Manhattan norm: sum of absolute values."""
        acc = 0
        for value in self._content:
            acc = acc + absolute(value)
        return acc

    def norm(self):
        """Euclidean norm: square root of the sum of squared moduli."""
        acc = 0
        for value in self._content:
            modulus = absolute(value)
            acc = acc + modulus * modulus
        return square_root(acc)

    def norm_inf(self):
        """Supremum norm: largest absolute value."""
        return max((absolute(value) for value in self._content), default=0)

    def normalize(self) -> Vector:
        """
        Vector of the same direction with a Euclidean norm of one.

        Raises:
            ZeroVectorError: If the vector has a zero norm
        """
        length = self.norm()
        if is_zero(length):
            raise ZeroVectorError("normalize: vector has a zero norm")
        return Vector([value / length for value in self._content])


def angle_cos(u: Vector, v: Vector):
    """
    Cosine of the angle between two vectors.

    Raises:
        NotSameSizeError: If lengths differ
        ZeroVectorError: If either vector has a zero norm
    """
    check_same_length(len(u), len(v))
    u_norm = u.norm()
    if is_zero(u_norm):
        raise ZeroVectorError("angle_cos: left vector has a zero norm")
    v_norm = v.norm()
    if is_zero(v_norm):
        raise ZeroVectorError("angle_cos: right vector has a zero norm")
    return u.dot_unchecked(v) / (u_norm * v_norm)


def angle_cos_unchecked(u: Vector, v: Vector):
    """Cosine of the angle; requires same-size, nonzero vectors."""
    return u.dot_unchecked(v) / (u.norm() * v.norm())
