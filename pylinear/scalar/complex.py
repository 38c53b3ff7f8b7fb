"""
Complex numbers over an arbitrary field.

Python's built-in ``complex`` is fixed to double precision. Complex[T]
keeps its components in any scalar type T (int, Fraction, Decimal, float,
NumPy scalars), so Gaussian elimination over, e.g., Gaussian rationals stays
exact. Operands may be Complex, a bare T, or a built-in complex.
"""

from __future__ import annotations

import numbers
from typing import Generic, TypeVar

from pylinear.core.scalars import is_zero, one, square_root, zero

T = TypeVar('T')


class Complex(Generic[T]):
    """
    Complex number ``real + imaginary * i`` with components of type T.

    Examples:
        >>> from fractions import Fraction
        >>> Complex(Fraction(1), Fraction(2)) / Complex(Fraction(3), Fraction(4))
        Complex(Fraction(11, 25), Fraction(2, 25))
    """

    __slots__ = ('real', 'imaginary')

    def __init__(self, real: T, imaginary: T | None = None):
        self.real = real
        self.imaginary = zero(real) if imaginary is None else imaginary

    @classmethod
    def from_builtin(cls, value: complex) -> Complex[float]:
        """Build from a built-in complex number."""
        return cls(value.real, value.imag)

    @staticmethod
    def _coerce(value) -> Complex | None:
        if isinstance(value, Complex):
            return value
        if isinstance(value, complex):
            return Complex(value.real, value.imag)
        if isinstance(value, numbers.Number):
            return Complex(value)
        return None

    # --- algebraic capabilities ---

    def zero(self) -> Complex[T]:
        return Complex(zero(self.real), zero(self.real))

    def one(self) -> Complex[T]:
        return Complex(one(self.real), zero(self.real))

    def is_zero(self) -> bool:
        return is_zero(self.real) and is_zero(self.imaginary)

    def conjugate(self) -> Complex[T]:
        return Complex(self.real, -self.imaginary)

    def sqrt(self) -> Complex:
        """
        Principal square root.

        For z = a + bi with modulus r:
            sqrt(z) = sqrt((r + a) / 2) + sign(b) * sqrt((r - a) / 2) * i
        with sign(0) taken as +1.
        """
        modulus = abs(self)
        real_part = square_root((modulus + self.real) / 2)
        imaginary_part = square_root((modulus - self.real) / 2)
        if self.imaginary < 0:
            imaginary_part = -imaginary_part
        return Complex(real_part, imaginary_part)

    # --- arithmetic ---

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.real + rhs.real, self.imaginary + rhs.imaginary)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.real - rhs.real, self.imaginary - rhs.imaginary)

    def __rsub__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__sub__(self)

    def __mul__(self, other):
        # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        a, b = self.real, self.imaginary
        c, d = rhs.real, rhs.imaginary
        return Complex(a * c - b * d, a * d + b * c)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        # (a + bi) / (c + di) = ((ac + bd) + (bc - ad)i) / (c^2 + d^2)
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        a, b = self.real, self.imaginary
        c, d = rhs.real, rhs.imaginary
        denominator = c * c + d * d
        return Complex((a * c + b * d) / denominator, (b * c - a * d) / denominator)

    def __rtruediv__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__truediv__(self)

    def __neg__(self) -> Complex[T]:
        return Complex(-self.real, -self.imaginary)

    def __pos__(self) -> Complex[T]:
        return Complex(self.real, self.imaginary)

    def __abs__(self):
        return square_root(self.real * self.real + self.imaginary * self.imaginary)

    # --- comparison and conversion ---

    def __eq__(self, other) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.real == rhs.real and self.imaginary == rhs.imaginary

    def __hash__(self) -> int:
        if is_zero(self.imaginary):
            return hash(self.real)
        return hash((self.real, self.imaginary))

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imaginary))

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imaginary!r})"

    def __str__(self) -> str:
        if self.imaginary < 0:
            return f"{self.real} - {-self.imaginary}i"
        return f"{self.real} + {self.imaginary}i"
