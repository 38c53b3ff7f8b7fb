"""
Algebraic capabilities of scalar values.

Built-in numbers cannot carry ``zero()``/``one()`` methods, so the engine
asks these helpers instead. A scalar type that defines the corresponding
method (pylinear.Complex does) takes precedence over the numeric fallback.
"""

import cmath
import math

from pylinear.core.protocols import AlgebraicScalar


def zero(like: AlgebraicScalar) -> AlgebraicScalar:
    """Additive identity of the type of ``like``."""
    method = getattr(like, 'zero', None)
    if callable(method):
        return method()
    return type(like)(0)


def one(like: AlgebraicScalar) -> AlgebraicScalar:
    """Multiplicative identity of the type of ``like``."""
    method = getattr(like, 'one', None)
    if callable(method):
        return method()
    return type(like)(1)


def is_zero(value: AlgebraicScalar) -> bool:
    """Exact zero test (no tolerance)."""
    method = getattr(value, 'is_zero', None)
    if callable(method):
        return bool(method())
    return bool(value == 0)


def absolute(value: AlgebraicScalar):
    """Absolute value or modulus."""
    return abs(value)


def square_root(value):
    """
    Principal square root.

    Uses the value's own ``sqrt()`` when it has one (Decimal, Complex),
    ``cmath.sqrt`` for built-in complex numbers and ``math.sqrt`` otherwise.
    """
    method = getattr(value, 'sqrt', None)
    if callable(method):
        return method()
    if isinstance(value, complex):
        return cmath.sqrt(value)
    return math.sqrt(value)
