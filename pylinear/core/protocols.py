"""
Core protocols for PyLinear.

These define structural interfaces that scalar types must satisfy for the
matrix engine to work on them. We use Protocol (structural typing) rather
than ABC (nominal typing) so that built-in numbers, fractions, decimals,
NumPy scalars and user types all qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only the arithmetic the engine calls
    - Identities and zero tests live in pylinear.core.scalars, because
      built-in numbers cannot grow methods
"""

from typing import Protocol, TypeVar, runtime_checkable

K = TypeVar('K', bound='AlgebraicScalar')


@runtime_checkable
class AlgebraicScalar(Protocol):
    """
    Minimal protocol for a matrix or vector element.

    Integers, floating-point numbers, complex numbers, Fraction, Decimal and
    pylinear.Complex all satisfy it. Integer division truncation is not the
    engine's concern: Python's ``/`` on integers is true division.

    Types may additionally provide ``zero()``, ``one()``, ``is_zero()`` and
    ``sqrt()`` methods; see pylinear.core.scalars.
    """

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __truediv__(self, other): ...

    def __neg__(self): ...

    def __eq__(self, other) -> bool: ...
