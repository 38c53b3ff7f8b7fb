"""
Interpolation helpers.

lerp works on anything supporting ``+``, ``-`` and multiplication by the
ratio: scalars, Complex, Vector and Matrix.
"""

from __future__ import annotations

from typing import TypeVar

from pylinear.core.validation import check_ratio

T = TypeVar("T")


def lerp(u: T, v: T, ratio) -> T:
    """
    Linear interpolation ``u + (v - u) * ratio``.

    Args:
        u: Value returned for ratio 0
        v: Value returned for ratio 1
        ratio: Position between u and v, in [0, 1]

    Raises:
        RatioOffBoundError: If ratio is outside [0, 1]
        NotSameSizeError: If u and v are vectors or matrices of different sizes

    >>> lerp(0.0, 1.0, 0.5)
    0.5
    """
    check_ratio(ratio)
    return lerp_unchecked(u, v, ratio)


def lerp_unchecked(u: T, v: T, ratio) -> T:
    """Linear interpolation without the bound check on ratio (extrapolates)."""
    return u + (v - u) * ratio
