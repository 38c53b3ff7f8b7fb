"""
Tolerance tiers for approximate comparison.

Defines precision expectations for the scalar types the engine runs on:
- EXACT: integers, fractions, decimals, Complex over exact types
- FP64: Python float/complex and NumPy 64-bit floating types
- FP32: NumPy single-precision floating types

The engine itself never compares with a tolerance (zero tests are exact);
these tiers are used by Matrix.approx_eq and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact arithmetic: results must compare equal
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact scalar types, bit-for-bit equality',
)

# Double precision after O(n^3) elimination steps
FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='fp64',
    description='Double precision, Gaussian elimination round-off',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision, Gaussian elimination round-off',
)


def select_tolerance(value) -> ToleranceTier:
    """Select the tolerance tier matching the type of a scalar."""
    # Complex[T] is judged by its components
    real = getattr(value, 'real', value)
    if isinstance(real, np.generic) and np.issubdtype(type(real), np.inexact):
        if np.finfo(type(real)).bits <= 32:
            return FP32
        return FP64
    if isinstance(value, (float, complex)) or isinstance(real, float):
        return FP64
    return EXACT
