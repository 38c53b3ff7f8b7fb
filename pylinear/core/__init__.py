"""
Core infrastructure for PyLinear.

This module provides shared abstractions and utilities used by the matrix,
vector and reduction subpackages.

Key components:
    protocols: AlgebraicScalar protocol
    scalars: zero / one / is_zero capability helpers
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
"""

from pylinear.core.protocols import AlgebraicScalar
from pylinear.core.exceptions import (
    PyLinearError,
    ValidationError,
    DimensionError,
    NotSameSizeError,
    SizeMismatchError,
    NotSquareMatrixError,
    InvalidRangesError,
    NotThreeDimensionalError,
    LinearCombinationError,
    CoefficientCountError,
    EmptyVectorListError,
    VectorSizeMismatchError,
    RatioOffBoundError,
    NumericalError,
    SingularMatrixError,
    ZeroVectorError,
)
from pylinear.core.tolerances import ToleranceTier, EXACT, FP64, FP32, select_tolerance

__all__ = [
    # Protocols
    "AlgebraicScalar",
    # Exceptions
    "PyLinearError",
    "ValidationError",
    "DimensionError",
    "NotSameSizeError",
    "SizeMismatchError",
    "NotSquareMatrixError",
    "InvalidRangesError",
    "NotThreeDimensionalError",
    "LinearCombinationError",
    "CoefficientCountError",
    "EmptyVectorListError",
    "VectorSizeMismatchError",
    "RatioOffBoundError",
    "NumericalError",
    "SingularMatrixError",
    "ZeroVectorError",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "select_tolerance",
]
