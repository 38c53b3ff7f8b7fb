"""
PyLinear: dense linear algebra over any field.

Matrices and vectors hold arbitrary algebraic scalars (int, float,
complex, Fraction, Decimal, NumPy scalars, pylinear.Complex). The core is
an exact Gaussian-elimination engine providing row echelon forms, rank,
determinants and inverses.

Submodules:
    matrix: Matrix and Dimensions
    vector: Vector, dot, norms, cross product, linear combination
    reduction: row echelon, determinant, inverse, rank
    scalar: Complex, Degree, Radian
    transform: scale, rotation, projection and view matrices
"""

__version__ = "0.1.0"

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
from pylinear.matrix import Dimensions, Matrix
from pylinear.vector import (
    Vector,
    angle_cos,
    cross_product,
    linear_combination,
)
from pylinear.reduction import (
    EchelonForm,
    determinant,
    inverse,
    rank,
    reduced_row_echelon,
    row_echelon,
    row_echelon_form,
)
from pylinear.scalar import Complex, Degree, Radian
from pylinear.utils import lerp
from pylinear import transform

__all__ = [
    "__version__",
    # Entities
    "Matrix",
    "Dimensions",
    "Vector",
    "Complex",
    "Degree",
    "Radian",
    # Operations
    "angle_cos",
    "cross_product",
    "linear_combination",
    "lerp",
    "row_echelon",
    "row_echelon_form",
    "reduced_row_echelon",
    "determinant",
    "inverse",
    "rank",
    "EchelonForm",
    "transform",
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
]
