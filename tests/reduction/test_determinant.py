"""
Tests for the determinant.

Sizes up to 4x4 use closed forms, larger sizes go through elimination;
both paths are checked against reference values and numpy.linalg.det.
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinear import Complex, Matrix
from pylinear.core.exceptions import NotSquareMatrixError
from pylinear.reduction import determinant, determinant_unchecked


class TestReferenceValues:

    def test_1x1(self):
        assert determinant([[7]]) == 7

    def test_2x2_singular(self):
        assert determinant([[1, -1], [-1, 1]]) == 0

    def test_scaled_identity(self):
        assert determinant(Matrix.identity(3) * 2) == 8

    def test_3x3(self, invertible_3x3):
        assert determinant(invertible_3x3) == -174

    def test_4x4(self):
        m = [
            [8, 5, -2, 4],
            [4, 2.5, 20, 4],
            [8, 5, 1, 4],
            [28, -4, 17, 1],
        ]
        assert determinant(m) == pytest.approx(1032.0)

    def test_5x5_exact(self, tridiagonal_5x5):
        assert determinant(tridiagonal_5x5) == 492

    def test_elimination_leaves_input_unchanged(self, tridiagonal_5x5, in_place_rational):
        m = Matrix([[in_place_rational(value) for value in row] for row in tridiagonal_5x5.rows()])
        assert determinant(m) == 492
        assert m == tridiagonal_5x5

    def test_method_wrapper(self, invertible_3x3):
        assert invertible_3x3.determinant() == -174

    def test_closed_form_keeps_integers(self, invertible_3x3):
        assert type(determinant(invertible_3x3)) is int


class TestIdentity:

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6, 8])
    def test_identity_has_unit_determinant(self, n):
        assert determinant(Matrix.identity(n)) == 1

    @pytest.mark.parametrize("n", [2, 5])
    def test_complex_identity(self, n):
        unit = Complex(Fraction(1), Fraction(0))
        assert determinant(Matrix.identity(n, one=unit)) == unit


class TestRowSwaps:
    """Swapping two rows flips the sign on both paths."""

    def test_swap_flips_sign_closed_form(self, invertible_3x3):
        swapped = invertible_3x3.copy()
        swapped.swap_rows(0, 2)
        assert determinant(swapped) == 174

    def test_swap_flips_sign_elimination(self, tridiagonal_5x5):
        swapped = tridiagonal_5x5.copy()
        swapped.swap_rows(1, 4)
        assert determinant(swapped) == -492

    def test_pivot_search_swap(self):
        # Leading zero forces a row swap during elimination
        permutation = Matrix.identity(5)
        permutation.swap_rows(0, 1)
        assert determinant(permutation) == -1

    def test_rank_deficient_elimination(self):
        rows = [[Fraction(i * 5 + j + 1) for j in range(5)] for i in range(5)]
        rows[4] = [Fraction(0)] * 5
        assert determinant(rows) == 0

    def test_dependent_rows_elimination(self):
        rows = [[Fraction(v) for v in row] for row in [
            [1, 2, 3, 4, 5],
            [2, 4, 6, 8, 10],
            [0, 1, 0, 1, 0],
            [3, 0, 1, 0, 2],
            [1, 1, 1, 1, 1],
        ]]
        assert determinant(rows) == 0


class TestAgainstNumpy:

    @pytest.mark.parametrize("n", [2, 3, 4, 6, 9])
    def test_random(self, rng, n):
        A = rng.standard_normal((n, n)) + n * np.eye(n)
        result = determinant(Matrix.from_array(A))
        np.testing.assert_allclose(result, np.linalg.det(A), rtol=1e-9)

    def test_accepts_ndarray(self):
        assert determinant(np.array([[1.0, 2.0], [3.0, 4.0]])) == pytest.approx(-2.0)


class TestValidation:

    def test_not_square(self):
        with pytest.raises(NotSquareMatrixError) as exc_info:
            determinant([[1, 2, 3], [4, 5, 6]])
        assert exc_info.value.dimensions.width == 3

    def test_unchecked_skips_validation(self, invertible_3x3):
        assert determinant_unchecked(invertible_3x3) == -174
