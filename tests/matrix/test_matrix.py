"""
Tests for the Matrix entity.

Validates:
    - Construction (rows, identity, filled, augmented, NumPy)
    - Element and row/column access, in-place mutation
    - Submatrix extraction and range validation
    - Element-wise arithmetic, products, trace, transpose
    - Equality and approximate equality
"""

import warnings
from fractions import Fraction

import numpy as np
import pytest

from pylinear import Matrix, Vector
from pylinear.core.exceptions import (
    DimensionError,
    InvalidRangesError,
    NotSameSizeError,
    NotSquareMatrixError,
    SizeMismatchError,
    ValidationError,
)
from pylinear.core.tolerances import FP32
from pylinear.matrix import Dimensions, identity_like


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_rows(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert m.dimensions == Dimensions(width=3, height=2)
        assert m.size == (3, 2)
        assert m.to_lists() == [[1, 2, 3], [4, 5, 6]]

    def test_copies_input(self):
        rows = [[1, 2], [3, 4]]
        m = Matrix(rows)
        rows[0][0] = 99
        assert m[0, 0] == 1

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([])

    def test_ragged_rejected(self):
        with pytest.raises(DimensionError):
            Matrix([[1, 2], [3]])

    def test_identity(self):
        assert Matrix.identity(3) == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]

    def test_identity_scalar_type(self):
        m = Matrix.identity(2, one=Fraction(1))
        assert all(type(value) is Fraction for row in m.rows() for value in row)

    def test_identity_like(self):
        m = identity_like(Matrix([[1.5, 2.0], [3.0, 4.0]]))
        assert m == [[1.0, 0.0], [0.0, 1.0]]
        assert type(m[0, 1]) is float

    def test_identity_rejects_zero_size(self):
        with pytest.raises(ValidationError):
            Matrix.identity(0)

    def test_filled(self):
        assert Matrix.filled(width=2, height=3, value=7) == [[7, 7], [7, 7], [7, 7]]

    def test_augmented(self):
        lhs = Matrix([[1], [2]])
        result = Matrix.augmented(lhs, Matrix.identity(2))
        assert result == [[1, 1, 0], [2, 0, 1]]

    def test_augmented_height_mismatch(self):
        with pytest.raises(SizeMismatchError):
            Matrix.augmented(Matrix([[1]]), Matrix.identity(2))

    def test_from_array(self):
        m = Matrix.from_array(np.arange(6.0).reshape(2, 3))
        assert m.size == (3, 2)
        assert type(m[0, 0]) is float

    def test_from_array_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_array(np.ones(3))

    def test_from_array_object_dtype_warns(self):
        data = np.array([[Fraction(1), Fraction(2)]], dtype=object)
        with pytest.warns(UserWarning, match="object dtype"):
            m = Matrix.from_array(data)
        assert m[0, 1] == Fraction(2)

    def test_from_array_numeric_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Matrix.from_array(np.eye(2))

    def test_to_numpy(self):
        np.testing.assert_array_equal(
            Matrix([[1, 2], [3, 4]]).to_numpy(dtype=float),
            np.array([[1.0, 2.0], [3.0, 4.0]]),
        )


# ═══════════════════════════════════════════════════════════════════════
# Access and mutation
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_get_in_and_out_of_bounds(self):
        m = Matrix([[1, 2], [3, 4]])
        assert m.get(1, 0) == 3
        assert m.get(2, 0) is None
        assert m.get(0, -1) is None

    def test_getitem_out_of_bounds(self):
        with pytest.raises(IndexError):
            Matrix([[1]])[1, 0]

    def test_set(self):
        m = Matrix([[1, 2], [3, 4]])
        m[0, 1] = 9
        m.set(1, 1, 8)
        assert m == [[1, 9], [3, 8]]
        with pytest.raises(IndexError):
            m.set(5, 5, 0)

    def test_row_and_column(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert list(m.row(1)) == [4, 5, 6]
        assert list(m.column(2)) == [3, 6]
        assert m.row(2) is None
        assert m.column(3) is None
        assert list(m.columns()) == [[1, 4], [2, 5], [3, 6]]

    def test_swap_rows(self):
        m = Matrix([[1, 2], [3, 4], [5, 6]])
        m.swap_rows(0, 2)
        assert m == [[5, 6], [3, 4], [1, 2]]

    def test_swap_rows_out_of_bounds(self):
        with pytest.raises(IndexError):
            Matrix([[1, 2]]).swap_rows(0, 1)

    def test_append_row_and_column(self):
        m = Matrix([[1, 2], [3, 4]])
        m.append_row([5, 6])
        m.append_column([7, 8, 9])
        assert m == [[1, 2, 7], [3, 4, 8], [5, 6, 9]]

    def test_append_row_wrong_size(self):
        with pytest.raises(SizeMismatchError):
            Matrix([[1, 2]]).append_row([1, 2, 3])

    def test_copy_is_independent(self):
        m = Matrix([[1, 2]])
        c = m.copy()
        c[0, 0] = 5
        assert m[0, 0] == 1

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix([[1]]))


class TestSubmatrix:

    def test_block(self):
        m = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert m.submatrix(rows=range(1, 3), columns=range(0, 2)) == [[4, 5], [7, 8]]

    def test_slices(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert m.submatrix(rows=slice(None), columns=slice(2, None)) == [[3], [6]]

    @pytest.mark.parametrize("rows, columns", [
        (range(0, 3), range(0, 1)),
        (range(0, 1), range(0, 4)),
        (range(1, 1), range(0, 1)),
        (range(0, 2, 2), range(0, 1)),
    ])
    def test_invalid_ranges(self, rows, columns):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(InvalidRangesError):
            m.submatrix(rows=rows, columns=columns)


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_sub(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[7, 4], [-2, 2]])
        assert a + b == [[8, 6], [1, 6]]
        assert a - b == [[-6, -2], [5, 2]]

    def test_size_mismatch(self):
        with pytest.raises(NotSameSizeError) as exc_info:
            Matrix([[1, 2]]).add(Matrix([[1], [2]]))
        assert exc_info.value.lhs == Dimensions(width=2, height=1)
        assert exc_info.value.rhs == Dimensions(width=1, height=2)

    def test_scale(self):
        m = Matrix([[1, 2], [3, 4]])
        assert m * 2 == [[2, 4], [6, 8]]
        assert 2 * m == m.scl(2)
        assert -m == [[-1, -2], [-3, -4]]

    def test_mul_vec(self):
        m = Matrix([[2, -2], [-2, 2]])
        assert m.mul_vec(Vector([4, 2])) == [4, -4]
        assert m @ Vector([4, 2]) == [4, -4]

    def test_mul_vec_mismatch(self):
        with pytest.raises(SizeMismatchError) as exc_info:
            Matrix([[1, 2, 3]]).mul_vec(Vector([1, 2]))
        assert (exc_info.value.lhs, exc_info.value.rhs) == (3, 2)

    def test_mul_mat(self):
        a = Matrix([[3, -5], [6, 8]])
        b = Matrix([[2, 1], [4, 2]])
        assert a @ b == [[-14, -7], [44, 22]]

    def test_mul_mat_rectangular(self):
        a = Matrix([[1, 2, 3]])
        b = Matrix([[1], [2], [3]])
        assert a.mul_mat(b) == [[14]]
        assert b.mul_mat(a).size == (3, 3)

    def test_mul_mat_mismatch(self):
        with pytest.raises(SizeMismatchError):
            Matrix([[1, 2]]).mul_mat(Matrix([[1, 2]]))

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((3, 4))
        b = rng.standard_normal((4, 2))
        result = Matrix.from_array(a) @ Matrix.from_array(b)
        np.testing.assert_allclose(result.to_numpy(dtype=float), a @ b, rtol=1e-10, atol=1e-12)


class TestDiagonal:

    def test_trace(self):
        assert Matrix([[2, -5, 0], [4, 3, 7], [-2, 3, 4]]).trace() == 9

    def test_multiplicative_trace(self):
        assert Matrix([[2, 1], [1, 3]]).multiplicative_trace() == 6

    def test_multiplicative_trace_leaves_input_unchanged(self, in_place_rational):
        m = Matrix([[in_place_rational(2), in_place_rational(0)],
                    [in_place_rational(0), in_place_rational(3)]])
        assert m.multiplicative_trace() == 6
        assert m[0, 0] == 2
        assert m[1, 1] == 3

    def test_not_square(self):
        with pytest.raises(NotSquareMatrixError):
            Matrix([[1, 2, 3]]).trace()
        with pytest.raises(NotSquareMatrixError):
            Matrix([[1, 2, 3]]).multiplicative_trace()

    def test_transpose(self):
        assert Matrix([[1, 2, 3], [4, 5, 6]]).transpose() == [[1, 4], [2, 5], [3, 6]]


# ═══════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════


class TestComparison:

    def test_eq_matrix(self):
        assert Matrix([[1, 2]]) == Matrix([[1, 2]])
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])

    def test_eq_ndarray(self):
        assert Matrix([[1.0, 2.0]]) == np.array([[1.0, 2.0]])

    def test_eq_unrelated(self):
        assert Matrix([[1]]) != 1

    def test_approx_eq_default_tier(self):
        m = Matrix([[0.1 + 0.2, 1.0]])
        assert m != [[0.3, 1.0]]
        assert m.approx_eq([[0.3, 1.0]])

    def test_approx_eq_exact_for_fractions(self):
        m = Matrix([[Fraction(1, 3)]])
        assert m.approx_eq([[Fraction(1, 3)]])
        assert not m.approx_eq([[Fraction(1, 3) + Fraction(1, 10**12)]])

    def test_approx_eq_epsilon(self):
        assert Matrix([[1.0]]).approx_eq([[1.05]], tolerance=0.1)
        assert not Matrix([[1.0]]).approx_eq([[1.05]], tolerance=0.01)

    def test_approx_eq_tier(self):
        assert Matrix([[1.0]]).approx_eq([[1.00001]], tolerance=FP32)

    def test_approx_eq_shape_mismatch(self):
        assert not Matrix([[1.0, 2.0]]).approx_eq([[1.0]])

    def test_str(self):
        assert str(Matrix([[1, 2], [3, 4]])) == "[1, 2]\n[3, 4]"
