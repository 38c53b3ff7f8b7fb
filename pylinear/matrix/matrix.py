"""
Matrix: dense row-major matrix over an algebraic scalar.

Storage is a flat Python list in row-major order plus a Dimensions value.
Every Matrix owns its list; constructors copy their input. Operations that
"return a new form" (transpose, row_echelon, inverse, ...) copy first, while
swap_rows, set, append_row and append_column mutate in place.

Construction:
    Matrix([[1, 2], [3, 4]])
    Matrix.identity(3, one=1.0)
    Matrix.filled(width=2, height=3, value=0)
    Matrix.augmented(lhs, rhs)
    Matrix.from_array(np.eye(3))
"""

from __future__ import annotations

import warnings
from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.protocols import AlgebraicScalar
from pylinear.core.scalars import absolute, one as one_like, zero as zero_like
from pylinear.core.tolerances import ToleranceTier, select_tolerance
from pylinear.core.validation import (
    check_2d_array,
    check_inner_size,
    check_positive_size,
    check_ranges,
    check_rows,
    check_same_dimensions,
    check_square,
)
from pylinear.matrix.dimensions import Dimensions
from pylinear.vector.vector import Vector


def _as_range(bounds: range | slice, limit: int) -> range:
    """Turn a slice into a range without clamping it to the bounds."""
    if isinstance(bounds, range):
        return bounds
    start = 0 if bounds.start is None else bounds.start
    stop = limit if bounds.stop is None else bounds.stop
    step = 1 if bounds.step is None else bounds.step
    return range(start, stop, step)


class Matrix:
    """
    Dense matrix of algebraic scalars.

    Element access uses ``matrix[row, column]``. Matrices are mutable and
    therefore unhashable.
    """

    __slots__ = ('_content', '_dimensions')
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Sequence[Sequence[AlgebraicScalar]]):
        width, height = check_rows(rows, "rows")
        self._content: list[AlgebraicScalar] = [value for row in rows for value in row]
        self._dimensions = Dimensions(width=width, height=height)

    # --- construction ---

    @classmethod
    def _from_flat(cls, content: list[AlgebraicScalar], dimensions: Dimensions) -> Matrix:
        """Wrap an already validated row-major list without copying it."""
        matrix = cls.__new__(cls)
        matrix._content = content
        matrix._dimensions = dimensions
        return matrix

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[AlgebraicScalar]]) -> Matrix:
        """Build a Matrix from a 2-D sequence of rows."""
        return cls(rows)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a NumPy array (or anything np.asarray accepts).

        Elements are converted to Python scalars with ``tolist()``; object
        arrays keep their elements as they are.
        """
        data = np.asarray(array)
        check_2d_array(data, "array")
        if data.dtype == object:
            warnings.warn(
                "array has object dtype; elements are used as-is and must "
                "implement the AlgebraicScalar protocol",
                UserWarning,
                stacklevel=2,
            )
        return cls(data.tolist())

    @classmethod
    def identity(cls, size: int, one: AlgebraicScalar = 1) -> Matrix:
        """
        Square identity matrix.

        Args:
            size: Number of rows and columns
            one: Multiplicative identity of the desired scalar type; the
                 off-diagonal zero is derived from it
        """
        check_positive_size(size, "size")
        zero = zero_like(one)
        content = [one if row == col else zero for row in range(size) for col in range(size)]
        return cls._from_flat(content, Dimensions(width=size, height=size))

    @classmethod
    def filled(cls, width: int, height: int, value: AlgebraicScalar = 0) -> Matrix:
        """Matrix with every element set to ``value``."""
        check_positive_size(width, "width")
        check_positive_size(height, "height")
        return cls._from_flat([value] * (width * height), Dimensions(width=width, height=height))

    @classmethod
    def augmented(cls, lhs: Matrix, rhs: Matrix) -> Matrix:
        """
        Horizontal concatenation ``[lhs | rhs]``.

        Raises:
            SizeMismatchError: If the heights differ
        """
        check_inner_size(lhs.height, rhs.height)
        content: list[AlgebraicScalar] = []
        for left, right in zip(lhs.rows(), rhs.rows()):
            content.extend(left)
            content.extend(right)
        return cls._from_flat(
            content, Dimensions(width=lhs.width + rhs.width, height=lhs.height)
        )

    def copy(self) -> Matrix:
        return Matrix._from_flat(list(self._content), self._dimensions)

    __copy__ = copy

    # --- shape ---

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._dimensions.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._dimensions.height

    @property
    def size(self) -> tuple[int, int]:
        """(width, height)."""
        return self._dimensions.width, self._dimensions.height

    def is_square(self) -> bool:
        return self._dimensions.is_square()

    # --- element access ---

    def _offset(self, row: int, column: int) -> int | None:
        if 0 <= row < self.height and 0 <= column < self.width:
            return row * self.width + column
        return None

    def get(self, row: int, column: int) -> AlgebraicScalar | None:
        """Element at (row, column), or None when out of bounds."""
        offset = self._offset(row, column)
        return None if offset is None else self._content[offset]

    def set(self, row: int, column: int, value: AlgebraicScalar) -> None:
        offset = self._offset(row, column)
        if offset is None:
            raise IndexError(f"({row}, {column}) out of bounds for a {self._dimensions} matrix")
        self._content[offset] = value

    def __getitem__(self, key: tuple[int, int]) -> AlgebraicScalar:
        row, column = key
        offset = self._offset(row, column)
        if offset is None:
            raise IndexError(f"({row}, {column}) out of bounds for a {self._dimensions} matrix")
        return self._content[offset]

    def __setitem__(self, key: tuple[int, int], value: AlgebraicScalar) -> None:
        self.set(key[0], key[1], value)

    def row(self, index: int) -> Iterator[AlgebraicScalar] | None:
        """Iterator over one row, or None when out of bounds."""
        if not 0 <= index < self.height:
            return None
        start = index * self.width
        return iter(self._content[start:start + self.width])

    def column(self, index: int) -> Iterator[AlgebraicScalar] | None:
        """Iterator over one column, or None when out of bounds."""
        if not 0 <= index < self.width:
            return None
        return iter(self._content[index::self.width])

    def rows(self) -> Iterator[list[AlgebraicScalar]]:
        width = self.width
        for start in range(0, len(self._content), width):
            yield self._content[start:start + width]

    def columns(self) -> Iterator[list[AlgebraicScalar]]:
        for index in range(self.width):
            yield self._content[index::self.width]

    def swap_rows(self, first: int, second: int) -> None:
        """Swap two whole rows in place."""
        if not (0 <= first < self.height and 0 <= second < self.height):
            raise IndexError(
                f"rows ({first}, {second}) out of bounds for a {self._dimensions} matrix"
            )
        if first == second:
            return
        width = self.width
        a = slice(first * width, (first + 1) * width)
        b = slice(second * width, (second + 1) * width)
        self._content[a], self._content[b] = self._content[b], self._content[a]

    def append_row(self, values: Sequence[AlgebraicScalar]) -> None:
        """
        Add a row at the bottom.

        Raises:
            SizeMismatchError: If len(values) != width
        """
        check_inner_size(self.width, len(values))
        self._content.extend(values)
        self._dimensions = Dimensions(width=self.width, height=self.height + 1)

    def append_column(self, values: Sequence[AlgebraicScalar]) -> None:
        """
        Add a column on the right.

        Raises:
            SizeMismatchError: If len(values) != height
        """
        check_inner_size(self.height, len(values))
        content: list[AlgebraicScalar] = []
        for row, value in zip(self.rows(), values):
            content.extend(row)
            content.append(value)
        self._content = content
        self._dimensions = Dimensions(width=self.width + 1, height=self.height)

    def submatrix(self, rows: range | slice, columns: range | slice) -> Matrix:
        """
        Copy of a contiguous block.

        Raises:
            InvalidRangesError: If a range is empty, stepped or out of bounds
        """
        row_range = _as_range(rows, self.height)
        column_range = _as_range(columns, self.width)
        check_ranges(row_range, column_range, self._dimensions)
        content: list[AlgebraicScalar] = []
        for row in row_range:
            start = row * self.width
            content.extend(
                self._content[start + column_range.start:start + column_range.stop]
            )
        return Matrix._from_flat(
            content, Dimensions(width=len(column_range), height=len(row_range))
        )

    def to_lists(self) -> list[list[AlgebraicScalar]]:
        return list(self.rows())

    def to_numpy(self, dtype=None) -> NDArray[Any]:
        return np.array(self.to_lists(), dtype=dtype)

    # --- element-wise arithmetic ---

    def add(self, other: Matrix) -> Matrix:
        """
        Element-wise sum.

        Raises:
            NotSameSizeError: If dimensions differ
        """
        check_same_dimensions(self._dimensions, other._dimensions)
        content = [a + b for a, b in zip(self._content, other._content)]
        return Matrix._from_flat(content, self._dimensions)

    def sub(self, other: Matrix) -> Matrix:
        """
        Element-wise difference.

        Raises:
            NotSameSizeError: If dimensions differ
        """
        check_same_dimensions(self._dimensions, other._dimensions)
        content = [a - b for a, b in zip(self._content, other._content)]
        return Matrix._from_flat(content, self._dimensions)

    def scl(self, scalar: AlgebraicScalar) -> Matrix:
        """Multiply every element by a scalar."""
        return Matrix._from_flat([value * scalar for value in self._content], self._dimensions)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.scl(other)

    def __rmul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return Matrix._from_flat([other * value for value in self._content], self._dimensions)

    def __neg__(self) -> Matrix:
        return Matrix._from_flat([-value for value in self._content], self._dimensions)

    # --- products ---

    def mul_vec(self, vector: Vector) -> Vector:
        """
        Matrix x vector product.

        Raises:
            SizeMismatchError: If width != len(vector), as (width, len(vector))
        """
        check_inner_size(self.width, len(vector))
        return self.mul_vec_unchecked(vector)

    def mul_vec_unchecked(self, vector: Vector) -> Vector:
        """Matrix x vector product; requires width == len(vector)."""
        values = list(vector)
        result = []
        for row in self.rows():
            acc = row[0] * values[0]
            for a, b in zip(row[1:], values[1:]):
                acc = acc + a * b
            result.append(acc)
        return Vector(result)

    def mul_mat(self, other: Matrix) -> Matrix:
        """
        Matrix x matrix product.

        Raises:
            SizeMismatchError: If self.width != other.height
        """
        check_inner_size(self.width, other.height)
        return self.mul_mat_unchecked(other)

    def mul_mat_unchecked(self, other: Matrix) -> Matrix:
        """Matrix x matrix product; requires self.width == other.height."""
        columns = list(other.columns())
        content = []
        for row in self.rows():
            for column in columns:
                acc = row[0] * column[0]
                for a, b in zip(row[1:], column[1:]):
                    acc = acc + a * b
                content.append(acc)
        return Matrix._from_flat(content, Dimensions(width=other.width, height=self.height))

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self.mul_mat(other)
        if isinstance(other, Vector):
            return self.mul_vec(other)
        return NotImplemented

    # --- reductions over the diagonal ---

    def _diagonal(self) -> list[AlgebraicScalar]:
        return self._content[::self.width + 1][:min(self.width, self.height)]

    def trace(self) -> AlgebraicScalar:
        """
        Sum of the diagonal.

        Raises:
            NotSquareMatrixError: If the matrix is not square
        """
        check_square(self)
        return self.trace_unchecked()

    def trace_unchecked(self) -> AlgebraicScalar:
        """Sum of the diagonal; requires a square matrix."""
        diagonal = self._diagonal()
        acc = diagonal[0]
        for value in diagonal[1:]:
            acc = acc + value
        return acc

    def multiplicative_trace(self) -> AlgebraicScalar:
        """
        Product of the diagonal.

        Raises:
            NotSquareMatrixError: If the matrix is not square
        """
        check_square(self)
        return self.multiplicative_trace_unchecked()

    def multiplicative_trace_unchecked(self) -> AlgebraicScalar:
        """Product of the diagonal; requires a square matrix."""
        diagonal = self._diagonal()
        acc = diagonal[0]
        for value in diagonal[1:]:
            acc = acc * value
        return acc

    def transpose(self) -> Matrix:
        content = [value for column in self.columns() for value in column]
        return Matrix._from_flat(content, Dimensions(width=self.height, height=self.width))

    # --- Gaussian elimination ---

    def row_echelon(self) -> Matrix:
        from pylinear.reduction.solvers import row_echelon
        return row_echelon(self)

    def reduced_row_echelon(self) -> Matrix:
        from pylinear.reduction.solvers import reduced_row_echelon
        return reduced_row_echelon(self)

    def determinant(self) -> AlgebraicScalar:
        from pylinear.reduction.solvers import determinant
        return determinant(self)

    def inverse(self) -> Matrix:
        from pylinear.reduction.solvers import inverse
        return inverse(self)

    def rank(self) -> int:
        from pylinear.reduction.solvers import rank
        return rank(self)

    # --- comparison ---

    def _other_content(self, other) -> list[AlgebraicScalar] | None:
        """Flat content of a comparable operand with the same dimensions."""
        if isinstance(other, Matrix):
            return other._content if other._dimensions == self._dimensions else None
        if isinstance(other, np.ndarray):
            other = other.tolist()
        if not isinstance(other, Sequence) or len(other) != self.height:
            return None
        content = []
        for row in other:
            if not isinstance(row, Sequence) or len(row) != self.width:
                return None
            content.extend(row)
        return content

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Matrix, Sequence, np.ndarray)):
            return NotImplemented
        content = self._other_content(other)
        return content is not None and all(a == b for a, b in zip(self._content, content))

    def approx_eq(
        self,
        other: Matrix | Sequence[Sequence[AlgebraicScalar]],
        tolerance: ToleranceTier | float | None = None,
    ) -> bool:
        """
        Element-wise ``|a - b| <= atol + rtol * |b|``.

        Args:
            other: Matrix or nested rows with the same dimensions
            tolerance: ToleranceTier, a bare absolute epsilon, or None to
                       pick the tier matching this matrix's scalar type
        """
        content = self._other_content(other)
        if content is None:
            return False
        if tolerance is None:
            tolerance = select_tolerance(self._content[0])
        if isinstance(tolerance, ToleranceTier):
            rtol, atol = tolerance.rtol, tolerance.atol
        else:
            rtol, atol = 0.0, tolerance
        return all(
            absolute(a - b) <= atol + rtol * absolute(b)
            for a, b in zip(self._content, content)
        )

    def __repr__(self) -> str:
        return f"Matrix({self.to_lists()!r})"

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(str(value) for value in row) + "]" for row in self.rows()
        )


def identity_like(matrix: Matrix) -> Matrix:
    """Identity matrix of the same height and scalar type."""
    return Matrix.identity(matrix.height, one_like(matrix[0, 0]))
