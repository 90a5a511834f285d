# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense, row-major matrix with value semantics
"""

import copy
import operator
from typing import Any, Callable, List, Optional, Sequence, Tuple

import numpy as np

from .errors import (
    ColumnOutOfRange,
    IncompatibleDimensions,
    InvalidSize,
    RowOutOfRange,
)
from .utils import checks_enabled

# sequences and arrays are never scaled by elementwise repetition
_NOT_SCALARS = (list, tuple, np.ndarray)


class Matrix:
    """
    A fixed-size matrix of any numeric-like element type.

    Elements need ``+``, binary and unary ``-``, ``*`` and a zero-argument
    constructor (``element_type()``) that yields the zero element.

    Parameters
    ----------
    rows, columns : int
        Shape of the matrix, both must be at least 1.
    fill : Any | None
        Initial value of every element. Defaults to ``element_type()``.
    element_type : callable | None
        Type of the elements. Defaults to ``type(fill)``, or ``float``
        when no fill value is given.

    Each cell, and every copy or extracted vector, gets its own
    ``copy.copy`` of the element, so mutable element objects are never
    shared between cells or matrices.

    Raises
    ------
    InvalidSize : if rows < 1 or columns < 1.
    """

    __hash__ = None  # mutable
    # keep numpy scalars from swallowing the matrix in `2.0 * m`
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int,
        columns: int,
        fill: Any = None,
        element_type: Optional[Callable[[], Any]] = None,
    ):
        rows = operator.index(rows)
        columns = operator.index(columns)
        if checks_enabled() and (rows < 1 or columns < 1):
            raise InvalidSize()

        if element_type is None:
            element_type = float if fill is None else type(fill)
        if fill is None:
            fill = element_type()

        self._rows = rows
        self._columns = columns
        self._element_type = element_type
        self._data: List[Any] = [copy.copy(fill) for _ in range(rows * columns)]

    # -----------------------------------------------------------------
    # Alternate constructors
    # -----------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], element_type=None) -> "Matrix":
        """Build a matrix from a list of equally long rows."""
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise InvalidSize()
        columns = len(rows[0])
        if any(len(row) != columns for row in rows):
            raise IncompatibleDimensions("rows must all have the same length.")

        if element_type is None:
            element_type = type(rows[0][0])
        result = cls(len(rows), columns, element_type=element_type)
        result._data = [value for row in rows for value in row]
        return result

    @classmethod
    def identity(cls, n: int, element_type=float) -> "Matrix":
        """n by n matrix with element_type(1) on the diagonal."""
        result = cls(n, n, element_type=element_type)
        one = element_type(1)
        for i in range(n):
            result._data[i * n + i] = one
        return result

    @classmethod
    def from_numpy(cls, array) -> "Matrix":
        """
        Copy a 2-D array (or anything np.asarray accepts) into a Matrix.
        Elements are converted to plain Python scalars.
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise IncompatibleDimensions(
                f"expected a 2-D array, got {array.ndim} dimension(s)."
            )
        return cls.from_rows(array.tolist())

    # -----------------------------------------------------------------
    # Shape
    # -----------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    @property
    def element_type(self):
        return self._element_type

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    # -----------------------------------------------------------------
    # Element access
    # -----------------------------------------------------------------
    def _offset(self, row, column) -> int:
        row = operator.index(row)
        column = operator.index(column)
        if checks_enabled():
            if row < 0 or row >= self._rows:
                raise RowOutOfRange()
            if column < 0 or column >= self._columns:
                raise ColumnOutOfRange()
        return row * self._columns + column

    def at(self, row: int, column: int):
        return self._data[self._offset(row, column)]

    def set(self, row: int, column: int, value) -> None:
        self._data[self._offset(row, column)] = value

    def __getitem__(self, index: Tuple[int, int]):
        row, column = index
        return self._data[self._offset(row, column)]

    def __setitem__(self, index: Tuple[int, int], value) -> None:
        row, column = index
        self._data[self._offset(row, column)] = value

    def assign(self, values: Sequence[Any]) -> "Matrix":
        """
        Replace every element, in row-major order, with ``values``.

        Raises
        ------
        IncompatibleDimensions : if len(values) != rows * columns. The
            matrix is left unchanged.
        """
        values = list(values)
        if checks_enabled() and len(values) != self._rows * self._columns:
            raise IncompatibleDimensions()
        self._data[:] = values
        return self

    def tolist(self) -> List[List[Any]]:
        n = self._columns
        return [self._data[r * n : (r + 1) * n] for r in range(self._rows)]

    # -----------------------------------------------------------------
    # Row / column extraction
    # -----------------------------------------------------------------
    def row_vector(self, row: int) -> "Matrix":
        """Copy of row ``row`` as a (1, columns) matrix."""
        row = operator.index(row)
        if checks_enabled() and (row < 0 or row >= self._rows):
            raise RowOutOfRange()
        result = self._like(1, self._columns)
        start = row * self._columns
        result._data[:] = map(copy.copy, self._data[start : start + self._columns])
        return result

    def column_vector(self, column: int) -> "Matrix":
        """Copy of column ``column`` as a (rows, 1) matrix."""
        column = operator.index(column)
        if checks_enabled() and (column < 0 or column >= self._columns):
            raise ColumnOutOfRange()
        result = self._like(self._rows, 1)
        result._data[:] = map(copy.copy, self._data[column :: self._columns])
        return result

    def transform(self, visitor: Callable[[int, int, Any], Any]) -> "Matrix":
        """
        Call ``visitor(row, column, value)`` on each cell in row-major
        order and store what it returns in that cell.

        Returns the matrix itself so calls can be chained.
        """
        for row in range(self._rows):
            for column in range(self._columns):
                offset = row * self._columns + column
                self._data[offset] = visitor(row, column, self._data[offset])
        return self

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------
    def _like(self, rows: int, columns: int) -> "Matrix":
        return Matrix(rows, columns, element_type=self._element_type)

    def _check_same_shape(self, other: "Matrix") -> None:
        if checks_enabled() and self.shape != other.shape:
            raise IncompatibleDimensions()

    def add(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other)
        result = self._like(self._rows, self._columns)
        result._data[:] = [a + b for a, b in zip(self._data, other._data)]
        return result

    def subtract(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other)
        result = self._like(self._rows, self._columns)
        result._data[:] = [a - b for a, b in zip(self._data, other._data)]
        return result

    def negate(self) -> "Matrix":
        result = self._like(self._rows, self._columns)
        result._data[:] = [-a for a in self._data]
        return result

    def scale(self, scalar) -> "Matrix":
        """Multiply every element by ``scalar``."""
        result = self._like(self._rows, self._columns)
        result._data[:] = [a * scalar for a in self._data]
        return result

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Matrix product self * other.

        Each element starts at the zero element and accumulates
        ``self[row, k] * other[k, column]`` for k = 0, 1, ... in order,
        so non-commutative element types keep their operand order.
        """
        if checks_enabled() and self._columns != other._rows:
            raise IncompatibleDimensions()
        m, n, p = self._rows, self._columns, other._columns
        result = self._like(m, p)
        a, b, c = self._data, other._data, result._data
        for row in range(m):
            for column in range(p):
                acc = c[row * p + column]
                for k in range(n):
                    acc = acc + a[row * n + k] * b[k * p + column]
                c[row * p + column] = acc
        return result

    def transpose(self) -> "Matrix":
        m, n = self._rows, self._columns
        result = self._like(n, m)
        for row in range(m):
            for column in range(n):
                result._data[column * m + row] = self._data[row * n + column]
        return result

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def minor(self, at_row: int, at_column: int) -> "Matrix":
        """
        Drop row ``at_row`` and column ``at_column``.

        Returns
        -------
        (rows - 1, columns - 1) matrix holding the remaining elements in
        their original row-major order.

        Raises
        ------
        InvalidSize : if the matrix has fewer than 2 rows or 2 columns.
        RowOutOfRange, ColumnOutOfRange : for indices outside the matrix.
        """
        at_row = operator.index(at_row)
        at_column = operator.index(at_column)
        if checks_enabled():
            if self._rows < 2 or self._columns < 2:
                raise InvalidSize("a minor needs at least 2 rows and 2 columns.")
            if at_row < 0 or at_row >= self._rows:
                raise RowOutOfRange()
            if at_column < 0 or at_column >= self._columns:
                raise ColumnOutOfRange()

        result = self._like(self._rows - 1, self._columns - 1)
        result._data[:] = [
            self._data[row * self._columns + column]
            for row in range(self._rows)
            if row != at_row
            for column in range(self._columns)
            if column != at_column
        ]
        return result

    def determinant(self):
        """Determinant by cofactor expansion along the first column."""
        from .matrix_functions import determinant

        return determinant(self)

    # -----------------------------------------------------------------
    # Operators
    # -----------------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, _NOT_SCALARS):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other):
        if isinstance(other, _NOT_SCALARS):
            return NotImplemented
        return self.scale(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    # -----------------------------------------------------------------
    # Copying and interop
    # -----------------------------------------------------------------
    def copy(self) -> "Matrix":
        result = self._like(self._rows, self._columns)
        result._data[:] = [copy.copy(value) for value in self._data]
        return result

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Matrix":
        result = self._like(self._rows, self._columns)
        result._data[:] = copy.deepcopy(self._data, memo)
        return result

    def to_numpy(self, dtype=None) -> np.ndarray:
        return np.array(self.tolist(), dtype=dtype)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if copy is False:
            raise ValueError("a Matrix cannot be viewed as an array without a copy")
        return self.to_numpy(dtype=dtype)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.tolist()!r})"
