# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

from .errors import NotSquare
from .matrix import Matrix
from .utils import FACTORIAL_WARNING_SIZE, checks_enabled

logger = logging.getLogger(__name__)


def add(A: Matrix, B: Matrix) -> Matrix:
    return A.add(B)


def subtract(A: Matrix, B: Matrix) -> Matrix:
    return A.subtract(B)


def negate(A: Matrix) -> Matrix:
    return A.negate()


def scale(A: Matrix, scalar) -> Matrix:
    return A.scale(scalar)


def multiply(A: Matrix, B: Matrix) -> Matrix:
    return A.multiply(B)


def transpose(A: Matrix) -> Matrix:
    return A.transpose()


def row_vector(A: Matrix, row: int) -> Matrix:
    return A.row_vector(row)


def column_vector(A: Matrix, column: int) -> Matrix:
    return A.column_vector(column)


def minor(A: Matrix, at_row: int, at_column: int) -> Matrix:
    return A.minor(at_row, at_column)


def _cofactor_expansion(A: Matrix):
    n = A.rows
    if n == 1:
        return A[0, 0]
    if n == 2:
        return A[0, 0] * A[1, 1] - A[1, 0] * A[0, 1]

    result = A.element_type()
    for row in range(n):
        term = A[row, 0] * _cofactor_expansion(A.minor(row, 0))
        # signs alternate down the first column: + - + - ...
        if row % 2 == 0:
            result = result + term
        else:
            result = result - term
    return result


def determinant(A: Matrix):
    """
    Calculate the determinant of n-by-n matrix A by cofactor (Laplace)
    expansion along the first column.

    Only ``+``, ``-`` and ``*`` of the elements are used, so integer and
    Fraction matrices give exact results. Cost is O(n!): meant for small
    matrices.
    """
    if checks_enabled() and not A.is_square:
        raise NotSquare()
    if A.rows > FACTORIAL_WARNING_SIZE:
        logger.warning(
            "determinant(): cofactor expansion of a %dx%d matrix is O(n!)",
            A.rows,
            A.rows,
        )
    logger.debug("determinant(): expanding %dx%d along column 0", A.rows, A.columns)
    return _cofactor_expansion(A)


def cofactor(A: Matrix, row: int, column: int):
    """(-1)^(row + column) times the determinant of minor(A, row, column)."""
    d = determinant(A.minor(row, column))
    return -d if (row + column) % 2 else d


def adjugate(A: Matrix) -> Matrix:
    """
    Adjugate (classical adjoint) of a square matrix A: the transpose of
    its cofactor matrix, so that A @ adjugate(A) == det(A) * I.
    """
    if checks_enabled() and not A.is_square:
        raise NotSquare()
    n = A.rows
    if n == 1:
        return Matrix(1, 1, A.element_type(1), element_type=A.element_type)

    C = Matrix(n, n, element_type=A.element_type)
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor(A, i, j)
    return C.transpose()
