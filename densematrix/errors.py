# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised when a matrix precondition is violated.
"""

from typing import Optional


class MatrixError(Exception):
    """Base class for every precondition failure raised by densematrix."""

    message = "matrix error."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidSize(MatrixError, ValueError):
    message = "invalid matrix dimensions [rows < 1 OR columns < 1]."


class RowOutOfRange(MatrixError, IndexError):
    message = "row index out of range [0, rows - 1]."


class ColumnOutOfRange(MatrixError, IndexError):
    message = "column index out of range [0, columns - 1]."


class IncompatibleDimensions(MatrixError, ValueError):
    message = "incompatible matrix dimensions."


class NotSquare(MatrixError, ValueError):
    message = "matrix must be square [rows = columns]."
