# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densematrix
===========

A small dense-matrix value type for any numeric-like element type
(int, float, complex, Fraction, Decimal, ...), with a recursive
cofactor-expansion determinant.

Public API
~~~~~~~~~~
- The value type
    - `Matrix`
- Arithmetic
    - `add`, `subtract`, `negate`, `scale`, `multiply`, `transpose`
- Slicing
    - `row_vector`, `column_vector`, `minor`
- Cofactor algorithms
    - `determinant`, `cofactor`, `adjugate`
- Errors
    - `MatrixError`, `InvalidSize`, `RowOutOfRange`, `ColumnOutOfRange`,
      `IncompatibleDimensions`, `NotSquare`
- Precondition checks
    - `checks_enabled`, `unchecked` (or set ``DENSEMATRIX_UNCHECKED=1``)

Example
-------
>>> import densematrix as dm
>>> A = dm.Matrix(2, 2, 0).assign([1, 2, 3, 4])
>>> dm.determinant(A)
-2
"""

from importlib.metadata import version as _pkg_version

from .errors import (
    ColumnOutOfRange,
    IncompatibleDimensions,
    InvalidSize,
    MatrixError,
    NotSquare,
    RowOutOfRange,
)
from .matrix import Matrix

# ---------------------------------------------------------------------
# Re-export the functional API; each name is implemented in
# matrix_functions on top of the Matrix methods.
# ---------------------------------------------------------------------
from .matrix_functions import (
    add,
    adjugate,
    cofactor,
    column_vector,
    determinant,
    minor,
    multiply,
    negate,
    row_vector,
    scale,
    subtract,
    transpose,
)
from .utils import checks_enabled, random_integer_matrix, unchecked

__all__ = [
    "Matrix",
    "add",
    "subtract",
    "negate",
    "scale",
    "multiply",
    "transpose",
    "row_vector",
    "column_vector",
    "minor",
    "determinant",
    "cofactor",
    "adjugate",
    "MatrixError",
    "InvalidSize",
    "RowOutOfRange",
    "ColumnOutOfRange",
    "IncompatibleDimensions",
    "NotSquare",
    "checks_enabled",
    "unchecked",
    "random_integer_matrix",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show densematrix", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
