# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import importlib
import logging

import pytest

import densematrix.utils
from densematrix.errors import (
    ColumnOutOfRange,
    IncompatibleDimensions,
    MatrixError,
    NotSquare,
    RowOutOfRange,
)
from densematrix.matrix import Matrix
from densematrix.matrix_functions import determinant
from densematrix.utils import checks_enabled, random_integer_matrix, unchecked


def test_checks_enabled_by_default():
    assert checks_enabled()


def test_unchecked_block_skips_checks():
    A = Matrix.from_rows([[1, 2], [3, 4]])
    with unchecked():
        assert not checks_enabled()
        # column overflow wraps into the next row
        assert A[0, 2] == 3
        A.assign([5, 6, 7])
        assert A.tolist() == [[5, 6], [7]]
    assert checks_enabled()


def test_unchecked_restores_on_error():
    with pytest.raises(ZeroDivisionError):
        with unchecked():
            1 / 0
    assert checks_enabled()
    with pytest.raises(NotSquare):
        determinant(Matrix(2, 3, 1))


def test_error_hierarchy():
    A = Matrix(2, 2, 0)
    with pytest.raises(IndexError):
        A[2, 0]
    with pytest.raises(MatrixError):
        A[0, 2]
    with pytest.raises(ValueError):
        A.assign([1])
    assert issubclass(RowOutOfRange, MatrixError)
    assert issubclass(ColumnOutOfRange, IndexError)
    assert issubclass(IncompatibleDimensions, ValueError)
    assert str(NotSquare()) == "matrix must be square [rows = columns]."


def test_random_integer_matrix():
    A = random_integer_matrix(3, 4, low=-2, high=2, seed=0)
    assert A.shape == (3, 4)
    assert A.element_type is int
    assert all(-2 <= v <= 2 for row in A.tolist() for v in row)
    assert A == random_integer_matrix(3, 4, low=-2, high=2, seed=0)


def _reload_utils(monkeypatch, value):
    if value is None:
        monkeypatch.delenv("DENSEMATRIX_UNCHECKED", raising=False)
    else:
        monkeypatch.setenv("DENSEMATRIX_UNCHECKED", value)
    importlib.reload(densematrix.utils)


def test_environment_variable_disables_checks(monkeypatch, caplog):
    try:
        with caplog.at_level(logging.WARNING, logger="densematrix.utils"):
            _reload_utils(monkeypatch, "1")
        assert not checks_enabled()
        assert "precondition checks are disabled" in caplog.text
        # column overflow wraps instead of raising
        assert Matrix.from_rows([[1, 2], [3, 4]])[0, 2] == 3
    finally:
        _reload_utils(monkeypatch, None)
    assert checks_enabled()
    with pytest.raises(ColumnOutOfRange):
        Matrix(2, 2, 0)[0, 2]


def test_environment_variable_off_values_keep_checks(monkeypatch, caplog):
    try:
        for value in ("0", "off", "", "no"):
            caplog.clear()
            with caplog.at_level(logging.WARNING, logger="densematrix.utils"):
                _reload_utils(monkeypatch, value)
            assert checks_enabled(), value
            assert "precondition checks are disabled" not in caplog.text
    finally:
        _reload_utils(monkeypatch, None)
