# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import os
from contextlib import contextmanager

import numpy as np

logger = logging.getLogger(__name__)

# Cofactor expansion is O(n!); anything larger than this gets a warning.
FACTORIAL_WARNING_SIZE: int = 9

UNCHECKED_ENV_VAR = "DENSEMATRIX_UNCHECKED"

_checks = os.environ.get(UNCHECKED_ENV_VAR, "").strip().lower() not in (
    "1",
    "true",
    "yes",
    "on",
)
if not _checks:
    logger.warning(
        "%s is set: matrix precondition checks are disabled", UNCHECKED_ENV_VAR
    )


def checks_enabled() -> bool:
    """Return True when precondition checks are active (the default)."""
    return _checks


@contextmanager
def unchecked():
    """
    Disable precondition checks for the duration of the block.

    Out of range indices, mismatched shapes and non-square determinants
    are no longer reported with the densematrix exceptions; results of
    such calls are unspecified.
    """
    global _checks
    previous = _checks
    _checks = False
    try:
        yield
    finally:
        _checks = previous


def random_integer_matrix(rows, columns, low=-9, high=9, seed=None):
    """
    Build a Matrix of Python ints drawn uniformly from [low, high].

    Integer entries keep the cofactor determinant exact, which makes the
    result comparable to ``round(np.linalg.det(...))``.
    """
    from .matrix import Matrix

    rng = np.random.default_rng(seed)
    values = rng.integers(low, high, size=(rows, columns), endpoint=True)
    return Matrix.from_numpy(values)
