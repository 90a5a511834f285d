#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import time

import numpy as np
import pandas as pd

from densematrix import Matrix, determinant

np.random.seed(0)
REPEATS = 5  # best of 5 runs leads to stable numbers
sizes = [3, 4, 5, 6, 7, 8]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


records = []
for n in sizes:
    A = np.random.randn(n, n)
    M = Matrix.from_numpy(A)

    # reference
    t_np = min(wall(np.linalg.det, A) for _ in range(REPEATS))
    d_ref = np.linalg.det(A)

    t_cof = min(wall(determinant, M) for _ in range(REPEATS))
    d_cof = determinant(M)
    rel_err = abs(d_cof - d_ref) / max(1.0, abs(d_ref))
    records.append(("cofactor", f"{n}x{n}", t_cof, t_cof / t_np, rel_err))

df = pd.DataFrame(
    records,
    columns=["kernel", "size", "sec", "sec/NumPy", "rel_err"],
)
print(df.to_string(index=False))

df.to_csv("bench_results.csv", index=False)
