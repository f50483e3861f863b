# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional, Sequence

import numpy as np

from .matrix import Matrix

EPS: float = 1e-12


def scale_tol(A: Matrix) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    if A.data.size == 0:
        return EPS
    G = A.grid().astype(float)
    return EPS * max(1.0, np.linalg.norm(G, ord=np.inf))


def is_upper_triangular(A: Matrix, tol: Optional[float] = None) -> bool:
    """True if every entry strictly below the diagonal is within `tol` of 0."""
    if tol is None:
        tol = scale_tol(A)
    G = A.grid()
    below = G[np.tril_indices(A.rows, k=-1, m=A.cols)]
    return bool(np.all(np.abs(below.astype(float)) <= tol))


def identity(n: int, dtype=np.float64) -> Matrix:
    return Matrix(n, n, np.eye(n, dtype=dtype), dtype=dtype)


def permutation_matrix(perm: Sequence[int]) -> Matrix:
    """Matrix P with P[i, perm[i]] = 1, i.e. row i of I taken from perm[i]."""
    n = len(perm)
    P = np.zeros((n, n))
    P[np.arange(n), list(perm)] = 1.0
    return Matrix(n, n, P)


def permutation_sign(perm: Sequence[int]) -> float:
    """Return +1 or –1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n − #cycles
    return -1.0 if swaps & 1 else 1.0


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> Matrix:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    U = rng.uniform(low, high, size=(n, n))
    # enforce upper-triangular
    U = np.triu(U)
    # replace any accidental zeros on the diagonal
    diag = rng.uniform(low if low != 0 else 1, high, size=n)
    U[np.diag_indices(n)] = diag
    return Matrix(n, n, U)
