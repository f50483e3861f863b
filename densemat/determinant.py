# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import functools
import logging
import operator
from typing import Tuple

import numpy as np

from .matrix import Matrix
from .scalar import T, is_zero, zero_like

logger = logging.getLogger(__name__)


def _product(values):
    return functools.reduce(operator.mul, values)


def laplace_determinant(M: Matrix) -> T:
    """
    Rule-of-diagonals determinant, wrapping the diagonals cyclically.

        sum_i ( prod_j M[j, (j + i) % n] - prod_j M[j, (n + i - j) % n] )

    This is Sarrus' rule for a 3 by 3 matrix. For any other size the
    cyclic wrap does NOT give the determinant (1x1 and 2x2 always yield 0);
    use `gaussian_determinant` there.

    Raises
    ------
    EmptyMatrixError, NonSquareMatrixError
    """
    n = M.require_square()
    if n != 3:
        logger.warning(
            f"laplace_determinant(): the diagonal rule is only exact for 3x3, got {n}x{n}"
        )
    A = M.grid()

    terms = []
    for i in range(n):
        forward = _product(A[j, (j + i) % n] for j in range(n))
        backward = _product(A[j, (n + i - j) % n] for j in range(n))
        terms.append(forward - backward)
    return functools.reduce(operator.add, terms)


def gaussian_elimination(M: Matrix) -> Tuple[bool, Matrix]:
    """
    Reduce a square matrix to upper-triangular form.

    The input is never modified; the work happens on a deep copy which
    is returned. Rows are only interchanged when the current pivot is
    exactly zero, in which case the candidate with the largest absolute
    value is brought up (first one wins on ties).

    Parameters
    ----------
    M : Matrix                   (n, n)

    Returns
    -------
    sign_positive : bool
        True if an even number of row swaps was performed.
    U : Matrix                   (n, n)
        Upper-triangular matrix row-equivalent to M.

    Raises
    ------
    EmptyMatrixError, NonSquareMatrixError
    """
    n = M.require_square()
    U = M.deep_copy()
    A = U.grid()

    sign_positive = True
    row = col = 0
    while col < n and row < n:
        if is_zero(A[col, row]):
            # Partial pivoting over the candidates in rows col..n-1
            candidates = np.abs(A[col:, row])
            best = col + int(np.argmax(candidates))

            if is_zero(A[best, row]):
                logger.debug(f"column {row} is rank deficient, skipping")
                col += 1
                continue
            if best != row:
                U.swap_rows(best, row)
                sign_positive = not sign_positive
                logger.debug(f"swapped rows {row} and {best}")

        pivot = A[row, col]
        if is_zero(pivot):
            # Only reachable once a column has been skipped (col > row)
            logger.debug(f"zero pivot at ({row}, {col}), skipping column")
            col += 1
            continue

        # Eliminate entries below the pivot
        factors = A[row + 1 :, col] / pivot
        A[row + 1 :, col] = zero_like(pivot)
        A[row + 1 :, col + 1 :] -= factors[:, None] * A[row, col + 1 :]

        col += 1
        row += 1

    return sign_positive, U


def gaussian_determinant(M: Matrix) -> Tuple[Matrix, T]:
    """
    Determinant from the diagonal of the eliminated matrix.

    Returns
    -------
    U : Matrix
        The upper-triangular matrix from `gaussian_elimination`.
    det : scalar
        Product of U's diagonal, negated after an odd number of swaps.
        A singular matrix gives 0.
    """
    sign_positive, U = gaussian_elimination(M)
    A = U.grid()
    base = _product(A[i, i] for i in range(U.rows))
    if not sign_positive:
        return U, -base
    return U, base
