# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densemat
========

A small dense-matrix toolkit for computing determinants two ways:
the (cyclic) rule of diagonals and Gaussian elimination with
partial pivoting.

Public API
~~~~~~~~~~
- Container
    - `Matrix`
- Determinants
    - `laplace_determinant` (exact for 3 by 3 only)
    - `gaussian_elimination`, `gaussian_determinant`
- Helpers
    - `identity`, `permutation_matrix`, `permutation_sign`,
      `random_nonsingular_upper`, `is_upper_triangular`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import densemat as dm
>>> A = dm.Matrix(3, 3, [1, 2, 2, 2, 0, -1, -2, 1, 3])
>>> float(A.laplace_determinant())
-3.0
>>> U, d = dm.gaussian_determinant(A)
>>> round(float(d), 10)
-3.0
"""

from importlib.metadata import version as _pkg_version

from .determinant import (
    gaussian_determinant,
    gaussian_elimination,
    laplace_determinant,
)
from .errors import (
    EmptyMatrixError,
    IndexOutOfRangeError,
    MatrixError,
    NonSquareMatrixError,
    ShapeMismatchError,
)
from .matrix import Matrix
from .scalar import Scalar
from .utils import (
    identity,
    is_upper_triangular,
    permutation_matrix,
    permutation_sign,
    random_nonsingular_upper,
    scale_tol,
)

__all__ = [
    "Matrix",
    "Scalar",
    "laplace_determinant",
    "gaussian_elimination",
    "gaussian_determinant",
    "MatrixError",
    "EmptyMatrixError",
    "NonSquareMatrixError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "identity",
    "is_upper_triangular",
    "permutation_matrix",
    "permutation_sign",
    "random_nonsingular_upper",
    "scale_tol",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densemat”, Sphinx, etc.)
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
