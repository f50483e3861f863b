# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""Exceptions raised by `densemat`.

Each error also derives from the builtin a NumPy user would expect
(`ValueError`, `IndexError`), so either can be caught.
"""


class MatrixError(Exception):
    """Base class for every error raised by this package."""


class EmptyMatrixError(MatrixError, ValueError):
    """A 0-row or 0-column matrix was given to a determinant routine."""


class NonSquareMatrixError(MatrixError, ValueError):
    """The operation is only defined for square matrices."""


class ShapeMismatchError(MatrixError, ValueError):
    """Storage length does not agree with the declared shape."""


class IndexOutOfRangeError(MatrixError, IndexError):
    pass
