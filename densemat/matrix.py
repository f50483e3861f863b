# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional, Tuple

import numpy as np

from .errors import (
    EmptyMatrixError,
    IndexOutOfRangeError,
    NonSquareMatrixError,
    ShapeMismatchError,
)
from .scalar import as_scalar_array


class Matrix:
    """
    Dense row-major matrix over a flat storage buffer.

    Row ``i`` is the slice ``data[i * cols : (i + 1) * cols]``. The
    constructor copies `data`, so the matrix owns its storage and the
    caller's buffer is never touched.

    Parameters
    ----------
    rows, cols : int
        Shape, both >= 0.
    data : sequence | np.ndarray
        ``rows * cols`` elements in row-major order (nested input is
        flattened).
    dtype : np.dtype | None
        Optional element type; integers are promoted to float64.
    """

    __slots__ = ("rows", "cols", "data")

    def __init__(self, rows: int, cols: int, data, dtype: Optional[np.dtype] = None):
        if rows < 0 or cols < 0:
            raise ShapeMismatchError(f"negative shape ({rows}, {cols})")
        flat = as_scalar_array(data, dtype=dtype)
        if flat.size != rows * cols:
            raise ShapeMismatchError(
                f"{rows}x{cols} matrix needs {rows * cols} elements, got {flat.size}"
            )
        self.rows = int(rows)
        self.cols = int(cols)
        self.data = flat

    @classmethod
    def from_rows(cls, rows, dtype: Optional[np.dtype] = None) -> "Matrix":
        """Build a matrix from a nested sequence or a 2-D array."""
        arr = np.asarray(rows, dtype=dtype)
        if arr.size == 0:
            # [] and [[]] both mean "no elements"
            return cls(0, 0, [], dtype=dtype)
        if arr.ndim != 2:
            raise ShapeMismatchError(f"expected 2-D input, got {arr.ndim}-D")
        m, n = arr.shape
        return cls(m, n, arr, dtype=dtype)

    # ------------------------------------------------------------------
    # Shape helpers
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def require_square(self, allow_empty: bool = False) -> int:
        """
        Check the preconditions of the square-only routines and
        return ``n``.
        """
        if not allow_empty and (self.rows == 0 or self.cols == 0):
            raise EmptyMatrixError(
                f"operation undefined for empty {self.rows}x{self.cols} matrix"
            )
        if self.rows != self.cols:
            raise NonSquareMatrixError(
                f"operation requires a square matrix, got {self.rows}x{self.cols}"
            )
        return self.rows

    def _check_row(self, i: int) -> None:
        if not 0 <= i < self.rows:
            raise IndexOutOfRangeError(f"row {i} outside [0, {self.rows})")

    def _check_col(self, j: int) -> None:
        if not 0 <= j < self.cols:
            raise IndexOutOfRangeError(f"column {j} outside [0, {self.cols})")

    def grid(self) -> np.ndarray:
        """Writable ``(rows, cols)`` view of the flat storage."""
        return self.data.reshape(self.rows, self.cols)

    def to_numpy(self) -> np.ndarray:
        return self.grid().copy()

    # ------------------------------------------------------------------
    # Row access
    # ------------------------------------------------------------------
    def row(self, i: int) -> np.ndarray:
        """Writable view of row `i` (length `cols`)."""
        self._check_row(i)
        start = i * self.cols
        return self.data[start : start + self.cols]

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            self._check_row(i)
            self._check_col(j)
            return self.data[i * self.cols + j]
        return self.row(key)

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            i, j = key
            self._check_row(i)
            self._check_col(j)
            self.data[i * self.cols + j] = value
        else:
            self.row(key)[:] = value

    def swap_rows(self, i: int, j: int) -> None:
        """Exchange rows `i` and `j` in place."""
        self._check_row(i)
        self._check_row(j)
        if i == j:
            return
        G = self.grid()
        G[[i, j]] = G[[j, i]]

    def deep_copy(self) -> "Matrix":
        """New matrix with the same shape and an unaliased copy of `data`."""
        return Matrix(self.rows, self.cols, self.data, dtype=self.data.dtype)

    # ------------------------------------------------------------------
    # Determinants (implemented in densemat.determinant)
    # ------------------------------------------------------------------
    def laplace_determinant(self):
        from .determinant import laplace_determinant

        return laplace_determinant(self)

    def gaussian_elimination(self) -> Tuple[bool, "Matrix"]:
        from .determinant import gaussian_elimination

        return gaussian_elimination(self)

    def gaussian_determinant(self):
        from .determinant import gaussian_determinant

        return gaussian_determinant(self)

    def eigenvalues(self):
        self.require_square(allow_empty=True)
        raise NotImplementedError("eigenvalues are not implemented yet")

    def eigenvectors(self) -> "Matrix":
        self.require_square(allow_empty=True)
        raise NotImplementedError("eigenvectors are not implemented yet")

    # ------------------------------------------------------------------
    # Comparison / rendering
    # ------------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and bool(np.array_equal(self.data, other.data))
        )

    __hash__ = None

    def __str__(self) -> str:
        body = ", ".join(
            "[" + ", ".join(str(x) for x in self.row(i)) + "]"
            for i in range(self.rows)
        )
        return f"{{ rows: {self.rows}, cols: {self.cols}, data: [{body}] }}"

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.data.tolist()!r})"
