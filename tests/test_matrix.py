# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from fractions import Fraction

import numpy as np
import pytest

from densemat.errors import (
    IndexOutOfRangeError,
    NonSquareMatrixError,
    ShapeMismatchError,
)
from densemat.matrix import Matrix


def test_construction_length_checked():
    with pytest.raises(ShapeMismatchError):
        Matrix(2, 2, [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        Matrix(-1, 2, [])


def test_construction_copies_caller_buffer():
    buf = np.arange(4.0)
    A = Matrix(2, 2, buf)
    A[0, 0] = 42.0
    assert buf[0] == 0.0


def test_integer_data_promoted_to_float():
    A = Matrix(2, 2, [1, 2, 3, 4])
    assert A.data.dtype == np.float64


def test_complex_and_string_data_rejected():
    with pytest.raises(TypeError):
        Matrix(1, 1, [1 + 2j])
    with pytest.raises(TypeError):
        Matrix(1, 2, ["a", "b"])


def test_from_rows():
    A = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert A.shape == (2, 3)
    assert A[1, 0] == 4.0
    assert Matrix.from_rows([]).shape == (0, 0)
    with pytest.raises(ShapeMismatchError):
        Matrix.from_rows([1, 2, 3])


def test_row_is_contiguous_view():
    A = Matrix(3, 3, np.arange(9.0))
    np.testing.assert_array_equal(A.row(1), [3.0, 4.0, 5.0])
    A.row(1)[0] = -1.0
    assert A[1, 0] == -1.0
    np.testing.assert_array_equal(A[2], A.row(2))


def test_row_uses_column_stride_for_rectangular():
    A = Matrix(2, 3, np.arange(6.0))
    np.testing.assert_array_equal(A.row(1), [3.0, 4.0, 5.0])


@pytest.mark.parametrize("i", [-1, 3, 10])
def test_row_out_of_range(i):
    A = Matrix(3, 3, np.arange(9.0))
    with pytest.raises(IndexOutOfRangeError):
        A.row(i)
    with pytest.raises(IndexError):
        A[i, 0]


def test_column_out_of_range():
    A = Matrix(2, 3, np.arange(6.0))
    with pytest.raises(IndexOutOfRangeError):
        A[0, 3]


def test_swap_rows():
    A = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
    A.swap_rows(0, 2)
    np.testing.assert_array_equal(A.to_numpy(), [[5, 6], [3, 4], [1, 2]])


def test_swap_rows_twice_restores():
    rng = np.random.default_rng(0)
    A = Matrix(5, 5, rng.normal(size=25))
    B = A.deep_copy()
    for i, j in [(0, 4), (1, 3), (2, 2), (4, 0)]:
        B.swap_rows(i, j)
        B.swap_rows(i, j)
        assert B == A


def test_swap_rows_out_of_range():
    A = Matrix(2, 2, np.arange(4.0))
    with pytest.raises(IndexOutOfRangeError):
        A.swap_rows(0, 2)


def test_deep_copy_is_independent():
    A = Matrix(2, 2, [Fraction(1, 2), Fraction(1, 3), Fraction(1, 4), Fraction(1, 5)])
    B = A.deep_copy()
    assert B == A
    assert B.data is not A.data

    B[0, 0] = Fraction(7)
    assert A[0, 0] == Fraction(1, 2)
    A.swap_rows(0, 1)
    assert B[1, 1] == Fraction(1, 5)


def test_equality():
    A = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    assert A == Matrix.from_rows([[1, 2], [3, 4]])
    assert A != Matrix(2, 2, [1.0, 2.0, 3.0, 5.0])
    assert A != Matrix(1, 4, [1.0, 2.0, 3.0, 4.0])
    assert A != "not a matrix"


def test_str_groups_rows():
    A = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    assert str(A) == "{ rows: 2, cols: 2, data: [[1.0, 2.0], [3.0, 4.0]] }"
    assert repr(A) == "Matrix(rows=2, cols=2, data=[1.0, 2.0, 3.0, 4.0])"


def test_eigen_stubs_not_implemented():
    A = Matrix(2, 2, [1.0, 0.0, 0.0, 1.0])
    with pytest.raises(NotImplementedError):
        A.eigenvalues()
    with pytest.raises(NotImplementedError):
        A.eigenvectors()
    with pytest.raises(NonSquareMatrixError):
        Matrix(1, 2, [1.0, 2.0]).eigenvalues()
