# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Element types a `Matrix` can hold.

Anything that behaves like a real number works: NumPy float dtypes, or
``object`` arrays of `fractions.Fraction` / `decimal.Decimal` when exact
arithmetic is wanted. Integer and boolean input is promoted to float64
because elimination divides in place.
"""

import logging
from typing import Any, Optional, Protocol, TypeVar

import numpy as np

logger = logging.getLogger(__name__)


class Scalar(Protocol):
    """Operations the determinant routines rely on."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...
    def __abs__(self) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Scalar)


def as_scalar_array(data, dtype: Optional[np.dtype] = None) -> np.ndarray:
    """
    Copy `data` into a flat ndarray with a supported element type.

    Raises
    ------
    TypeError : complex, string or otherwise non-numeric input.
    """
    try:
        arr = np.array(data, dtype=dtype, copy=True)
    except (TypeError, ValueError) as e:
        raise TypeError(f"matrix data is not numeric: {e}") from e

    kind = arr.dtype.kind
    if kind in "biu":
        logger.debug(f"promoting {arr.dtype} matrix data to float64")
        arr = arr.astype(np.float64)
    elif kind == "c":
        raise TypeError("complex matrices are not supported")
    elif kind not in "fO":
        raise TypeError(f"unsupported matrix dtype {arr.dtype}")
    return arr.reshape(-1)


def is_zero(x) -> bool:
    return x == 0


def zero_like(x):
    """Additive identity of the same type as `x`."""
    return type(x)(0)
