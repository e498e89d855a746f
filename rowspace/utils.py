# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional

import numpy as np

from .errors import InvalidConstructionError

# Every pivot, rank and consistency decision goes through is_zero().
# Elimination is exact by default; raising this turns it tolerant.
ZERO_TOL: float = 0.0
DEFAULT_PRECISION: int = 3


class _Unset:
    """Marker for a memo cell that has not been computed yet."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


def is_zero(x: float, tol: Optional[float] = None) -> bool:
    """Return True if x counts as zero. `tol` defaults to ZERO_TOL."""
    if tol is None:
        tol = ZERO_TOL
    return abs(x) <= tol


def all_zero(arr, tol: Optional[float] = None) -> bool:
    """is_zero() applied to every entry of `arr`."""
    if tol is None:
        tol = ZERO_TOL
    return bool(np.all(np.abs(arr) <= tol))


def as_float_array(data, ndim: int) -> np.ndarray:
    """
    Copy `data` into a fresh float64 array of the given rank.

    Raises TypeError for non-numeric input and InvalidConstructionError
    when the data is empty or cannot be shaped into `ndim` dimensions
    (ragged rows).
    """
    try:
        raw = np.asarray(data)
        # numpy parses numeric strings silently
        if raw.dtype.kind in "SUV":
            raise TypeError(f"entries must be real numbers, got {raw.dtype}")
        arr = np.array(raw, dtype=float)
    except ValueError as e:
        if "could not convert" in str(e):
            raise TypeError(f"entries must be real numbers: {e}") from e
        raise InvalidConstructionError(f"ragged input: {e}") from e
    if arr.ndim != ndim:
        raise InvalidConstructionError(
            f"expected {ndim}-dimensional data, got shape {arr.shape}"
        )
    if arr.size == 0:
        raise InvalidConstructionError("cannot build from empty data")
    return arr


def format_entry(x: float, precision: int = DEFAULT_PRECISION, grouping=False) -> str:
    """
    Render a single entry: a plain integer when it has no fractional
    part, otherwise a fixed-precision decimal.
    """
    x = float(x)
    sep = "," if grouping else ""
    if x.is_integer():
        return f"{int(x):{sep}d}"
    return f"{x:{sep}.{precision}f}"


def freeze(arr: np.ndarray) -> np.ndarray:
    """Mark an array read-only and return it."""
    arr.flags.writeable = False
    return arr
