# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Gauss-Jordan elimination on raw ndarrays.

Everything here works on plain float arrays so that Matrix, Vector and
Basis can share one engine without importing each other. Pivoting only
looks for a non-zero entry (no magnitude-based pivoting), and every zero
test goes through utils.is_zero so results stay exact for inputs whose
elimination steps are exactly representable.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .errors import MatrixIndexError, SingularOperationError
from .utils import is_zero

logger = logging.getLogger(__name__)


class EliminationWorkspace:
    """
    Mutable working copy of a matrix that supports the three elementary
    row operations. The input array is never modified.
    """

    def __init__(self, A: np.ndarray):
        self.A = np.array(A, dtype=float, copy=True)
        self.m, self.n = self.A.shape

    def _check_row(self, i: int, name: str = "i"):
        if not 0 <= i < self.m:
            logger.debug(f"{name}={i} not in [0, {self.m - 1}]")
            raise MatrixIndexError(i, "row")

    def swap_rows(self, i1: int, i2: int) -> None:
        self._check_row(i1, "i1")
        self._check_row(i2, "i2")
        self.A[[i1, i2]] = self.A[[i2, i1]]

    def divide_row(self, i: int, scalar: float) -> None:
        if is_zero(scalar):
            raise SingularOperationError("Cannot divide a row by 0.")
        self._check_row(i)
        self.A[i] /= scalar

    def subtract_row(self, target: int, multiple: float, source: int) -> None:
        """Row `target` -= `multiple` * row `source`."""
        self._check_row(target, "target")
        self._check_row(source, "source")
        self.A[target] -= multiple * self.A[source]


def rref(A: np.ndarray) -> Tuple[np.ndarray, List[int]]:
    """
    Return the reduced row-echelon form R of A and the
    pivot column list. R has the same shape as A.

    Rows are processed top to bottom with a column cursor j. While the
    entry at (i, j) is zero, the first lower row with a non-zero entry in
    column j is swapped up; if there is none, j moves right. The pivot row
    is then scaled to a leading 1 and column j is cleared in every other
    row.

    Parameters
    ----------
    A   : (m,n) ndarray

    Returns
    -------
    R       : (m,n) ndarray  (RREF)
    pivots  : list[int]      pivot column indices
    """
    if not isinstance(A, np.ndarray):
        raise TypeError("A must be a NumPy ndarray")

    W = EliminationWorkspace(A)
    R = W.A
    m, n = W.m, W.n
    pivots: List[int] = []

    j = 0
    for i in range(m):
        while j < n and is_zero(R[i, j]):
            for k in range(i + 1, m):
                if not is_zero(R[k, j]):
                    W.swap_rows(i, k)
                    break
            else:
                j += 1
        if j == n:
            # remaining rows are zero in the remaining columns
            break

        W.divide_row(i, R[i, j])
        for k in range(m):
            factor = R[k, j]
            if k != i and not is_zero(factor):
                W.subtract_row(k, factor, i)
        pivots.append(j)
        j += 1

    logger.debug(f"rref of {m}x{n} matrix, pivots={pivots}")
    return R, pivots


def pivot_columns(R: np.ndarray, augmented: bool = False) -> List[int]:
    """
    Column index of the leading entry of every non-zero row of the RREF R.

    When `augmented` is set the last column is ignored, so a trailing
    "0 = 1" row of an inconsistent system does not count as a pivot.
    """
    m, n = R.shape
    limit = n - 1 if augmented else n
    pivots: List[int] = []
    for i in range(m):
        for j in range(limit):
            if not is_zero(R[i, j]):
                pivots.append(j)
                break
    return pivots


def rank_from_rref(R: np.ndarray, augmented: bool = False) -> int:
    """Matrix rank is the number of pivot columns"""
    return len(pivot_columns(R, augmented=augmented))


def rank_elimination(A: np.ndarray, augmented: bool = False) -> int:
    return rank_from_rref(rref(A)[0], augmented=augmented)


def rref_is_consistent(R: np.ndarray) -> bool:
    """
    Treat the RREF R as an augmented system and report whether it has
    at least one solution.

    Zero rows collect at the bottom of an RREF, so scanning upward stops at
    the first row with a non-zero coefficient; a row of zero coefficients
    with a non-zero right-hand side reads "0 = 1".
    """
    m, n = R.shape
    if n == 1 or rank_from_rref(R, augmented=True) == m:
        return True
    for i in reversed(range(m)):
        if not all(is_zero(x) for x in R[i, : n - 1]):
            break
        if not is_zero(R[i, n - 1]):
            return False
    return True


def rref_solution(R: np.ndarray) -> Optional[np.ndarray]:
    """
    The unique solution of the augmented system whose RREF is R.

    Returns
    -------
    x : (n-1,) ndarray, or None when there is no solution or infinitely
        many of them.
    """
    m, n = R.shape
    if n == 1 or rank_from_rref(R, augmented=True) != n - 1:
        logger.debug("system has no unique solution (free variables)")
        return None
    if not rref_is_consistent(R):
        logger.debug("inconsistent system (no solution)")
        return None
    return R[: n - 1, n - 1].copy()


def is_consistent(A: np.ndarray, b: Optional[np.ndarray] = None) -> bool:
    """Consistency of the augmented matrix A, or of [A | b] if b is given."""
    if b is not None:
        A = np.column_stack([A, b])
    return rref_is_consistent(rref(A)[0])


def gaussian_solve(A: np.ndarray, b: np.ndarray) -> Optional[np.ndarray]:
    """
    Solve A x = b exactly by Gauss-Jordan elimination on [A | b].

    Returns None unless the system has exactly one solution.
    """
    return rref_solution(rref(np.column_stack([A, b]))[0])


def rref_nullspace(R: np.ndarray) -> np.ndarray:
    """
    Constructs a matrix N whose columns form a basis of the nullspace of
    the matrix whose RREF is R, one column per free variable in
    increasing column order.

    Returns
    -------
    N : (n, n-r) ndarray
        If R has full column rank the returned array has shape (n, 0).
    """
    m, n = R.shape
    pivots = pivot_columns(R)
    free = [j for j in range(n) if j not in pivots]
    N = np.zeros((n, len(free)))

    for k, f in enumerate(free):
        N[f, k] = 1.0
        # x_pivot = -R[row, f]; 0.0 - x keeps zeros unsigned
        for r, p in enumerate(pivots):
            N[p, k] = 0.0 - R[r, f]
    return N


def nullspace_basis_elimination(A: np.ndarray) -> np.ndarray:
    return rref_nullspace(rref(A)[0])


def inverse_elimination(A: np.ndarray) -> Optional[np.ndarray]:
    """
    Invert a square matrix by row reducing [A | I].

    Returns None when A is not square or the left block of the reduced
    matrix is not the identity (A is singular).
    """
    m, n = A.shape
    if m != n:
        return None
    R, _ = rref(np.hstack([A, np.eye(n)]))
    left = R[:, :n]
    for i in range(n):
        for j in range(n):
            if not is_zero(left[i, j] - (1.0 if i == j else 0.0)):
                logger.debug(f"{n}x{n} matrix is singular, no inverse")
                return None
    return R[:, n:].copy()
