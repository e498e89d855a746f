# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from rowspace.elimination import (
    EliminationWorkspace,
    gaussian_solve,
    inverse_elimination,
    is_consistent,
    nullspace_basis_elimination,
    pivot_columns,
    rank_elimination,
    rref,
)
from rowspace.errors import MatrixIndexError, SingularOperationError

TEST_ITERATIONS = 50
logger = logging.getLogger(__name__)

SCENARIO_ONE = np.array(
    [
        [1, 2, 2, -5, 6],
        [-1, -2, -1, 1, -1],
        [4, 8, 5, -8, 9],
        [3, 6, 1, 5, -7],
    ],
    dtype=float,
)


def random_integer_matrix(rng, m, n, low=-5, high=6):
    return rng.integers(low, high, size=(m, n)).astype(float)


def test_rref_known_matrix():
    R, pivots = rref(SCENARIO_ONE)
    logger.debug(f"RREF\n{R}\n")
    expected = np.array(
        [
            [1, 2, 0, 3, -4],
            [0, 0, 1, -4, 5],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
        ],
        dtype=float,
    )
    np.testing.assert_array_equal(R, expected)
    assert pivots == [0, 2]


def test_rref_does_not_modify_input():
    A = SCENARIO_ONE.copy()
    rref(A)
    np.testing.assert_array_equal(A, SCENARIO_ONE)


def test_rref_rejects_non_ndarray():
    with pytest.raises(TypeError):
        rref([[1, 2], [3, 4]])


def test_rref_idempotent():
    rng = np.random.default_rng(0)
    for _ in range(TEST_ITERATIONS):
        A = random_integer_matrix(rng, 6, 8)
        R1, piv1 = rref(A)
        R2, piv2 = rref(R1)  # RREF of an RREF is itself
        np.testing.assert_array_equal(R1, R2)
        assert piv1 == piv2


def test_rref_pivot_structure():
    rng = np.random.default_rng(1)
    for _ in range(TEST_ITERATIONS):
        A = random_integer_matrix(rng, 5, 7)
        R, pivots = rref(A)
        assert pivots == sorted(set(pivots))
        assert pivot_columns(R) == pivots
        # each pivot column should be e_i
        for r, c in enumerate(pivots):
            ei = np.zeros_like(R[:, c])
            ei[r] = 1
            np.testing.assert_array_equal(R[:, c], ei)


def test_rank_agreement():
    rng = np.random.default_rng(2)
    for _ in range(100):
        A = random_integer_matrix(rng, 8, 6)
        assert rank_elimination(A) == np.linalg.matrix_rank(A)


def test_rank_never_exceeds_shape():
    rng = np.random.default_rng(3)
    for m, n in [(2, 7), (7, 2), (4, 4)]:
        A = random_integer_matrix(rng, m, n)
        assert rank_elimination(A) <= min(m, n)


def test_rank_augmented_ignores_last_column():
    A = np.array([[1, 1, 1], [1, 1, 2]], dtype=float)
    assert rank_elimination(A) == 2
    assert rank_elimination(A, augmented=True) == 1


def test_gaussian_solve_unique():
    A = np.array([[2, 8, 4], [2, 5, 1], [4, 10, -1]], dtype=float)
    b = np.array([2, 5, 1], dtype=float)
    np.testing.assert_array_equal(gaussian_solve(A, b), [11, -4, 3])


def test_gaussian_solve_no_unique_solution():
    A = np.array([[1, 1], [1, 1]], dtype=float)
    assert gaussian_solve(A, np.array([1.0, 2.0])) is None  # inconsistent
    assert gaussian_solve(A, np.array([1.0, 1.0])) is None  # free variable


def test_is_consistent():
    A = np.array([[1, 1], [2, 2]], dtype=float)
    assert is_consistent(A, np.array([1.0, 2.0]))
    assert not is_consistent(A, np.array([1.0, 3.0]))


def test_nullspace_basis_elimination():
    rng = np.random.default_rng(4)
    A = random_integer_matrix(rng, 6, 10)  # rank <= 6
    N = nullspace_basis_elimination(A)
    assert np.allclose(A @ N, 0, atol=1e-10)
    # Assert that we are satisfying the rank nullity theorem
    assert N.shape[1] == A.shape[1] - np.linalg.matrix_rank(A)


def test_nullspace_known_matrix():
    N = nullspace_basis_elimination(SCENARIO_ONE)
    expected = np.array(
        [
            [-2, -3, 4],
            [1, 0, 0],
            [0, 4, -5],
            [0, 1, 0],
            [0, 0, 1],
        ],
        dtype=float,
    )
    np.testing.assert_array_equal(N, expected)
    np.testing.assert_array_equal(SCENARIO_ONE @ N, np.zeros((4, 3)))


def test_nullspace_full_column_rank_is_empty():
    N = nullspace_basis_elimination(np.eye(3))
    assert N.shape == (3, 0)


def test_inverse_elimination():
    A = np.array([[2, 1], [1, 1]], dtype=float)
    np.testing.assert_array_equal(inverse_elimination(A), [[1, -1], [-1, 2]])

    rng = np.random.default_rng(5)
    for _ in range(TEST_ITERATIONS):
        A = random_integer_matrix(rng, 5, 5)
        if np.linalg.matrix_rank(A) < 5:
            continue
        inv = inverse_elimination(A)
        np.testing.assert_allclose(A @ inv, np.eye(5), atol=1e-10)


def test_inverse_elimination_absent():
    assert inverse_elimination(np.array([[1, 2], [2, 4]], dtype=float)) is None
    assert inverse_elimination(np.ones((2, 3))) is None


def test_workspace_row_operations():
    W = EliminationWorkspace(np.array([[1, 2], [3, 4]], dtype=float))
    W.swap_rows(0, 1)
    np.testing.assert_array_equal(W.A, [[3, 4], [1, 2]])
    W.divide_row(1, 2)
    np.testing.assert_array_equal(W.A, [[3, 4], [0.5, 1]])
    W.subtract_row(0, 6, 1)
    np.testing.assert_array_equal(W.A, [[0, -2], [0.5, 1]])


def test_workspace_rejects_bad_input():
    W = EliminationWorkspace(np.eye(2))
    with pytest.raises(SingularOperationError):
        W.divide_row(0, 0)
    with pytest.raises(ZeroDivisionError):
        W.divide_row(0, 0.0)
    with pytest.raises(MatrixIndexError):
        W.swap_rows(0, 2)
    with pytest.raises(MatrixIndexError):
        W.subtract_row(-1, 1, 0)
    np.testing.assert_array_equal(W.A, np.eye(2))
