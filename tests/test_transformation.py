# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np
import pytest

from rowspace.basis import Basis, standard_basis
from rowspace.errors import (
    DimensionMismatchError,
    InvalidConstructionError,
    UnsupportedOperationError,
)
from rowspace.matrix import Matrix
from rowspace.space import VectorSpace, real_space
from rowspace.transformation import LinearTransformation
from rowspace.transformations import (
    orthogonal_projection,
    reflection,
    rotation,
    scaling,
    shear,
)
from rowspace.vector import Vector

logger = logging.getLogger(__name__)


@pytest.fixture
def diagonal_basis():
    return Basis([Vector([1, 1]), Vector([1, -1])])


def test_reflection_about_diagonal():
    T = reflection(Vector([1, 1]))
    assert T.matrix == Matrix([[0, 1], [1, 0]])
    assert T.transform(Vector([5, -3])) == Vector([-3, 5])


def test_scaling():
    T = scaling(3, 2.0)
    for v in (Vector([1, -2, 3.5]), Vector([0, 0, 0]), Vector([7, 1, -1])):
        assert T(v) == v.scalar_multiply(2)
    assert list(T(Vector([1, -2, 3.5])).components) == [2, -4, 7]


def test_rotation():
    T = rotation(math.pi / 2)
    np.testing.assert_allclose(T(Vector([1, 0])).components, [0, 1], atol=1e-12)
    np.testing.assert_allclose(T(Vector([0, 2])).components, [-2, 0], atol=1e-12)
    assert rotation(0).matrix.is_identity()


def test_shear():
    assert shear(True, 2)(Vector([1, 1])) == Vector([3, 1])
    assert shear(False, 2)(Vector([1, 1])) == Vector([1, 3])


def test_orthogonal_projection():
    assert orthogonal_projection(Vector([1, 0]))(Vector([3, 4])) == Vector([3, 0])
    P = orthogonal_projection(Vector([1, 1]))
    assert P(Vector([3, 1])) == Vector([2, 2])
    assert P.kernel().dimension() == 1
    assert P.image() == VectorSpace(Basis([Vector([1, 1])]))
    with pytest.raises(InvalidConstructionError):
        orthogonal_projection(Vector([0, 0]))
    with pytest.raises(InvalidConstructionError):
        reflection(Vector([0, 0, 0]))


def test_default_bases_are_standard():
    T = LinearTransformation(Matrix([[1, 2, 3], [4, 5, 6]]))
    assert T.domain_basis is standard_basis(3)
    assert T.target_basis is standard_basis(2)
    assert T.domain_space() == real_space(3)
    assert T.target_space().dimension() == 2
    assert T(Vector([1, 0, 1])) == Vector([4, 10])


def test_constructor_validation(diagonal_basis):
    M = Matrix([[1, 2], [3, 4]])
    with pytest.raises(DimensionMismatchError):
        LinearTransformation(M, standard_basis(3))
    with pytest.raises(DimensionMismatchError):
        LinearTransformation(M, None, standard_basis(3))
    line = Basis([Vector([1, 1])])
    with pytest.raises(InvalidConstructionError):
        LinearTransformation(M, line)
    with pytest.raises(InvalidConstructionError):
        LinearTransformation(M, diagonal_basis, line)
    with pytest.raises(TypeError):
        LinearTransformation([[1, 0], [0, 1]])


def test_transform_rejects_wrong_space():
    T = LinearTransformation(Matrix([[1, 2], [3, 4]]))
    with pytest.raises(DimensionMismatchError):
        T.transform(Vector([1, 2, 3]))


def test_transform_with_non_standard_bases(diagonal_basis):
    # swaps the two diagonal coordinates
    T = LinearTransformation.in_basis(Matrix([[0, 1], [1, 0]]), diagonal_basis)
    out = T(Vector([1, 0]))  # coordinates (1/2, 1/2) -> (1/2, 1/2)
    assert out.basis is diagonal_basis
    assert out == Vector([1, 0])
    assert T(Vector([1, 1])) == Vector([1, -1])


def test_kernel_and_image():
    T = LinearTransformation(Matrix([[1, 2], [2, 4]]))
    kernel = T.kernel()
    assert kernel.dimension() == 1
    assert kernel.contains(Vector([-2, 1]))
    assert kernel == VectorSpace(Basis([Vector([-2, 1])]))
    image = T.image()
    assert image.dimension() == 1
    assert image.contains(Vector([3, 6]))
    assert not image.contains(Vector([1, 0]))


def test_kernel_and_image_in_non_standard_bases(diagonal_basis):
    T = LinearTransformation(Matrix([[1, 2], [2, 4]]), diagonal_basis, diagonal_basis)
    # null space coordinates (-2, 1) read in the diagonal basis
    kernel = T.kernel()
    assert kernel.dimension() == 1
    assert kernel.contains(Vector([-1, -3]))
    assert not kernel.contains(Vector([-2, 1]))
    assert kernel == VectorSpace(Basis([Vector([-2, 1], diagonal_basis)]))
    for v in kernel.basis:
        assert T(v).is_zero_vector()
    # first column (1, 2) read in the diagonal basis
    image = T.image()
    assert image.dimension() == 1
    assert image == VectorSpace(Basis([Vector([3, -1])]))
    assert image.contains(Vector([1, 2], diagonal_basis))
    assert not image.contains(Vector([1, 2]))


def test_kernel_of_injective_map_is_zero_subspace():
    T = LinearTransformation(Matrix([[2, 1], [1, 1]]))
    kernel = T.kernel()
    assert kernel.dimension() == 0
    assert kernel.in_space() == 2
    assert kernel.contains(Vector([0, 0]))
    assert T.image() == real_space(2)


def test_image_of_zero_map():
    T = LinearTransformation(Matrix.zeros(2, 3))
    assert T.image().dimension() == 0
    assert T.kernel() == real_space(3)


def test_rank_nullity():
    M = Matrix(
        [
            [1, 2, 2, -5, 6],
            [-1, -2, -1, 1, -1],
            [4, 8, 5, -8, 9],
            [3, 6, 1, 5, -7],
        ]
    )
    T = LinearTransformation(M)
    assert T.kernel().dimension() + T.image().dimension() == M.column_count
    for v in T.kernel().basis:
        assert T(v).is_zero_vector()


def test_inverse():
    T = LinearTransformation(Matrix([[2, 1], [1, 1]]))
    assert T.is_isomorphism()
    inv = T.inverse()
    assert inv.matrix == Matrix([[1, -1], [-1, 2]])
    assert T.inverse() is inv
    v = Vector([1, 2])
    assert inv(T(v)) == v


def test_inverse_swaps_bases(diagonal_basis):
    T = LinearTransformation(Matrix([[1, 0], [0, 2]]), diagonal_basis, standard_basis(2))
    inv = T.inverse()
    assert inv.domain_basis is standard_basis(2)
    assert inv.target_basis is diagonal_basis


def test_non_invertible_has_no_inverse():
    T = LinearTransformation(Matrix([[1, 2], [2, 4]]))
    assert not T.is_isomorphism()
    assert T.inverse() is None
    assert T.inverse() is None
    assert LinearTransformation(Matrix([[1, 2, 3]])).inverse() is None


def test_change_of_basis(diagonal_basis):
    T = LinearTransformation(Matrix([[2, 0], [0, 3]]))
    similar = T.to_basis(diagonal_basis)
    logger.debug(f"\n{similar.matrix}")
    assert similar.matrix == Matrix([[2.5, -0.5], [-0.5, 2.5]])
    assert similar.domain_basis is diagonal_basis
    assert similar.target_basis is diagonal_basis
    for v in (Vector([1, 0]), Vector([0, 1]), Vector([3, -2])):
        assert similar(v) == T(v)
    assert similar.to_standard_basis().matrix == Matrix([[2, 0], [0, 3]])


def test_change_of_basis_errors(diagonal_basis):
    T = LinearTransformation(Matrix([[2, 0], [0, 3]]))
    assert T.to_basis(standard_basis(2)) is T
    with pytest.raises(DimensionMismatchError):
        T.to_basis(standard_basis(3))
    with pytest.raises(InvalidConstructionError):
        T.to_basis(Basis([Vector([1, 1])], in_space=2))
    mixed = LinearTransformation(Matrix([[1, 0], [0, 1]]), diagonal_basis, standard_basis(2))
    with pytest.raises(UnsupportedOperationError):
        mixed.to_basis(standard_basis(2))
