# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Linear subspaces of R^n.

A subspace W must contain the zero vector and be closed under addition
and scalar multiplication; here it is always described by a Basis.
"""

import functools

from .basis import Basis, standard_basis
from .vector import Vector


class VectorSpace:
    def __init__(self, basis: Basis):
        if not isinstance(basis, Basis):
            raise TypeError(f"expected a Basis, got {type(basis).__name__}")
        self._basis = basis

    @staticmethod
    def real_space(n: int) -> "VectorSpace":
        return real_space(n)

    @property
    def basis(self) -> Basis:
        return self._basis

    def dimension(self) -> int:
        """Number of vectors in the basis."""
        return self._basis.length()

    def in_space(self) -> int:
        return self._basis.in_space()

    def contains(self, v: Vector) -> bool:
        return self._basis.contains(v)

    def __contains__(self, v: Vector) -> bool:
        return self.contains(v)

    def __eq__(self, other: object) -> bool:
        """Equal when both describe the same subspace, whatever the bases."""
        if self is other:
            return True
        if not isinstance(other, VectorSpace):
            return NotImplemented
        return self._basis is other._basis or self._basis.same_subspace(other._basis)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._basis!r})"

    def __str__(self) -> str:
        return (
            f"{self.dimension()} dimensional subspace of {self.in_space()}-space "
            f"with basis: {self._basis}"
        )


@functools.lru_cache(maxsize=None)
def real_space(n: int) -> VectorSpace:
    """R^n itself, spanned by its standard basis (memoized)."""
    return VectorSpace(standard_basis(n))
