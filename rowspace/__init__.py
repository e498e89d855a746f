# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
rowspace
========

Exact Gauss-Jordan linear algebra over the reals: vectors, matrices,
bases, subspaces and linear transformations, all built on one
reduced-row-echelon-form engine.

Public API
~~~~~~~~~~
- Values
    - `Vector`, `Matrix`
- Subspaces
    - `Basis`, `VectorSpace`, `standard_basis`, `real_space`
- Transformations
    - `LinearTransformation`
    - `rotation`, `reflection`, `shear`, `scaling`,
      `orthogonal_projection`
- Errors
    - `LinalgError` and its subclasses

The raw-ndarray engine lives in `rowspace.elimination` and is **not**
considered part of the stable interface.

Example
-------
>>> from rowspace import Matrix
>>> M = Matrix([[2, 8, 4, 2], [2, 5, 1, 5], [4, 10, -1, 1]])
>>> print(M.find_solution())
<11, -4, 3>
"""

from importlib.metadata import version as _pkg_version

from .basis import Basis, standard_basis
from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidConstructionError,
    LinalgError,
    MatrixIndexError,
    SingularOperationError,
    UnsupportedOperationError,
    VectorIndexError,
)
from .matrix import Matrix
from .space import VectorSpace, real_space
from .transformation import LinearTransformation

# ---------------------------------------------------------------------
# Re-export the high-level names users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .transformations import (
    orthogonal_projection,
    reflection,
    rotation,
    scaling,
    shear,
)
from .vector import Vector, standard_vector, zero_vector

__all__ = [
    "Vector",
    "zero_vector",
    "standard_vector",
    "Matrix",
    "Basis",
    "standard_basis",
    "VectorSpace",
    "real_space",
    "LinearTransformation",
    "rotation",
    "reflection",
    "shear",
    "scaling",
    "orthogonal_projection",
    "LinalgError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "MatrixIndexError",
    "VectorIndexError",
    "InvalidConstructionError",
    "SingularOperationError",
    "UnsupportedOperationError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show rowspace”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see debug
# records only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
