#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Common geometric transformations
"""

import numpy as np

from .errors import InvalidConstructionError
from .matrix import Matrix
from .transformation import LinearTransformation
from .vector import Vector


def rotation(theta: float) -> LinearTransformation:
    """Counter-clockwise rotation of 2-space by `theta` radians."""
    c, s = np.cos(theta), np.sin(theta)
    return LinearTransformation(Matrix([[c, -s], [s, c]]))


def shear(horizontal: bool, k: float) -> LinearTransformation:
    """Horizontal (x += k y) or vertical (y += k x) shear of 2-space."""
    if horizontal:
        return LinearTransformation(Matrix([[1, k], [0, 1]]))
    return LinearTransformation(Matrix([[1, 0], [k, 1]]))


def scaling(n: int, k: float) -> LinearTransformation:
    """Multiply every vector of n-space by k."""
    return LinearTransformation(Matrix.identity(n).multiply(k))


def _outer_over_norm(w: Vector) -> np.ndarray:
    # w w^T / (w . w)
    if w.is_zero_vector():
        raise InvalidConstructionError("The zero vector does not span a line.")
    u = w.to_standard_basis().components
    return np.outer(u, u) / w.dot_product(w)


def orthogonal_projection(w: Vector) -> LinearTransformation:
    """
    Find p = P x, the orthogonal projection of x onto the line spanned
    by w:  P = w w^T / (w . w).
    """
    return LinearTransformation(Matrix(_outer_over_norm(w)))


def reflection(w: Vector) -> LinearTransformation:
    """Reflection about the line spanned by w:  R = 2 P - I."""
    P = _outer_over_norm(w)
    return LinearTransformation(Matrix(2 * P - np.eye(P.shape[0])))
