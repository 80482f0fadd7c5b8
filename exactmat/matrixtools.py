#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Block assembly of matrices: stacking, row/column selection and Kronecker products

These primitives build the augmented block matrices that the syzygy, divide and
zero reduction algorithms hand to the normal form engine.
"""

from typing import Iterable, List, Sequence

from .exceptions import ShapeMismatchError, IndexOutOfBoundsError
from .matrix import RingMatrix, check_same_ring, zero_matrix
from .rings import Ring


def union_of_rows(ring: Ring, ncols: int, mats: Sequence[RingMatrix]) -> RingMatrix:
    """Stack matrices vertically

    All matrices must be defined over ring and have ncols columns. They are stacked
    in list order. An empty list yields the (0 x ncols)-zero matrix.

    Example:
        >>> union_of_rows(ZZ, 3, [mat, mat])

    Args:
        ring (exactmat.rings.Ring):
            The common ring of the matrices.

        ncols (int):
            The common number of columns.

        mats (list of RingMatrix):
            The matrices to stack.

    Returns:
        (RingMatrix):
        A matrix with sum(m.nrows for m in mats) rows and ncols columns.
    """
    mats = list(mats)
    check_same_ring(ring, mats, 'union_of_rows')
    for k, mat in enumerate(mats):
        if mat.ncols != ncols:
            raise ShapeMismatchError(f"union_of_rows: matrix {k} has {mat.ncols} columns, expected {ncols}.",
                                     expected=ncols,
                                     actual=mat.ncols)
    if not mats:
        return zero_matrix(0, ncols, ring)
    data = tuple(v for mat in mats for v in mat.entries())
    return RingMatrix._from_trusted(data, sum(mat.nrows for mat in mats), ncols, ring)


def union_of_columns(ring: Ring, nrows: int, mats: Sequence[RingMatrix]) -> RingMatrix:
    """Stack matrices horizontally

    All matrices must be defined over ring and have nrows rows. An empty list yields
    the (nrows x 0)-zero matrix.

    Example:
        >>> union_of_columns(ZZ, 2, [mat, mat])
    """
    mats = list(mats)
    check_same_ring(ring, mats, 'union_of_columns')
    for k, mat in enumerate(mats):
        if mat.nrows != nrows:
            raise ShapeMismatchError(f"union_of_columns: matrix {k} has {mat.nrows} rows, expected {nrows}.",
                                     expected=nrows,
                                     actual=mat.nrows)
    if not mats:
        return zero_matrix(nrows, 0, ring)
    data = tuple(v for i in range(nrows) for mat in mats for v in mat.row(i))
    return RingMatrix._from_trusted(data, nrows, sum(mat.ncols for mat in mats), ring)


def _check_indices(indices: Iterable[int], bound: int, kind: str) -> List[int]:
    indices = list(indices)
    for k in indices:
        if not 0 <= k < bound:
            raise IndexOutOfBoundsError(f"{kind} index {k} out of range [0, {bound}).", index=k, bound=bound)
    return indices


def certain_rows(mat: RingMatrix, indices: Iterable[int]) -> RingMatrix:
    """Return the matrix whose i-th row is row indices[i] of mat

    Indices may repeat and need not be sorted. An empty index list yields the
    (0 x mat.ncols)-zero matrix.

    Raises:
        IndexOutOfBoundsError: If an index lies outside of [0, mat.nrows).
    """
    indices = _check_indices(indices, mat.nrows, 'Row')
    data = tuple(v for i in indices for v in mat.row(i))
    return RingMatrix._from_trusted(data, len(indices), mat.ncols, mat.ring)


def certain_columns(mat: RingMatrix, indices: Iterable[int]) -> RingMatrix:
    """Return the matrix whose j-th column is column indices[j] of mat

    Indices may repeat and need not be sorted. An empty index list yields the
    (mat.nrows x 0)-zero matrix.

    Raises:
        IndexOutOfBoundsError: If an index lies outside of [0, mat.ncols).
    """
    indices = _check_indices(indices, mat.ncols, 'Column')
    data = tuple(mat[i, j] for i in range(mat.nrows) for j in indices)
    return RingMatrix._from_trusted(data, mat.nrows, len(indices), mat.ring)


def kronecker_product(mat1: RingMatrix, mat2: RingMatrix) -> RingMatrix:
    """Return the Kronecker (tensor) product of mat1 and mat2

    The result has shape (r1*r2, c1*c2) and the entry at (i1*r2 + i2, j1*c2 + j2)
    equals mat1[i1, j1] * mat2[i2, j2].
    """
    check_same_ring(mat1.ring, [mat2], 'kronecker_product')
    r1, c1 = mat1.shape
    r2, c2 = mat2.shape
    data = tuple(mat1[i1, j1] * mat2[i2, j2]
                 for i1 in range(r1)
                 for i2 in range(r2)
                 for j1 in range(c1)
                 for j2 in range(c2))
    return RingMatrix._from_trusted(data, r1 * r2, c1 * c2, mat1.ring)


def convert_matrix_to_row(mat: RingMatrix) -> RingMatrix:
    """Unfold mat row-wise into a single row."""
    return union_of_columns(mat.ring, 1, [certain_rows(mat, [i]) for i in range(mat.nrows)])


def convert_matrix_to_column(mat: RingMatrix) -> RingMatrix:
    """Unfold mat column-wise into a single column."""
    return union_of_rows(mat.ring, 1, [certain_columns(mat, [j]) for j in range(mat.ncols)])
