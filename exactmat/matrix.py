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
"""Immutable matrices over the exact rings ZZ and QQ

A RingMatrix stores its entries row-major in a tuple together with the ring
they belong to. There are no mutating methods: slicing, stacking, transposing
and arithmetic always return a fresh matrix. Matrices are hashable and compare
equal if they live over the same ring and have equal shape and entries.

Example:
    >>> from exactmat import matrix, ZZ
    >>> mat = matrix([1, 2, 3, 4, 5, 6], 2, 3, ZZ)
    >>> print(mat)
    [1   2   3]
    [4   5   6]
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy import sparse

from .exceptions import ShapeMismatchError, IndexOutOfBoundsError, ConversionError
from .rings import Ring, Element

LOG = logging.getLogger(__name__)


class RingMatrix:
    """Immutable matrix with entries in an exact ring

    Instances are usually created with the constructor functions of this module
    (matrix, identity_matrix, zero_matrix, ...) or returned by operations on
    other matrices.

    Args:
        entries (iterable):
            Flat, row-major list of nrows*ncols entries. Every entry is converted
            with ring.coerce.

        nrows, ncols (int):
            Non-negative matrix dimensions. Empty matrices (0 rows or 0 columns)
            are legal.

        ring (exactmat.rings.Ring):
            The ring of the entries, ZZ or QQ.
    """

    __slots__ = ('_ring', '_nrows', '_ncols', '_data')

    def __init__(self, entries: Iterable, nrows: int, ncols: int, ring: Ring):
        if not isinstance(ring, Ring):
            raise TypeError(f"Expected a ring (ZZ or QQ), got {type(ring).__name__}.")
        if nrows < 0 or ncols < 0:
            raise ShapeMismatchError(f"Matrix dimensions must be non-negative, got {nrows}x{ncols}.",
                                     actual=(nrows, ncols))
        data = tuple(ring.coerce(e) for e in entries)
        if len(data) != nrows * ncols:
            raise ShapeMismatchError(f"A {nrows}x{ncols} matrix needs {nrows * ncols} entries, got {len(data)}.",
                                     expected=nrows * ncols,
                                     actual=len(data))
        self._ring = ring
        self._nrows = nrows
        self._ncols = ncols
        self._data = data

    @classmethod
    def _from_trusted(cls, data: Tuple, nrows: int, ncols: int, ring: Ring) -> 'RingMatrix':
        """Wrap entries that are already elements of ring (no coercion, no checks)."""
        obj = object.__new__(cls)
        obj._ring = ring
        obj._nrows = nrows
        obj._ncols = ncols
        obj._data = data
        return obj

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence], ring: Ring, ncols: Optional[int] = None) -> 'RingMatrix':
        """Create a matrix from a list of rows

        Args:
            rows (list of lists):
                The matrix rows. All rows must have the same length.

            ring (exactmat.rings.Ring):
                ZZ or QQ.

            ncols (optional (int)):
                Number of columns. Only required if rows is empty.
        """
        rows = [list(r) for r in rows]
        if ncols is None:
            ncols = len(rows[0]) if rows else 0
        for i, r in enumerate(rows):
            if len(r) != ncols:
                raise ShapeMismatchError(f"Row {i} has {len(r)} entries, expected {ncols}.", expected=ncols, actual=len(r))
        return cls([e for r in rows for e in r], len(rows), ncols, ring)

    @classmethod
    def from_numpy(cls, array: np.ndarray, ring: Ring) -> 'RingMatrix':
        """Create a matrix from a two-dimensional numpy array.

        Integer and object arrays are converted exactly. Float entries are converted
        to rationals with bounded denominators (see exactmat.rings.float_to_rational).
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ShapeMismatchError(f"Expected a two-dimensional array, got {array.ndim} dimension(s).",
                                     expected=2,
                                     actual=array.ndim)
        rows, cols = array.shape
        return cls(array.flat, rows, cols, ring)

    @classmethod
    def from_sparse(cls, sparse_matrix: sparse.spmatrix, ring: Ring) -> 'RingMatrix':
        """Create a matrix from a scipy sparse matrix."""
        rows, cols = sparse_matrix.shape
        data = [ring.zero] * (rows * cols)
        # Convert to COO format for easy iteration
        coo = sparse.coo_matrix(sparse_matrix)
        for i, j, v in zip(coo.row, coo.col, coo.data):
            data[int(i) * cols + int(j)] += ring.coerce(v)
        return cls._from_trusted(tuple(data), rows, cols, ring)

    # --- Attributes ---

    @property
    def ring(self) -> Ring:
        return self._ring

    @property
    def nrows(self) -> int:
        return self._nrows

    @property
    def ncols(self) -> int:
        return self._ncols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._nrows, self._ncols

    # --- Element access ---

    def _check_row(self, i: int):
        if not 0 <= i < self._nrows:
            raise IndexOutOfBoundsError(f"Row index {i} out of range for a matrix with {self._nrows} rows.",
                                        index=i,
                                        bound=self._nrows)

    def _check_column(self, j: int):
        if not 0 <= j < self._ncols:
            raise IndexOutOfBoundsError(f"Column index {j} out of range for a matrix with {self._ncols} columns.",
                                        index=j,
                                        bound=self._ncols)

    def __getitem__(self, key) -> Element:
        i, j = key
        self._check_row(i)
        self._check_column(j)
        return self._data[i * self._ncols + j]

    def row(self, i: int) -> Tuple:
        self._check_row(i)
        return self._data[i * self._ncols:(i + 1) * self._ncols]

    def column(self, j: int) -> Tuple:
        self._check_column(j)
        return self._data[j::self._ncols]

    def entries(self) -> Tuple:
        """Flat, row-major tuple of all entries."""
        return self._data

    def to_list(self) -> List[List[Element]]:
        return [list(self._data[i * self._ncols:(i + 1) * self._ncols]) for i in range(self._nrows)]

    def to_numpy(self, as_float: bool = False) -> np.ndarray:
        """Convert to numpy array.

        Args:
            as_float (bool):
                If True, return a float array; otherwise an object array holding the
                exact ring elements.
        """
        if as_float:
            return np.array([float(v) for v in self._data], dtype=float).reshape(self.shape)
        result = np.empty(self.shape, dtype=object)
        for i in range(self._nrows):
            for j in range(self._ncols):
                result[i, j] = self._data[i * self._ncols + j]
        return result

    # --- Properties ---

    def is_zero(self) -> bool:
        return all(v == 0 for v in self._data)

    def is_one(self) -> bool:
        if self._nrows != self._ncols:
            return False
        n = self._ncols
        return all(v == (1 if k % (n + 1) == 0 else 0) for k, v in enumerate(self._data))

    def is_empty(self) -> bool:
        return self._nrows == 0 or self._ncols == 0

    def is_symmetric(self) -> bool:
        return self._nrows == self._ncols and self == self.transpose()

    # --- Derived matrices ---

    def transpose(self) -> 'RingMatrix':
        r, c = self._nrows, self._ncols
        data = tuple(self._data[i * c + j] for j in range(c) for i in range(r))
        return RingMatrix._from_trusted(data, c, r, self._ring)

    @property
    def T(self) -> 'RingMatrix':
        return self.transpose()

    def sub_matrix(self, start_row: int, end_row: int, start_col: int, end_col: int) -> 'RingMatrix':
        """Extract the block of rows start_row:end_row and columns start_col:end_col (half-open)."""
        if not 0 <= start_row <= end_row <= self._nrows:
            raise IndexOutOfBoundsError(f"Row range {start_row}:{end_row} invalid for {self._nrows} rows.",
                                        index=(start_row, end_row),
                                        bound=self._nrows)
        if not 0 <= start_col <= end_col <= self._ncols:
            raise IndexOutOfBoundsError(f"Column range {start_col}:{end_col} invalid for {self._ncols} columns.",
                                        index=(start_col, end_col),
                                        bound=self._ncols)
        c = self._ncols
        data = tuple(self._data[i * c + j] for i in range(start_row, end_row) for j in range(start_col, end_col))
        return RingMatrix._from_trusted(data, end_row - start_row, end_col - start_col, self._ring)

    # --- Arithmetic ---

    def _check_compatible(self, other: 'RingMatrix', operation: str):
        if other._ring is not self._ring:
            raise ShapeMismatchError(f"Cannot {operation} matrices over {self._ring} and {other._ring}.",
                                     expected=self._ring,
                                     actual=other._ring)

    def __add__(self, other):
        if not isinstance(other, RingMatrix):
            return NotImplemented
        self._check_compatible(other, 'add')
        if other.shape != self.shape:
            raise ShapeMismatchError(f"Cannot add a {self._nrows}x{self._ncols} and a {other._nrows}x{other._ncols} matrix.",
                                     expected=self.shape,
                                     actual=other.shape)
        data = tuple(a + b for a, b in zip(self._data, other._data))
        return RingMatrix._from_trusted(data, self._nrows, self._ncols, self._ring)

    def __sub__(self, other):
        if not isinstance(other, RingMatrix):
            return NotImplemented
        return self + (-other)

    def __neg__(self):
        return RingMatrix._from_trusted(tuple(-a for a in self._data), self._nrows, self._ncols, self._ring)

    def __mul__(self, other):
        if isinstance(other, RingMatrix):
            return self._matmul(other)
        if isinstance(other, Ring):
            return NotImplemented
        scalar = self._ring.coerce(other)
        return RingMatrix._from_trusted(tuple(a * scalar for a in self._data), self._nrows, self._ncols, self._ring)

    def __rmul__(self, other):
        # scalars commute in ZZ and QQ
        return self.__mul__(other)

    def __matmul__(self, other):
        if not isinstance(other, RingMatrix):
            return NotImplemented
        return self._matmul(other)

    def _matmul(self, other: 'RingMatrix') -> 'RingMatrix':
        self._check_compatible(other, 'multiply')
        if self._ncols != other._nrows:
            raise ShapeMismatchError(
                f"Matrix dimensions incompatible: {self._nrows}x{self._ncols} * {other._nrows}x{other._ncols}",
                expected=self._ncols,
                actual=other._nrows)
        zero = self._ring.zero
        columns = [other._data[j::other._ncols] for j in range(other._ncols)]
        data = []
        for i in range(self._nrows):
            row = self._data[i * self._ncols:(i + 1) * self._ncols]
            for col in columns:
                acc = zero
                for a, b in zip(row, col):
                    if a and b:
                        acc += a * b
                data.append(acc)
        return RingMatrix._from_trusted(tuple(data), self._nrows, other._ncols, self._ring)

    # --- Comparison and representation ---

    def __eq__(self, other) -> bool:
        if not isinstance(other, RingMatrix):
            return NotImplemented
        return other._ring is self._ring and other.shape == self.shape and other._data == self._data

    def __hash__(self) -> int:
        return hash((self._ring.symbol, self._nrows, self._ncols, self._data))

    def __repr__(self) -> str:
        return f"RingMatrix({self._nrows}x{self._ncols}, {self._ring.symbol}, {self.to_list()})"

    def __str__(self) -> str:
        if self.is_empty():
            return f"{self._nrows} by {self._ncols} empty matrix"
        cells = [[str(v) for v in row] for row in self.to_list()]
        widths = [max(len(cells[i][j]) for i in range(self._nrows)) for j in range(self._ncols)]
        return "\n".join("[" + "   ".join(cell.rjust(w) for cell, w in zip(row, widths)) + "]" for row in cells)


def check_same_ring(ring: Ring, mats: Iterable[RingMatrix], operation: str):
    """Raise ShapeMismatchError unless every matrix in mats is defined over ring."""
    for mat in mats:
        if mat.ring is not ring:
            raise ShapeMismatchError(f"{operation}: expected a matrix over {ring}, got one over {mat.ring}.",
                                     expected=ring,
                                     actual=mat.ring)


# =============================================================================
# Constructors
# =============================================================================


def matrix(entries: Iterable, nrows: int, ncols: int, ring: Ring) -> RingMatrix:
    """Construct a (nrows x ncols)-matrix over ring from a flat, row-major list of entries

    Example:
        >>> print(matrix(range(1, 7), 2, 3, ZZ))
        [1   2   3]
        [4   5   6]
    """
    return RingMatrix(entries, nrows, ncols, ring)


def identity_matrix(n: int, ring: Ring) -> RingMatrix:
    """Construct the (n x n)-identity matrix over ring."""
    data = tuple(ring.one if i == j else ring.zero for i in range(n) for j in range(n))
    return RingMatrix._from_trusted(data, n, n, ring)


def zero_matrix(nrows: int, ncols: int, ring: Ring) -> RingMatrix:
    """Construct the (nrows x ncols)-zero matrix over ring."""
    if nrows < 0 or ncols < 0:
        raise ShapeMismatchError(f"Matrix dimensions must be non-negative, got {nrows}x{ncols}.", actual=(nrows, ncols))
    return RingMatrix._from_trusted((ring.zero,) * (nrows * ncols), nrows, ncols, ring)


def row_vector(entries: Iterable, ring: Ring, ncols: Optional[int] = None) -> RingMatrix:
    """Construct a (1 x ncols)-matrix, ncols defaults to the number of entries."""
    entries = list(entries)
    return RingMatrix(entries, 1, len(entries) if ncols is None else ncols, ring)


def column_vector(entries: Iterable, ring: Ring, nrows: Optional[int] = None) -> RingMatrix:
    """Construct a (nrows x 1)-matrix, nrows defaults to the number of entries."""
    entries = list(entries)
    return RingMatrix(entries, len(entries) if nrows is None else nrows, 1, ring)


def diagonal_matrix(entries: Iterable, ring: Ring) -> RingMatrix:
    """Construct a square matrix with the given diagonal entries."""
    diag = [ring.coerce(e) for e in entries]
    n = len(diag)
    data = tuple(diag[i] if i == j else ring.zero for i in range(n) for j in range(n))
    return RingMatrix._from_trusted(data, n, n, ring)


def change_base_ring(ring: Ring, mat: RingMatrix) -> RingMatrix:
    """Rewrite the matrix mat over ring (if possible)

    The input matrix is left untouched. Rewriting a rational matrix with
    non-integral entries over ZZ fails.

    Example:
        >>> qmat = change_base_ring(QQ, mat)
        >>> change_base_ring(ZZ, qmat) == mat
        True

    Raises:
        ConversionError: If an entry has no exact representation in ring.
    """
    if mat.ring is ring:
        return mat
    try:
        data = tuple(ring.coerce(v) for v in mat.entries())
    except ConversionError as exc:
        raise ConversionError(f"Matrix cannot be rewritten over {ring}: {exc}", value=exc.value, ring=ring) from exc
    LOG.debug(f"Rewrote {mat.nrows}x{mat.ncols} matrix from {mat.ring} to {ring}.")
    return RingMatrix._from_trusted(data, mat.nrows, mat.ncols, ring)
