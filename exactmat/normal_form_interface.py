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
"""Normal form interface for exactmat.

Backend: FLINT (fast), sympy, or pure Python for reduced row echelon forms over QQ.
All FLINT-specific code is contained in this module.

The normal form of a matrix M is a pair (N, rank). N has the shape of M, spans
the same row space, its first rank rows are nonzero with strictly increasing
pivot columns and all other rows are zero. The form is canonical, so slicing
logic built on top of it is reproducible:

    ZZ: row-style Hermite normal form. Pivots are positive and the entries
        above a pivot are reduced into the range [0, pivot).
    QQ: reduced row echelon form. Pivots are one and all other entries in a
        pivot column are zero.

Example usage:
    >>> from exactmat.normal_form_interface import normal_form
    >>> hnf, rank = normal_form(matrix(range(9, 0, -1), 3, 3, ZZ))
    >>> print(hnf)
    [3   0   -3]
    [0   1    2]
    [0   0    0]
"""

import logging
from fractions import Fraction
from typing import List, Optional, Tuple

from sympy import Matrix as SympyMatrix, Rational

from .exceptions import BackendError, ShapeMismatchError, UnsolvableError
from .matrix import RingMatrix, check_same_ring
from .names import FLINT, SYMPY, PYTHON, BACKEND_PRIORITY
from .rings import ZZ, QQ

# Backend detection - ONLY place flint is imported in the entire exactmat package
try:
    from flint import fmpq, fmpq_mat
    FLINT_AVAILABLE = True
except ImportError:
    FLINT_AVAILABLE = False
    fmpq = None
    fmpq_mat = None

LOG = logging.getLogger(__name__)

avail_backends = {SYMPY, PYTHON}
if FLINT_AVAILABLE:
    avail_backends.add(FLINT)


def select_backend(backend: Optional[str] = None) -> str:
    """Select a backend for the computation of reduced row echelon forms

    If no backend is requested, the first available backend in the order 'flint',
    'sympy', 'python' is used. If the requested backend is not available (e.g. because
    python-flint is not installed), a warning is logged and the preferred available
    backend is returned instead.

    Example:
        backend = select_backend('sympy')

    Args:
        backend (optional (str)):
            A user preferred backend: 'flint', 'sympy' or 'python'.

    Returns:
        (str):
        The name of the selected backend.
    """
    preferred = next(b for b in BACKEND_PRIORITY if b in avail_backends)
    if backend:
        if backend in avail_backends:
            return backend
        LOG.warning(f"Selected backend {backend} not available. Using {preferred} instead.")
    return preferred


# =============================================================================
# Integers: Hermite normal form
# =============================================================================


def _xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (x, y, g) with x*a + y*b == g == gcd(a, b) and g >= 0."""
    # Maintain the invariants:
    #          x * a +      y * b ==      g
    #     next_x * a + next_y * b == next_g
    x, next_x = 1, 0
    y, next_y = 0, 1
    g, next_g = a, b
    while next_g:
        q = g // next_g
        x, next_x = next_x, x - q * next_x
        y, next_y = next_y, y - q * next_y
        g, next_g = next_g, g - q * next_g
    if g < 0:
        x, y, g = -x, -y, -g
    return x, y, g


def _hermite_rows(rows: List[List[int]], ncols: int) -> int:
    """Bring the integer rows into Hermite normal form in place and return the rank."""
    nrows = len(rows)
    pivot_row = 0
    for j in range(ncols):
        if pivot_row == nrows:
            break
        # gather the gcd of column j in pivot_row, clearing everything below
        for i in range(pivot_row + 1, nrows):
            b = rows[i][j]
            if b == 0:
                continue
            a = rows[pivot_row][j]
            if a == 0:
                rows[pivot_row], rows[i] = rows[i], rows[pivot_row]
                continue
            x, y, g = _xgcd(a, b)
            a_g, b_g = a // g, b // g
            top, bottom = rows[pivot_row], rows[i]
            rows[pivot_row] = [x * u + y * v for u, v in zip(top, bottom)]
            rows[i] = [a_g * v - b_g * u for u, v in zip(top, bottom)]
        pivot = rows[pivot_row][j]
        if pivot == 0:
            continue
        if pivot < 0:
            rows[pivot_row] = [-u for u in rows[pivot_row]]
            pivot = -pivot
        # reduce the entries above the pivot into [0, pivot)
        for i in range(pivot_row):
            q = rows[i][j] // pivot
            if q:
                rows[i] = [u - q * v for u, v in zip(rows[i], rows[pivot_row])]
        pivot_row += 1
    return pivot_row


def hermite_form(mat: RingMatrix) -> Tuple[RingMatrix, int]:
    """Compute the row-style Hermite normal form of an integer matrix

    Only unimodular row operations (swaps, extended-gcd combinations, subtracting
    integer multiples) are used, so the result spans the same lattice of rows.

    Args:
        mat (RingMatrix):
            A matrix over ZZ.

    Returns:
        (tuple):
        The Hermite normal form (same shape as mat) and the rank.
    """
    if mat.ring is not ZZ:
        raise BackendError(f"Hermite normal forms are computed over {ZZ}, got a matrix over {mat.ring}.")
    if mat.is_empty():
        return mat, 0
    rows = mat.to_list()
    rank = _hermite_rows(rows, mat.ncols)
    data = tuple(v for row in rows for v in row)
    return RingMatrix._from_trusted(data, mat.nrows, mat.ncols, ZZ), rank


# =============================================================================
# Rationals: reduced row echelon form
# =============================================================================


def _rref_python(mat: RingMatrix) -> Tuple[Tuple, int]:
    rows = mat.to_list()
    nrows = len(rows)
    pivot_row = 0
    for j in range(mat.ncols):
        if pivot_row == nrows:
            break
        found = next((i for i in range(pivot_row, nrows) if rows[i][j] != 0), None)
        if found is None:
            continue
        rows[pivot_row], rows[found] = rows[found], rows[pivot_row]
        pivot = rows[pivot_row][j]
        if pivot != 1:
            rows[pivot_row] = [u / pivot for u in rows[pivot_row]]
        for i in range(nrows):
            factor = rows[i][j]
            if i != pivot_row and factor != 0:
                rows[i] = [u - factor * v for u, v in zip(rows[i], rows[pivot_row])]
        pivot_row += 1
    return tuple(v for row in rows for v in row), pivot_row


def _rref_flint(mat: RingMatrix) -> Tuple[Tuple, int]:
    nrows, ncols = mat.shape
    fmat = fmpq_mat(nrows, ncols)
    for i in range(nrows):
        for j in range(ncols):
            v = mat[i, j]
            if v != 0:
                fmat[i, j] = fmpq(v.numerator, v.denominator)
    # rref() returns a new matrix, no need to copy first
    rref_mat, rk = fmat.rref()
    data = []
    for i in range(nrows):
        for j in range(ncols):
            v = rref_mat[i, j]
            data.append(Fraction(int(v.p), int(v.q)))
    return tuple(data), int(rk)


def _rref_sympy(mat: RingMatrix) -> Tuple[Tuple, int]:
    nrows, ncols = mat.shape
    sympy_mat = SympyMatrix(nrows, ncols, [Rational(v.numerator, v.denominator) for v in mat.entries()])
    rref_mat, pivot_cols = sympy_mat.rref()
    data = tuple(Fraction(int(v.p), int(v.q)) for v in rref_mat)
    return data, len(pivot_cols)


_RREF_BACKENDS = {
    FLINT: _rref_flint,
    SYMPY: _rref_sympy,
    PYTHON: _rref_python,
}


def rref(mat: RingMatrix, backend: Optional[str] = None) -> Tuple[RingMatrix, int]:
    """Compute the reduced row echelon form of a rational matrix

    Args:
        mat (RingMatrix):
            A matrix over QQ.

        backend (optional (str)):
            'flint', 'sympy' or 'python'. See select_backend.

    Returns:
        (tuple):
        The reduced row echelon form (same shape as mat) and the rank.
    """
    if mat.ring is not QQ:
        raise BackendError(f"Reduced row echelon forms are computed over {QQ}, got a matrix over {mat.ring}.")
    if mat.is_empty():
        return mat, 0
    backend = select_backend(backend)
    LOG.debug(f"Computing reduced row echelon form with backend {backend}.")
    data, rank = _RREF_BACKENDS[backend](mat)
    return RingMatrix._from_trusted(data, mat.nrows, mat.ncols, QQ), rank


def normal_form(mat: RingMatrix, backend: Optional[str] = None) -> Tuple[RingMatrix, int]:
    """Return the normal form and the rank of the matrix mat

    Over ZZ this is the Hermite normal form, over QQ the reduced row echelon form.

    Example:
        >>> normal_form(matrix(range(9, 0, -1), 3, 3, QQ))[0].to_list() == [[1, 0, -1], [0, 1, 2], [0, 0, 0]]
        True

    Args:
        mat (RingMatrix):
            A matrix over ZZ or QQ.

        backend (optional (str)):
            Backend for rational matrices ('flint', 'sympy' or 'python'). Integer
            matrices are always reduced by the built-in Hermite normal form.

    Returns:
        (tuple):
        The pair (N, rank).
    """
    if mat.ring.is_field:
        result = rref(mat, backend)
    else:
        result = hermite_form(mat)
    LOG.debug(f"Normal form of {mat.nrows}x{mat.ncols} matrix over {mat.ring}: rank {result[1]}.")
    return result


def rank(mat: RingMatrix, backend: Optional[str] = None) -> int:
    """Compute the rank of mat (number of nonzero rows of its normal form)."""
    return normal_form(mat, backend)[1]


# =============================================================================
# Generic linear system solver
# =============================================================================


def solve_linear_system(coefficients: RingMatrix, rhs: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Find some X with coefficients * X == rhs over the ring of the matrices

    The rows of [coefficients^T | I] are brought into normal form. Its rows with a
    nonzero left part form an echelon basis H of the row space of coefficients^T
    and the right part U records H = U * coefficients^T. Each column b of rhs is
    reduced against H pivot by pivot; the quotients q (which must be exact in the
    ring) give the solution column x = U^T * q.

    Args:
        coefficients (RingMatrix):
            Matrix A of shape (m x n).

        rhs (RingMatrix):
            Matrix B of shape (m x k) over the same ring.

    Returns:
        (RingMatrix):
        A matrix X of shape (n x k). If the system has several solutions, a
        deterministic particular solution is returned.

    Raises:
        ShapeMismatchError: If the rings differ or the row counts do not match.
        UnsolvableError: If no exact solution exists.
    """
    ring = coefficients.ring
    check_same_ring(ring, [rhs], 'solve_linear_system')
    if rhs.nrows != coefficients.nrows:
        raise ShapeMismatchError(
            f"Coefficient matrix has {coefficients.nrows} rows, right hand side has {rhs.nrows}.",
            expected=coefficients.nrows,
            actual=rhs.nrows)
    m, n = coefficients.shape
    k = rhs.ncols
    zero, one = ring.zero, ring.one
    aug_data = []
    for i in range(n):
        aug_data.extend(coefficients.column(i))
        aug_data.extend(one if i == j else zero for j in range(n))
    augmented = RingMatrix._from_trusted(tuple(aug_data), n, m + n, ring)
    reduced, _ = normal_form(augmented, backend)

    echelon = []
    for p in range(n):
        row = reduced.row(p)
        pivot_col = next((j for j in range(m) if row[j] != 0), None)
        if pivot_col is None:
            # remaining rows have a zero left part
            break
        echelon.append((pivot_col, row[:m], row[m:]))

    columns = []
    for c in range(k):
        vec = list(rhs.column(c))
        x = [zero] * n
        for pivot_col, h, u in echelon:
            if vec[pivot_col] == 0:
                continue
            q = ring.exact_quotient(vec[pivot_col], h[pivot_col])
            if q is None:
                break
            vec = [a - q * b for a, b in zip(vec, h)]
            x = [a + q * b for a, b in zip(x, u)]
        if any(v != 0 for v in vec):
            LOG.debug(f"Linear system with {m}x{n} coefficient matrix over {ring} has no solution.")
            raise UnsolvableError("Unable to solve linear system")
        columns.append(x)
    data = tuple(columns[c][i] for i in range(n) for c in range(k))
    return RingMatrix._from_trusted(data, n, k, ring)
