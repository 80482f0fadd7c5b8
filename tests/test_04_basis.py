"""Test row and column bases and zero row/column detection."""
import pytest
from exactmat import *


def test_basis_of_rows_integers():
    mat = matrix(range(1, 10), 3, 3, ZZ)
    assert (basis_of_rows(mat).to_list() == [[1, 2, 3], [0, 3, 6]])


def test_basis_of_rows_rationals(backend):
    mat = matrix(range(1, 10), 3, 3, QQ)
    assert (basis_of_rows(mat, backend).to_list() == [[1, 0, -1], [0, 1, 2]])


def test_basis_of_columns():
    assert (basis_of_columns(matrix(range(1, 10), 3, 3, ZZ)).to_list() == [[1, 0], [1, 3], [1, 6]])
    assert (basis_of_columns(matrix(range(1, 10), 3, 3, QQ)).to_list() == [[1, 0], [0, 1], [-1, 2]])


@pytest.mark.timeout(15)
def test_basis_spans_same_space(ring, backend):
    mat = matrix([2, 4, 6, 1, 0, 3, 3, 4, 9, 0, 8, 6], 4, 3, ring)
    basis = basis_of_rows(mat, backend)
    assert (basis.nrows == rank(mat, backend))
    assert (basis_of_rows(basis, backend).nrows == basis.nrows)
    assert (decide_zero_rows(mat, basis, backend).is_zero())
    assert (decide_zero_rows(basis, mat, backend).is_zero())


def test_basis_of_zero_matrix(ring):
    assert (basis_of_rows(zero_matrix(3, 2, ring)).shape == (0, 2))
    assert (basis_of_columns(zero_matrix(3, 2, ring)).shape == (3, 0))


def test_zero_rows_and_columns(ring):
    mat = matrix([0, 2, 6, 0, 0, 0], 3, 2, ring)
    assert (zero_rows(mat) == [2])
    assert (zero_columns(mat) == [])
    assert (zero_columns(matrix([0, 2, 0, 0, 0, 0], 2, 3, ring)) == [0, 2])
    assert (zero_rows(zero_matrix(0, 2, ring)) == [])


def test_first_zero_row_and_column(ring):
    assert (first_zero_row(matrix(range(4, 10), 3, 2, ring)) == 3)
    assert (first_zero_row(matrix([1, 0, 0, 0, 0, 1], 3, 2, ring)) == 1)
    assert (first_zero_column(matrix([0, 2, 0, 0, 0, 0], 2, 3, ring)) == 0)
    assert (first_zero_column(matrix(range(1, 5), 2, 2, ring)) == 2)
