"""Test stacking, row and column selection and Kronecker products."""
import pytest
from exactmat import *


def test_union_of_rows(ring):
    mat = union_of_rows(ring, 2, [matrix(range(1, 5), 2, 2, ring), matrix([5, 6], 1, 2, ring)])
    assert (mat.to_list() == [[1, 2], [3, 4], [5, 6]])
    assert (union_of_rows(ring, 2, []) == zero_matrix(0, 2, ring))
    assert (union_of_rows(ring, 2, [zero_matrix(0, 2, ring), mat]) == mat)


def test_union_of_columns(ring):
    mat = union_of_columns(ring, 2, [matrix(range(1, 5), 2, 2, ring), matrix([5, 6], 2, 1, ring)])
    assert (mat.to_list() == [[1, 2, 5], [3, 4, 6]])
    assert (union_of_columns(ring, 3, []) == zero_matrix(3, 0, ring))


def test_union_errors():
    with pytest.raises(ShapeMismatchError):
        union_of_rows(ZZ, 2, [matrix(range(1, 4), 1, 3, ZZ)])
    with pytest.raises(ShapeMismatchError):
        union_of_columns(ZZ, 2, [matrix(range(1, 4), 3, 1, ZZ)])
    with pytest.raises(ShapeMismatchError):
        union_of_rows(ZZ, 1, [matrix([1], 1, 1, QQ)])


def test_certain_rows_and_columns(ring):
    mat = matrix(range(1, 7), 2, 3, ring)
    assert (certain_columns(mat, [1, 1, 0]).to_list() == [[2, 2, 1], [5, 5, 4]])
    assert (certain_columns(mat, []).shape == (2, 0))
    mat = matrix(range(2, 8), 3, 2, ring)
    assert (certain_rows(mat, [1, 1, 0]).to_list() == [[4, 5], [4, 5], [2, 3]])
    assert (certain_rows(mat, []).shape == (0, 2))


def test_certain_rows_out_of_range():
    mat = matrix(range(2, 8), 3, 2, ZZ)
    with pytest.raises(IndexOutOfBoundsError) as exc:
        certain_rows(mat, [0, 3])
    assert (exc.value.bound == 3)
    with pytest.raises(IndexOutOfBoundsError):
        certain_columns(mat, [-1])


def test_kronecker_product(ring):
    mat1 = matrix(range(1, 7), 2, 3, ring)
    mat2 = matrix(range(2, 8), 3, 2, ring)
    kron = kronecker_product(mat1, mat2)
    assert (kron.shape == (6, 6))
    assert (kron.to_list() == [[2, 3, 4, 6, 6, 9], [4, 5, 8, 10, 12, 15], [6, 7, 12, 14, 18, 21],
                               [8, 12, 10, 15, 12, 18], [16, 20, 20, 25, 24, 30], [24, 28, 30, 35, 36, 42]])
    assert (kronecker_product(identity_matrix(1, ring), mat2) == mat2)
    with pytest.raises(ShapeMismatchError):
        kronecker_product(mat1, QQ * mat2 if ring is ZZ else ZZ * mat2)


def test_convert_matrix(ring):
    mat = matrix(range(2, 8), 3, 2, ring)
    assert (convert_matrix_to_row(mat).to_list() == [[2, 3, 4, 5, 6, 7]])
    assert (convert_matrix_to_column(mat).to_list() == [[2], [4], [6], [3], [5], [7]])
