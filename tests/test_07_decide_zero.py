"""Test the reduction of rows and columns modulo row and column spaces."""
import pytest
from exactmat import *


def test_decide_zero_rows(mat1, mat2):
    reduced = decide_zero_rows(mat2, mat1)
    assert (reduced.shape == mat2.shape)
    if mat1.ring is ZZ:
        assert (reduced.to_list() == [[0, 1], [0, 1], [0, 1]])
        assert (safe_right_divide(mat2 - reduced, mat1).to_list() == [[0, -1, 1], [0, -2, 2], [0, -3, 3]])
    else:
        # over QQ the rows of mat1 span everything
        assert (reduced.is_zero())


def test_decide_zero_rows_self(mat1, backend):
    assert (decide_zero_rows(mat1, mat1, backend) == zero_matrix(3, 2, mat1.ring))


def test_decide_zero_rows_lattice():
    mat1 = matrix(range(1, 7), 3, 2, ZZ)
    mat3 = matrix([4, 6, 2, 2], 2, 2, ZZ)
    assert (decide_zero_rows(mat3, mat1).is_zero())
    assert (decide_zero_rows(mat1, mat3).to_list() == [[1, 0], [1, 0], [1, 0]])


def test_decide_zero_columns(mat1):
    mat = matrix([3, 1, 7, 1, 11, 1], 3, 2, mat1.ring)
    assert (decide_zero_columns(mat, mat1).is_zero())
    reduced = decide_zero_columns(matrix([1, 1, 1], 3, 1, mat1.ring), matrix([1, 0, 0], 3, 1, mat1.ring))
    assert (reduced.to_list() == [[0], [1], [1]])


def test_decide_zero_empty(ring):
    A = matrix(range(1, 7), 3, 2, ring)
    assert (decide_zero_rows(zero_matrix(0, 2, ring), A).shape == (0, 2))
    B = matrix(range(1, 5), 2, 2, ring)
    assert (decide_zero_rows(B, zero_matrix(0, 2, ring)) == B)


def test_decide_zero_errors():
    with pytest.raises(ShapeMismatchError):
        decide_zero_rows(matrix([1, 2], 1, 2, ZZ), matrix([1, 2, 3], 1, 3, ZZ))
    with pytest.raises(ShapeMismatchError):
        decide_zero_columns(matrix([1, 2], 2, 1, ZZ), matrix([1, 2, 3], 3, 1, ZZ))
    with pytest.raises(ShapeMismatchError):
        decide_zero_rows(matrix([1, 2], 1, 2, ZZ), matrix([1, 2], 1, 2, QQ))
