"""Test the computation of row and column syzygies."""
import pytest
from exactmat import *


def test_syzygies_of_rows(ring, backend):
    mat = matrix(range(4, 10), 3, 2, ring)
    syz = syzygies_of_rows(mat, backend)
    assert (syz.to_list() == [[1, -2, 1]])
    assert ((syz * mat).is_zero())


def test_syzygies_of_columns(ring, backend):
    mat = matrix(range(4, 10), 3, 2, ring).transpose()
    syz = syzygies_of_columns(mat, backend)
    assert (syz.to_list() == [[1], [-2], [1]])
    assert ((mat * syz).is_zero())


def test_syzygies_full_rank(ring):
    syz = syzygies_of_rows(identity_matrix(3, ring))
    assert (syz.shape == (0, 3))
    assert (syzygies_of_columns(matrix(range(1, 7), 3, 2, ring)).shape == (2, 0))


@pytest.mark.timeout(15)
def test_syzygies_generate_kernel(ring):
    mat = matrix([1, 2, 2, 4, 3, 6, 0, 1], 4, 2, ring)
    syz = syzygies_of_rows(mat)
    assert (syz.nrows == mat.nrows - rank(mat))
    assert (rank(syz) == syz.nrows)
    assert ((syz * mat).is_zero())


def test_syzygies_of_zero_matrix(ring):
    syz = syzygies_of_rows(zero_matrix(2, 3, ring))
    assert (syz == identity_matrix(2, ring))
    assert (syzygies_of_rows(zero_matrix(0, 3, ring)).shape == (0, 0))
