"""Test the normal form engine and the backends for rational matrices."""
import logging
import pytest
from fractions import Fraction
from exactmat import *
from exactmat.normal_form_interface import _xgcd


def test_xgcd():
    for a, b in [(9, 6), (-3, -6), (0, 5), (7, 0), (-4, 10), (1, 1)]:
        x, y, g = _xgcd(a, b)
        assert (g >= 0)
        assert (x * a + y * b == g)
        assert (a % g == 0 if g else a == 0)


def test_hermite_form():
    hnf, rk = hermite_form(matrix(range(9, 0, -1), 3, 3, ZZ))
    assert (hnf.to_list() == [[3, 0, -3], [0, 1, 2], [0, 0, 0]])
    assert (rk == 2)
    hnf, rk = hermite_form(matrix([4, 6], 2, 1, ZZ))
    assert (hnf.to_list() == [[2], [0]])
    assert (rk == 1)


def test_hermite_form_canonical():
    hnf, rk = hermite_form(matrix([-2, 4, 1, 0, 5, 3, 0, 0, 7], 3, 3, ZZ))
    assert (rk == 3)
    for i in range(rk):
        pivot_col = next(j for j in range(3) if hnf[i, j] != 0)
        pivot = hnf[i, pivot_col]
        assert (pivot > 0)
        for k in range(i):
            assert (0 <= hnf[k, pivot_col] < pivot)
    # same row lattice
    mat = matrix([-2, 4, 1, 0, 5, 3, 0, 0, 7], 3, 3, ZZ)
    assert (right_divide(hnf, mat))
    assert (right_divide(mat, hnf))


def test_rref(backend):
    reduced, rk = rref(matrix(range(9, 0, -1), 3, 3, QQ), backend)
    assert (reduced.to_list() == [[1, 0, -1], [0, 1, 2], [0, 0, 0]])
    assert (rk == 2)
    assert (all(isinstance(v, Fraction) for v in reduced.entries()))


@pytest.mark.timeout(15)
def test_rref_backends_agree(backend):
    mat = matrix([Fraction(1, 2), 3, 0, -1, 2, Fraction(2, 3), 6, 0, 5, 1, -3, 4], 3, 4, QQ)
    reference, rk_ref = rref(mat, PYTHON)
    reduced, rk = rref(mat, backend)
    assert (reduced == reference)
    assert (rk == rk_ref == 3)


def test_normal_form_dispatch(ring, backend):
    mat = matrix(range(1, 10), 3, 3, ring)
    reduced, rk = normal_form(mat, backend)
    assert (reduced.ring is ring)
    assert (rk == rank(mat, backend) == 2)
    if ring is ZZ:
        assert (reduced == hermite_form(mat)[0])
    else:
        assert (reduced.to_list() == [[1, 0, -1], [0, 1, 2], [0, 0, 0]])


def test_normal_form_empty(ring):
    reduced, rk = normal_form(zero_matrix(0, 3, ring))
    assert (reduced.shape == (0, 3))
    assert (rk == 0)


def test_wrong_ring():
    with pytest.raises(BackendError):
        hermite_form(matrix([1], 1, 1, QQ))
    with pytest.raises(BackendError):
        rref(matrix([1], 1, 1, ZZ))


def test_select_backend(caplog):
    assert (select_backend() in avail_backends)
    assert (select_backend(PYTHON) == PYTHON)
    with caplog.at_level(logging.WARNING):
        assert (select_backend('magma') == select_backend())
    assert ('not available' in caplog.text)


def test_disable_logger(caplog):
    with caplog.at_level(logging.WARNING):
        with DisableLogger():
            select_backend('magma')
    assert (caplog.text == '')


@pytest.mark.timeout(15)
def test_solve_linear_system(ring, backend):
    A = matrix(range(1, 7), 3, 2, ring)
    B = matrix(range(2, 8), 3, 2, ring)
    X = solve_linear_system(A, B, backend)
    assert (X.to_list() == [[0, -1], [1, 2]])
    assert (A * X == B)


def test_solve_linear_system_underdetermined(ring):
    A = matrix([1, 2, 3, 2, 4, 6], 2, 3, ring)
    B = matrix([2, 4], 2, 1, ring)
    X = solve_linear_system(A, B)
    assert (X.shape == (3, 1))
    assert (A * X == B)


def test_solve_linear_system_unsolvable():
    with pytest.raises(UnsolvableError):
        solve_linear_system(matrix([2, 0, 0, 2], 2, 2, ZZ), matrix([1, 0], 2, 1, ZZ))
    with pytest.raises(UnsolvableError):
        solve_linear_system(matrix([1, 1], 2, 1, QQ), matrix([1, 2], 2, 1, QQ))
    with pytest.raises(ShapeMismatchError):
        solve_linear_system(matrix([1, 1], 2, 1, QQ), matrix([1, 2, 3], 3, 1, QQ))
