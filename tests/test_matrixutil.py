import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from raypick import matrixutil as mutil


def test_unit_vector():
    assert_allclose(mutil.unit_vector([3.0, 4.0, 0.0]), [0.6, 0.8, 0.0])

    rows = mutil.unit_vector([[0.0, 0.0, 2.0], [0.0, -5.0, 0.0]])
    assert_allclose(rows, [[0.0, 0.0, 1.0], [0.0, -1.0, 0.0]])


def test_unit_vector_zero():
    assert_allclose(mutil.unit_vector(np.zeros(3)), np.zeros(3))

    rows = mutil.unit_vector([[0.0, 0.0, 0.0], [1.0, 1.0, 0.0]])
    assert_allclose(rows[0], np.zeros(3))
    assert_allclose(rows[1], np.r_[1.0, 1.0, 0.0]/np.sqrt(2.0))


def test_unit_vector_tiny():
    # only an exactly zero norm is left alone
    assert_allclose(mutil.unit_vector([1e-17, 0.0, 0.0]), [1.0, 0.0, 0.0])
    assert_allclose(mutil.unit_vector([[0.0, -3e-20, 4e-20]]),
                    [[0.0, -0.6, 0.8]])


def test_unit_vector_bad_dimensions():
    with pytest.raises(ValueError):
        mutil.unit_vector(np.zeros((2, 2, 3)))


def test_invert_matrix():
    mat = np.diag([2.0, 4.0, 0.5, 1.0])
    assert_allclose(mutil.invert_matrix(mat), np.diag([0.5, 0.25, 2.0, 1.0]))


def test_invert_singular_matrix(caplog):
    with caplog.at_level(logging.WARNING, logger='raypick.matrixutil'):
        res = mutil.invert_matrix(np.zeros((4, 4)))

    assert res.shape == (4, 4)
    assert np.all(np.isnan(res))
    assert 'singular' in caplog.text


def test_perspective():
    mat = mutil.perspective(0.5*np.pi, 2.0, 1.0, 3.0)

    expected = np.zeros((4, 4))
    expected[0, 0] = 0.5
    expected[1, 1] = 1.0
    expected[2, 2] = -2.0
    expected[2, 3] = -3.0
    expected[3, 2] = -1.0
    assert_allclose(mat, expected, atol=1e-15)

    # near and far planes go to -1 and 1 in NDC
    near = mat @ np.r_[0.0, 0.0, -1.0, 1.0]
    far = mat @ np.r_[0.0, 0.0, -3.0, 1.0]
    assert near[2]/near[3] == pytest.approx(-1.0)
    assert far[2]/far[3] == pytest.approx(1.0)


def test_perspective_infinite():
    mat = mutil.perspective(1.0, 1.5, 0.25)

    assert mat[2, 2] == -1.0
    assert mat[2, 3] == -0.5
    assert mat[3, 2] == -1.0
    assert_allclose(mutil.perspective(1.0, 1.5, 0.25, np.inf), mat)


def test_look_at():
    eye = np.r_[0.0, 0.0, 5.0]
    view = mutil.look_at(eye, np.zeros(3))

    assert_allclose(view @ np.r_[0.0, 0.0, 0.0, 1.0], [0.0, 0.0, -5.0, 1.0])
    assert_allclose(view @ np.r_[eye, 1.0], [0.0, 0.0, 0.0, 1.0])


def test_look_at_frame():
    eye = np.r_[1.0, 2.0, 3.0]
    target = np.r_[-2.0, 0.5, 1.0]
    view = mutil.look_at(eye, target, up=[0.0, 0.0, 1.0])

    rmat = view[:3, :3]
    assert_allclose(rmat @ rmat.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(rmat) == pytest.approx(1.0)

    # the target is straight ahead, down the local -Z
    local = view @ np.r_[target, 1.0]
    assert_allclose(local[:2], [0.0, 0.0], atol=1e-12)
    assert local[2] == pytest.approx(-np.linalg.norm(eye - target))


def test_look_at_same_point():
    assert_allclose(mutil.look_at([1.0, 1.0, 1.0], [1.0, 1.0, 1.0]),
                    np.eye(4))
