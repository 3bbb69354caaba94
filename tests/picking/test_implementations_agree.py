# the compiled implementation must give the same answers as the reference one

import numpy as np
import pytest
from numpy.testing import assert_allclose

import raypick.picking as pk
from raypick.primitives import BoundingBox

from common import sample_directions


NUM_RAYS = 48


@pytest.fixture
def rays():
    rng = np.random.default_rng(42)
    starts = rng.uniform(-3.0, 3.0, size=(NUM_RAYS, 3))
    directions = 2.5*sample_directions(NUM_RAYS)
    return list(zip(starts, directions))


def _aimed_at(rays, point):
    # rays through a known inside point so that some of them hit
    return rays + [(start, point - start) for start, _ in rays[:8]]


def _assert_same(expected, result):
    if expected is None:
        assert result is None
        return
    assert result is not None
    assert_allclose(result[0], expected[0])
    assert_allclose(result[1], expected[1], atol=1e-12)


def test_plane(rays):
    plane_pos = np.r_[0.1, 0.2, -0.3]
    plane_normal = np.r_[0.5, -1.0, 2.0]
    for start, direction in rays:
        _assert_same(
            pk.numpy.intersect_ray_with_plane(
                start, direction, plane_pos, plane_normal),
            pk.numba.intersect_ray_with_plane(
                start, direction, plane_pos, plane_normal)
        )


def test_triangle(rays):
    vertices = np.array([[-2.0, -1.0, 0.5],
                         [2.0, -1.5, 0.0],
                         [0.0, 2.0, -0.5]])
    hits = 0
    for start, direction in _aimed_at(rays, vertices.mean(axis=0)):
        expected = pk.numpy.intersect_ray_with_triangle(
            start, direction, vertices)
        hits += expected is not None
        _assert_same(
            expected,
            pk.numba.intersect_ray_with_triangle(start, direction, vertices)
        )
    assert hits > 0


def test_quad(rays):
    vertices = np.array([[-2.0, -2.0, 0.0],
                         [2.0, -2.0, 0.0],
                         [2.0, 2.0, 0.0],
                         [-2.0, 2.0, 0.0]])
    hits = 0
    for start, direction in _aimed_at(rays, vertices.mean(axis=0)):
        expected = pk.numpy.intersect_ray_with_quad(
            start, direction, vertices)
        hits += expected is not None
        _assert_same(
            expected,
            pk.numba.intersect_ray_with_quad(start, direction, vertices)
        )
    assert hits > 0


def test_aabb(rays):
    box = BoundingBox([-1.0, -0.5, -2.0], [1.5, 0.5, 1.0])
    for start, direction in rays:
        expected = pk.numpy.intersect_ray_with_aabb(start, direction, box)
        result = pk.numba.intersect_ray_with_aabb(start, direction, box)
        if expected is None:
            assert result is None
        else:
            assert result == pytest.approx(expected)
