# tests for intersect_ray_with_plane

import numpy as np
import pytest
from numpy.testing import assert_allclose

from common import all_impls, sample_directions


impls = all_impls('intersect_ray_with_plane')

ORIGIN = np.zeros(3)
Z_UP = np.r_[0.0, 0.0, 1.0]


@impls
def test_hit_straight_down(impl, module_name):
    hit = impl([1.0, 2.0, 10.0], [0.0, 0.0, -2.0], ORIGIN, Z_UP)

    assert hit is not None
    time, point = hit
    assert_allclose(time, 5.0)
    assert_allclose(point, [1.0, 2.0, 0.0])


@impls
def test_normal_orientation_does_not_matter(impl, module_name):
    up = impl([0.0, 0.0, 3.0], [0.0, 0.0, -1.0], ORIGIN, Z_UP)
    down = impl([0.0, 0.0, 3.0], [0.0, 0.0, -1.0], ORIGIN, -Z_UP)

    assert up is not None and down is not None
    assert_allclose(up[0], down[0])
    assert_allclose(up[1], down[1])


@impls
def test_unnormalized_normal(impl, module_name):
    hit = impl([0.0, 0.0, 3.0], [0.0, 0.0, -1.0], ORIGIN, 25.0*Z_UP)

    assert hit is not None
    assert_allclose(hit[0], 3.0)


@impls
def test_behind(impl, module_name):
    assert impl([0.0, 0.0, 3.0], [0.0, 0.0, 1.0], ORIGIN, Z_UP) is None


@impls
def test_parallel(impl, module_name):
    # off the plane: infinite time
    assert impl([0.0, 0.0, 3.0], [1.0, 0.0, 0.0], ORIGIN, Z_UP) is None
    # within the plane: 0/0
    assert impl([0.0, 0.0, 0.0], [1.0, 0.0, 0.0], ORIGIN, Z_UP) is None


@impls
def test_zero_normal(impl, module_name):
    assert impl([0.0, 0.0, 3.0], [0.0, 0.0, -1.0], ORIGIN, ORIGIN) is None


@impls
def test_start_on_plane(impl, module_name):
    hit = impl([4.0, 5.0, 0.0], [0.0, 1.0, -1.0], ORIGIN, Z_UP)

    assert hit is not None
    assert_allclose(hit[0], 0.0)
    assert_allclose(hit[1], [4.0, 5.0, 0.0])


@impls
def test_point_on_ray_and_plane(impl, module_name):
    plane_pos = np.r_[0.3, -1.2, 0.7]
    plane_normal = np.r_[1.0, 2.0, -0.5]
    start = np.r_[2.0, 3.0, -4.0]

    hits = 0
    for direction in sample_directions(64):
        hit = impl(start, 3.0*direction, plane_pos, plane_normal)
        if hit is None:
            continue
        hits += 1
        time, point = hit
        assert time >= 0.0
        assert_allclose(point, start + time*3.0*direction)
        assert_allclose(np.dot(point - plane_pos, plane_normal), 0.0,
                        atol=1e-6)
    assert hits > 0


@impls
def test_idempotent(impl, module_name):
    args = ([1.0, 1.0, 1.0], [-1.0, -1.0, -1.0], ORIGIN, Z_UP)
    first = impl(*args)
    second = impl(*args)

    assert first[0] == second[0]
    assert np.array_equal(first[1], second[1])


@impls
def test_bad_dimensions(impl, module_name):
    with pytest.raises(ValueError):
        impl([0.0, 0.0], [0.0, 0.0, -1.0], ORIGIN, Z_UP)
    with pytest.raises(ValueError):
        impl(ORIGIN, [0.0, 0.0, -1.0], ORIGIN, np.eye(3))
