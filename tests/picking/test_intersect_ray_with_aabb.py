# tests for intersect_ray_with_aabb

from types import SimpleNamespace

import numpy as np
import pytest
from numpy.testing import assert_allclose

from raypick.primitives import BoundingBox

from common import all_impls


impls = all_impls('intersect_ray_with_aabb')

UNIT_BOX = BoundingBox([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])


@impls
def test_hit_front(impl, module_name):
    time = impl([0.5, 0.5, -5.0], [0.0, 0.0, 1.0], UNIT_BOX)

    assert time == pytest.approx(5.0)


@impls
def test_direction_scale(impl, module_name):
    time = impl([0.5, 0.5, -5.0], [0.0, 0.0, 2.0], UNIT_BOX)

    assert time == pytest.approx(2.5)


@impls
def test_hit_diagonal(impl, module_name):
    origin = np.r_[-1.0, -1.0, -1.0]
    direction = np.r_[1.0, 1.0, 1.0]
    time = impl(origin, direction, UNIT_BOX)

    assert time == pytest.approx(1.0)
    assert_allclose(origin + time*direction, UNIT_BOX.min)


@impls
def test_behind(impl, module_name):
    assert impl([0.5, 0.5, 5.0], [0.0, 0.0, 1.0], UNIT_BOX) is None


@impls
def test_inside(impl, module_name):
    # the entry time is behind the origin
    time = impl([0.5, 0.5, 0.5], [0.0, 0.0, 1.0], UNIT_BOX)

    assert time == pytest.approx(-0.5)


@impls
def test_zero_direction(impl, module_name):
    # inside: every slab is infinite
    time = impl([0.5, 0.5, 0.5], [0.0, 0.0, 0.0], UNIT_BOX)
    assert time == -np.inf

    # outside: never reaches the box
    assert impl([2.0, 0.5, 0.5], [0.0, 0.0, 0.0], UNIT_BOX) is None


@impls
def test_miss_sideways(impl, module_name):
    assert impl([2.0, 0.5, -5.0], [0.0, 0.0, 1.0], UNIT_BOX) is None


@impls
def test_slabs_do_not_overlap(impl, module_name):
    # x is crossed for t in [1, 2], y for t in [3, 4]
    assert impl([-1.0, 4.0, 0.5], [1.0, -1.0, 0.0], UNIT_BOX) is None

    # touching a corner
    time = impl([-1.0, 3.0, 0.5], [1.0, -1.0, 0.0], UNIT_BOX)
    assert time == pytest.approx(2.0)


@impls
def test_origin_on_slab_plane(impl, module_name):
    # 0/0 on the x slab
    assert impl([0.0, 0.5, -5.0], [0.0, 0.0, 1.0], UNIT_BOX) is None


@impls
def test_duck_typed_box(impl, module_name):
    box = SimpleNamespace(min=[-1.0, -1.0, -1.0], max=[1.0, 1.0, 1.0])
    time = impl([0.0, 0.0, 10.0], [0.0, 0.0, -1.0], box)

    assert time == pytest.approx(9.0)


@impls
def test_idempotent(impl, module_name):
    args = ([0.2, 0.3, -3.0], [0.1, 0.05, 1.0], UNIT_BOX)

    assert impl(*args) == impl(*args)


@impls
def test_bad_dimensions(impl, module_name):
    with pytest.raises(ValueError):
        impl([0.5, 0.5], [0.0, 0.0, 1.0], UNIT_BOX)

    box = SimpleNamespace(min=np.zeros(2), max=np.ones(3))
    with pytest.raises(ValueError):
        impl([0.5, 0.5, -5.0], [0.0, 0.0, 1.0], box)
