# -*- coding: utf-8 -*-
# =============================================================================
# This file is part of raypick. For details on dowloading the source,
# see the file COPYING.
#
# Please also see the file LICENSE.
#
# This program is free software; you can redistribute it and/or modify it under
# the terms of the GNU Lesser General Public License (as published by the Free
# Software Foundation) version 2.1 dated February 1999.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the IMPLIED WARRANTY OF MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the terms and conditions of the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program (see file LICENSE); if not, write to
# the Free Software Foundation, Inc., 59 Temple Place, Suite 330,
# Boston, MA 02111-1307 USA or visit <http://www.gnu.org/licenses/>.
# =============================================================================

"""Picking module implementation using numba.

Currently, this implementation contains code for the following functions:

- intersect_ray_with_plane
- intersect_ray_with_triangle
- intersect_ray_with_quad
- intersect_ray_with_aabb

Ray construction is only provided by the numpy implementation.

The kernels return the ray time, NaN meaning no hit, and write the hit point
into an output array. The interface functions validate the arguments and
build the results.
"""
import math

import numba
import numpy as np

from . import constants as cnst
from .definitions import pk_api
from .pk_numpy import _as_float_array


# error_model='numpy' keeps the IEEE754 semantics of float division: a divide
# by zero produces inf or NaN instead of raising ZeroDivisionError.
def pk_jit(fn):
    return numba.njit(fn, nogil=True, error_model='numpy')


@pk_jit
def _dot3(a0, a1, a2, b0, b1, b2):
    return a0*b0 + a1*b1 + a2*b2


@pk_jit
def _cross3(a0, a1, a2, b0, b1, b2):
    return a1*b2 - a2*b1, a2*b0 - a0*b2, a0*b1 - a1*b0


@pk_jit
def _plane_kernel(ray_start, ray_direction,
                  p0, p1, p2, n0, n1, n2, out):
    wp = _dot3(p0 - ray_start[0], p1 - ray_start[1], p2 - ray_start[2],
               n0, n1, n2)
    vp = _dot3(ray_direction[0], ray_direction[1], ray_direction[2],
               n0, n1, n2)
    time = wp / vp

    # NaN fails the comparison, inf is rejected explicitly
    if not (time >= 0.0) or math.isinf(time):
        return cnst.no_hit

    for i in range(3):
        out[i] = ray_start[i] + ray_direction[i]*time
    return time


@pk_jit
def _triangle_kernel(ray_start, ray_direction, vertices, out):
    v = vertices
    n0, n1, n2 = _cross3(v[1, 0] - v[0, 0], v[1, 1] - v[0, 1],
                         v[1, 2] - v[0, 2],
                         v[2, 0] - v[0, 0], v[2, 1] - v[0, 1],
                         v[2, 2] - v[0, 2])

    time = _plane_kernel(ray_start, ray_direction,
                         v[0, 0], v[0, 1], v[0, 2], n0, n1, n2, out)
    if math.isnan(time):
        return time

    for i in range(3):
        ii = (i + 1) % 3
        c0, c1, c2 = _cross3(v[ii, 0] - v[i, 0], v[ii, 1] - v[i, 1],
                             v[ii, 2] - v[i, 2],
                             out[0] - v[i, 0], out[1] - v[i, 1],
                             out[2] - v[i, 2])
        if _dot3(n0, n1, n2, c0, c1, c2) < 0.0:
            return cnst.no_hit

    return time


@pk_jit
def _quad_kernel(ray_start, ray_direction, vertices, out):
    v = vertices
    n0, n1, n2 = _cross3(v[2, 0] - v[1, 0], v[2, 1] - v[1, 1],
                         v[2, 2] - v[1, 2],
                         v[0, 0] - v[1, 0], v[0, 1] - v[1, 1],
                         v[0, 2] - v[1, 2])

    time = _plane_kernel(ray_start, ray_direction,
                         v[0, 0], v[0, 1], v[0, 2], n0, n1, n2, out)
    if math.isnan(time):
        return time

    # edges v0 -> v1 and v1 -> v2
    for i in range(2):
        e0 = v[i + 1, 0] - v[i, 0]
        e1 = v[i + 1, 1] - v[i, 1]
        e2 = v[i + 1, 2] - v[i, 2]
        t = _dot3(out[0] - v[i, 0], out[1] - v[i, 1], out[2] - v[i, 2],
                  e0, e1, e2) / _dot3(e0, e1, e2, e0, e1, e2)
        if t < 0.0 or t > 1.0:
            return cnst.no_hit

    return time


@pk_jit
def _aabb_kernel(origin, direction, box_min, box_max):
    tmin = -np.inf
    tmax = np.inf
    for i in range(3):
        t_lo = (box_min[i] - origin[i]) / direction[i]
        t_hi = (box_max[i] - origin[i]) / direction[i]
        if math.isnan(t_lo) or math.isnan(t_hi):
            return cnst.no_hit
        tmin = max(tmin, min(t_lo, t_hi))
        tmax = min(tmax, max(t_lo, t_hi))

    if tmax < 0.0 or tmin > tmax:
        return cnst.no_hit

    return tmin


# =============================================================================
# API FUNCTIONS
# =============================================================================

def _hit_or_none(time, point):
    return None if np.isnan(time) else (time, point)


@pk_api
def intersect_ray_with_plane(ray_start, ray_direction, plane_pos, plane_normal):
    ray_start = _as_float_array(ray_start, 'ray_start', cnst.vec3_shape)
    ray_direction = _as_float_array(
        ray_direction, 'ray_direction', cnst.vec3_shape
    )
    plane_pos = _as_float_array(plane_pos, 'plane_pos', cnst.vec3_shape)
    plane_normal = _as_float_array(
        plane_normal, 'plane_normal', cnst.vec3_shape
    )

    point = np.empty(3)
    time = _plane_kernel(ray_start, ray_direction,
                         plane_pos[0], plane_pos[1], plane_pos[2],
                         plane_normal[0], plane_normal[1], plane_normal[2],
                         point)
    return _hit_or_none(time, point)


@pk_api
def intersect_ray_with_triangle(ray_start, ray_direction, vertices):
    ray_start = _as_float_array(ray_start, 'ray_start', cnst.vec3_shape)
    ray_direction = _as_float_array(
        ray_direction, 'ray_direction', cnst.vec3_shape
    )
    vertices = _as_float_array(vertices, 'vertices', cnst.triangle_shape)

    point = np.empty(3)
    time = _triangle_kernel(ray_start, ray_direction, vertices, point)
    return _hit_or_none(time, point)


@pk_api
def intersect_ray_with_quad(ray_start, ray_direction, vertices):
    ray_start = _as_float_array(ray_start, 'ray_start', cnst.vec3_shape)
    ray_direction = _as_float_array(
        ray_direction, 'ray_direction', cnst.vec3_shape
    )
    vertices = _as_float_array(vertices, 'vertices', cnst.quad_shape)

    point = np.empty(3)
    time = _quad_kernel(ray_start, ray_direction, vertices, point)
    return _hit_or_none(time, point)


@pk_api
def intersect_ray_with_aabb(origin, direction, box):
    origin = _as_float_array(origin, 'origin', cnst.vec3_shape)
    direction = _as_float_array(direction, 'direction', cnst.vec3_shape)
    box_min = _as_float_array(box.min, 'min', cnst.vec3_shape)
    box_max = _as_float_array(box.max, 'max', cnst.vec3_shape)

    time = _aabb_kernel(origin, direction, box_min, box_max)
    return None if np.isnan(time) else time
