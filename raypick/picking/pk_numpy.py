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

"""Picking module implementation using numpy.

This is the reference implementation of the whole API.
"""
import numpy as np

from raypick.matrixutil import invert_matrix, unit_vector
from raypick.primitives import Ray

from . import constants as cnst
from .definitions import pk_api


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _as_float_array(arg, name, shape):
    """Cast an argument to a float ndarray, checking its dimensions"""
    arr = np.asarray(arg, dtype=float)
    if arr.shape != shape:
        raise ValueError("'%s' does not match expected dimensions" % name)
    return arr


def _ray_plane_time(ray_start, ray_direction, plane_pos, plane_normal):
    # In the intersection code, advantage is taken from the IEEE754 divide
    # behavior generating NAN (or INF) for divide by 0. A ray parallel to the
    # plane ends up with a non-finite time and is rejected with the rays
    # pointing away from the plane.
    with np.errstate(divide='ignore', invalid='ignore'):
        # project ray to plane distance vector onto plane normal
        wp = np.dot(plane_pos - ray_start, plane_normal)
        # project ray direction onto plane normal
        vp = np.dot(ray_direction, plane_normal)
        return wp / vp


def _intersect_plane(ray_start, ray_direction, plane_pos, plane_normal):
    time = _ray_plane_time(ray_start, ray_direction, plane_pos, plane_normal)
    if np.isfinite(time) and time >= 0.:
        return float(time), ray_start + ray_direction*time
    return None


# =============================================================================
# MAIN FUNCTIONS
# =============================================================================

@pk_api
def project_mouse_to_world_space(norm_mouse_coords, camera, ray_scale=999.):
    norm_mouse_coords = _as_float_array(
        norm_mouse_coords, 'norm_mouse_coords', cnst.vec2_shape
    )
    proj = _as_float_array(
        camera.projection_matrix, 'projection_matrix', cnst.mat4_shape
    )
    view_inv = _as_float_array(
        camera.view_matrix_inverse, 'view_matrix_inverse', cnst.mat4_shape
    )
    # copy, the ray must not share memory with the camera
    ray_start = np.array(
        _as_float_array(camera.position, 'position', cnst.vec3_shape)
    )

    # homogeneous clip coordinates
    vec4_clip = np.r_[norm_mouse_coords, cnst.clip_near_z, cnst.clip_w]

    # a singular projection yields NaN all the way down, quietly
    with np.errstate(invalid='ignore'):
        # 4d eye (camera) coordinates
        vec4_eye = invert_matrix(proj) @ vec4_clip
        vec4_eye[2] = -1.
        vec4_eye[3] = 0.

        # 4d world coordinates
        vec4_world = view_inv @ vec4_eye
        ray = unit_vector(vec4_world[:3])

        ray_end = ray_start + ray*ray_scale
        ray_direction = ray_end - ray_start

    return Ray(ray_start, ray_end, ray_direction)


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

    return _intersect_plane(ray_start, ray_direction, plane_pos, plane_normal)


@pk_api
def intersect_ray_with_triangle(ray_start, ray_direction, vertices):
    ray_start = _as_float_array(ray_start, 'ray_start', cnst.vec3_shape)
    ray_direction = _as_float_array(
        ray_direction, 'ray_direction', cnst.vec3_shape
    )
    vertices = _as_float_array(vertices, 'vertices', cnst.triangle_shape)

    # cross (v1 - v0, v2 - v0), counter clockwise gives the front face
    v0, v1, v2 = vertices
    plane_normal = np.cross(v1 - v0, v2 - v0)

    intersection = _intersect_plane(ray_start, ray_direction, v0, plane_normal)
    if intersection is None:
        return None
    _, intersect_point = intersection

    for i in range(3):
        ii = (i + 1) % 3  # wrap index through v1, v2, v0
        edge = vertices[ii] - vertices[i]
        to_point = intersect_point - vertices[i]
        if np.dot(plane_normal, np.cross(edge, to_point)) < 0.:
            return None

    return intersection


@pk_api
def intersect_ray_with_quad(ray_start, ray_direction, vertices):
    ray_start = _as_float_array(ray_start, 'ray_start', cnst.vec3_shape)
    ray_direction = _as_float_array(
        ray_direction, 'ray_direction', cnst.vec3_shape
    )
    vertices = _as_float_array(vertices, 'vertices', cnst.quad_shape)

    # three sequential corners, edges crossed in clockwise order
    v0, v1, v2 = vertices[:3]
    plane_normal = np.cross(v2 - v1, v0 - v1)

    intersection = _intersect_plane(ray_start, ray_direction, v0, plane_normal)
    if intersection is None:
        return None
    _, intersect_point = intersection

    # parameters of the hit point along v0 -> v1 and v1 -> v2
    for start, end in ((v0, v1), (v1, v2)):
        edge = end - start
        t = np.dot(intersect_point - start, edge) / np.dot(edge, edge)
        if t < 0. or t > 1.:
            return None

    return intersection


@pk_api
def intersect_ray_with_aabb(origin, direction, box):
    origin = _as_float_array(origin, 'origin', cnst.vec3_shape)
    direction = _as_float_array(direction, 'direction', cnst.vec3_shape)
    box_min = _as_float_array(box.min, 'min', cnst.vec3_shape)
    box_max = _as_float_array(box.max, 'max', cnst.vec3_shape)

    # zero direction components give +/-inf (or NaN), propagated below
    with np.errstate(divide='ignore', invalid='ignore'):
        t_lo = (box_min - origin) / direction
        t_hi = (box_max - origin) / direction

    # np.minimum/np.maximum and np.max/np.min propagate NaN
    tmin = np.max(np.minimum(t_lo, t_hi))
    tmax = np.min(np.maximum(t_lo, t_hi))

    if np.isnan(tmin) or np.isnan(tmax):
        return None

    # box entirely behind the ray
    if tmax < 0.:
        return None

    # slabs do not overlap
    if tmin > tmax:
        return None

    return float(tmin)
