"""This module provides the definitions for the picking API. It also provides
a decorator to add to any implementation of the API. The decorator attaches
the reference documentation to every function that implements an API
function, and allows pre and post conditions as an additional way to
document the implementations.

Pre and post conditions are code. They are only evaluated when CHECK_API is
enabled (via the RAYPICK_API_CHECK environment variable), in which case a
failed condition raises a RuntimeError. Otherwise they incur no overhead.

Every decorated implementation must also have the exact signature of its
definition, including default values.
"""
import functools
import logging
import os
from inspect import signature as get_signature

import numpy as np

logger = logging.getLogger(__name__)

# Just a list of the API functions...
# Note this can be kind of redundant with the definition classes, but it also
# allows for some coherence checks.
API = (
    "project_mouse_to_world_space",

    "intersect_ray_with_plane",
    "intersect_ray_with_triangle",
    "intersect_ray_with_quad",
    "intersect_ray_with_aabb",
)

CHECK_API = os.getenv("RAYPICK_API_CHECK")

# tolerance for the post conditions
_CHECK_RTOL = 1e-6
_CHECK_ATOL = 1e-8


def _check(condition, msg, *args):
    if not condition:
        raise RuntimeError(msg % args)


class DEF_Func(object):
    """Documentation to use for the function"""

    def _signature():
        """The signature of this method defines the one for the API
        including default values."""
        pass

    @classmethod
    def _PRECOND(cls, *args, **kwargs):
        logger.debug("PRECOND (%s)", cls.__name__)

    @classmethod
    def _POSTCOND(cls, results, *args, **kwargs):
        logger.debug("POSTCOND (%s)", cls.__name__)


class _DEF_HitFunc(DEF_Func):
    """Shared post condition of the functions returning (time, point)"""

    @classmethod
    def _POSTCOND(cls, results, ray_start, ray_direction, *args, **kwargs):
        super()._POSTCOND(results, ray_start, ray_direction, *args, **kwargs)
        if results is None:
            return

        time, point = results
        _check(np.isfinite(time) and time >= 0.,
               "%s: invalid ray time %s", cls.__name__, time)
        expected = (np.asarray(ray_start, dtype=float)
                    + time*np.asarray(ray_direction, dtype=float))
        _check(np.allclose(point, expected,
                           rtol=_CHECK_RTOL, atol=_CHECK_ATOL),
               "%s: point %s is not on the ray", cls.__name__, point)


# ==============================================================================
# API
# ==============================================================================

class DEF_project_mouse_to_world_space(DEF_Func):
    """Project a pointer position in NDC space to a world space ray.

    The clip space point (x, y, -1, 1) is taken to eye space with the inverse
    projection; there its depth is forced to -1 and its w to 0, turning it
    into a direction towards the near plane. The inverse view matrix takes
    that direction to world space where it is normalized.

    Parameters
    ----------
    norm_mouse_coords : array_like
        (2,) pointer position in normalized device coordinates, usually in
        [-1, 1] with y up.
    camera : PerspectiveCamera
        Anything exposing `projection_matrix`, `view_matrix_inverse` and
        `position`.
    ray_scale : float, optional
        Length of the resulting ray; the default (999) is an arbitrary "far
        enough" distance.

    Returns
    -------
    Ray
        `start` is the camera position, `end` is `start` plus `ray_scale`
        times the unit view direction, and `direction` is `end - start`, so
        its magnitude is `ray_scale`.

    Notes
    -----
    There is no error path. A singular projection matrix produces a NaN
    inverse that propagates into the ray; the intersection functions then
    report no hit for it.
    """
    def _signature(norm_mouse_coords, camera, ray_scale=999.):
        pass

    @classmethod
    def _POSTCOND(cls, results, norm_mouse_coords, camera, ray_scale=999.):
        super()._POSTCOND(results, norm_mouse_coords, camera, ray_scale)
        start, end, direction = results
        if not np.all(np.isfinite(direction)):
            return
        _check(np.allclose(direction, end - start,
                           rtol=_CHECK_RTOL, atol=_CHECK_ATOL),
               "%s: direction is not end - start", cls.__name__)
        length = np.linalg.norm(direction)
        # a zero direction is left as is by the normalization
        if length > 0.:
            _check(np.isclose(length, abs(ray_scale), rtol=_CHECK_RTOL),
                   "%s: ray length %s does not match ray_scale %s",
                   cls.__name__, length, ray_scale)


class DEF_intersect_ray_with_plane(_DEF_HitFunc):
    """Intersect a ray with an infinite plane.

    Parameters
    ----------
    ray_start : array_like
        (3,) ray origin.
    ray_direction : array_like
        (3,) ray direction; it does not need to be normalized.
    plane_pos : array_like
        (3,) any point on the plane.
    plane_normal : array_like
        (3,) plane normal; it does not need to be normalized.

    Returns
    -------
    tuple or None
        (time, point) where `point = ray_start + time * ray_direction`, or
        None if the plane is behind the ray origin.

    Notes
    -----
    time is dot(plane_pos - ray_start, n) / dot(ray_direction, n). A ray
    parallel to the plane divides by zero; the resulting NaN or infinite
    time is reported as no hit, same as a plane behind the origin.
    """
    def _signature(ray_start, ray_direction, plane_pos, plane_normal):
        pass


class DEF_intersect_ray_with_triangle(_DEF_HitFunc):
    """Intersect a ray with a triangle.

    Parameters
    ----------
    ray_start : array_like
        (3,) ray origin.
    ray_direction : array_like
        (3,) ray direction; it does not need to be normalized.
    vertices : array_like
        (3, 3) triangle vertices in world space, one per row.

    Returns
    -------
    tuple or None
        (time, point) of the hit, or None.

    Notes
    -----
    The plane normal is cross(v1 - v0, v2 - v0), so counter-clockwise
    winding gives the front face. The hit point on that plane is inside the
    triangle when, for every edge v[i] -> v[i+1], the cross product of the
    edge with (point - v[i]) does not point against the normal. Points on
    an edge count as inside. Both faces are hit; there is no culling.
    """
    def _signature(ray_start, ray_direction, vertices):
        pass


class DEF_intersect_ray_with_quad(_DEF_HitFunc):
    """Intersect a ray with a planar quad.

    Parameters
    ----------
    ray_start : array_like
        (3,) ray origin.
    ray_direction : array_like
        (3,) ray direction; it does not need to be normalized.
    vertices : array_like
        (4, 3) quad vertices in world space, one per row, assumed coplanar.

    Returns
    -------
    tuple or None
        (time, point) of the hit, or None.

    Notes
    -----
    The plane normal is cross(v2 - v1, v0 - v1). The hit point is then
    projected on the edges v0 -> v1 and v1 -> v2; both parameters must lie
    in [0, 1]. This is a parallelogram membership test: it is exact for
    parallelograms (rectangles included) but may misclassify points near
    the corners of other quads. The fourth vertex is not used.
    """
    def _signature(ray_start, ray_direction, vertices):
        pass


class DEF_intersect_ray_with_aabb(DEF_Func):
    """Intersect a ray with an axis aligned bounding box (slab method).

    Parameters
    ----------
    origin : array_like
        (3,) ray origin.
    direction : array_like
        (3,) ray direction; zero components are allowed.
    box : BoundingBox
        Anything exposing (3,) `min` and `max`.

    Returns
    -------
    float or None
        The entry time along the ray, or None if the box is entirely behind
        the origin or the slabs do not overlap. The entry time is negative
        when the origin is inside the box. Unlike the other intersection
        functions no point is returned; it is origin + time * direction.

    Notes
    -----
    Zero direction components divide by zero, producing infinite slab
    parameters that the min/max reductions handle per IEEE-754. A NaN slab
    parameter (origin exactly on a slab plane of a zero direction
    component) is reported as no hit.
    """
    def _signature(origin, direction, box):
        pass

    @classmethod
    def _POSTCOND(cls, results, origin, direction, box):
        super()._POSTCOND(results, origin, direction, box)
        if results is not None:
            _check(not np.isnan(results),
                   "%s: NaN entry time", cls.__name__)


# ==============================================================================
# Decorator to mark implementations of the API. Names must match.
# ==============================================================================

def pk_api(f, name=None):
    """decorator to apply to the entry points of the picking module"""
    api_call = name if name is not None else f.__name__

    if api_call not in API:
        raise RuntimeError("'%s' is not part of the picking API." % api_call)

    try:
        fn_def = globals()['DEF_'+api_call]
    except KeyError:
        # This happens if there is no definition for the decorated function
        raise RuntimeError("'%s' definition not found." % api_call)

    if not (isinstance(fn_def.__doc__, str) and
            callable(fn_def._PRECOND) and
            callable(fn_def._POSTCOND) and
            callable(fn_def._signature)):
        # A valid definition requires a string doc, and callable _PRECOND,
        # _POSTCOND and _signature.
        #
        # __doc__ will become the decorated function's documentation.
        # _PRECOND will be run on every call with args and kwargs
        # _POSTCOND will be run on every call with result, args and kwargs
        # _signature will be used to enforce a signature on implementations.
        raise RuntimeError("'{0}' definition error.".format(api_call))

    # Sanity check: make sure the decorated function has the expected signature.
    if get_signature(fn_def._signature) != get_signature(f):
        raise RuntimeError("'{0}' signature mismatch.".format(api_call))

    # At this point use a wrapper that calls pre and post conditions if checking
    # is enabled, otherwise leave the function "as is".
    if CHECK_API:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            fn_def._PRECOND(*args, **kwargs)
            result = f(*args, **kwargs)
            fn_def._POSTCOND(result, *args, **kwargs)
            return result

        wrapper.__doc__ = fn_def.__doc__
        return wrapper
    else:
        f.__doc__ = fn_def.__doc__
        return f
