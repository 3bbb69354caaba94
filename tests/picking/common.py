#
# This will allow to easily adapt tests in case the module name changes.
#
import numpy as np

import raypick.picking as pk
from raypick.primitives import PerspectiveCamera


def function_implementations(api_func_name):
    """returns a list of pairs (function, implementation_name) for all
    implementations of the API function.

    This is useful in parametrization of tests"""

    assert api_func_name in pk.API

    impls = [(getattr(pk, api_func_name), 'default')]
    for name, module in pk.implementations.items():
        impl = getattr(module, api_func_name, None)
        if impl is not None:
            impls.append((impl, name))

    return impls


def all_impls(api_func_name):
    """parametrize a test over every implementation of `api_func_name`"""
    import pytest

    return pytest.mark.parametrize(
        'impl, module_name', function_implementations(api_func_name)
    )


# a right angled CCW triangle in the XY plane, normal +Z
TRIANGLE_XY = np.array([[0.0, 0.0, 0.0],
                        [1.0, 0.0, 0.0],
                        [0.0, 1.0, 0.0]])

# the unit square in the XY plane
UNIT_SQUARE = np.array([[0.0, 0.0, 0.0],
                        [1.0, 0.0, 0.0],
                        [1.0, 1.0, 0.0],
                        [0.0, 1.0, 0.0]])


def identity_camera(position=(0.0, 0.0, 0.0)):
    """A camera with identity matrices, looking down -Z"""
    view_inv = np.eye(4)
    view_inv[:3, 3] = position
    return PerspectiveCamera(np.eye(4), view_inv, position)


def sample_directions(num=32):
    """Unit directions on a spiral over the sphere"""
    t = np.linspace(-0.95, 0.95, num=num)
    alpha = 0.5 * t * np.pi
    beta = t * np.pi * 42.0

    z = np.sin(alpha)
    o = np.cos(alpha)

    return np.stack((o*np.cos(beta), o*np.sin(beta), z), axis=-1)
