"""Picking module.

Contains different implementations based on Python+Numpy and numba. All of
them adhere to the same interface (see `definitions`), but performance will
vary.

Use the functions under this module scope to use the preferred versions,
import the specific submodule if you want to use a specific version.
"""
from collections import OrderedDict

from .definitions import API
from . import pk_numpy as numpy
from . import pk_numba as numba


# The code below is useful for automated testing as it allows:
# - Enumerate the different implementations
# - Access implementations "by name"

implementations = OrderedDict()
implementations["numpy"] = numpy
implementations["numba"] = numba


def get_implementation(name):
    """Return a namespace with the API of the implementation `name`.

    Functions missing from that implementation fall back to the numpy ones.
    """
    try:
        module = implementations[name]
    except KeyError:
        raise ValueError(
            "unknown picking implementation '%s', expecting one of %s"
            % (name, ', '.join(implementations))
        )
    return _Implementation(name, {
        function: getattr(module, function, getattr(numpy, function))
        for function in API
    })


class _Implementation(object):
    def __init__(self, name, functions):
        self.name = name
        self.__dict__.update(functions)

    def __repr__(self):
        return "<picking implementation '%s'>" % self.name


# assign default implementations for the functions.
# by default use the "numpy" implementations.
_default_implementations = {function: getattr(numpy, function)
                            for function in API}
# it is possible to override some functions by patching them before applying
# the update. Something like:
#
# _default_implementations['intersect_ray_with_aabb'] = \
#     numba.intersect_ray_with_aabb

globals().update(_default_implementations)
del _default_implementations
