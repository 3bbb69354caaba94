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

"""Plain data holders consumed by the picking functions."""
from collections import namedtuple

import numpy as np

from raypick import constants
from raypick.matrixutil import invert_matrix, look_at, perspective
from raypick.scalars import deg2rad


Ray = namedtuple('Ray', ['start', 'end', 'direction'])
Ray.__doc__ = """World space ray; `direction` is `end - start`, not unit."""


class BoundingBox(object):
    """Axis aligned bounding box.

    `min` must not exceed `max` on any axis; this is not checked.
    """

    def __init__(self, min, max):
        self.min = np.asarray(min, dtype=float)
        self.max = np.asarray(max, dtype=float)
        if self.min.shape != (3,):
            raise ValueError("'min' does not match expected dimensions")
        if self.max.shape != (3,):
            raise ValueError("'max' does not match expected dimensions")

    def __repr__(self):
        return 'BoundingBox(min=%s, max=%s)' % (
            self.min.tolist(), self.max.tolist()
        )

    @property
    def center(self):
        return 0.5*(self.min + self.max)

    @property
    def extent(self):
        return self.max - self.min


class PerspectiveCamera(object):
    """The camera state needed to unproject a pointer.

    Parameters
    ----------
    projection_matrix : array_like
        (4, 4) projection matrix, eye space to clip space.
    view_matrix_inverse : array_like
        (4, 4) matrix taking eye space to world space.
    position : array_like
        (3,) camera position in world space; the origin of projected rays.
    """

    def __init__(self, projection_matrix, view_matrix_inverse, position):
        self._projection_matrix = np.asarray(projection_matrix, dtype=float)
        self._view_matrix_inverse = np.asarray(view_matrix_inverse,
                                               dtype=float)
        self._position = np.asarray(position, dtype=float)

        if self._projection_matrix.shape != (4, 4):
            raise ValueError(
                "'projection_matrix' does not match expected dimensions"
            )
        if self._view_matrix_inverse.shape != (4, 4):
            raise ValueError(
                "'view_matrix_inverse' does not match expected dimensions"
            )
        if self._position.shape != (3,):
            raise ValueError("'position' does not match expected dimensions")

    @classmethod
    def from_look_at(cls, eye, target=None, up=None,
                     fov=None, aspect=1.0, near=None, far=None):
        """Build a camera from a pose and a lens.

        `fov` is the vertical field of view in radians; the default is
        `constants.default_fov` degrees.
        """
        target = constants.default_target if target is None else target
        fov = deg2rad(constants.default_fov) if fov is None else fov
        near = constants.default_near if near is None else near

        proj = perspective(fov, aspect, near, far)
        view_inv = invert_matrix(look_at(eye, target, up))
        return cls(proj, view_inv, eye)

    @property
    def projection_matrix(self):
        return self._projection_matrix

    @property
    def view_matrix_inverse(self):
        return self._view_matrix_inverse

    @property
    def position(self):
        return self._position
