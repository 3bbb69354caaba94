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

"""Scalar helpers used around picking.

All of these accept python scalars or numpy arrays (elementwise).
"""
import numpy as np


def clamp(num, min_val, max_val):
    """Clamp `num` to the closed range [min_val, max_val]."""
    return np.minimum(np.maximum(num, min_val), max_val)


def map_number_range(val, in_min, in_max, out_min, out_max):
    """
    Linearly map `val` from [in_min, in_max] to [out_min, out_max].

    Values outside the input range are extrapolated, not clamped.
    """
    return (val - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def is_power_of_2(value):
    # bitwise test, zero passes as well
    return (value & (value - 1)) == 0


def normalize_number(min_val, max_val, val):
    """Position of `val` in [min_val, max_val], as a fraction."""
    return (val - min_val) / (max_val - min_val)


def triangle_wave(t):
    """
    Periodic triangle wave with period 2 and range [0, 1].

    triangle_wave(0) == 0, triangle_wave(1) == 1, triangle_wave(2) == 0.
    Used when laying out the edge vertices of rounded cube geometry.
    """
    t = t - np.floor(t * 0.5) * 2
    t = np.minimum(np.maximum(t, 0.), 2.)
    return 1. - np.abs(t - 1.)


def deg2rad(deg):
    return deg * np.pi / 180.


def rad2deg(rad):
    return rad * 180. / np.pi


def pixel_to_ndc(px, py, width, height):
    """
    Map pixel coordinates to normalized device coordinates.

    Parameters
    ----------
    px, py : float or array_like
        Pointer position in pixels, origin at the top-left corner of the
        viewport and y growing downwards.
    width, height : float
        Viewport size in pixels.

    Returns
    -------
    tuple
        (x, y) in [-1, 1], y growing upwards.
    """
    x = map_number_range(px, 0., width, -1., 1.)
    y = map_number_range(py, 0., height, 1., -1.)
    return x, y
