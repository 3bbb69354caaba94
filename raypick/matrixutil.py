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

"""Vector and matrix helpers for building cameras and rays.

Matrices follow the column-vector convention: a point `v` is transformed as
``mat @ v``.
"""
import logging

import numpy as np

from raypick import constants

logger = logging.getLogger(__name__)


def unit_vector(vec_in):
    """
    Normalize a vector, or the rows of an (n, 3) array.

    Zero-norm vectors are returned unchanged rather than divided by zero.
    """
    vec_in = np.asarray(vec_in, dtype=float)
    orig_dims = vec_in.ndim
    if vec_in.ndim not in [1, 2]:
        raise ValueError(
            "incorrect arg shape; must be 1-d or 2-d, yours is %d-d"
            % (vec_in.ndim)
        )

    a = np.atleast_2d(vec_in)

    # calculate row norms and prevent divide by zero
    nrm = np.sqrt(np.sum(a*a, axis=1))
    nrm[nrm == 0.] = 1.
    normalized = a/nrm[:, np.newaxis]

    return normalized[0] if orig_dims == 1 else normalized


def invert_matrix(mat):
    """
    Invert a square matrix.

    A singular matrix does not raise; the result is filled with NaN so that
    anything computed from it is rejected by the intersection tests.
    """
    mat = np.asarray(mat, dtype=float)
    try:
        return np.linalg.inv(mat)
    except np.linalg.LinAlgError:
        logger.warning(
            'singular %s matrix, inverse filled with NaN',
            'x'.join(str(i) for i in mat.shape)
        )
        return np.full(mat.shape, np.nan)


def perspective(fovy, aspect, near, far=None):
    """
    OpenGL style perspective projection matrix.

    Parameters
    ----------
    fovy : float
        Vertical field of view in radians.
    aspect : float
        Viewport width over height.
    near : float
        Distance to the near clipping plane.
    far : float, optional
        Distance to the far clipping plane. None (or inf) gives an infinite
        far plane.

    Returns
    -------
    numpy.ndarray
        The (4, 4) projection matrix.
    """
    f = 1.0 / np.tan(0.5*fovy)
    mat = np.zeros((4, 4))
    mat[0, 0] = f / aspect
    mat[1, 1] = f
    mat[3, 2] = -1.
    if far is not None and np.isfinite(far):
        nf = 1.0 / (near - far)
        mat[2, 2] = (far + near) * nf
        mat[2, 3] = 2.0 * far * near * nf
    else:
        mat[2, 2] = -1.
        mat[2, 3] = -2.0 * near
    return mat


def look_at(eye, target, up=None):
    """
    View matrix for a camera at `eye` looking at `target`.

    The camera looks down its local -Z axis with `up` projected to its
    local +Y. If `eye` and `target` coincide the identity is returned.
    """
    eye = np.asarray(eye, dtype=float)
    target = np.asarray(target, dtype=float)
    up = constants.default_up if up is None else np.asarray(up, dtype=float)

    z = eye - target
    if np.linalg.norm(z) < constants.epsf:
        return constants.identity_4x4.copy()
    z = unit_vector(z)
    x = unit_vector(np.cross(up, z))
    y = np.cross(z, x)

    mat = constants.identity_4x4.copy()
    mat[0, :3] = x
    mat[1, :3] = y
    mat[2, :3] = z
    mat[:3, 3] = -mat[:3, :3] @ eye
    return mat
