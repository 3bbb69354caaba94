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

import numpy as np

# tolerance
epsf = np.finfo(float).eps      # ~2.2e-16

identity_4x4 = np.eye(4)

# world up
world_y = np.r_[0., 1., 0.]

# default camera pose and lens; the camera looks down -Z in its own frame
default_up = world_y
default_target = np.zeros(3)
default_fov = 45.0      # degrees
default_near = 0.1
default_far = 1000.0

# length of a projected pointer ray; arbitrary, just "far enough"
default_ray_scale = 999.
