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

# Minimal subset of constants needed for the picking kernels.

# the picking functions work on single vectors only
vec2_shape = (2,)
vec3_shape = (3,)
triangle_shape = (3, 3)
quad_shape = (4, 3)
mat4_shape = (4, 4)

# "no hit" marker used by the compiled kernels
no_hit = np.nan

# homogeneous clip space coordinates of a pointer on the near plane
clip_near_z = -1.
clip_w = 1.
