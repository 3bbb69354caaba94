import logging

from raypick import constants
from raypick.matrixutil import invert_matrix, look_at, perspective
from raypick.primitives import PerspectiveCamera
from raypick.scalars import deg2rad, pixel_to_ndc

from .config import Config
from .utils import as_float

logger = logging.getLogger('raypick.config')


class ViewportConfig(Config):
    """Handle the viewport (canvas) size, in pixels."""

    @property
    def is_set(self):
        return self._cfg.get('viewport', default=None) is not None

    @property
    def width(self):
        return self._positive('viewport:width')

    @property
    def height(self):
        return self._positive('viewport:height')

    @property
    def aspect(self):
        return self.width / self.height

    def to_ndc(self, px, py):
        """Map a pointer position in pixels to normalized coordinates"""
        return pixel_to_ndc(px, py, self.width, self.height)

    def _positive(self, key):
        val = as_float(self._cfg.get(key), key)
        if not val > 0:
            raise RuntimeError('"%s": must be positive, got %s' % (key, val))
        return val


class CameraConfig(Config):
    """Handle the camera.

    The camera is described either by a pose (position, target, up) and a
    lens (fov, aspect, near, far), or by explicit matrices. Explicit
    matrices take precedence.
    """

    @property
    def position(self):
        return self._cfg.get_array('camera:position', (3,))

    @property
    def target(self):
        return self._cfg.get_array(
            'camera:target', (3,), default=constants.default_target.tolist()
            )

    @property
    def up(self):
        return self._cfg.get_array(
            'camera:up', (3,), default=constants.default_up.tolist()
            )

    @property
    def fov(self):
        """Vertical field of view, in degrees."""
        return as_float(
            self._cfg.get('camera:fov', default=constants.default_fov),
            'camera:fov'
            )

    @property
    def aspect(self):
        aspect = self._cfg.get('camera:aspect', default=None)
        if aspect is not None:
            return as_float(aspect, 'camera:aspect')
        if self._cfg.viewport.is_set:
            return self._cfg.viewport.aspect
        logger.info('no viewport specified, camera aspect defaulting to 1')
        return 1.

    @property
    def near(self):
        return as_float(
            self._cfg.get('camera:near', default=constants.default_near),
            'camera:near'
            )

    @property
    def far(self):
        far = self._cfg.get('camera:far', default=constants.default_far)
        return None if far is None else as_float(far, 'camera:far')

    @property
    def projection_matrix(self):
        mat = self._cfg.get_array(
            'camera:projection_matrix', (4, 4), default=None
            )
        if mat is None:
            mat = perspective(
                deg2rad(self.fov), self.aspect, self.near, self.far
                )
        return mat

    @property
    def view_matrix_inverse(self):
        mat = self._cfg.get_array(
            'camera:view_matrix_inverse', (4, 4), default=None
            )
        if mat is None:
            mat = invert_matrix(look_at(self.position, self.target, self.up))
        return mat

    @property
    def camera(self):
        """Return the PerspectiveCamera described by this section."""
        return PerspectiveCamera(
            self.projection_matrix, self.view_matrix_inverse, self.position
            )
