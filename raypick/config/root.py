import logging

from raypick import constants
from raypick import picking

from .config import Config
from .camera import CameraConfig, ViewportConfig
from .primitive import PrimitiveConfig
from .utils import as_float

logger = logging.getLogger('raypick.config')


class RootConfig(Config):

    @property
    def implementation(self):
        """Name of the picking implementation to use"""
        name = str(self.get('implementation', default='numpy'))
        if name not in picking.implementations:
            raise RuntimeError(
                '"implementation": must be one of %s, got %s'
                % (', '.join(picking.implementations), name)
                )
        return name

    @implementation.setter
    def implementation(self, val):
        if val not in picking.implementations:
            raise RuntimeError(
                '"implementation": must be one of %s, got %s'
                % (', '.join(picking.implementations), val)
                )
        self.set('implementation', val)

    @property
    def picking(self):
        """The picking functions of the configured implementation"""
        name = self.implementation
        logger.debug('using the %s picking implementation', name)
        return picking.get_implementation(name)

    @property
    def ray_scale(self):
        return as_float(
            self.get('ray_scale', default=constants.default_ray_scale),
            'ray_scale'
            )

    @ray_scale.setter
    def ray_scale(self, val):
        self.set('ray_scale', as_float(val, 'ray_scale'))

    @property
    def viewport(self):
        if not hasattr(self, '_viewport_config'):
            self._viewport_config = ViewportConfig(self)
        return self._viewport_config

    @property
    def camera(self):
        if not hasattr(self, '_camera_config'):
            self._camera_config = CameraConfig(self)
        return self._camera_config

    @property
    def primitive(self):
        if not hasattr(self, '_primitive_config'):
            self._primitive_config = PrimitiveConfig(self)
        return self._primitive_config
