from raypick.primitives import BoundingBox

from .config import Config

PRIMITIVE_TYPES = ('plane', 'triangle', 'quad', 'aabb')


class PrimitiveConfig(Config):
    """Handle the single primitive a pointer ray is tested against."""

    @property
    def type(self):
        kind = str(self._cfg.get('primitive:type')).lower()
        if kind not in PRIMITIVE_TYPES:
            raise RuntimeError(
                '"primitive:type": must be one of %s, got %s'
                % (', '.join(PRIMITIVE_TYPES), kind)
                )
        return kind

    @property
    def point(self):
        """A point on the plane."""
        return self._cfg.get_array('primitive:point', (3,))

    @property
    def normal(self):
        """The plane normal."""
        return self._cfg.get_array('primitive:normal', (3,))

    @property
    def vertices(self):
        """Triangle or quad vertices, one per row."""
        nverts = 4 if self.type == 'quad' else 3
        return self._cfg.get_array('primitive:vertices', (nverts, 3))

    @property
    def box(self):
        return BoundingBox(
            self._cfg.get_array('primitive:min', (3,)),
            self._cfg.get_array('primitive:max', (3,))
            )

    def intersect(self, ray_start, ray_direction, functions):
        """Test a ray against the primitive.

        `functions` is a picking implementation (see
        `raypick.picking.get_implementation`). Returns what the matching
        intersect_ray_with_* function returns.
        """
        kind = self.type
        if kind == 'plane':
            return functions.intersect_ray_with_plane(
                ray_start, ray_direction, self.point, self.normal
                )
        elif kind == 'triangle':
            return functions.intersect_ray_with_triangle(
                ray_start, ray_direction, self.vertices
                )
        elif kind == 'quad':
            return functions.intersect_ray_with_quad(
                ray_start, ray_direction, self.vertices
                )
        return functions.intersect_ray_with_aabb(
            ray_start, ray_direction, self.box
            )
