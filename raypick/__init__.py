"""Pointer picking: unproject a pointer to a world space ray and intersect
that ray with planes, triangles, quads and axis aligned boxes."""

__version__ = '0.1.0'
