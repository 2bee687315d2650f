"""Heightmap terrain viewer: camera, shader, terrain mesh and window."""

__version__ = "0.1.0"
__all__ = ["__version__"]