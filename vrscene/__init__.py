"""A small software 3D renderer for .vrobj meshes, with a pygame viewer."""

__version__ = "0.1.0"