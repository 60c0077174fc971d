"""Vectors, matrices, camera, colour conversion, images, float grids and OBJ meshes."""

__version__ = "0.1.0"
__all__ = ["rand", "vec2", "vec3", "mat3", "mat4", "camera", "color", "image", "objfile", "grid2d"]