"""Read and validate .cub scene description files."""

__version__ = "0.1.0"
__all__ = ["cli", "colors", "mapcheck", "scene", "textures", "textutils"]