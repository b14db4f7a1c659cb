"""Checks on the scene file name and the wall texture paths."""

from __future__ import annotations

import os

from cubscene.scene import ParseError, SceneData
from cubscene.textutils import word_count


def has_extension(path: str, extension: str) -> bool:
    """True when everything from the last dot in ``path`` equals ``extension``."""
    dot = path.rfind(".")
    if dot == -1:
        return False
    return path[dot:] == extension


def is_readable(path: str | os.PathLike[str]) -> bool:
    """True when the file can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def check_textures(data: SceneData) -> None:
    """Check that every texture is a single word naming a readable file.

    Raises ParseError on the first texture that fails.
    """
    textures = {"SO": data.so, "NO": data.no, "WE": data.we, "EA": data.ea}
    for key, value in textures.items():
        if word_count(value) != 1:
            raise ParseError(f"texture {key} must be a single path, got {value!r}")
    for key, value in (("NO", data.no), ("EA", data.ea), ("SO", data.so), ("WE", data.we)):
        if not is_readable(value):
            raise ParseError(f"texture {key} cannot be read: {value}")