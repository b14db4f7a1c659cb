"""Scene description data and the reader for scene files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from cubscene.textutils import is_empty_line

_CONFIG_KEYS = {
    "NO": "no",
    "SO": "so",
    "WE": "we",
    "EA": "ea",
    "F": "floor",
    "C": "ceiling",
}

_CONFIG_LINE = re.compile(r"[ \t]*([^ \t]*)[ \t]*([^\n]*)")
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


class ParseError(Exception):
    """Raised when a scene file or one of its parts is invalid."""


@dataclass
class SceneData:
    """Everything read from a scene file."""

    no: str | None = None
    so: str | None = None
    we: str | None = None
    ea: str | None = None
    floor: str | None = None
    ceiling: str | None = None
    floor_rgb: tuple[int, int, int] = (0, 0, 0)
    ceiling_rgb: tuple[int, int, int] = (0, 0, 0)
    map: list[str] = field(default_factory=list)
    map_width: int = 0
    player_dir: str = ""

    @property
    def map_height(self) -> int:
        return len(self.map)

    def is_configured(self) -> bool:
        """True once all four textures and both colours are set."""
        return all(
            value is not None
            for value in (self.no, self.so, self.we, self.ea, self.floor, self.ceiling)
        )

    def add_map_line(self, line: str) -> None:
        """Append a raw map line, keeping its newline, and widen the map if needed."""
        self.map.append(line)
        self.map_width = max(self.map_width, len(line))


def process_config_line(line: str, data: SceneData) -> None:
    """Store one ``KEY value`` line into ``data``.

    Raises ParseError for a missing key or value, an unknown key, or a key
    that was already set.
    """
    match = _CONFIG_LINE.match(line)
    key = match.group(1)
    if not key:
        raise ParseError("missing configuration key")
    value = match.group(2).rstrip(" \t")
    if not value:
        raise ParseError(f"missing value for {key.strip()!r}")
    attr = _CONFIG_KEYS.get(key)
    if attr is None:
        raise ParseError(f"unknown configuration key {key!r}")
    if getattr(data, attr) is not None:
        raise ParseError(f"duplicate configuration key {key!r}")
    setattr(data, attr, value)


def _lines(content: str) -> Iterator[str]:
    for match in _LINE.finditer(content):
        yield match.group(0)


def read_scene(path: str | os.PathLike[str], data: SceneData | None = None) -> SceneData:
    """Read a scene file: configuration lines first, then raw map lines."""
    if data is None:
        data = SceneData()
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            content = fh.read()
    except OSError as exc:
        raise ParseError(f"cannot open {os.fspath(path)}: {exc.strerror}") from exc
    for line in _lines(content):
        if data.is_configured():
            data.add_map_line(line)
        elif not is_empty_line(line):
            process_config_line(line, data)
    return data