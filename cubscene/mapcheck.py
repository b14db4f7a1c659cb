"""Validation of the map grid of a scene."""

from __future__ import annotations

from cubscene.scene import ParseError, SceneData
from cubscene.textutils import is_empty_line

_ALLOWED_CHARS = frozenset(" 01NSEW\n\t")
_PLAYERS = frozenset("NSEW")
_FLOOR_NEIGHBOURS = frozenset("10NEWS")
_PLAYER_NEIGHBOURS = frozenset("10")


def check_invalid_chars(data: SceneData) -> None:
    """Raise ParseError if the map holds a character outside the map alphabet."""
    for row, line in enumerate(data.map):
        for col, ch in enumerate(line):
            if ch not in _ALLOWED_CHARS:
                raise ParseError(f"Invalid char {ch!r} at [{row}][{col}]")


def check_player_count(data: SceneData) -> None:
    """Require exactly one player start and record its direction."""
    count = 0
    for line in data.map:
        for ch in line:
            if ch in _PLAYERS:
                data.player_dir = ch
                count += 1
    if count != 1:
        raise ParseError(f"Found {count} players (expected 1)")


def check_inner_empty_lines(data: SceneData) -> None:
    """Raise ParseError if an empty line is followed by more map lines."""
    started = False
    ended = False
    for number, line in enumerate(data.map, start=1):
        empty = is_empty_line(line)
        if not started and empty:
            continue
        started = True
        if empty:
            ended = True
        elif ended:
            raise ParseError(f"Empty line inside map at line {number}")


def _is_enclosed(grid: list[str], row: int, col: int, allowed: frozenset[str]) -> bool:
    line = grid[row]
    if col == 0 or line[col - 1] not in allowed:
        return False
    if col + 1 >= len(line) or line[col + 1] not in allowed:
        return False
    if row == 0:
        return False
    above = grid[row - 1]
    if col >= len(above) or above[col] not in allowed:
        return False
    if row + 1 >= len(grid):
        return False
    below = grid[row + 1]
    return col < len(below) and below[col] in allowed


def map_is_closed(data: SceneData) -> bool:
    """True when every floor cell and the player are surrounded on all four sides."""
    grid = data.map
    for row, line in enumerate(grid):
        for col, ch in enumerate(line):
            if ch == "0" and not _is_enclosed(grid, row, col, _FLOOR_NEIGHBOURS):
                return False
            if ch in _PLAYERS and not _is_enclosed(grid, row, col, _PLAYER_NEIGHBOURS):
                return False
    return True


def check_map(data: SceneData) -> None:
    """Run every map check in order, raising ParseError on the first failure."""
    if not data.map:
        raise ParseError("map is missing")
    check_invalid_chars(data)
    check_player_count(data)
    check_inner_empty_lines(data)
    if not map_is_closed(data):
        raise ParseError("map is not closed by walls")