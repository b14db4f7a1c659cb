"""Validation and decoding of floor and ceiling colours."""

from __future__ import annotations

from cubscene.scene import ParseError, SceneData
from cubscene.textutils import parse_int, split_fields, tokenize

_DIGITS = frozenset("0123456789")


def is_valid_number(text: str) -> bool:
    """True when the text is all decimal digits with a value from 0 to 255."""
    if not all(ch in _DIGITS for ch in text):
        return False
    return 0 <= parse_int(text) <= 255


def valid_rgb(text: str | None) -> bool:
    """True when the text is exactly three comma-separated numbers in 0..255."""
    if not text:
        return False
    if text.count(",") > 2 or text.startswith(",") or text.endswith(","):
        return False
    tokens = list(tokenize(text, ","))
    return len(tokens) == 3 and all(is_valid_number(token) for token in tokens)


def parse_rgb(text: str) -> tuple[int, int, int] | None:
    """Decode ``r,g,b`` into a tuple, or None when there are not three fields."""
    fields = split_fields(text, ",")
    if len(fields) != 3:
        return None
    red, green, blue = (parse_int(item) for item in fields)
    return red, green, blue


def set_rgb(data: SceneData) -> None:
    """Decode the raw floor and ceiling strings into their RGB tuples."""
    if data.floor is not None:
        rgb = parse_rgb(data.floor)
        if rgb is not None:
            data.floor_rgb = rgb
    if data.ceiling is not None:
        rgb = parse_rgb(data.ceiling)
        if rgb is not None:
            data.ceiling_rgb = rgb


def check_colors(data: SceneData) -> None:
    """Validate both colours and store their decoded values.

    Raises ParseError if the ceiling is missing or either colour is malformed.
    """
    if data.ceiling is None:
        raise ParseError("ceiling colour is missing")
    if not valid_rgb(data.ceiling):
        raise ParseError(f"invalid ceiling colour {data.ceiling!r}")
    if not valid_rgb(data.floor):
        raise ParseError(f"invalid floor colour {data.floor!r}")
    set_rgb(data)