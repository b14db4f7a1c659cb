"""Small string helpers shared by the scene parser."""

from __future__ import annotations

import re
from collections.abc import Iterator

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_WORD = re.compile(r"[^ \t]+")
_BLANKS = frozenset(" \t\n")


def parse_int(text: str) -> int:
    """Read a leading decimal integer, ignoring leading whitespace and trailing junk.

    Text with no digits after the optional sign reads as 0.
    """
    match = _INT_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def word_count(text: str | None) -> int:
    """Count runs of characters separated by spaces or tabs."""
    if text is None:
        return 0
    return len(_WORD.findall(text))


def is_spaces_only(line: str | None) -> bool:
    """True when the line holds nothing but spaces, tabs and newlines."""
    if line is None:
        return False
    return all(ch in _BLANKS for ch in line)


def is_empty_line(line: str | None) -> bool:
    """True when the line is exactly a single newline."""
    return line == "\n"


def split_fields(text: str, sep: str) -> list[str]:
    """Split on a separator, dropping empty fields."""
    return [field for field in text.split(sep) if field]


def tokenize(text: str, delims: str) -> Iterator[str]:
    """Yield maximal runs of characters that are not in ``delims``."""
    word: list[str] = []
    for ch in text:
        if ch in delims:
            if word:
                yield "".join(word)
                word = []
        else:
            word.append(ch)
    if word:
        yield "".join(word)