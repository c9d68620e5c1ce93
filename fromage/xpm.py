"""Reading XPM pictures into :class:`~fromage.image.Image` objects.

Only the parts of the format the game needs are handled: a header of
width, height, colour count and characters per pixel, colour lines using
the ``c`` key, and pixel rows. Colours named ``none`` become transparent
pixels with the value ``0xFF000000``.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from fromage.colors import NONE_COLOR, parse_color
from fromage.image import Image, new_image

TRANSPARENT = 0xFF000000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when an XPM picture cannot be read."""


def split_words(text: str) -> list[str]:
    """Split *text* on runs of spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def find(text: str, needle: str) -> int:
    """Return the position of *needle* in *text*, or -1."""
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the position of *needle* in *text* outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings by spaces.

    The text keeps its length. A line comment is blanked together with the
    newline that ends it.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        stop = len(text) if end < 0 else begin + end + 4
        text = _blank(text, begin, stop)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        stop = len(text) if end < 0 else begin + end + 3
        text = _blank(text, begin, stop)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in *text*, in order."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def color_key(chars: str) -> int:
    """Pack the characters naming a colour into one integer key."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"picture ends before its {what}") from None


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[int, int]:
    table: dict[int, int] = {}
    for _ in range(count):
        line = _next_line(lines, "colour table")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without a 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        qualifier = words[index + 2] if index + 2 < len(words) else None
        value = parse_color(words[index + 1], qualifier)
        key = color_key(line[:cpp])
        if cpp <= 2:
            table[key] = value
        else:
            table.setdefault(key, value)
    return table


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM picture.

    The first string is the header; then come the colour lines and the
    pixel rows. Keys not in the colour table give black.
    """
    source = iter(lines)
    header = _next_line(source, "header")
    words = split_words(header)
    if len(words) < 4:
        raise XpmError(f"bad header: {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"bad header: {header!r}")
    table = _read_colors(source, ncolors, cpp)
    image = new_image(width, height)
    for y in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = table.get(color_key(line[x * cpp:(x + 1) * cpp]), 0)
            if color == NONE_COLOR:
                color = TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def xpm_from_data(rows: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(rows)


def load_xpm(path: str | os.PathLike[str]) -> Image:
    """Read the XPM file at *path* and return its image."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read picture {os.fspath(path)!r}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))