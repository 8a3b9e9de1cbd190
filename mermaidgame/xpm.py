"""Reading of XPM images into rows of 0xAARRGGBB pixel values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from mermaidgame.colors import text_to_rgb

TRANSPARENT = 0xFF000000
"""Pixel value given to the colour "None"."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_DIRECT_KEY_CHARS = 2


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; ``pixels`` holds one tuple per row."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find(text: str, pattern: str) -> int:
    """Return the position of the first ``pattern`` in ``text``, or -1."""
    return text.find(pattern)


def find_unquoted(text: str, pattern: str) -> int:
    """Like :func:`find`, but skip matches inside double-quoted strings."""
    quoted = False
    for pos, char in enumerate(text[: len(text) - len(pattern) + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    count = min(count, len(text) - start)
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace C and C++ style comments outside strings by spaces.

    The length of the text is kept, so positions stay valid.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of each complete double-quoted string in order."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def color_key(chars: str) -> int:
    """Pack the characters naming a colour into one integer key."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _parse_color_line(line: str, cpp: int) -> tuple[str, Optional[str]]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line without a colour after 'c': {line!r}")
    end = words[index + 2] if index + 2 < len(words) else None
    return words[index + 1], end


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its quoted strings, header first."""
    rows = iter(lines)
    header = split_words(_next_line(rows, "header"))
    if len(header) < 4:
        raise XpmError(f"XPM header needs four values, got {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header values: {header[:4]!r}")

    direct = cpp <= _DIRECT_KEY_CHARS
    colors: dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "end of the colour table")
        name, end = _parse_color_line(line, cpp)
        key = color_key(line[:cpp])
        rgb = text_to_rgb(name, end)
        # Short keys let later entries override earlier ones; long keys keep the first.
        if direct:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    pixels = []
    for y in range(height):
        line = _next_line(rows, f"pixel row {y}")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        row = []
        for x in range(width):
            color = colors.get(color_key(line[x * cpp:(x + 1) * cpp]), 0)
            if color == -1:
                color = TRANSPARENT
            row.append(color & 0xFFFFFFFF)
        pixels.append(tuple(row))
    return XpmImage(width, height, tuple(pixels))


def read_xpm(path: Union[str, Path]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as error:
        raise XpmError(f"cannot read XPM file {path}: {error}") from error
    return parse_xpm(quoted_strings(strip_comments(text)))