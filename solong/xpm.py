"""Reading XPM pixmaps into plain pixel grids."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from solong.colors import text_to_rgb

TRANSPARENT = -1
TRANSPARENT_PIXEL = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: its size and its pixels in row-major order."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """The pixel value at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _blank_outside_quotes(text: str, opener: str, closer: str) -> str:
    quoted = False
    index = 0
    while index < len(text):
        char = text[index]
        if char == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, index):
            end = text.find(closer, index + len(opener))
            stop = len(text) if end < 0 else end + len(closer)
            text = text[:index] + " " * (stop - index) + text[stop:]
        index += 1
    return text


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    Comments are replaced by spaces, so the text keeps its length.
    """
    text = _blank_outside_quotes(text, "/*", "*/")
    return _blank_outside_quotes(text, "//", "\n")


def extract_strings(text: str) -> list[str]:
    """The contents of every double-quoted string in ``text``, in order."""
    return _QUOTED.findall(text)


def _read_colors(lines, count: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    for number in range(count):
        line = next(lines, None)
        if line is None or len(line) < cpp:
            raise XpmError(f"missing or short colour line {number}")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            position = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line {number} has no 'c' entry") from None
        if position >= len(words):
            raise XpmError(f"colour line {number} has no colour after 'c'")
        end: Optional[str] = words[position + 1] if position + 1 < len(words) else None
        color = text_to_rgb(words[position], end)
        # Short keys keep the last definition, long ones the first.
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)
    return palette


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its string entries: header, colours, then rows."""
    entries = iter(lines)
    header = next(entries, None)
    if header is None:
        raise XpmError("XPM data has no header")
    values = [_atoi(word) for word in split_words(header)[:4]]
    if len(values) < 4 or any(value <= 0 for value in values):
        raise XpmError(f"bad XPM header: {header!r}")
    width, height, ncolors, cpp = values
    palette = _read_colors(entries, ncolors, cpp)

    pixels: list[int] = []
    for row in range(height):
        line = next(entries, None)
        if line is None:
            raise XpmError(f"missing pixel row {row}")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {row} is too short")
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start : start + cpp], 0)
            pixels.append(TRANSPARENT_PIXEL if color == TRANSPARENT else color & 0xFFFFFFFF)
    return XpmImage(width=width, height=height, pixels=tuple(pixels))


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(extract_strings(strip_comments(text)))


def load_xpm(path: Union[str, os.PathLike]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, "r", encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)}: {exc}") from exc
    return parse_xpm(text)