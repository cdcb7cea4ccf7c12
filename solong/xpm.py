"""Reading images in the XPM text format."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from solong.colors import color_by_name

TRANSPARENT = 0xFF000000
"""Pixel value of a transparent pixel: the top byte holds transparency."""

_WORD_SEPARATOR = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when an XPM image cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image; each pixel is 0xTTRRGGBB with TT the transparency."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y][x]

    def is_transparent(self, x: int, y: int) -> bool:
        """Tell whether the pixel at (x, y) is fully transparent."""
        return self.pixel(x, y) == TRANSPARENT


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATOR.split(text) if word]


def _blank(text: str, opener: str, closer: str, keep_closer: bool) -> str:
    chars = list(text)
    in_quote = False
    i = 0
    while i < len(text):
        if text[i] == '"':
            in_quote = not in_quote
            i += 1
            continue
        if not in_quote and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            if end == -1:
                stop = len(text)
            else:
                stop = end if keep_closer else end + len(closer)
            chars[i:stop] = " " * (stop - i)
            i = stop
            continue
        i += 1
    return "".join(chars)


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces, keeping the length."""
    text = _blank(text, "/*", "*/", keep_closer=False)
    return _blank(text, "//", "\n", keep_closer=True)


def text_to_rgb(name: str, following: Optional[str] = None) -> int:
    """Turn a colour word (``#RRGGBB`` or a name) into 0xRRGGBB.

    ``following`` is the next word of the definition; it is joined to a
    colour name with a space, so that names like "dark red" work. The name
    "none" gives -1; unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if following is not None:
        name = f"{name} {following}"[:_NAME_LIMIT]
    color = color_by_name(name)
    return 0 if color is None else color


def _atoi(word: str) -> int:
    match = _INTEGER.match(word)
    return int(match.group(1)) if match else 0


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the contents of its quoted XPM strings."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = [_atoi(word) for word in split_words(next_line("header"))[:4]]
    if len(header) < 4 or any(value <= 0 for value in header):
        raise XpmError("invalid XPM header")
    width, height, ncolors, cpp = header

    # With one or two characters per pixel a later definition overrides an
    # earlier one; with more, the first definition of a key is kept.
    overriding = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c': {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        following = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], following)
        key = line[:cpp]
        if overriding:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(
            tuple(
                _pixel_value(palette.get(line[start:start + cpp], 0))
                for start in range(0, width * cpp, cpp)
            )
        )
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: Union[str, os.PathLike]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)}: {exc.strerror}") from exc
    return parse_xpm_text(text)