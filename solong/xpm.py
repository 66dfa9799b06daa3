"""Reader for XPM images, covering the subset of the format used by sprites."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from solong.colors import lookup_color

# Pixel value used for the transparent colour "None".
TRANSPARENT_PIXEL = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_INTEGER = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: rows of 0xRRGGBB pixel values."""

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


def _blank_comments(text: str, opener: str, closer: str) -> str:
    parts: list[str] = []
    in_quote = False
    i = 0
    size = len(text)
    while i < size:
        char = text[i]
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            end = size if end == -1 else end + len(closer)
            parts.append(" " * (end - i))
            i = end
            continue
        parts.append(char)
        i += 1
    return "".join(parts)


def strip_comments(text: str) -> str:
    """Replace comments outside quoted strings with spaces.

    Block comments are removed first, then line comments together with the
    newline that ends them. The text keeps its length.
    """
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def quoted_lines(text: str) -> Iterator[str]:
    """Yield, in order, the contents of each double-quoted string in ``text``."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _parse_hex(text: str) -> int:
    match = _HEX_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if sign == "-" else value


def _parse_int(text: str) -> int:
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def color_spec_to_rgb(name: str, extra: Optional[str]) -> int:
    """Return the colour a "c" specification names.

    "#RRGGBB" is read as hexadecimal. Otherwise ``name`` joined with
    ``extra`` (when given) is looked up among the named colours; "None"
    gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if extra:
        name = f"{name} {extra}"
    value = lookup_color(name)
    return 0 if value is None else value


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"incomplete XPM header: {line!r}")
    values = tuple(_parse_int(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    extra = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], color_spec_to_rgb(words[index], extra)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its strings: header, colours, then pixel rows."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"XPM data ends before the {what}") from None

    width, height, ncolors, cpp = _read_header(next_line("header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _read_color(next_line("colour table ends"), cpp)
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    rows: list[tuple[int, ...]] = []
    for _ in range(height):
        line = next_line("last pixel row")
        row: list[int] = []
        for x in range(width):
            key = line[cpp * x : cpp * (x + 1)]
            value = palette.get(key, 0) if len(key) == cpp else 0
            row.append(TRANSPARENT_PIXEL if value == -1 else value)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def read_xpm_file(path: Union[str, Path]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))