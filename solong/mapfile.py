"""Loading and validation of ``.ber`` map files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

WALL = "1"
MAP_TILES = "10ECPJ"
MIN_SIZE = 4

_LINE = re.compile(r"[^\n]*\n|[^\n]+")

_RED = "\033[31m"
_MAGENTA = "\033[35m"
_RESET = "\033[0m"


class MapError(ValueError):
    """Raised when a map file is missing, unreadable or malformed."""

    def __init__(self, message: str, errnum: int = 5) -> None:
        super().__init__(message)
        self.message = message
        self.errnum = errnum


@dataclass
class GameMap:
    """A rectangular grid of map tiles, indexed by column and row."""

    rows: list[list[str]]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} map")

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` of row ``y``."""
        self._check(x, y)
        return self.rows[y][x]

    def set_tile(self, x: int, y: int, tile: str) -> None:
        """Replace the tile at column ``x`` of row ``y``."""
        self._check(x, y)
        self.rows[y][x] = tile

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def format_error(message: str) -> str:
    """Return an error report in the colours the game prints it with."""
    return f"{_RED}Error\n{_MAGENTA}\t{message}\n{_RESET}"


def check_extension(path: Union[str, Path]) -> None:
    """Raise MapError unless ``path`` names a ``.ber`` file."""
    if not str(path).endswith(".ber"):
        raise MapError("File type is not supported, use .ber files!", errnum=2)


def _spans(row: str, allowed: str, width: int) -> bool:
    """Whether ``row`` starts with exactly ``width`` characters from ``allowed``."""
    if len(row) < width or any(char not in allowed for char in row[:width]):
        return False
    return len(row) == width or row[width] not in allowed


def validate_row(row: str, width: int, index: int) -> str:
    """Check one raw line of the map and return its ``width`` tiles.

    ``row`` is the line as read, with its newline if it has one; ``index``
    is its position in the file.
    """
    if width < MIN_SIZE:
        raise MapError("The width is too small!")
    if _spans(row, WALL, width):
        if len(row) != width and index > 0:
            raise MapError("Wrong construction of the map!")
        return row[:width]
    if _spans(row, MAP_TILES, width):
        if row[0] != WALL or row[width - 1] != WALL:
            raise MapError("Wrong construction of the map!")
        if len(row) - 1 != width:
            raise MapError("Wrong construction of the map!")
        return row[:width]
    raise MapError("Wrong construction of the map, letter not allowed!")


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from raw lines, each keeping its trailing newline."""
    rows: list[str] = []
    width = 0
    for index, line in enumerate(lines):
        if index == 0:
            width = len(line) - 1
        rows.append(validate_row(line, width, index))

    collectibles = sum("C" in row for row in rows)
    players = sum("P" in row for row in rows)
    exits = sum("E" in row for row in rows)
    if collectibles < 1 or players != 1 or exits != 1:
        raise MapError("Something is missing from the map!")
    if len(rows) < MIN_SIZE:
        raise MapError("The height is too small!")
    return GameMap([list(row) for row in rows])


def load_map(path: Union[str, Path]) -> GameMap:
    """Read and validate a ``.ber`` map file."""
    check_extension(path)
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError:
        raise MapError("File doesn't exists", errnum=9) from None
    return parse_map(_LINE.findall(text))