"""Reading height maps from ``.fdf`` files.

A map file holds one row of the grid per line. Fields are separated by
spaces and each field is a height, optionally followed by a comma and a
hexadecimal colour (``10,0xFF0000``). Every line must hold the same number
of fields.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

WHITE = 0xFFFFFF
MAP_SUFFIX = ".fdf"

_SPACES = " \t\n\v\f\r"
_HEX_LETTERS = {c: 10 + i for i, c in enumerate("abcdef")}


class MapError(ValueError):
    """Raised when a map file cannot be opened or is malformed."""


@dataclass
class Point:
    """One vertex of the grid: its position, height and colour."""

    x: float
    y: float
    z: int
    original_z: int
    color: int = WHITE


@dataclass
class HeightMap:
    """A rectangular grid of points, indexed as ``points[row][column]``."""

    rows: int
    cols: int
    points: list[list[Point]] = field(default_factory=list)

    def restore_original_z(self) -> None:
        """Reset every point's height to the value read from the file."""
        for row in self.points:
            for point in row:
                point.z = point.original_z


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0. The result wraps to 32 bits.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = result * 10 + int(char)
    return _to_int32(result * sign)


def parse_hex(text: str | None) -> int:
    """Parse a colour written in hexadecimal.

    Letters ``a``-``f`` (either case) count as 10-15 and every other
    character counts as its code minus ``ord('0')``. A ``0x`` prefix
    therefore only lands in the bits above the 24-bit colour. ``None``
    gives 0. The result wraps to 32 bits.
    """
    if text is None:
        return 0
    num = 0
    for char in text:
        digit = _HEX_LETTERS.get(char.lower(), ord(char) - ord("0"))
        num = _to_int32(num * 16 + digit)
    return num


def split_fields(line: str, sep: str) -> list[str]:
    """Split ``line`` on ``sep``, dropping empty fields."""
    return [part for part in line.split(sep) if part]


def count_columns(line: str, expected_cols: int) -> int:
    """Count the space-separated fields of ``line``.

    When ``expected_cols`` is not zero the count must equal it, otherwise
    :class:`MapError` is raised.
    """
    cols = len(split_fields(line, " "))
    if expected_cols and cols != expected_cols:
        raise MapError("Map in wrong format, check the edges!")
    return cols


def parse_row(line: str, y: int) -> list[Point]:
    """Turn one line of a map into the points of row ``y``."""
    points = []
    for x, item in enumerate(split_fields(line.strip("\n"), " ")):
        parts = split_fields(item, ",")
        if not parts:
            raise MapError(f"Map in wrong format, empty field on row {y}!")
        z = parse_int(parts[0])
        color = parse_hex(parts[1]) if len(parts) > 1 else WHITE
        points.append(Point(float(x), float(y), z, z, color))
    return points


def read_lines(path: str | Path) -> Iterator[str]:
    """Yield the lines of a file, each keeping its trailing newline.

    Lines are split on ``\\n`` only; no empty line follows a final newline.
    """
    with open(path, "rb") as handle:
        for raw in handle:
            yield raw.decode("utf-8", errors="replace")


def load_map(path: str | Path) -> HeightMap:
    """Read and validate a ``.fdf`` map file.

    Raises :class:`MapError` for a wrong file name, an unreadable or empty
    file, or rows of differing width.
    """
    if not str(path).endswith(MAP_SUFFIX):
        raise MapError("File specified in wrong format!")
    try:
        lines = list(read_lines(path))
    except OSError as exc:
        raise MapError("File doesn't exist or couldn't open!") from exc
    if not lines:
        raise MapError("File can't be readed!")

    cols = 0
    for line in lines:
        counted = count_columns(line.strip("\n"), cols)
        if cols == 0:
            cols = counted

    points = [parse_row(line, y) for y, line in enumerate(lines)]
    height_map = HeightMap(rows=len(lines), cols=cols, points=points)
    height_map.restore_original_z()
    return height_map