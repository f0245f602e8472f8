"""View state, key handling and drawing of a height map onto a canvas."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field, replace
from enum import IntEnum

from wireframe.parsing import HeightMap, Point
from wireframe.projection import bresenham, isometric, rotate_x, rotate_y, rotate_z

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

_ROTATION_STEP = 0.05
_ZOOM_STEP = 0.1
_ZOOM_MIN = 0.2
_ANGLE_STEP = 5


class Key(IntEnum):
    """X11 key symbols the viewer reacts to."""

    ESCAPE = 0xFF1B
    UP = 0xFF52
    DOWN = 0xFF54
    LEFT = 0xFF51
    RIGHT = 0xFF53
    SHIFT_L = 0xFFE1
    CONTROL_L = 0xFFE3
    KP_SUBTRACT = 0xFFAD
    KP_ADD = 0xFFAB
    R = 0x72
    W = 0x77
    S = 0x73
    A = 0x61
    D = 0x64
    Q = 0x71
    E = 0x65
    Z = 0x7A
    X = 0x78
    ONE = 0x31
    TWO = 0x32
    THREE = 0x33


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class Canvas:
    """A frame of 32-bit pixels, stored row by row."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.pixels:
            self.clear()

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.pixels = [0] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside the canvas")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)``."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at ``(x, y)``."""
        return self.pixels[self._index(x, y)]


@dataclass
class ViewState:
    """Zoom, offsets, projection angle and rotations of the view."""

    zoom: float = 0.5
    size: float = 0.0
    x_offset: float = WINDOW_WIDTH * 2 // 5
    y_offset: float = WINDOW_HEIGHT * 1 // 5
    angle: int = 30
    view: int = 2
    size_applied: int = 0
    alpha: float = 0.0
    beta: float = 0.0
    gamma: float = 0.0

    def reset(self) -> None:
        """Return every setting to its default."""
        defaults = ViewState()
        for name in self.__dataclass_fields__:
            setattr(self, name, getattr(defaults, name))


class Viewer:
    """Projects a height map and reacts to key presses.

    With ``bonus`` false the viewer only draws the isometric projection and
    ignores every key but Escape.
    """

    def __init__(self, height_map: HeightMap, bonus: bool = True) -> None:
        self.height_map = height_map
        self.bonus = bonus
        self.state = ViewState()
        self._reset()

    def _reset(self) -> None:
        self.state.reset()
        if self.bonus:
            self.height_map.restore_original_z()

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return True when the key asks to quit."""
        if key == Key.ESCAPE:
            return True
        if not self.bonus:
            return False
        try:
            key = Key(key)
        except ValueError:
            return False
        self._view_keys(key)
        self._move_keys(key)
        self._rotate_keys(key)
        return False

    def _view_keys(self, key: Key) -> None:
        state = self.state
        if key is Key.KP_SUBTRACT and state.zoom > _ZOOM_MIN:
            state.zoom -= _ZOOM_STEP
        elif key is Key.KP_ADD:
            state.zoom += _ZOOM_STEP
        elif key is Key.E:
            state.angle += _ANGLE_STEP
        elif key is Key.Q:
            state.angle -= _ANGLE_STEP
        elif key is Key.ONE:
            self._reset()
            state.view = 1
            state.x_offset -= 200
        elif key is Key.TWO:
            self._reset()
            state.view = 2
        elif key is Key.R:
            self._reset()

    def _move_keys(self, key: Key) -> None:
        state = self.state
        step = 30 if self.height_map.cols > 70 or state.zoom >= 0.9 else 10
        if key is Key.UP:
            state.y_offset -= step
        elif key is Key.DOWN:
            state.y_offset += step
        elif key is Key.LEFT:
            state.x_offset -= step
        elif key is Key.RIGHT:
            state.x_offset += step
        elif key is Key.SHIFT_L:
            self.apply_size(1)
        elif key is Key.CONTROL_L:
            self.apply_size(-1)

    def _rotate_keys(self, key: Key) -> None:
        state = self.state
        changes = {
            Key.S: ("alpha", -_ROTATION_STEP),
            Key.W: ("alpha", _ROTATION_STEP),
            Key.A: ("beta", -_ROTATION_STEP),
            Key.D: ("beta", _ROTATION_STEP),
            Key.Z: ("gamma", -_ROTATION_STEP),
            Key.X: ("gamma", _ROTATION_STEP),
        }
        if key in changes:
            name, delta = changes[key]
            setattr(state, name, _f32(getattr(state, name) + delta))

    def apply_size(self, flag: int) -> None:
        """Stretch heights by their original value (1) or undo one stretch (-1)."""
        grow = flag == 1
        shrink = flag == -1 and self.state.size_applied > 0
        if not (grow or shrink):
            return
        for row in self.height_map.points:
            for point in row:
                step = point.original_z if point.z >= 0 else -abs(point.original_z)
                point.z += step if grow else -step
        self.state.size_applied += 1 if grow else -1

    def project(self, point: Point) -> Point:
        """Return a copy of ``point`` moved to its screen position."""
        state = self.state
        height_map = self.height_map
        width = WINDOW_WIDTH * state.zoom
        height = WINDOW_HEIGHT * state.zoom
        projected = replace(point)
        projected.x = point.x * (width / height_map.cols)
        projected.y = point.y * (height / height_map.rows)
        if not self.bonus or state.view == 2:
            if self.bonus:
                rotate_x(projected, state.alpha)
                rotate_y(projected, state.beta)
                rotate_z(projected, state.gamma)
            projected.x, projected.y = isometric(
                projected.x, projected.y, projected.z, state.angle
            )
        projected.x += state.x_offset
        projected.y += state.y_offset
        return projected

    def draw_line(self, canvas: Canvas, a: Point, b: Point) -> None:
        """Draw the edge between two grid points in the colour of ``a``."""
        start = self.project(a)
        end = self.project(b)
        for x, y in bresenham(start.x, start.y, end.x, end.y):
            if 0 <= x < canvas.width and 0 <= y < canvas.height:
                canvas.put_pixel(math.trunc(x), math.trunc(y), start.color)

    def render(self, canvas: Canvas) -> None:
        """Clear ``canvas`` and draw every edge of the grid onto it."""
        canvas.clear()
        points = self.height_map.points
        rows, cols = self.height_map.rows, self.height_map.cols
        for i in range(cols):
            for j in range(rows):
                if j < rows - 1:
                    self.draw_line(canvas, points[j][i], points[j + 1][i])
                if i < cols - 1:
                    self.draw_line(canvas, points[j][i], points[j][i + 1])