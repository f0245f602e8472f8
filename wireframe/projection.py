"""Projection and line rasterising for wireframe rendering."""

from __future__ import annotations

import math
from collections.abc import Iterator

from wireframe.parsing import Point

PI = 3.14159265


def get_radian(angle: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle * (PI / 180)


def isometric(x: float, y: float, z: int, angle: float) -> tuple[float, float]:
    """Project grid coordinates ``(x, y)`` at height ``z`` onto the screen.

    ``angle`` is the projection angle in degrees.
    """
    radian = get_radian(angle)
    return (x - y) * math.cos(radian), (x + y) * math.sin(radian) - z


def rotate_x(point: Point, alpha: float) -> None:
    """Rotate ``point`` in place about the x axis by ``alpha`` radians.

    The old ``y`` is truncated to an integer before rotating, and the new
    height is truncated too.
    """
    tmp = math.trunc(point.y)
    point.y = tmp * math.cos(alpha) - point.z * math.sin(alpha)
    point.z = math.trunc(tmp * math.sin(alpha) + point.z * math.cos(alpha))


def rotate_y(point: Point, beta: float) -> None:
    """Rotate ``point`` in place about the y axis by ``beta`` radians."""
    tmp = math.trunc(point.x)
    point.x = tmp * math.cos(beta) + point.z * math.sin(beta)
    point.z = math.trunc(point.z * math.cos(beta) - tmp * math.sin(beta))


def rotate_z(point: Point, gamma: float) -> None:
    """Rotate ``point`` in place about the z axis by ``gamma`` radians."""
    tmp = math.trunc(point.x)
    point.x = tmp * math.cos(gamma) - point.y * math.sin(gamma)
    point.y = tmp * math.sin(gamma) + point.y * math.cos(gamma)


def bresenham(
    x0: float, y0: float, x1: float, y1: float
) -> Iterator[tuple[float, float]]:
    """Yield the positions visited when drawing a line from start to end.

    The start point is always yielded first; one position is yielded per
    step along the longer axis, plus one.
    """
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    if dx > dy:
        err = math.trunc(dx / 2)
        steps = math.trunc(dx)
    else:
        err = math.trunc(-dy / 2)
        steps = math.trunc(dy)
    x, y = x0, y0
    for _ in range(steps + 1):
        yield x, y
        e2 = err
        if e2 > -dx:
            err = math.trunc(err - dy)
            x += sx
        if e2 < dy:
            err = math.trunc(err + dx)
            y += sy