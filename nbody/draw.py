#!/usr/bin/env python3
"""
Screen-space drawing primitives on top of a Rasterizer.

Points are Vector2D in pixels; they are truncated to integers right before they reach the
rasterizer. Points outside +/- SAFE_COORD_LIMIT are not rasterized, which keeps huge
coordinates (e.g. a body far off screen) from reaching the backend.
"""
from typing import Optional, Tuple

from .color import Color
from .constants import ARROW_HEAD_HALF_WIDTH, ARROW_HEAD_LENGTH, SAFE_COORD_LIMIT
from .rasterizer import Rasterizer
from .vector import Vector2D


def _safe_point(p: Vector2D) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(p.x), int(p.y)
    except (ValueError, OverflowError):
        # NaN or infinity
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def set_color(rasterizer: Rasterizer, color: Color) -> None:
    rasterizer.set_draw_color(color.r, color.g, color.b, color.a)


def line(rasterizer: Rasterizer, start: Vector2D, end: Vector2D) -> None:
    start_s = _safe_point(start)
    end_s = _safe_point(end)
    if start_s is None or end_s is None:
        return
    rasterizer.draw_line(start_s[0], start_s[1], end_s[0], end_s[1])


def circle(rasterizer: Rasterizer, center: Vector2D, radius: float) -> None:
    """Midpoint circle outline, emitting the eight symmetric points per step."""
    c = _safe_point(center)
    if c is None:
        return
    cx, cy = c
    x = int(radius)
    y = 0
    err = 0
    while x >= y:
        rasterizer.draw_point(cx + x, cy + y)
        rasterizer.draw_point(cx + y, cy + x)
        rasterizer.draw_point(cx - y, cy + x)
        rasterizer.draw_point(cx - x, cy + y)
        rasterizer.draw_point(cx - x, cy - y)
        rasterizer.draw_point(cx - y, cy - x)
        rasterizer.draw_point(cx + y, cy - x)
        rasterizer.draw_point(cx + x, cy - y)
        if err <= 0:
            y += 1
            err += 2 * y + 1
        if err > 0:
            x -= 1
            err -= 2 * x + 1


def arrow(rasterizer: Rasterizer, start: Vector2D, end: Vector2D) -> None:
    """Line from start to end with a two-stroke head at end. No head when start == end."""
    line(rasterizer, start, end)
    direction = end - start
    if direction.magnitude() == 0:
        return
    direction = direction.normalized()
    perp = direction.perpendicular()
    back = end - direction * ARROW_HEAD_LENGTH
    line(rasterizer, end, back + perp * ARROW_HEAD_HALF_WIDTH)
    line(rasterizer, end, back - perp * ARROW_HEAD_HALF_WIDTH)


def cross(rasterizer: Rasterizer, center: Vector2D, radius: float) -> None:
    line(rasterizer, center + Vector2D(-radius, -radius), center + Vector2D(radius, radius))
    line(rasterizer, center + Vector2D(-radius, radius), center + Vector2D(radius, -radius))


def rect(rasterizer: Rasterizer, top_left: Vector2D, bottom_right: Vector2D) -> None:
    tl = _safe_point(top_left)
    br = _safe_point(bottom_right)
    if tl is None or br is None:
        return
    rasterizer.draw_rect(tl[0], tl[1], br[0] - tl[0], br[1] - tl[1])


def clear_screen(rasterizer: Rasterizer, color: Color) -> None:
    set_color(rasterizer, color)
    rasterizer.clear()
