#!/usr/bin/env python3
"""
Camera: maps world points to screen pixels through a Frame2D and renders a Scene.

World-to-screen transform
- screen = center + frame.get_local_coordinates(world_point)
- center is (width // 2, height // 2) in whole pixels, fixed at construction.
- Circle and cross radii are multiplied by frame.scale.x only; a non-uniform scale
  distorts point positions but not shape radii.

Backend lifecycle
- pygame is initialised by the first live Camera and shut down when the last one closes.
- Each Camera owns its rasterizer (by default a WindowRasterizer) and closes it in close().
  Cameras are context managers.
"""
import logging
from typing import Optional

import pygame

from . import draw
from .color import Color
from .constants import BACKGROUND_COLOR, DEFAULT_CAMERA_HEIGHT, DEFAULT_CAMERA_WIDTH
from .frame import Frame2D
from .rasterizer import Rasterizer, WindowRasterizer
from .scene import Scene
from .vector import Vector2D

logger = logging.getLogger(__name__)


class Camera:
    """
    A window (or any rasterizer) looking at the world through a Frame2D.

    Attributes:
        frame: frame whose local coordinates are screen offsets from center; not owned.
        center: screen-center offset in pixels.
        rasterizer: drawing backend owned by this camera.
    """

    _live_cameras = 0

    def __init__(self,
                 title: str = "Simulation",
                 frame: Optional[Frame2D] = None,
                 width: int = DEFAULT_CAMERA_WIDTH,
                 height: int = DEFAULT_CAMERA_HEIGHT,
                 rasterizer: Optional[Rasterizer] = None):
        if Camera._live_cameras == 0:
            pygame.init()
            logger.info("pygame initialised")
        Camera._live_cameras += 1
        try:
            self.rasterizer = rasterizer if rasterizer is not None else WindowRasterizer(title, width, height)
        except Exception:
            self._release_backend()
            raise
        self._closed = False
        self.frame = frame if frame is not None else Frame2D.identity()
        self.width = width
        self.height = height
        self.center = Vector2D(width // 2, height // 2)

    @classmethod
    def live_cameras(cls) -> int:
        return cls._live_cameras

    @staticmethod
    def _release_backend() -> None:
        Camera._live_cameras -= 1
        if Camera._live_cameras == 0:
            pygame.quit()
            logger.info("pygame shut down")

    def close(self) -> None:
        """Release the rasterizer; the last camera to close shuts pygame down. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self.rasterizer.close()
        self._release_backend()

    def __enter__(self) -> "Camera":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def to_screen(self, p: Vector2D) -> Vector2D:
        return self.center + self.frame.get_local_coordinates(p)

    def render(self, scene: Scene) -> None:
        """Clear to the background color, draw every drawable in depth order, present."""
        draw.clear_screen(self.rasterizer, BACKGROUND_COLOR)
        for drawable in scene:
            drawable.draw(self)
        self.rasterizer.present()

    def set_draw_color(self, color: Color) -> None:
        draw.set_color(self.rasterizer, color)

    def draw_line(self, start: Vector2D, end: Vector2D) -> None:
        draw.line(self.rasterizer, self.to_screen(start), self.to_screen(end))

    def draw_circle(self, center: Vector2D, radius: float) -> None:
        draw.circle(self.rasterizer, self.to_screen(center), self.frame.scale.x * radius)

    def draw_arrow(self, start: Vector2D, end: Vector2D) -> None:
        draw.arrow(self.rasterizer, self.to_screen(start), self.to_screen(end))

    def draw_cross(self, center: Vector2D, radius: float) -> None:
        draw.cross(self.rasterizer, self.to_screen(center), self.frame.scale.x * radius)

    def draw_rect(self, top_left: Vector2D, bottom_right: Vector2D) -> None:
        draw.rect(self.rasterizer, self.to_screen(top_left), self.to_screen(bottom_right))
