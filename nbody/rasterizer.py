#!/usr/bin/env python3
"""
Pixel rasterizer backends.

The camera and draw helpers only talk to the small Rasterizer interface below. Two pygame
implementations are provided:
- SurfaceRasterizer draws into any pygame.Surface (offscreen rendering, tests).
- WindowRasterizer opens the display window and presents with display.flip().

pygame must already be initialised before a WindowRasterizer is created; Camera takes
care of the process-wide init/quit pair.
"""
import logging
from typing import Optional, Protocol

import pygame

from .color import Color, WHITE
from .errors import BackendInitError

logger = logging.getLogger(__name__)


class Rasterizer(Protocol):
    """Minimal 2D drawing surface. All coordinates are integer pixels."""

    def set_draw_color(self, r: int, g: int, b: int, a: int = 255) -> None: ...

    def draw_point(self, x: int, y: int) -> None: ...

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None: ...

    def draw_rect(self, x: int, y: int, w: int, h: int) -> None: ...

    def clear(self) -> None: ...

    def present(self) -> None: ...

    def event_poll(self) -> Optional[pygame.event.Event]: ...

    def ticks_ms(self) -> int: ...

    def close(self) -> None: ...


class SurfaceRasterizer:
    """Rasterizer over a pygame.Surface. present() and event_poll() do nothing."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.color: Color = WHITE

    @property
    def size(self):
        return self.surface.get_size()

    def set_draw_color(self, r: int, g: int, b: int, a: int = 255) -> None:
        self.color = Color(r, g, b, a)

    def draw_point(self, x: int, y: int) -> None:
        # set_at ignores pixels outside the surface
        self.surface.set_at((x, y), self.color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        pygame.draw.line(self.surface, self.color, (x0, y0), (x1, y1), 1)

    def draw_rect(self, x: int, y: int, w: int, h: int) -> None:
        rect = pygame.Rect(x, y, w, h)
        rect.normalize()
        pygame.draw.rect(self.surface, self.color, rect, 1)

    def clear(self) -> None:
        self.surface.fill(self.color)

    def present(self) -> None:
        pass

    def event_poll(self) -> Optional[pygame.event.Event]:
        return None

    def ticks_ms(self) -> int:
        return pygame.time.get_ticks()

    def close(self) -> None:
        pass


class WindowRasterizer(SurfaceRasterizer):
    """Rasterizer backed by the pygame display window."""

    def __init__(self, title: str, width: int, height: int):
        try:
            surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise BackendInitError(f"Could not create window: {exc}") from exc
        pygame.display.set_caption(title)
        logger.debug("opened %dx%d window %r", width, height, title)
        super().__init__(surface)
        self._open = True

    def present(self) -> None:
        pygame.display.flip()

    def event_poll(self) -> Optional[pygame.event.Event]:
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return None
        return event

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()


def is_quit_event(event: Optional[pygame.event.Event]) -> bool:
    return event is not None and event.type == pygame.QUIT
