"""
Pytest configuration and shared fixtures.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from nbody.camera import Camera
from nbody.data_models import PhysicsBody, PhysicsWorld
from nbody.vector import Vector2D


class RecordingRasterizer:
    """Rasterizer that records every call instead of drawing."""

    def __init__(self, events=None, ticks=None):
        self.calls = []
        self.color = (255, 255, 255, 255)
        self.events = list(events or [])
        self.ticks = list(ticks or [])
        self.closed = False

    def set_draw_color(self, r, g, b, a=255):
        self.color = (r, g, b, a)
        self.calls.append(("color", (r, g, b, a)))

    def draw_point(self, x, y):
        self.calls.append(("point", (x, y)))

    def draw_line(self, x0, y0, x1, y1):
        self.calls.append(("line", (x0, y0, x1, y1)))

    def draw_rect(self, x, y, w, h):
        self.calls.append(("rect", (x, y, w, h)))

    def clear(self):
        self.calls.append(("clear", self.color))

    def present(self):
        self.calls.append(("present", None))

    def event_poll(self):
        if self.events:
            return self.events.pop(0)
        return None

    def ticks_ms(self):
        if self.ticks:
            return self.ticks.pop(0)
        return 0

    def close(self):
        self.closed = True

    def of_kind(self, kind):
        return [args for k, args in self.calls if k == kind]


@pytest.fixture
def recorder():
    return RecordingRasterizer()


@pytest.fixture
def camera(recorder, monkeypatch):
    """A 200x100 camera drawing into a RecordingRasterizer, with pygame init/quit stubbed."""
    monkeypatch.setattr(pygame, "init", lambda: (0, 0))
    monkeypatch.setattr(pygame, "quit", lambda: None)
    cam = Camera("test", None, 200, 100, rasterizer=recorder)
    yield cam
    cam.close()


@pytest.fixture
def two_body_world():
    """Two unit masses 200 apart on the x axis, at rest."""
    world = PhysicsWorld()
    world.add_body(PhysicsBody(Vector2D(-100, 0), Vector2D(0, 0), 1))
    world.add_body(PhysicsBody(Vector2D(100, 0), Vector2D(0, 0), 1))
    return world


@pytest.fixture
def make_recorder():
    """Factory for extra RecordingRasterizers."""
    return RecordingRasterizer
