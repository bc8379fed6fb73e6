#!/usr/bin/env python3
"""
RGBA colors and the named palette.

Color is a NamedTuple so it can be handed straight to pygame, which accepts any
(r, g, b, a) sequence.
"""
import random
from typing import NamedTuple, Optional


class Color(NamedTuple):
    """Four 8-bit channels; alpha defaults to opaque."""
    r: int
    g: int
    b: int
    a: int = 255


BLACK = Color(0, 0, 0)
DARK_GRAY = Color(64, 64, 64)
GRAY = Color(128, 128, 128)
LIGHT_GRAY = Color(192, 192, 192)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)
YELLOW = Color(255, 255, 0)
ORANGE = Color(255, 165, 0)
PURPLE = Color(128, 0, 128)


def random_color(rng: Optional[random.Random] = None) -> Color:
    """Uniformly random opaque color. Pass an rng for reproducible picks."""
    rng = rng or random
    return Color(rng.randrange(256), rng.randrange(256), rng.randrange(256))
