#!/usr/bin/env python3
"""
Drawables and the depth-ordered scene that holds them.

A Scene is owned by the application and handed to Camera.render(). Drawables are added
and removed through explicit calls. The list stays sorted by non-decreasing depth; a new
drawable goes before the first entry with a strictly greater depth, so equal depths keep
insertion order and are drawn earliest-first.
"""
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, List, Optional

if TYPE_CHECKING:
    from .camera import Camera

logger = logging.getLogger(__name__)


class Drawable(ABC):
    """Something the camera can draw. Smaller depth is drawn first (further back)."""

    depth: int = 0

    def __init__(self, depth: Optional[int] = None):
        if depth is not None:
            self.depth = int(depth)

    @abstractmethod
    def draw(self, camera: "Camera") -> None:
        """Draw using the camera's world-space primitives."""


class Scene:
    """Depth-ordered registry of drawables."""

    def __init__(self):
        self._drawables: List[Drawable] = []

    def add(self, drawable: Drawable) -> Drawable:
        """Register a drawable and return it. Adding an already registered drawable does nothing."""
        if drawable in self:
            logger.debug("drawable %r already registered", drawable)
            return drawable
        for i, existing in enumerate(self._drawables):
            if existing.depth > drawable.depth:
                self._drawables.insert(i, drawable)
                return drawable
        self._drawables.append(drawable)
        return drawable

    def remove(self, drawable: Drawable) -> None:
        """Deregister a drawable by identity. Unknown drawables are ignored."""
        for i, existing in enumerate(self._drawables):
            if existing is drawable:
                del self._drawables[i]
                return
        logger.debug("remove of unregistered drawable %r ignored", drawable)

    def clear(self) -> None:
        self._drawables.clear()

    def __contains__(self, drawable: object) -> bool:
        return any(d is drawable for d in self._drawables)

    def __iter__(self) -> Iterator[Drawable]:
        # iterate a snapshot so draw() callbacks may add or remove drawables
        return iter(list(self._drawables))

    def __len__(self) -> int:
        return len(self._drawables)
