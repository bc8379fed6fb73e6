#!/usr/bin/env python3
"""
Nested 2D coordinate frames.

A Frame2D describes a local coordinate system (translation, rotation, per-axis scale)
relative to an optional parent frame. A frame without a parent treats its own parent
space as global space.

Transforms
- local -> parent:  P_parent = position + R(rotation) * (scale ⊙ P_local)
- parent -> local:  P_local  = (R(-rotation) * (P_parent - position)) ⊘ scale

where ⊙ / ⊘ are component-wise multiply / divide and R is the standard
counter-clockwise rotation matrix.

Ownership
- A frame holds a non-owning reference to its parent; parents never know their children.
- The parent chain must stay acyclic. Assigning a parent walks the new chain and raises
  ValueError on a cycle or on a chain deeper than MAX_FRAME_DEPTH.
"""
from typing import List, Optional

from .constants import MAX_FRAME_DEPTH
from .vector import Vector2D


class Frame2D:
    """
    A local coordinate system relative to an optional parent.

    Attributes:
        parent: enclosing frame or None for a root frame.
        position: origin of this frame in parent coordinates.
        rotation: rotation of this frame's axes in radians, counter-clockwise.
        scale: per-axis scale of this frame's units in parent units.
    """

    def __init__(self,
                 parent: Optional["Frame2D"] = None,
                 position: Optional[Vector2D] = None,
                 rotation: float = 0.0,
                 scale: Optional[Vector2D] = None):
        self._parent: Optional[Frame2D] = None
        self.position = position if position is not None else Vector2D.zero()
        self.rotation = float(rotation)
        self.scale = scale if scale is not None else Vector2D(1.0, 1.0)
        self.parent = parent

    @classmethod
    def identity(cls, parent: Optional["Frame2D"] = None) -> "Frame2D":
        return cls(parent, Vector2D.zero(), 0.0, Vector2D(1.0, 1.0))

    @property
    def parent(self) -> Optional["Frame2D"]:
        return self._parent

    @parent.setter
    def parent(self, parent: Optional["Frame2D"]) -> None:
        depth = 0
        node = parent
        while node is not None:
            if node is self:
                raise ValueError("frame parent assignment would create a cycle")
            depth += 1
            if depth > MAX_FRAME_DEPTH:
                raise ValueError(f"frame chain deeper than {MAX_FRAME_DEPTH}")
            node = node._parent
        self._parent = parent

    @property
    def root(self) -> "Frame2D":
        return self.chain()[-1]

    def chain(self) -> List["Frame2D"]:
        """Frames from this one up to the root, inclusive."""
        frames = []
        node: Optional[Frame2D] = self
        while node is not None:
            frames.append(node)
            node = node._parent
        return frames

    def to_parent(self, p: Vector2D) -> Vector2D:
        """Map a point from this frame into its parent's coordinates."""
        return self.position + p.component_mul(self.scale).rotated(self.rotation)

    def from_parent(self, p: Vector2D) -> Vector2D:
        """
        Map a point from parent coordinates into this frame.

        Raises ZeroDivisionError if a scale component is zero.
        """
        return (p - self.position).rotated(-self.rotation).component_div(self.scale)

    def get_global_coordinates(self, p: Vector2D) -> Vector2D:
        """Map a point expressed in this frame into root (global) coordinates."""
        for frame in self.chain():
            p = frame.to_parent(p)
        return p

    def get_local_coordinates(self, p: Vector2D) -> Vector2D:
        """Map a global point into this frame, applying parent->local from the root down."""
        for frame in reversed(self.chain()):
            p = frame.from_parent(p)
        return p

    def __repr__(self) -> str:
        return (f"Frame2D(position={self.position!r}, rotation={self.rotation:.4f}, "
                f"scale={self.scale!r}, has_parent={self._parent is not None})")
