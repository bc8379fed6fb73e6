#!/usr/bin/env python3
"""
Concrete drawables: bodies, background grid, trajectory preview and frame axes.

BodyDrawable keeps a (world, index) handle rather than a body reference, so it keeps
pointing at the right slot when the world's body list is rebuilt. The world must outlive
the drawable, and removing bodies below ``index`` shifts which body it shows.
"""
from typing import List, Optional

from .color import Color
from .constants import (
    BODY_COLOR,
    BODY_DEPTH,
    FORCE_VECTOR_COLOR,
    FRAME_AXES_DEPTH,
    FRAME_AXIS_LENGTH,
    FRAME_MARKER_RADIUS,
    FRAME_X_AXIS_COLOR,
    FRAME_Y_AXIS_COLOR,
    GRID_COLOR,
    GRID_DEPTH,
    GRID_SPACING,
    TRAJECTORY_COLOR,
    TRAJECTORY_DEPTH,
    VELOCITY_VECTOR_COLOR,
)
from .data_models import PhysicsBody, PhysicsWorld
from .frame import Frame2D
from .scene import Drawable
from .vector import Vector2D


class BodyDrawable(Drawable):
    """
    A body as a circle of radius = mass, plus its velocity arrow.

    Optionally also draws the force accumulated so far this step (show_force), which is
    what the next update() will integrate.
    """

    depth = BODY_DEPTH

    def __init__(self, world: PhysicsWorld, index: int,
                 color: Color = BODY_COLOR,
                 velocity_color: Color = VELOCITY_VECTOR_COLOR,
                 velocity_scale: float = 1.0,
                 show_force: bool = False,
                 force_color: Color = FORCE_VECTOR_COLOR,
                 force_scale: float = 1.0,
                 depth: Optional[int] = None):
        super().__init__(depth)
        self.world = world
        self.index = index
        self.color = color
        self.velocity_color = velocity_color
        self.velocity_scale = velocity_scale
        self.show_force = show_force
        self.force_color = force_color
        self.force_scale = force_scale

    @property
    def body(self) -> PhysicsBody:
        return self.world.bodies[self.index]

    def draw(self, camera) -> None:
        body = self.body
        camera.set_draw_color(self.color)
        camera.draw_circle(body.position, body.mass)
        camera.set_draw_color(self.velocity_color)
        camera.draw_arrow(body.position, body.position + body.velocity * self.velocity_scale)
        if self.show_force:
            camera.set_draw_color(self.force_color)
            camera.draw_arrow(body.position, body.position + body.total_force * self.force_scale)


class GridDrawable(Drawable):
    """Axis-aligned grid over the world rectangle [0, width) x [0, height)."""

    depth = GRID_DEPTH

    def __init__(self, width: float, height: float,
                 spacing: float = GRID_SPACING,
                 color: Color = GRID_COLOR,
                 depth: Optional[int] = None):
        super().__init__(depth)
        if spacing <= 0:
            raise ValueError("Grid spacing must be positive")
        self.width = width
        self.height = height
        self.spacing = spacing
        self.color = color

    def draw(self, camera) -> None:
        camera.set_draw_color(self.color)
        k = 0
        while k * self.spacing < self.width:
            x = k * self.spacing
            camera.draw_line(Vector2D(x, 0), Vector2D(x, self.height))
            k += 1
        k = 0
        while k * self.spacing < self.height:
            y = k * self.spacing
            camera.draw_line(Vector2D(0, y), Vector2D(self.width, y))
            k += 1


class TrajectoryDrawable(Drawable):
    """Polyline through a growable list of world points."""

    depth = TRAJECTORY_DEPTH

    def __init__(self, color: Color = TRAJECTORY_COLOR, depth: Optional[int] = None):
        super().__init__(depth)
        self.color = color
        self.points: List[Vector2D] = []

    def add_point(self, p: Vector2D) -> None:
        self.points.append(p)

    def clear(self) -> None:
        self.points.clear()

    def __len__(self) -> int:
        return len(self.points)

    def draw(self, camera) -> None:
        if len(self.points) < 2:
            return
        camera.set_draw_color(self.color)
        for a, b in zip(self.points, self.points[1:]):
            camera.draw_line(a, b)


class FrameAxesDrawable(Drawable):
    """
    The x (red) and y (green) axes of a frame, drawn in global space.

    If ``marker`` is set, a cross is drawn at that point expressed in the frame's
    local coordinates.
    """

    depth = FRAME_AXES_DEPTH

    def __init__(self, frame: Frame2D,
                 length: float = FRAME_AXIS_LENGTH,
                 marker: Optional[Vector2D] = None,
                 marker_radius: float = FRAME_MARKER_RADIUS,
                 depth: Optional[int] = None):
        super().__init__(depth)
        self.frame = frame
        self.length = length
        self.marker = marker
        self.marker_radius = marker_radius

    def draw(self, camera) -> None:
        origin = self.frame.get_global_coordinates(Vector2D.zero())
        camera.set_draw_color(FRAME_X_AXIS_COLOR)
        camera.draw_arrow(origin, self.frame.get_global_coordinates(Vector2D(self.length, 0)))
        camera.set_draw_color(FRAME_Y_AXIS_COLOR)
        camera.draw_arrow(origin, self.frame.get_global_coordinates(Vector2D(0, self.length)))
        if self.marker is not None:
            camera.draw_cross(self.frame.get_global_coordinates(self.marker), self.marker_radius)
