#!/usr/bin/env python3
"""
N-body simulator entry point and per-frame driver.

What this module does
- Opens one pygame window and builds the default two-body world.
- Each frame: integrates the world, accumulates gravity, predicts the future path of one
  body on a cloned world, moves the camera frame toward the tracked body, and renders.
- Runs until the window is closed; exits 0, or 1 if the window cannot be created.

Frame order
- world.update(dt) runs before gravity is applied, so forces computed in frame n are
  integrated in frame n+1 (see nbody.physics.step).

Running
1) Install dependencies: `pip install pygame`
2) Run this module: `python nbody_sim.py` (or the `nbody-sim` console script)
"""
import logging
import sys

import pygame

from nbody.camera import Camera
from nbody.constants import (
    CAMERA_FOLLOW_RATE,
    FORCE_ARROW_SCALE,
    G,
    LOG_EVERY_TICKS,
    MAX_FPS,
    MAX_FRAME_DT,
    PREDICTED_BODY,
    TRACKED_BODY,
    TRAJECTORY_SEGMENT_LENGTH,
    TRAJECTORY_STEPS,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from nbody.data_models import PhysicsBody, PhysicsWorld
from nbody.drawables import BodyDrawable, FrameAxesDrawable, GridDrawable, TrajectoryDrawable
from nbody.errors import BackendInitError
from nbody.frame import Frame2D
from nbody.physics import predict_trajectory, step
from nbody.rasterizer import is_quit_event
from nbody.scene import Scene
from nbody.vector import Vector2D, clamp

logger = logging.getLogger("nbody_sim")


def build_default_world() -> PhysicsWorld:
    """A heavy body drifting right and a light one passing above it."""
    world = PhysicsWorld()
    world.add_body(PhysicsBody(Vector2D(320, 240), Vector2D(25, 0), 10))
    world.add_body(PhysicsBody(Vector2D(320, 60), Vector2D(-250, 0), 1))
    return world


class SimulationApp:
    """
    Owns the scene and drives the simulation for one camera.

    The camera follows ``tracked_index``; the trajectory preview and the local frame axes
    follow ``predicted_index``. The world frame axes stay at the origin.
    """

    def __init__(self, camera: Camera, world: PhysicsWorld,
                 g: float = G,
                 tracked_index: int = TRACKED_BODY,
                 predicted_index: int = PREDICTED_BODY,
                 use_masses: bool = False):
        self.camera = camera
        self.world = world
        self.g = g
        self.tracked_index = tracked_index
        self.predicted_index = predicted_index
        self.use_masses = use_masses
        self.running = True

        self.scene = Scene()
        self.grid = self.scene.add(GridDrawable(camera.width, camera.height))
        self.body_drawables = [
            self.scene.add(BodyDrawable(world, i, show_force=True, force_scale=FORCE_ARROW_SCALE))
            for i in range(len(world))
        ]
        self.trajectory = self.scene.add(TrajectoryDrawable())
        self.world_frame = Frame2D.identity()
        self.local_frame = Frame2D.identity(self.world_frame)
        self.axes = self.scene.add(FrameAxesDrawable(self.local_frame, marker=Vector2D(100, 0)))
        self.world_axes = self.scene.add(FrameAxesDrawable(self.world_frame))

        if self._has_body(tracked_index):
            self.camera.frame.position = world.bodies[tracked_index].position
        self._update_local_frame()

    def _has_body(self, index: int) -> bool:
        return 0 <= index < len(self.world)

    def _update_local_frame(self) -> None:
        if not self._has_body(self.predicted_index):
            return
        body = self.world.bodies[self.predicted_index]
        self.local_frame.position = body.position
        if body.velocity.magnitude() > 0:
            self.local_frame.rotation = body.velocity.angle()

    def _update_trajectory(self) -> None:
        self.trajectory.clear()
        for p in predict_trajectory(self.world, self.predicted_index, TRAJECTORY_STEPS,
                                    TRAJECTORY_SEGMENT_LENGTH, self.g, self.use_masses):
            self.trajectory.add_point(p)

    def _track(self, dt: float) -> None:
        if not self._has_body(self.tracked_index):
            return
        frame = self.camera.frame
        target = self.world.bodies[self.tracked_index].position
        frame.position = Vector2D.lerp(frame.position, target, clamp(CAMERA_FOLLOW_RATE * dt, 0.0, 1.0))

    def advance(self, dt: float) -> None:
        """Everything a frame does before rendering."""
        step(self.world, dt, self.g, self.use_masses)
        self._update_trajectory()
        self._update_local_frame()
        self._track(dt)
        if self.world.ticks % LOG_EVERY_TICKS == 0:
            logger.debug("tick %d: %d bodies, %d preview points",
                         self.world.ticks, len(self.world), len(self.trajectory))

    def handle_events(self) -> bool:
        """Drain pending events. Returns False once a quit event has been seen."""
        rasterizer = self.camera.rasterizer
        event = rasterizer.event_poll()
        while event is not None:
            if is_quit_event(event):
                self.running = False
            event = rasterizer.event_poll()
        return self.running

    def run(self) -> None:
        clock = pygame.time.Clock()
        last = self.camera.rasterizer.ticks_ms()
        while self.handle_events():
            now = self.camera.rasterizer.ticks_ms()
            dt = min((now - last) / 1000.0, MAX_FRAME_DT)
            last = now

            self.advance(dt)
            self.camera.render(self.scene)

            # Limit FPS
            clock.tick(MAX_FPS)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        camera = Camera(WINDOW_TITLE, Frame2D.identity(), WINDOW_WIDTH, WINDOW_HEIGHT)
    except BackendInitError as exc:
        print(exc, file=sys.stderr)
        return 1

    with camera:
        world = build_default_world()
        app = SimulationApp(camera, world)
        logger.info("starting with %d bodies, G=%g", len(world), app.g)
        app.run()
    logger.info("quit after %d ticks", world.ticks)
    return 0


if __name__ == "__main__":
    sys.exit(main())
