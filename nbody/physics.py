#!/usr/bin/env python3
"""
Gravity and stepping for the N-body simulator.

Responsibilities
- Accumulate pairwise inverse-square attraction into each body's scratch acceleration.
- Drive one frame of simulation in the documented order (integrate, then gravity).
- Predict a body's future path by stepping a cloned world.

Force model
- By default the pair force is F = G * d_hat / r^2 with no mass factor, so the simulation
  is a geometric attractor rather than Newtonian gravity. Each body still divides F by its
  own mass in apply_force(), so light bodies react more strongly.
- use_masses=True switches to F = G * m_i * m_j * d_hat / r^2.
- Pairs closer than MIN_SEPARATION are skipped: neither body receives a force. This is
  deterministic and keeps NaNs out of the state.

Step ordering
- step() calls world.update(dt) and only then applies gravity, so the force computed in
  frame n is integrated in frame n+1. Reference trajectories depend on this one-step lag.

Complexity
- Direct summation over unordered pairs, O(N^2) per step.
"""
import logging
from typing import List

from .constants import MIN_SEPARATION
from .data_models import PhysicsWorld
from .vector import Vector2D

logger = logging.getLogger(__name__)


def apply_gravitational_forces(g: float, world: PhysicsWorld, use_masses: bool = False) -> None:
    """
    Apply equal and opposite attraction to every unordered pair (i < j).

    Args:
        g: attraction constant.
        world: world whose bodies receive the forces (accelerations are accumulated).
        use_masses: multiply the force by m_i * m_j.
    """
    bodies = world.bodies
    n = len(bodies)
    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            bj = bodies[j]
            d = bj.position - bi.position
            r = d.magnitude()
            if r < MIN_SEPARATION:
                logger.debug("skipping degenerate gravity pair (%d, %d) at r=%g", i, j, r)
                continue
            magnitude = g / (r * r)
            if use_masses:
                magnitude *= bi.mass * bj.mass
            force = (d / r) * magnitude
            bi.apply_force(force)
            bj.apply_force(-force)


def step(world: PhysicsWorld, dt: float, g: float, use_masses: bool = False) -> None:
    """One driver frame: integrate the forces from the previous frame, then accumulate new ones."""
    world.update(dt)
    apply_gravitational_forces(g, world, use_masses)


def predict_trajectory(world: PhysicsWorld, index: int, steps: int, segment_length: float,
                       g: float, use_masses: bool = False) -> List[Vector2D]:
    """
    Sample the future path of ``world.bodies[index]`` without touching ``world``.

    The world is cloned, then stepped ``steps`` times with dt = segment_length / |v|
    where v is the body's velocity at the time of the call, so consecutive samples are
    roughly ``segment_length`` apart. Returns an empty list if the index is out of range
    or the body is at rest.
    """
    if not 0 <= index < len(world.bodies):
        return []
    speed = world.bodies[index].velocity.magnitude()
    if speed == 0:
        return []
    dt = segment_length / speed

    ghost = world.clone()
    points = []
    for _ in range(steps):
        ghost.update(dt)
        apply_gravitational_forces(g, ghost, use_masses)
        points.append(ghost.bodies[index].position)
    return points


def total_momentum(world: PhysicsWorld) -> Vector2D:
    """Sum of m * v over all bodies."""
    total = Vector2D.zero()
    for body in world.bodies:
        total += body.momentum
    return total
