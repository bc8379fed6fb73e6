#!/usr/bin/env python3
"""
Data models for the N-body simulator.

This module defines the PhysicsBody and PhysicsWorld dataclasses shared between the
physics helpers, the drawables and the driver.

Units and usage
- position, velocity and acceleration are Vector2D in world units and seconds.
- acceleration is scratch state: forces for a step are accumulated into it, and update()
  integrates and clears it. Callers apply every force for step n before calling update().
- A PhysicsWorld owns its bodies. Code that needs a lasting handle to a body keeps
  (world, index); index order is stable across updates.
"""
from dataclasses import dataclass, field
from typing import Iterator, List

from .vector import Vector2D


@dataclass
class PhysicsBody:
    """
    A point mass.

    Fields:
    - position: current position
    - velocity: current velocity
    - mass: must be > 0
    - acceleration: force-accumulation register, cleared by update()
    """
    position: Vector2D = field(default_factory=Vector2D.zero)
    velocity: Vector2D = field(default_factory=Vector2D.zero)
    mass: float = 1.0
    acceleration: Vector2D = field(default_factory=Vector2D.zero)

    def __post_init__(self):
        if self.mass <= 0:
            raise ValueError("Mass must be positive")

    def update(self, dt: float) -> None:
        """Semi-implicit Euler step: v += a*dt, then p += v*dt, then a := 0."""
        self.velocity += self.acceleration * dt
        self.position += self.velocity * dt
        self.acceleration = Vector2D.zero()

    def apply_force(self, force: Vector2D) -> None:
        self.acceleration += force / self.mass

    def apply_acceleration(self, acceleration: Vector2D) -> None:
        """Add an acceleration directly, independent of mass."""
        self.acceleration += acceleration

    @property
    def total_force(self) -> Vector2D:
        """Force accumulated so far this step (acceleration * mass)."""
        return self.acceleration * self.mass

    @property
    def momentum(self) -> Vector2D:
        return self.velocity * self.mass

    def clone(self) -> "PhysicsBody":
        """Copy position, velocity and mass. The clone's acceleration starts at zero."""
        return PhysicsBody(self.position, self.velocity, self.mass)


@dataclass
class PhysicsWorld:
    """
    Ordered collection of bodies plus a tick counter.

    Fields:
    - bodies: bodies in insertion order
    - ticks: number of update() calls so far
    """
    bodies: List[PhysicsBody] = field(default_factory=list)
    ticks: int = 0

    def add_body(self, body: PhysicsBody) -> int:
        """Append a body and return its index."""
        self.bodies.append(body)
        return len(self.bodies) - 1

    def remove_body(self, body: PhysicsBody) -> None:
        """Remove the first body identical to ``body``. Unknown bodies are ignored."""
        for i, b in enumerate(self.bodies):
            if b is body:
                del self.bodies[i]
                return

    def update(self, dt: float) -> None:
        self.ticks += 1
        for body in self.bodies:
            body.update(dt)

    def clone(self) -> "PhysicsWorld":
        """Deep copy: same tick count, a clone of every body in order."""
        return PhysicsWorld([b.clone() for b in self.bodies], self.ticks)

    def __len__(self) -> int:
        return len(self.bodies)

    def __iter__(self) -> Iterator[PhysicsBody]:
        return iter(self.bodies)

    def __getitem__(self, index: int) -> PhysicsBody:
        return self.bodies[index]
