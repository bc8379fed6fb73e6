"""Unit tests for PhysicsBody, PhysicsWorld and the gravity helpers."""

import pytest

from nbody.constants import G
from nbody.data_models import PhysicsBody, PhysicsWorld
from nbody.physics import apply_gravitational_forces, predict_trajectory, step, total_momentum
from nbody.vector import Vector2D

DT = 0.01


class TestPhysicsBody:
    """Tests for single-body integration and force accumulation."""

    def test_defaults(self):
        b = PhysicsBody()
        assert b.position == Vector2D(0, 0)
        assert b.velocity == Vector2D(0, 0)
        assert b.acceleration == Vector2D(0, 0)
        assert b.mass == 1

    def test_non_positive_mass_rejected(self):
        with pytest.raises(ValueError):
            PhysicsBody(Vector2D(0, 0), Vector2D(0, 0), 0)

    def test_force_then_update(self):
        b = PhysicsBody(Vector2D(1, 2), Vector2D(3, 0), 2.0)
        b.apply_force(Vector2D(4, -2))
        b.update(0.5)
        assert b.velocity == Vector2D(3 + 2 * 0.5, -1 * 0.5)
        assert b.position == Vector2D(1 + 4 * 0.5, 2 - 0.5 * 0.5)
        assert b.acceleration == Vector2D(0, 0)

    def test_forces_accumulate(self):
        b = PhysicsBody(mass=4.0)
        b.apply_force(Vector2D(4, 0))
        b.apply_force(Vector2D(0, 8))
        assert b.acceleration == Vector2D(1, 2)
        assert b.total_force == Vector2D(4, 8)

    def test_apply_acceleration_ignores_mass(self):
        b = PhysicsBody(mass=10.0)
        b.apply_acceleration(Vector2D(0, -9.8))
        b.apply_acceleration(Vector2D(1, 0))
        assert b.acceleration == Vector2D(1, -9.8)

    def test_clone_drops_acceleration(self):
        b = PhysicsBody(Vector2D(1, 1), Vector2D(2, 2), 3.0)
        b.apply_force(Vector2D(3, 3))
        c = b.clone()
        assert c is not b
        assert (c.position, c.velocity, c.mass) == (b.position, b.velocity, b.mass)
        assert c.acceleration == Vector2D(0, 0)


class TestPhysicsWorld:
    """Tests for world bookkeeping and cloning."""

    def test_add_returns_index(self):
        w = PhysicsWorld()
        assert w.add_body(PhysicsBody()) == 0
        assert w.add_body(PhysicsBody()) == 1
        assert len(w) == 2

    def test_remove_by_identity(self):
        w = PhysicsWorld()
        a, b, c = PhysicsBody(), PhysicsBody(), PhysicsBody()
        for body in (a, b, c):
            w.add_body(body)
        w.remove_body(b)
        assert w.bodies == [a, c]
        assert w[1] is c

    def test_remove_unknown_is_noop(self):
        w = PhysicsWorld()
        a = PhysicsBody()
        w.add_body(a)
        # equal by value but not the same object
        w.remove_body(PhysicsBody())
        assert w.bodies == [a]

    def test_free_drift(self):
        """One body, no forces, 100 steps."""
        w = PhysicsWorld()
        w.add_body(PhysicsBody(Vector2D(0, 0), Vector2D(10, 0), 1))
        for _ in range(100):
            w.update(DT)
        assert w.ticks == 100
        assert w[0].velocity == Vector2D(10, 0)
        assert w[0].position.x == pytest.approx(10)
        assert w[0].position.y == 0

    def test_clone_isolation(self, two_body_world):
        two_body_world[0].velocity = Vector2D(1, 0)
        copy = two_body_world.clone()
        assert copy.ticks == two_body_world.ticks
        for original, cloned in zip(two_body_world, copy):
            assert cloned is not original
            assert (cloned.position, cloned.velocity, cloned.mass) == (original.position, original.velocity, original.mass)

        copy.update(1.0)
        copy.add_body(PhysicsBody())
        assert two_body_world.ticks == 0
        assert len(two_body_world) == 2
        assert two_body_world[0].position == Vector2D(-100, 0)

    def test_clone_independence_under_gravity(self, two_body_world):
        start = two_body_world[0].position
        copy = two_body_world.clone()
        for _ in range(10):
            step(two_body_world, DT, G)
        assert two_body_world.ticks == 10
        assert copy.ticks == 0
        assert copy[0].position == start
        assert two_body_world[0].position != start


class TestGravity:
    """Tests for the pairwise attraction."""

    def test_symmetric_pair(self, two_body_world):
        apply_gravitational_forces(G, two_body_world)
        two_body_world.update(DT)
        a, b = two_body_world
        expected = G / 200 ** 2 * DT
        assert a.acceleration == Vector2D(0, 0)
        assert a.velocity.x == pytest.approx(expected)
        assert a.velocity.y == 0
        assert b.velocity.x == pytest.approx(-expected)
        assert (a.velocity + b.velocity).magnitude() == pytest.approx(0, abs=1e-9)

    def test_force_ignores_masses_by_default(self):
        w = PhysicsWorld()
        w.add_body(PhysicsBody(Vector2D(0, 0), Vector2D(0, 0), 2))
        w.add_body(PhysicsBody(Vector2D(10, 0), Vector2D(0, 0), 5))
        apply_gravitational_forces(100.0, w)
        assert w[0].total_force.x == pytest.approx(1.0)
        assert w[1].total_force.x == pytest.approx(-1.0)

    def test_mass_weighted_flag(self):
        w = PhysicsWorld()
        w.add_body(PhysicsBody(Vector2D(0, 0), Vector2D(0, 0), 2))
        w.add_body(PhysicsBody(Vector2D(10, 0), Vector2D(0, 0), 5))
        apply_gravitational_forces(100.0, w, use_masses=True)
        assert w[0].total_force.x == pytest.approx(10.0)
        assert w[1].total_force.x == pytest.approx(-10.0)

    def test_coincident_pair_skipped(self):
        w = PhysicsWorld()
        w.add_body(PhysicsBody(Vector2D(5, 5)))
        w.add_body(PhysicsBody(Vector2D(5, 5)))
        w.add_body(PhysicsBody(Vector2D(15, 5)))
        apply_gravitational_forces(100.0, w)
        # only the pairs involving the third body contribute
        assert w[0].total_force == w[1].total_force
        assert w[0].total_force.x == pytest.approx(1.0)
        assert w[2].total_force.x == pytest.approx(-2.0)

    def test_driver_order_lag(self):
        w = PhysicsWorld()
        w.add_body(PhysicsBody(Vector2D(0, 0), Vector2D(0, 0), 1))
        w.add_body(PhysicsBody(Vector2D(100, 0), Vector2D(0, 0), 1))
        step(w, DT, G)
        assert w[0].position == Vector2D(0, 0)
        assert w[1].position == Vector2D(100, 0)
        step(w, DT, G)
        assert w[0].position.x > 0
        assert w[1].position.x < 100

    def test_equal_mass_velocity_sum_constant(self):
        w = PhysicsWorld()
        w.add_body(PhysicsBody(Vector2D(0, 0), Vector2D(3, 1), 2))
        w.add_body(PhysicsBody(Vector2D(150, 40), Vector2D(-1, 2), 2))
        before = w[0].velocity + w[1].velocity
        for _ in range(50):
            step(w, DT, 1e6)
        after = w[0].velocity + w[1].velocity
        assert after.x == pytest.approx(before.x, abs=1e-6)
        assert after.y == pytest.approx(before.y, abs=1e-6)

    def test_total_momentum(self):
        w = PhysicsWorld()
        w.add_body(PhysicsBody(Vector2D(0, 0), Vector2D(1, 0), 2))
        w.add_body(PhysicsBody(Vector2D(1, 0), Vector2D(0, 3), 3))
        assert total_momentum(w) == Vector2D(2, 9)


class TestPredictTrajectory:
    """Tests for the look-ahead on a cloned world."""

    def test_leaves_world_untouched(self, two_body_world):
        two_body_world[1].velocity = Vector2D(0, 50)
        before = [(b.position, b.velocity) for b in two_body_world]
        points = predict_trajectory(two_body_world, 1, 20, 5.0, G)
        assert len(points) == 20
        assert [(b.position, b.velocity) for b in two_body_world] == before
        assert two_body_world.ticks == 0

    def test_free_body_spacing(self):
        w = PhysicsWorld()
        w.add_body(PhysicsBody(Vector2D(0, 0), Vector2D(4, 3), 1))
        points = predict_trajectory(w, 0, 3, 10.0, G)
        assert [p.x for p in points] == pytest.approx([8, 16, 24])
        assert [p.y for p in points] == pytest.approx([6, 12, 18])

    def test_resting_body_has_no_preview(self, two_body_world):
        assert predict_trajectory(two_body_world, 0, 10, 5.0, G) == []

    def test_bad_index(self, two_body_world):
        assert predict_trajectory(two_body_world, 5, 10, 5.0, G) == []
