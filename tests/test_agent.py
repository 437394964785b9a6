"""
Tests for the agent record, its factory and the random sources.
"""

import random
import pytest

from flocking.boids.agent import Agent, Bounds, build_random_agent, build_flock
from flocking.boids.rng import XorShift32, make_rng
from flocking.config import MAX_AGENT_ID


class TestBounds:

    def test_unpacks_as_width_height(self):
        width, height = Bounds(640, 480)
        assert (width, height) == (640, 480)

    def test_degenerate_when_no_area(self):
        assert Bounds(0, 480).is_degenerate
        assert Bounds(640, 0).is_degenerate
        assert not Bounds(1, 1).is_degenerate


class TestAgent:

    def test_transient_fields_start_zeroed(self):
        agent = Agent(id=1, x=3.0, y=4.0, vx=1.0, vy=-1.0)
        assert agent.neighbor_count == 0
        assert (agent.heading_x, agent.heading_y) == (0.0, 0.0)

    def test_position_and_velocity_views(self):
        agent = Agent(x=3.0, y=4.0, vx=1.0, vy=-1.0)
        assert agent.position == (3.0, 4.0)
        assert agent.velocity == (1.0, -1.0)


class TestBuildRandomAgent:

    def test_values_within_ranges(self, seeded_rng):
        bounds = Bounds(200, 100)
        for _ in range(500):
            agent = build_random_agent(bounds, 2, seeded_rng)
            assert 0 <= agent.x < 200
            assert 0 <= agent.y < 100
            assert -2 <= agent.vx <= 2
            assert -2 <= agent.vy <= 2
            assert 0 <= agent.id <= MAX_AGENT_ID

    def test_values_are_integers(self, seeded_rng):
        agent = build_random_agent(Bounds(200, 100), 3, seeded_rng)
        for value in (agent.x, agent.y, agent.vx, agent.vy):
            assert float(value).is_integer()

    def test_velocity_covers_both_ends(self):
        rng = random.Random(99)
        seen = {build_random_agent(Bounds(50, 50), 1, rng).vx for _ in range(300)}
        assert seen == {-1.0, 0.0, 1.0}

    def test_zero_size_surface_places_at_origin(self, seeded_rng):
        agent = build_random_agent(Bounds(0, 0), 2, seeded_rng)
        assert (agent.x, agent.y) == (0.0, 0.0)

    def test_transient_fields_zeroed(self, seeded_rng):
        agent = build_random_agent(Bounds(10, 10), 2, seeded_rng)
        assert agent.neighbor_count == 0
        assert (agent.heading_x, agent.heading_y) == (0.0, 0.0)


class TestBuildFlock:

    def test_size(self, seeded_rng):
        assert len(build_flock(30, Bounds(100, 100), 2, seeded_rng)) == 30

    def test_empty(self, seeded_rng):
        assert build_flock(0, Bounds(100, 100), 2, seeded_rng) == []

    def test_same_seed_same_flock(self):
        a = build_flock(10, Bounds(100, 100), 2, XorShift32(5))
        b = build_flock(10, Bounds(100, 100), 2, XorShift32(5))
        assert a == b


class TestXorShift32:

    def test_zero_seed_is_usable(self):
        rng = XorShift32(0)
        assert rng.next_uint32() != 0

    def test_uniform_range(self):
        rng = XorShift32(42)
        for _ in range(1000):
            value = rng.uniform(-0.1, 0.1)
            assert -0.1 <= value < 0.1

    def test_randint_inclusive(self):
        rng = XorShift32(42)
        seen = {rng.randint(-2, 2) for _ in range(1000)}
        assert seen == {-2, -1, 0, 1, 2}

    def test_randint_empty_range(self):
        with pytest.raises(ValueError):
            XorShift32(1).randint(3, 2)

    def test_make_rng_is_deterministic_with_seed(self):
        a, b = make_rng(11), make_rng(11)
        assert [a.next_uint32() for _ in range(5)] == [b.next_uint32() for _ in range(5)]
