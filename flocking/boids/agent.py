"""
Agent - per-boid state record and its factory.
"""

from dataclasses import dataclass
from typing import List, NamedTuple

from flocking.config import MAX_AGENT_ID
from .rng import RandomSource


class Bounds(NamedTuple):
    """Size of the drawing surface the flock wraps around."""
    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        """True while the surface has no area (e.g. not laid out yet)."""
        return self.width <= 0 or self.height <= 0


@dataclass
class Agent:
    """
    Single boid.

    x/y stay within [0, width) x [0, height) and vx/vy within
    [-max_velocity, max_velocity] after every tick. neighbor_count and
    heading_x/heading_y are per-tick working state, zeroed before each
    neighbor pass.
    """
    id: int = 0
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    neighbor_count: int = 0
    heading_x: float = 0.0
    heading_y: float = 0.0

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def velocity(self):
        return (self.vx, self.vy)


def _random_coordinate(size: float, rng: RandomSource) -> int:
    # Integer in [0, size); a surface narrower than one unit yields 0
    upper = int(size) - 1
    if upper <= 0:
        return 0
    return rng.randint(0, upper)


def build_random_agent(bounds: Bounds, max_velocity: float,
                       rng: RandomSource) -> Agent:
    """Return an agent with a random id, position and velocity."""
    limit = int(max_velocity)
    return Agent(
        id=rng.randint(0, MAX_AGENT_ID),
        x=float(_random_coordinate(bounds.width, rng)),
        y=float(_random_coordinate(bounds.height, rng)),
        vx=float(rng.randint(-limit, limit)),
        vy=float(rng.randint(-limit, limit)),
    )


def build_flock(size: int, bounds: Bounds, max_velocity: float,
                rng: RandomSource) -> List[Agent]:
    """Build a flock of `size` random agents."""
    return [build_random_agent(bounds, max_velocity, rng) for _ in range(size)]
