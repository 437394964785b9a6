"""
Flock Engine - one discrete simulation step

Each tick:
- reset the per-tick neighbor totals on every agent
- scan every unordered pair once and accumulate neighbor headings
  symmetrically (sight range is a squared-distance threshold)
- blend each agent's velocity toward its neighbors' average heading,
  perturb, clamp, move and wrap around the surface
- hand each agent to the render callback

Neighbor distance ignores wraparound; wrapping only affects position.
"""

from typing import Callable, List, Optional

from flocking.config import PERTURBATION
from flocking.utils.logger import logger
from .agent import Agent, Bounds
from .flock_config import FlockConfig
from .rng import RandomSource


# Receives each agent after it moved. vx may be 0, so a renderer deriving a
# facing angle must not divide by it.
RenderCallback = Callable[[Agent], None]


def squared_distance(a: Agent, b: Agent) -> float:
    """Squared euclidean distance, without canvas wraparound."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def wrap(value: float, size: float) -> float:
    """True modulo into [0, size); negative overshoot wraps to the far edge."""
    wrapped = ((value % size) + size) % size
    # -1e-17 % 100.0 rounds to 100.0
    if wrapped >= size:
        return 0.0
    return wrapped


def clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


def reset_totals(flock: List[Agent]) -> None:
    """Zero the neighbor totals used in movement calculations."""
    for agent in flock:
        agent.neighbor_count = 0
        agent.heading_x = 0.0
        agent.heading_y = 0.0


def find_neighbors(flock: List[Agent], sight_range: float) -> None:
    """
    Accumulate neighbor counts and heading sums for every close pair.

    Every unordered pair of distinct agents is examined exactly once and
    both members are updated, so accumulation is never one-sided.
    """
    n = len(flock)
    for i in range(n):
        boid = flock[i]
        for j in range(i + 1, n):
            other = flock[j]
            if squared_distance(boid, other) < sight_range:
                boid.neighbor_count += 1
                boid.heading_x += other.vx
                boid.heading_y += other.vy
                other.neighbor_count += 1
                other.heading_x += boid.vx
                other.heading_y += boid.vy


def integrate_agent(agent: Agent, bounds: Bounds, max_velocity: float,
                    rng: RandomSource) -> None:
    """Compute the agent's next velocity and position from its totals."""
    if agent.neighbor_count > 0:
        avg_x = agent.heading_x / agent.neighbor_count
        avg_y = agent.heading_y / agent.neighbor_count

        # Move towards average local heading
        agent.vx = (avg_x + agent.vx) / 2
        agent.vy = (avg_y + agent.vy) / 2
    # No neighbors: keep the current velocity

    # Speed up or down randomly
    agent.vx = clamp(agent.vx + rng.uniform(-PERTURBATION, PERTURBATION), max_velocity)
    agent.vy = clamp(agent.vy + rng.uniform(-PERTURBATION, PERTURBATION), max_velocity)

    agent.x = wrap(agent.x + agent.vx, bounds.width)
    agent.y = wrap(agent.y + agent.vy, bounds.height)


def step(flock: List[Agent], bounds: Bounds, config: FlockConfig,
         rng: RandomSource, render: Optional[RenderCallback] = None) -> List[Agent]:
    """
    Advance the flock by one tick, in place.

    Returns the same list. Agents are rendered in flock order, each right
    after it has been integrated. On a surface with no area nothing moves
    and nothing is rendered.
    """
    if bounds.is_degenerate:
        logger.debug(f"Skipping tick on empty surface {bounds.width}x{bounds.height}",
                     component="ENGINE")
        return flock

    reset_totals(flock)
    find_neighbors(flock, config.sight_range)

    for agent in flock:
        integrate_agent(agent, bounds, config.max_velocity, rng)
        if render is not None:
            render(agent)

    return flock
