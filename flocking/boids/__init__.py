"""
Boid Flocking Simulation

Agents steer toward the average heading of nearby agents and wrap around
the edges of the drawing surface.
"""

from .agent import Agent, Bounds, build_random_agent, build_flock
from .flock_config import FlockConfig
from .flock_engine import step, RenderCallback
from .flock_controller import FlockController
from .rng import XorShift32, generate_random_seed

__all__ = [
    'Agent',
    'Bounds',
    'build_random_agent',
    'build_flock',
    'FlockConfig',
    'step',
    'RenderCallback',
    'FlockController',
    'XorShift32',
    'generate_random_seed',
]
