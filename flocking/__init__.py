"""
Flocking - boids simulation on a Qt drawing surface.
"""

__version__ = "1.0.0"
