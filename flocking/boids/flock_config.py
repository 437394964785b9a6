"""
Flock Config - validated, immutable options for one simulation run

User options are merged over DEFAULT_OPTIONS, then every recognized option
is checked. Initialization aborts with ConfigurationError on the first
missing, null or malformed value.
"""

import math
from dataclasses import dataclass, asdict
from numbers import Real
from typing import Any, Dict, Mapping, Optional

from flocking.config import (
    DEFAULT_OPTIONS,
    NULLABLE_OPTIONS,
    NUMERIC_OPTIONS,
    BOOL_OPTIONS,
    COLOR_OPTIONS,
    DEFAULT_SIGHT_RANGE,
    DEFAULT_MAX_VELOCITY,
    DEFAULT_FLOCK_SIZE,
    DEFAULT_TICK_PERIOD_MS,
)
from flocking.errors import ConfigurationError
from flocking.utils.logger import logger


@dataclass(frozen=True)
class FlockConfig:
    """Process-wide options, fixed for the duration of a run."""

    # Simulation
    sight_range: float = DEFAULT_SIGHT_RANGE  # squared-distance threshold
    max_velocity: float = DEFAULT_MAX_VELOCITY
    flock_size: int = DEFAULT_FLOCK_SIZE
    tick_period_ms: int = DEFAULT_TICK_PERIOD_MS

    # Input
    click_adds_boid: bool = True

    # Rendering
    boid_size: float = 20
    boid_stroke_color: str = '#ffffff'
    boid_fill_color: str = '#222222'
    trail_stroke_color: str = '#444444'
    trail_fill_color: str = '#999999'
    draw_trail: bool = True
    draw_dotted: bool = False

    # None = fresh seed each initialization
    seed: Optional[int] = None

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "FlockConfig":
        """Merge user options over the defaults and validate the result."""
        merged = dict(DEFAULT_OPTIONS)
        if options:
            unknown = sorted(set(options) - set(DEFAULT_OPTIONS))
            if unknown:
                raise ConfigurationError(unknown[0], "is not a recognized option")
            merged.update(options)

        _validate(merged)
        config = cls(**merged)
        logger.debug(
            f"sight={config.sight_range} max_velocity={config.max_velocity} "
            f"size={config.flock_size} period={config.tick_period_ms}ms",
            component="CONFIG",
        )
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Return the options mapping (round-trips through from_options)."""
        return asdict(self)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _validate(options: Dict[str, Any]) -> None:
    for key, value in options.items():
        if value is None and key not in NULLABLE_OPTIONS:
            logger.error(f"The option {key} is required.", component="CONFIG")
            raise ConfigurationError(key, "is required")

    for key in NUMERIC_OPTIONS:
        if not _is_number(options[key]):
            raise ConfigurationError(key, "must be a number")
        if not math.isfinite(options[key]):
            raise ConfigurationError(key, "must be a finite number")

    flock_size = options['flock_size']
    if isinstance(flock_size, bool) or not isinstance(flock_size, int) or flock_size < 0:
        raise ConfigurationError('flock_size', "must be a non-negative integer")

    if options['tick_period_ms'] <= 0:
        raise ConfigurationError('tick_period_ms', "must be positive")
    if options['max_velocity'] < 0:
        raise ConfigurationError('max_velocity', "must not be negative")
    if options['sight_range'] < 0:
        raise ConfigurationError('sight_range', "must not be negative")

    for key in BOOL_OPTIONS:
        if not isinstance(options[key], bool):
            raise ConfigurationError(key, "must be true or false")

    for key in COLOR_OPTIONS:
        if not isinstance(options[key], str):
            raise ConfigurationError(key, "must be a color string")

    seed = options['seed']
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigurationError('seed', "must be an integer")
