"""
Tests for option merging and validation.
"""

import pytest

from flocking.boids import FlockConfig
from flocking.config import DEFAULT_OPTIONS
from flocking.errors import ConfigurationError, FlockError


class TestDefaults:

    def test_no_options_gives_defaults(self):
        config = FlockConfig.from_options()
        assert config.sight_range == 10
        assert config.max_velocity == 2
        assert config.flock_size == 30
        assert config.tick_period_ms == 100
        assert config.seed is None

    def test_dataclass_defaults_match_option_table(self):
        assert FlockConfig().to_dict() == DEFAULT_OPTIONS


class TestMerge:

    def test_user_options_override(self):
        config = FlockConfig.from_options({"flock_size": 5, "draw_dotted": True})
        assert config.flock_size == 5
        assert config.draw_dotted is True
        assert config.max_velocity == 2

    def test_round_trip(self):
        config = FlockConfig.from_options({"sight_range": 50, "seed": 3})
        assert FlockConfig.from_options(config.to_dict()) == config

    def test_is_immutable(self):
        config = FlockConfig.from_options()
        with pytest.raises(AttributeError):
            config.flock_size = 3

    def test_defaults_table_not_mutated(self):
        FlockConfig.from_options({"flock_size": 1})
        assert DEFAULT_OPTIONS["flock_size"] == 30


class TestValidation:

    @pytest.mark.parametrize("key", ["sight_range", "max_velocity", "flock_size",
                                     "tick_period_ms", "boid_fill_color", "draw_trail"])
    def test_null_option_rejected(self, key):
        with pytest.raises(ConfigurationError) as info:
            FlockConfig.from_options({key: None})
        assert info.value.option == key
        assert "required" in str(info.value)

    def test_null_seed_allowed(self):
        assert FlockConfig.from_options({"seed": None}).seed is None

    def test_unknown_option_rejected(self):
        with pytest.raises(ConfigurationError) as info:
            FlockConfig.from_options({"boidSight": 10})
        assert info.value.option == "boidSight"

    @pytest.mark.parametrize("options", [
        {"sight_range": "far"},
        {"max_velocity": True},
        {"flock_size": 2.5},
        {"flock_size": -1},
        {"tick_period_ms": 0},
        {"max_velocity": -1},
        {"sight_range": -4},
        {"draw_trail": "yes"},
        {"boid_stroke_color": 0xffffff},
        {"seed": "abc"},
        {"max_velocity": float("nan")},
        {"max_velocity": float("inf")},
        {"sight_range": float("nan")},
        {"sight_range": float("inf")},
        {"tick_period_ms": float("inf")},
        {"boid_size": float("nan")},
    ])
    def test_invalid_values_rejected(self, options):
        with pytest.raises(ConfigurationError):
            FlockConfig.from_options(options)

    @pytest.mark.parametrize("key", ["max_velocity", "sight_range"])
    def test_non_finite_reported_by_name(self, key):
        with pytest.raises(ConfigurationError) as info:
            FlockConfig.from_options({key: float("nan")})
        assert info.value.option == key
        assert "finite" in str(info.value)

    def test_error_is_flock_error(self):
        with pytest.raises(FlockError):
            FlockConfig.from_options({"flock_size": None})

    def test_float_numbers_accepted(self):
        config = FlockConfig.from_options({"sight_range": 12.5, "max_velocity": 1.5})
        assert config.sight_range == 12.5


class TestConfigurationError:

    def test_generic_message(self):
        error = ConfigurationError("Something off")
        assert str(error) == "Something off"
        assert error.option is None

    def test_option_message(self):
        error = ConfigurationError("flock_size", "is required")
        assert str(error) == "The option 'flock_size' is required"
        assert error.option == "flock_size"
