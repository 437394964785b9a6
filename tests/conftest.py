"""Pytest configuration - consistent CWD, headless Qt and shared fixtures."""
from __future__ import annotations

import os
import random
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]

# No display on CI; must be set before the first QApplication
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_sessionstart(session):
    os.chdir(ROOT)


class ZeroRandom:
    """Random source with no perturbation, for exact arithmetic checks."""

    def randint(self, a, b):
        return a

    def uniform(self, a, b):
        return 0.0


# Fixtures used by multiple test files

@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def zero_rng():
    return ZeroRandom()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def config():
    from flocking.boids import FlockConfig
    return FlockConfig.from_options({"flock_size": 12, "seed": 7})
