"""
Pytest configuration and shared fixtures for the game test suite.
"""

import os
import sys
from pathlib import Path

import pytest

# Headless pygame for the renderer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure project root is on PYTHONPATH so the game modules can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from controls import InputSnapshot  # noqa: E402
from simulation import World  # noqa: E402


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def world(clock):
    return World(clock=clock)


@pytest.fixture
def idle():
    return InputSnapshot(frozenset(), ())



GROUND = (0, 470, 3200, 120, "ground")
FAR_GOAL = (3090, 390, 24, 80)


@pytest.fixture
def make_world(clock):
    """World over a hand-made level; ground only unless told otherwise."""

    def _make(platforms=(GROUND,), coins=(), enemies=(), goal=FAR_GOAL):
        level = {
            "platforms": list(platforms),
            "coins": list(coins),
            "enemies": list(enemies),
            "goal": goal,
        }
        return World(level=level, clock=clock)

    return _make
