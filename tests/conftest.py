"""Shared fixtures for Fronton tests."""
import os
import random

# Headless pygame: must be set before pygame opens a display or mixer
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from fronton.match_state import MatchState


FIELD_WIDTH = 400
FIELD_HEIGHT = 600
SEED = 20240501


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """A fake clock starting at t=100s."""
    return FakeClock()


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(SEED)


@pytest.fixture
def match(rng, clock):
    """A 400x600 match with the start ball, not yet started."""
    state = MatchState(rng=rng, clock=clock)
    state.initialize(FIELD_WIDTH, FIELD_HEIGHT)
    state.spawn_canonical_ball()
    return state


@pytest.fixture
def pygame_init():
    """Initialize pygame with a dummy display for testing."""
    pygame.init()
    pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT + 64))
    yield
    pygame.quit()
