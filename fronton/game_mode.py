"""Fronton - pygame host for the match core.

Wires an input source, a MatchState and a skin into one frame step:
sample input, advance the match, play the frame's sounds, render.
"""

import random
from typing import List, Optional

import pygame

from fronton.config import HUD_MARGIN, SCREEN_HEIGHT, SCREEN_WIDTH
from fronton.input import MatchInput
from fronton.input.sources import InputSource
from fronton.logging import get_logger
from fronton.match_state import Clock, MatchState
from fronton.models import MatchEvent, MatchPhase, MatchSnapshot
from fronton.skins import FrontonSkin, GeometricSkin

log = get_logger('game_mode')


class FrontonMode:
    """Fronton game mode.

    The field takes the full screen width and the screen height minus the
    HUD strip, which holds the score and the arrow buttons.
    """

    # Game metadata
    NAME = "Fronton"
    DESCRIPTION = "Keep every ball off the floor. One more ball every 3 points per ball."
    VERSION = "1.0.0"

    def __init__(
        self,
        input_source: InputSource,
        skin: Optional[FrontonSkin] = None,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize the game and spawn the start ball.

        Args:
            input_source: Where per-frame intent comes from
            skin: Visual/audio skin (silent GeometricSkin if None)
            width: Screen width
            height: Screen height, including the HUD strip
            rng: Random source for the match
            clock: Monotonic clock for the match
        """
        if height <= HUD_MARGIN:
            raise ValueError(f"Screen height must exceed the HUD margin ({HUD_MARGIN}), got {height}")

        self._input = input_source
        self._skin = skin if skin is not None else GeometricSkin()
        self._screen_width = width
        self._screen_height = height

        self._match = MatchState(rng=rng, clock=clock)
        self._match.initialize(self.field_width, self.field_height)
        self._match.spawn_canonical_ball()
        log.info("field %dx%d", self.field_width, self.field_height)

    @property
    def field_width(self) -> int:
        return self._screen_width

    @property
    def field_height(self) -> int:
        return self._screen_height - HUD_MARGIN

    @property
    def match(self) -> MatchState:
        return self._match

    @property
    def phase(self) -> MatchPhase:
        return self._match.phase

    def step(self, dt: float) -> List[MatchEvent]:
        """Run one frame of input and simulation, then play its sounds.

        Args:
            dt: Delta time in seconds

        Returns:
            The frame's events
        """
        self._input.update(dt)
        intent: MatchInput = self._input.poll_input()

        events = self._match.advance(intent)
        if events:
            log.trace("frame events %s", [e.value for e in events])
        self._skin.play_event_sounds(events)
        self._skin.update(dt)
        return events

    def render(self, screen: pygame.Surface) -> None:
        """Render the current frame."""
        self._skin.render(self.snapshot(), screen)

    def snapshot(self) -> MatchSnapshot:
        return self._match.snapshot()
