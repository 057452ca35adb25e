"""
Base class for Fronton skins.

A skin provides the visual representation and audio for a match without
affecting game logic. Skins are responsible for:
- Rendering the field, paddle, balls and HUD from a MatchSnapshot
- Playing one sound per event kind returned by MatchState.advance()
"""

from abc import ABC, abstractmethod
from typing import Iterable

import pygame

from fronton.models import BallView, MatchEvent, MatchPhase, MatchSnapshot, PaddleView


class FrontonSkin(ABC):
    """Base class for Fronton skins (visuals + audio).

    Subclasses implement the render_* primitives and optionally override
    the sound methods.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def render(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        """Render a full frame.

        Args:
            snapshot: Match state to draw
            screen: Pygame surface to draw on
        """
        self.render_field(snapshot, screen)

        if snapshot.phase == MatchPhase.NOT_STARTED:
            self.render_paddle(snapshot.paddle, screen)
            self.render_start_screen(snapshot, screen)
            return

        if snapshot.phase == MatchPhase.OVER:
            self.render_game_over(snapshot, screen)
            return

        for ball in snapshot.balls:
            self.render_ball(ball, screen)
        self.render_paddle(snapshot.paddle, screen)
        self.render_hud(snapshot, screen)

    @abstractmethod
    def render_field(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        """Render background, bottom line and arrow buttons."""
        pass

    @abstractmethod
    def render_paddle(self, paddle: PaddleView, screen: pygame.Surface) -> None:
        """Render the paddle."""
        pass

    @abstractmethod
    def render_ball(self, ball: BallView, screen: pygame.Surface) -> None:
        """Render a ball."""
        pass

    @abstractmethod
    def render_hud(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        """Render the score below the field."""
        pass

    def render_start_screen(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        """Render the pre-start instructions."""
        pass

    def render_game_over(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        """Render the game over overlay."""
        pass

    def update(self, dt: float) -> None:
        """Update skin state (animations, timers, etc.).

        Args:
            dt: Delta time in seconds
        """
        pass

    def play_event_sounds(self, events: Iterable[MatchEvent]) -> None:
        """Play one clip per event, in order."""
        for event in events:
            if event == MatchEvent.BALL_HIT:
                self.play_hit_sound()
            elif event == MatchEvent.BALL_MISS:
                self.play_miss_sound()
            elif event == MatchEvent.MATCH_OVER:
                self.play_over_sound()

    def play_hit_sound(self) -> None:
        """Play sound when a ball hits the paddle."""
        pass

    def play_miss_sound(self) -> None:
        """Play sound when a ball gets past the paddle."""
        pass

    def play_over_sound(self) -> None:
        """Play sound when the match is over."""
        pass
