"""Fronton match core - phase state machine and per-frame simulation.

One player paddle defends the bottom of the field against any number of
balls bouncing off the side walls and the ceiling. Every paddle hit scores
for the player, every miss scores for the opponent. The first side to
WINNER_SCORE ends the match. Each time the player's score reaches three
times the number of balls in play, another ball joins.

The core never renders or plays sound. `advance()` returns the events of
the frame and the host decides what to do with them.
"""

import random
import time
from typing import Callable, List, Optional

from fronton.config import (
    BALLS_PER_STEP,
    EXTRA_BALL_ALPHA,
    EXTRA_BALL_RADIUS_RANGE,
    EXTRA_BALL_SPEED_RANGE,
    RESTART_COOLDOWN,
    START_BALL_COLOR,
    START_BALL_RADIUS,
    START_BALL_SPEED,
    WINNER_SCORE,
)
from fronton.entities import Ball, Paddle
from fronton.input import MatchInput
from fronton.logging import get_logger
from fronton.models import (
    Color,
    FieldGeometry,
    MatchEvent,
    MatchPhase,
    MatchSnapshot,
    MatchTiming,
    Score,
)
from fronton.physics import check_paddle_hit, check_wall_collision, reached_paddle_row

log = get_logger('match_state')

Clock = Callable[[], float]


class MatchState:
    """Authoritative state of a Fronton match.

    Owns phase, score, paddle, balls and timing. The host calls
    `initialize()` and `spawn_canonical_ball()` once at boot, then
    `advance()` once per frame.

    Randomness and time are injected so a seeded Random and a fake clock
    make a match fully reproducible.

    Usage:
        match = MatchState(rng=random.Random(7))
        match.initialize(400, 600)
        match.spawn_canonical_ball()
        events = match.advance(MatchInput(confirm=True))
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ):
        """Create an uninitialized match.

        Args:
            rng: Random source for ball placement and escalation balls
            clock: Monotonic clock in seconds (defaults to time.monotonic)
        """
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.monotonic

        self._phase = MatchPhase.NOT_STARTED
        self._score = Score()
        self._geometry: Optional[FieldGeometry] = None
        self._paddle: Optional[Paddle] = None
        self._balls: List[Ball] = []
        self._timing = MatchTiming(start_time=self._clock())
        self._over_since: Optional[float] = None

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def phase(self) -> MatchPhase:
        return self._phase

    @property
    def score(self) -> Score:
        return self._score

    @property
    def geometry(self) -> Optional[FieldGeometry]:
        return self._geometry

    @property
    def paddle(self) -> Optional[Paddle]:
        return self._paddle

    @property
    def balls(self) -> List[Ball]:
        """Balls in spawn order. Do not mutate outside `advance()`."""
        return self._balls

    @property
    def timing(self) -> MatchTiming:
        return self._timing

    @property
    def winner(self) -> Optional[str]:
        """'player' or 'opponent' once the match is over.

        The player wins whenever their score reached WINNER_SCORE, even if
        the opponent reached it in the same frame.
        """
        if self._phase != MatchPhase.OVER:
            return None
        return 'player' if self._score.player >= WINNER_SCORE else 'opponent'

    def snapshot(self) -> MatchSnapshot:
        """Immutable copy of the current state for rendering or comparison."""
        self._require_initialized()
        return MatchSnapshot(
            phase=self._phase,
            score=self._score,
            field_width=self._geometry.width,
            field_height=self._geometry.height,
            paddle=self._paddle.to_view(),
            balls=[ball.to_view() for ball in self._balls],
            timing=self._timing,
            winner=self.winner,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def initialize(self, field_width: int, field_height: int) -> None:
        """Reset the match for a field of the given size.

        Phase goes back to NOT_STARTED, score to 0:0, the paddle is
        centered, all balls are removed and the start time is recorded.
        Safe to call repeatedly.

        Args:
            field_width: Field width in pixels (must be positive)
            field_height: Field height in pixels, HUD margin already removed

        Raises:
            ValueError: If either dimension is not positive
        """
        self._geometry = FieldGeometry(width=field_width, height=field_height)
        self._phase = MatchPhase.NOT_STARTED
        self._score = Score()
        self._paddle = Paddle(self._geometry)
        self._balls = []
        self._timing = MatchTiming(start_time=self._clock())
        self._over_since = None
        log.debug("initialized %s, paddle at x=%d y=%d width=%d",
                  self._geometry, self._paddle.x, self._paddle.y, self._paddle.width)

    def spawn_ball(self, radius: int, color: Color, speed_x: int, speed_y: int) -> Ball:
        """Add a ball at a random column, touching the ceiling.

        Args:
            radius: Ball radius (must be positive)
            color: Ball color
            speed_x: X movement per frame
            speed_y: Y movement per frame

        Returns:
            The new ball

        Raises:
            ValueError: If radius is not positive
            RuntimeError: If the match was never initialized
        """
        self._require_initialized()
        ball = Ball.spawn(self._rng, self._geometry.width, radius, color, speed_x, speed_y)
        self._balls.append(ball)
        log.debug("spawned %r (%d in play)", ball, len(self._balls))
        return ball

    def spawn_canonical_ball(self) -> Ball:
        """Spawn the ball every match starts with."""
        return self.spawn_ball(
            START_BALL_RADIUS,
            Color.from_tuple(START_BALL_COLOR),
            START_BALL_SPEED,
            START_BALL_SPEED,
        )

    # =========================================================================
    # Frame step
    # =========================================================================

    def advance(self, match_input: MatchInput) -> List[MatchEvent]:
        """Run one frame.

        Args:
            match_input: The player's intent for this frame

        Returns:
            Events in the order they happened. MATCH_OVER, if present, is
            the only one of its kind and always last.
        """
        if self._phase == MatchPhase.NOT_STARTED:
            if match_input.confirm:
                self._require_initialized()
                self._phase = MatchPhase.IN_PLAY
                log.info("match started")
            return []

        if self._phase == MatchPhase.OVER:
            if match_input.confirm and self.cooldown_elapsed():
                self.initialize(self._geometry.width, self._geometry.height)
                self.spawn_canonical_ball()
                self._phase = MatchPhase.IN_PLAY
                log.info("match restarted")
            return []

        return self._play_frame(match_input)

    def cooldown_elapsed(self) -> bool:
        """True once a finished match may be restarted."""
        if self._over_since is None:
            return False
        return self._clock() - self._over_since > RESTART_COOLDOWN

    def _play_frame(self, match_input: MatchInput) -> List[MatchEvent]:
        events: List[MatchEvent] = []

        self._paddle.move(match_input.move_left, match_input.move_right)

        for ball in self._balls:
            ball.move()

            if not reached_paddle_row(ball, self._paddle):
                check_wall_collision(ball, self._geometry.width)
                continue

            if check_paddle_hit(ball, self._paddle):
                ball.bounce_vertical()
                self._score = self._score.record_player_point()
                events.append(MatchEvent.BALL_HIT)
            else:
                ball.reset(self._rng, self._geometry.width)
                self._score = self._score.record_opponent_point()
                events.append(MatchEvent.BALL_MISS)

        if self._score.reached(WINNER_SCORE):
            self._end_match()
            events.append(MatchEvent.MATCH_OVER)
        elif self._score.player == len(self._balls) * BALLS_PER_STEP:
            self._spawn_extra_ball()

        return events

    def _end_match(self) -> None:
        now = self._clock()
        self._timing = self._timing.finish(now)
        self._over_since = now
        self._phase = MatchPhase.OVER
        log.info("match over %s, %s won after %.2fs",
                 self._score, self.winner, self._timing.elapsed_seconds)

    def _spawn_extra_ball(self) -> None:
        # Same speed on both axes; alpha stays 0 like the start ball
        speed = self._rng.randint(*EXTRA_BALL_SPEED_RANGE)
        radius = self._rng.randint(*EXTRA_BALL_RADIUS_RANGE)
        color = Color(
            r=self._rng.randint(0, 255),
            g=self._rng.randint(0, 255),
            b=self._rng.randint(0, 255),
            a=EXTRA_BALL_ALPHA,
        )
        self.spawn_ball(radius, color, speed, speed)
        log.info("escalation at %d points: %d balls in play", self._score.player, len(self._balls))

    def _require_initialized(self) -> None:
        if self._geometry is None:
            raise RuntimeError("MatchState.initialize() must be called first")
