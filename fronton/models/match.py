"""
Match-level data models.

Score and timing are owned by MatchState; the snapshot types are the
read-only view renderers and tests work from.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .enums import MatchPhase
from .primitives import Color


class Score(BaseModel):
    """Immutable match score.

    The player scores on every paddle hit; the opponent (the wall, shown
    as "Machine") scores on every miss. Updates return new instances, so
    a score can never go down during a match.

    Attributes:
        player: Paddle hits (non-negative)
        opponent: Misses (non-negative)

    Examples:
        >>> score = Score().record_player_point().record_opponent_point()
        >>> (score.player, score.opponent)
        (1, 1)
    """
    player: int = 0
    opponent: int = 0

    model_config = ConfigDict(frozen=True)

    @field_validator('player', 'opponent')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate score values are non-negative."""
        if v < 0:
            raise ValueError(f'Score values must be non-negative, got {v}')
        return v

    def record_player_point(self) -> 'Score':
        """Return a new score with one more player point."""
        return Score(player=self.player + 1, opponent=self.opponent)

    def record_opponent_point(self) -> 'Score':
        """Return a new score with one more opponent point."""
        return Score(player=self.player, opponent=self.opponent + 1)

    def reached(self, target: int) -> bool:
        """True if either side has at least `target` points."""
        return self.player >= target or self.opponent >= target

    def __str__(self) -> str:
        """Scoreboard format, e.g. '07:03'."""
        return f"{self.player:02d}:{self.opponent:02d}"


class MatchTiming(BaseModel):
    """Wall-clock bookkeeping for a match, used only for reporting.

    Attributes:
        start_time: Clock reading when the match was initialized
        end_time: Clock reading when the match ended (None while running)
        elapsed_seconds: end_time - start_time once over, else 0
    """
    start_time: float
    end_time: Optional[float] = None
    elapsed_seconds: float = 0.0

    model_config = ConfigDict(frozen=True)

    def finish(self, end_time: float) -> 'MatchTiming':
        """Return timing closed at `end_time`."""
        return MatchTiming(
            start_time=self.start_time,
            end_time=end_time,
            elapsed_seconds=end_time - self.start_time,
        )


class PaddleView(BaseModel):
    """Paddle rectangle as seen by a renderer."""
    x: int
    y: int
    width: int
    height: int

    model_config = ConfigDict(frozen=True)


class BallView(BaseModel):
    """Ball state as seen by a renderer."""
    x: int
    y: int
    radius: int
    color: Color
    speed_x: int
    speed_y: int

    model_config = ConfigDict(frozen=True)


class MatchSnapshot(BaseModel):
    """Immutable copy of everything a frame renders.

    Attributes:
        phase: Current match phase
        score: Current score
        field_width: Field width in pixels
        field_height: Field height in pixels
        paddle: Paddle rectangle
        balls: Balls in spawn order
        timing: Match timing
        winner: "player" or "opponent" once over, else None
    """
    phase: MatchPhase
    score: Score
    field_width: int
    field_height: int
    paddle: PaddleView
    balls: List[BallView]
    timing: MatchTiming
    winner: Optional[str] = None

    model_config = ConfigDict(frozen=True)
