"""Paddle entity driven by left/right input.

The paddle slides a fixed number of pixels per frame while a direction is
held. Its row never changes during a match.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from fronton.config import PADDLE_FLOOR_GAP, PADDLE_HEIGHT, PADDLE_SPEED
from fronton.models import FieldGeometry, PaddleView


@dataclass
class PaddleConfig:
    """Paddle configuration."""

    height: int = PADDLE_HEIGHT
    speed: int = PADDLE_SPEED
    floor_gap: int = PADDLE_FLOOR_GAP  # pixels between paddle and bottom line


class Paddle:
    """Paddle with a fixed row and a movable left edge.

    The x position is deliberately not clamped to the field, so the paddle
    can leave the screen when held against a side.
    """

    def __init__(self, field: FieldGeometry, config: Optional[PaddleConfig] = None):
        """Initialize paddle centered horizontally on the field.

        Args:
            field: Field geometry; the paddle spans a quarter of its width
            config: Paddle configuration (defaults if None)
        """
        self._config = config or PaddleConfig()
        self._width = field.paddle_width
        self._x = field.width // 2 - self._width // 2
        self._y = field.height - 1 - self._config.floor_gap - self._config.height

    @property
    def x(self) -> int:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> int:
        """Get paddle top Y (the paddle row)."""
        return self._y

    @property
    def width(self) -> int:
        """Get paddle width."""
        return self._width

    @property
    def height(self) -> int:
        """Get paddle height."""
        return self._config.height

    @property
    def speed(self) -> int:
        """Get pixels moved per frame."""
        return self._config.speed

    @property
    def left(self) -> int:
        """Get paddle left edge X."""
        return self._x

    @property
    def right(self) -> int:
        """Get paddle right edge X."""
        return self._x + self._width

    @property
    def rect(self) -> Tuple[int, int, int, int]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._config.height)

    def move(self, move_left: bool, move_right: bool) -> None:
        """Apply one frame of movement.

        Both directions are applied independently, so holding both
        cancels out.

        Args:
            move_left: Move left by `speed` pixels
            move_right: Move right by `speed` pixels
        """
        if move_left:
            self._x -= self._config.speed
        if move_right:
            self._x += self._config.speed

    def covers(self, x: int) -> bool:
        """Check if a horizontal position lies within the paddle span (inclusive)."""
        return self.left <= x <= self.right

    def to_view(self) -> PaddleView:
        """Immutable copy for renderers."""
        return PaddleView(x=self._x, y=self._y, width=self._width, height=self._config.height)
