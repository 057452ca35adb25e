"""Ball entity with integer velocity.

A ball moves by (speed_x, speed_y) pixels every frame. Balls are never
removed from a match; a missed ball is re-dropped from the top.
"""

import random

from fronton.models import BallView, Color


class Ball:
    """Ball with per-frame integer movement and axis reflection."""

    def __init__(
        self,
        radius: int,
        color: Color,
        x: int,
        y: int,
        speed_x: int,
        speed_y: int,
    ):
        """Initialize ball.

        Args:
            radius: Ball radius in pixels (must be positive)
            color: Ball color
            x: Center X position
            y: Center Y position
            speed_x: X movement per frame
            speed_y: Y movement per frame

        Raises:
            ValueError: If radius is not positive
        """
        if radius <= 0:
            raise ValueError(f'Ball radius must be positive, got {radius}')
        self.radius = radius
        self.color = color
        self.x = x
        self.y = y
        self.speed_x = speed_x
        self.speed_y = speed_y

    @classmethod
    def spawn(
        cls,
        rng: random.Random,
        field_width: int,
        radius: int,
        color: Color,
        speed_x: int,
        speed_y: int,
    ) -> 'Ball':
        """Create a ball at a random column, touching the ceiling.

        Args:
            rng: Random source for the start column
            field_width: Start X is drawn from [0, field_width)
            radius: Ball radius
            color: Ball color
            speed_x: X movement per frame
            speed_y: Y movement per frame

        Returns:
            New Ball
        """
        if radius <= 0:
            raise ValueError(f'Ball radius must be positive, got {radius}')
        return cls(radius, color, rng.randrange(field_width), radius, speed_x, speed_y)

    @property
    def top(self) -> int:
        return self.y - self.radius

    @property
    def bottom(self) -> int:
        return self.y + self.radius

    @property
    def left(self) -> int:
        return self.x - self.radius

    @property
    def right(self) -> int:
        return self.x + self.radius

    def move(self) -> None:
        """Advance one frame."""
        self.x += self.speed_x
        self.y += self.speed_y

    def bounce_horizontal(self) -> None:
        """Bounce off a side wall (reverse X velocity)."""
        self.speed_x = -self.speed_x

    def bounce_vertical(self) -> None:
        """Bounce off the ceiling or the paddle (reverse Y velocity)."""
        self.speed_y = -self.speed_y

    def reset(self, rng: random.Random, field_width: int) -> None:
        """Re-drop the ball from a random column at the ceiling.

        Speed, radius and color are kept.
        """
        self.x = rng.randrange(field_width)
        self.y = self.radius

    def to_view(self) -> BallView:
        """Immutable copy for renderers."""
        return BallView(
            x=self.x,
            y=self.y,
            radius=self.radius,
            color=self.color,
            speed_x=self.speed_x,
            speed_y=self.speed_y,
        )

    def __repr__(self) -> str:
        return (f"Ball(r={self.radius}, pos=({self.x}, {self.y}), "
                f"speed=({self.speed_x}, {self.speed_y}))")
