"""Collision detection for Fronton.

Handles ball-wall, ball-ceiling and ball-paddle checks. Reflection only
flips the velocity sign; positions are never corrected, so a ball may sit
slightly past a wall for a frame.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle


def reached_paddle_row(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball's bottom edge is at or below the paddle row.

    Args:
        ball: Ball to check
        paddle: Paddle whose row is the defensive line

    Returns:
        True once hit/miss resolution applies to this ball
    """
    return ball.bottom >= paddle.y


def check_wall_collision(ball: 'Ball', field_width: int) -> bool:
    """Reflect the ball off the side walls and the ceiling.

    Args:
        ball: Ball to check, updated in place
        field_width: Field width in pixels

    Returns:
        True if any reflection happened
    """
    bounced = False

    # Side walls
    if ball.left <= 0 or ball.right >= field_width - 1:
        ball.bounce_horizontal()
        bounced = True

    # Ceiling
    if ball.top <= 0:
        ball.bounce_vertical()
        bounced = True

    return bounced


def check_paddle_hit(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if a ball at the paddle row is inside the paddle span.

    Only the ball center is tested against [paddle.left, paddle.right].

    Args:
        ball: Ball that reached the paddle row
        paddle: Paddle to check against

    Returns:
        True for a hit, False for a miss
    """
    return paddle.covers(ball.x)
