"""Fronton collision detection."""

from .collision import (
    reached_paddle_row,
    check_wall_collision,
    check_paddle_hit,
)

__all__ = [
    'reached_paddle_row',
    'check_wall_collision',
    'check_paddle_hit',
]
