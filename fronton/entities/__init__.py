"""Fronton game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball',
]
