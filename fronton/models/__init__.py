"""
Data models for Fronton.

- Primitives: validated value types (Color, FieldGeometry)
- Enums: match phases and the events a frame can emit
- Match: score, timing and the read-only snapshot handed to renderers

Usage:
    >>> from fronton.models import Color, MatchPhase, Score
"""

from .primitives import Color, FieldGeometry
from .enums import MatchPhase, MatchEvent
from .match import Score, MatchTiming, PaddleView, BallView, MatchSnapshot

__all__ = [
    # Primitives
    "Color",
    "FieldGeometry",
    # Enums
    "MatchPhase",
    "MatchEvent",
    # Match
    "Score",
    "MatchTiming",
    "PaddleView",
    "BallView",
    "MatchSnapshot",
]
