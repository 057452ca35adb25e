"""
Fronton enumerations.

These enums define the match lifecycle and the events a simulation step
reports back to the host.
"""

from enum import Enum


class MatchPhase(str, Enum):
    """Lifecycle of a match.

    Attributes:
        NOT_STARTED: Initialized, waiting for the first confirm
        IN_PLAY: Balls moving, paddle responds to input
        OVER: A side reached the winning score; restart after the cooldown
    """
    NOT_STARTED = "not_started"
    IN_PLAY = "in_play"
    OVER = "over"


class MatchEvent(str, Enum):
    """Events emitted by a single simulation step.

    The host maps each kind to one sound clip.

    Attributes:
        BALL_HIT: A ball reached the paddle row inside the paddle span
        BALL_MISS: A ball reached the paddle row outside the paddle span
        MATCH_OVER: A score reached the winning score this frame
    """
    BALL_HIT = "ball_hit"
    BALL_MISS = "ball_miss"
    MATCH_OVER = "match_over"
