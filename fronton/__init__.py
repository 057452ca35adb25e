"""
Fronton - a one-paddle, many-ball wall game.

Provides:
- match_state: MatchState, the phase machine and per-frame simulation
- models: validated value types (Color, Score, MatchSnapshot, ...)
- entities: Paddle and Ball
- physics: wall, ceiling and paddle checks
- input: MatchInput and the pygame keyboard/mouse/touch source
- skins: rendering and procedurally generated sounds
- game_mode: FrontonMode, the pygame frame step
"""

from fronton.match_state import MatchState
from fronton.input import MatchInput
from fronton.models import MatchEvent, MatchPhase

__version__ = "1.0.0"

__all__ = [
    'MatchState',
    'MatchInput',
    'MatchEvent',
    'MatchPhase',
]
