"""
Fronton - Configuration.

Host settings (window, frame rate, audio) are loaded from a .env file with
sensible defaults. Match rules are fixed constants.
"""
import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load .env from the working directory, then from the package directory
load_dotenv()
load_dotenv(Path(__file__).parent / '.env')


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 400)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 664)
FPS = _get_int('FPS', 60)
HUD_MARGIN = 64  # strip below the field for the score and arrow buttons
ARROW_SIZE = 64  # touch/click zone for the arrow buttons

# Audio
AUDIO_ENABLED = _get_bool('AUDIO_ENABLED', True)
SFX_VOLUME = _get_float('SFX_VOLUME', 0.7)

# Match rules
WINNER_SCORE = 21
RESTART_COOLDOWN = 2.0  # seconds before a confirm can restart a finished match
BALLS_PER_STEP = 3      # a new ball every 3 player points per ball in play

# Paddle
PADDLE_HEIGHT = 5
PADDLE_FLOOR_GAP = 5  # distance between paddle and the field's bottom line
PADDLE_SPEED = 8

# Canonical ball, spawned at start and restart
START_BALL_RADIUS = 5
START_BALL_COLOR: Tuple[int, int, int, int] = (0, 255, 0, 0)
START_BALL_SPEED = 5

# Escalation balls
EXTRA_BALL_RADIUS_RANGE: Tuple[int, int] = (4, 10)
EXTRA_BALL_SPEED_RANGE: Tuple[int, int] = (3, 6)
EXTRA_BALL_ALPHA = 0

# Visual
BACKGROUND_COLOR = (0, 0, 0)
FOREGROUND_COLOR = (255, 255, 255)
FIELD_LINE_THICKNESS = 3
SCORE_FONT_SIZE = 28
HELP_FONT_SIZE = 20
TITLE_FONT_SIZE = 36
