"""
Pygame Controls - Keyboard, mouse and touch input.

Movement comes from the arrow keys, from holding the left mouse button over
one of the arrow buttons drawn below the field, or from touching those
buttons. Releasing a touch or the mouse button, or pressing Space/Enter,
confirms.
"""
from typing import Optional

import pygame

from fronton.config import ARROW_SIZE
from fronton.input.match_input import MatchInput
from fronton.input.sources.base import InputSource
from fronton.logging import get_logger

log = get_logger('input')

CONFIRM_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)


def zone_at(x: float, y: float, screen_width: int, field_height: int) -> Optional[str]:
    """Return which arrow button a screen point falls in.

    Args:
        x: Screen X
        y: Screen Y
        screen_width: Screen width in pixels
        field_height: Field height; the buttons sit below it

    Returns:
        'left', 'right' or None
    """
    if y <= field_height:
        return None
    if x > screen_width - ARROW_SIZE:
        return 'right'
    if x < ARROW_SIZE:
        return 'left'
    return None


class PygameControls(InputSource):
    """Pygame keyboard/mouse/touch input source.

    Touching an arrow button latches that direction until any finger is
    lifted. Events this source does not use are re-posted to the pygame
    event queue for the main loop.
    """

    def __init__(self, screen_width: int, screen_height: int, field_height: int):
        """Initialize the controls.

        Args:
            screen_width: Screen width in pixels
            screen_height: Screen height in pixels
            field_height: Field height in pixels (arrow buttons sit below)
        """
        self._screen_width = screen_width
        self._screen_height = screen_height
        self._field_height = field_height
        self._touch_left = False
        self._touch_right = False
        self._confirm = False

    def update(self, dt: float) -> None:
        """Process pygame events and collect touch/confirm state."""
        for event in pygame.event.get():
            if not self.process_event(event):
                pygame.event.post(event)

    def process_event(self, event: pygame.event.Event) -> bool:
        """Apply one pygame event.

        Args:
            event: Pygame event

        Returns:
            True if the event was consumed
        """
        if event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalized to [0, 1]
            zone = zone_at(
                event.x * self._screen_width,
                event.y * self._screen_height,
                self._screen_width,
                self._field_height,
            )
            if zone == 'right':
                self._touch_right, self._touch_left = True, False
            elif zone == 'left':
                self._touch_left, self._touch_right = True, False
            log.trace("finger down in zone %s", zone)
            return True

        if event.type == pygame.FINGERUP:
            self._touch_left = self._touch_right = False
            self._confirm = True
            return True

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._confirm = True
            return True

        if event.type == pygame.KEYDOWN and event.key in CONFIRM_KEYS:
            self._confirm = True
            return True

        return False

    def poll_input(self) -> MatchInput:
        """Sample held keys, mouse and touch latches for this frame."""
        keys = pygame.key.get_pressed()
        mouse_zone = None
        if pygame.mouse.get_pressed()[0]:
            mx, my = pygame.mouse.get_pos()
            mouse_zone = zone_at(mx, my, self._screen_width, self._field_height)

        intent = MatchInput(
            move_left=bool(keys[pygame.K_LEFT]) or mouse_zone == 'left' or self._touch_left,
            move_right=bool(keys[pygame.K_RIGHT]) or mouse_zone == 'right' or self._touch_right,
            confirm=self._confirm,
        )
        self._confirm = False
        return intent

    def clear(self) -> None:
        """Drop latched touches and any pending confirm."""
        self._touch_left = self._touch_right = False
        self._confirm = False
