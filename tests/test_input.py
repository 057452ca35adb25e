"""
Tests for MatchInput and the pygame keyboard/mouse/touch controls.
"""

import pygame
import pytest
from pydantic import ValidationError

from fronton.input import MatchInput, NO_INPUT
from fronton.input.sources import InputSource, PygameControls, zone_at

SCREEN_WIDTH = 400
SCREEN_HEIGHT = 664
FIELD_HEIGHT = 600


def finger(event_type, x, y):
    """Build a touch event from screen pixels (pygame normalizes to [0, 1])."""
    return pygame.event.Event(
        event_type,
        touch_id=0,
        finger_id=0,
        x=x / SCREEN_WIDTH,
        y=y / SCREEN_HEIGHT,
        dx=0.0,
        dy=0.0,
        pressure=1.0,
    )


@pytest.fixture
def controls():
    return PygameControls(SCREEN_WIDTH, SCREEN_HEIGHT, FIELD_HEIGHT)


class TestMatchInput:
    """Test the per-frame intent value."""

    def test_defaults(self):
        """Test the idle intent."""
        assert NO_INPUT == MatchInput()
        assert not (NO_INPUT.move_left or NO_INPUT.move_right or NO_INPUT.confirm)

    def test_frozen(self):
        """Test intents cannot be changed after sampling."""
        intent = MatchInput(move_left=True)
        with pytest.raises(ValidationError):
            intent.move_left = False

    def test_str(self):
        """Test the debug form lists the active flags."""
        assert str(NO_INPUT) == "MatchInput(idle)"
        assert str(MatchInput(move_right=True, confirm=True)) == "MatchInput(right, confirm)"


class TestZoneAt:
    """Test arrow button hit zones below the field."""

    @pytest.mark.parametrize("x,y,expected", [
        (10, 630, 'left'),
        (63, 630, 'left'),
        (64, 630, None),
        (200, 630, None),
        (336, 630, None),
        (337, 630, 'right'),
        (399, 663, 'right'),
        (10, 600, None),
        (390, 300, None),
    ])
    def test_zones(self, x, y, expected):
        """Test zone edges and the field above them."""
        assert zone_at(x, y, SCREEN_WIDTH, FIELD_HEIGHT) == expected


class TestPygameControls:
    """Test event handling and per-frame sampling."""

    def test_is_input_source(self, controls):
        assert isinstance(controls, InputSource)

    def test_touch_latches_direction(self, controls, pygame_init):
        """Test a touch on an arrow keeps moving until released."""
        assert controls.process_event(finger(pygame.FINGERDOWN, 380, 640))

        for _ in range(3):
            intent = controls.poll_input()
            assert intent.move_right
            assert not intent.move_left
            assert not intent.confirm

    def test_touch_switches_direction(self, controls, pygame_init):
        """Test a second finger on the other arrow replaces the latch."""
        controls.process_event(finger(pygame.FINGERDOWN, 380, 640))
        controls.process_event(finger(pygame.FINGERDOWN, 20, 640))

        intent = controls.poll_input()
        assert intent.move_left
        assert not intent.move_right

    def test_touch_in_field_does_not_move(self, controls, pygame_init):
        """Test touching the field only matters on release."""
        controls.process_event(finger(pygame.FINGERDOWN, 200, 300))
        assert controls.poll_input() == NO_INPUT

    def test_release_confirms_and_clears(self, controls, pygame_init):
        """Test lifting a finger confirms once and stops movement."""
        controls.process_event(finger(pygame.FINGERDOWN, 20, 640))
        controls.process_event(finger(pygame.FINGERUP, 20, 640))

        intent = controls.poll_input()
        assert intent.confirm
        assert not intent.move_left

        assert controls.poll_input() == NO_INPUT

    def test_confirm_keys(self, controls, pygame_init):
        """Test Space and Enter confirm."""
        for key in (pygame.K_SPACE, pygame.K_RETURN):
            assert controls.process_event(pygame.event.Event(pygame.KEYDOWN, key=key))
            assert controls.poll_input().confirm

    def test_mouse_release_confirms(self, controls, pygame_init):
        """Test a left click confirms."""
        event = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(200, 300))
        assert controls.process_event(event)
        assert controls.poll_input().confirm

    def test_unrelated_events_not_consumed(self, controls):
        """Test other events are left for the main loop."""
        assert not controls.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        assert not controls.process_event(pygame.event.Event(pygame.QUIT))
        assert not controls.process_event(
            pygame.event.Event(pygame.MOUSEBUTTONUP, button=3, pos=(0, 0)))

    def test_update_reposts_unused_events(self, controls, pygame_init):
        """Test update consumes confirms and re-posts everything else."""
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        controls.update(1 / 60)

        remaining = [event.type for event in pygame.event.get()]
        assert pygame.QUIT in remaining
        assert controls.poll_input().confirm

    def test_clear(self, controls, pygame_init):
        """Test clear drops latches and pending confirm."""
        controls.process_event(finger(pygame.FINGERDOWN, 380, 640))
        controls.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        controls.clear()
        assert controls.poll_input() == NO_INPUT
