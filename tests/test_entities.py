"""
Tests for the Paddle and Ball entities.
"""

import random

import pytest

from fronton.entities import Ball, Paddle, PaddleConfig
from fronton.models import Color, FieldGeometry, PaddleView

GREEN = Color(r=0, g=255, b=0, a=0)


@pytest.fixture
def field():
    return FieldGeometry(width=400, height=600)


class TestPaddle:
    """Test Paddle placement and movement."""

    def test_initial_placement(self, field):
        """Test the paddle is centered with its row above the floor gap."""
        paddle = Paddle(field)
        assert paddle.width == 100
        assert paddle.height == 5
        assert paddle.x == 150
        assert paddle.y == 600 - 1 - 5 - 5
        assert paddle.rect == (150, 589, 100, 5)

    def test_odd_width_field(self):
        """Test placement uses integer division."""
        paddle = Paddle(FieldGeometry(width=333, height=100))
        assert paddle.width == 83
        assert paddle.x == 166 - 41

    def test_custom_config(self, field):
        """Test speed, height and gap come from the config."""
        paddle = Paddle(field, PaddleConfig(height=10, speed=3, floor_gap=0))
        assert paddle.y == 600 - 1 - 0 - 10
        paddle.move(False, True)
        assert paddle.x == 153

    def test_move(self, field):
        """Test each direction and both together."""
        paddle = Paddle(field)
        paddle.move(True, False)
        assert paddle.x == 142
        paddle.move(False, True)
        assert paddle.x == 150
        paddle.move(True, True)
        assert paddle.x == 150
        paddle.move(False, False)
        assert paddle.x == 150

    def test_covers_is_inclusive(self, field):
        """Test both edges are inside the span."""
        paddle = Paddle(field)
        assert paddle.covers(150)
        assert paddle.covers(250)
        assert not paddle.covers(149)
        assert not paddle.covers(251)

    def test_to_view(self, field):
        """Test the view mirrors the paddle."""
        assert Paddle(field).to_view() == PaddleView(x=150, y=589, width=100, height=5)


class TestBall:
    """Test Ball construction and movement."""

    @pytest.mark.parametrize("radius", [0, -1])
    def test_non_positive_radius_rejected(self, radius):
        """Test both constructors reject a non-positive radius."""
        with pytest.raises(ValueError):
            Ball(radius, GREEN, 10, 10, 1, 1)
        with pytest.raises(ValueError):
            Ball.spawn(random.Random(1), 400, radius, GREEN, 1, 1)

    def test_spawn_at_ceiling(self):
        """Test spawned balls touch the ceiling at a column in range."""
        rng = random.Random(3)
        for _ in range(200):
            ball = Ball.spawn(rng, 400, 7, GREEN, 5, 5)
            assert ball.y == 7
            assert ball.top == 0
            assert 0 <= ball.x < 400

    def test_spawn_is_seeded(self):
        """Test the same seed gives the same column."""
        first = Ball.spawn(random.Random(11), 400, 5, GREEN, 5, 5)
        second = Ball.spawn(random.Random(11), 400, 5, GREEN, 5, 5)
        assert first.x == second.x

    def test_edges(self):
        """Test edge properties."""
        ball = Ball(5, GREEN, 100, 50, 1, 1)
        assert (ball.left, ball.right, ball.top, ball.bottom) == (95, 105, 45, 55)

    def test_move_and_bounce(self):
        """Test integration and sign flips."""
        ball = Ball(5, GREEN, 100, 50, 3, -4)
        ball.move()
        assert (ball.x, ball.y) == (103, 46)

        ball.bounce_horizontal()
        ball.bounce_vertical()
        assert (ball.speed_x, ball.speed_y) == (-3, 4)

    def test_reset_keeps_speed_and_look(self):
        """Test a reset ball only changes position."""
        ball = Ball(6, GREEN, 100, 580, -5, 5)
        ball.reset(random.Random(2), 400)

        assert ball.y == 6
        assert 0 <= ball.x < 400
        assert (ball.speed_x, ball.speed_y) == (-5, 5)
        assert ball.radius == 6
        assert ball.color == GREEN

    def test_to_view(self):
        """Test the view mirrors the ball."""
        view = Ball(5, GREEN, 1, 2, 3, 4).to_view()
        assert (view.x, view.y, view.radius, view.speed_x, view.speed_y) == (1, 2, 5, 3, 4)
        assert view.color == GREEN
