"""Geometric skin - flat shapes and a monochrome HUD."""

from typing import List, Optional

import pygame

from fronton import config
from fronton.models import BallView, Color, MatchEvent, MatchSnapshot, PaddleView

from .base import FrontonSkin
from .sounds import SoundBank


class GeometricSkin(FrontonSkin):
    """Renders a match using simple geometric shapes.

    - Field: black background, white bottom line, arrow buttons below it
    - Paddle: white rectangle
    - Balls: filled circles in their own color. Colors are premultiplied,
      so alpha 0 balls are added on top of the background.
    - HUD: "PP:OO" score centered under the field
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes, white HUD"

    PADDLE_COLOR = config.FOREGROUND_COLOR
    LINE_COLOR = config.FOREGROUND_COLOR
    ARROW_COLOR = (200, 200, 200)
    TEXT_COLOR = config.FOREGROUND_COLOR
    GAME_OVER_COLOR = (255, 100, 100)
    START_BALL_COLOR = Color.from_tuple(config.START_BALL_COLOR)

    HELP_LINES = [
        "Tap the screen to play.",
        "Move racket with the arrows.",
        f"First to score {config.WINNER_SCORE} wins. Enjoy!",
    ]

    def __init__(self, sounds: Optional[SoundBank] = None):
        """Initialize geometric skin.

        Args:
            sounds: Sound bank for event clips (silent if None)
        """
        self._sounds = sounds
        self._score_font: Optional[pygame.font.Font] = None
        self._help_font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None

    def _ensure_fonts(self) -> None:
        """Ensure fonts are initialized."""
        if self._score_font is None:
            pygame.font.init()
            self._score_font = pygame.font.Font(None, config.SCORE_FONT_SIZE)
            self._help_font = pygame.font.Font(None, config.HELP_FONT_SIZE)
            self._title_font = pygame.font.Font(None, config.TITLE_FONT_SIZE)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_field(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        screen.fill(config.BACKGROUND_COLOR)

        field_w, field_h = snapshot.field_width, snapshot.field_height
        pygame.draw.rect(
            screen,
            self.LINE_COLOR,
            (0, field_h, field_w, config.FIELD_LINE_THICKNESS),
        )

        top = field_h + config.FIELD_LINE_THICKNESS
        size = config.ARROW_SIZE
        margin = size // 4
        mid_y = top + size // 2

        # Left arrow
        pygame.draw.polygon(screen, self.ARROW_COLOR, [
            (margin, mid_y),
            (size - margin, top + margin),
            (size - margin, top + size - margin),
        ])
        # Right arrow
        right = field_w - size
        pygame.draw.polygon(screen, self.ARROW_COLOR, [
            (right + size - margin, mid_y),
            (right + margin, top + margin),
            (right + margin, top + size - margin),
        ])

    def render_paddle(self, paddle: PaddleView, screen: pygame.Surface) -> None:
        # Drawn one pixel below the collision row, flush with the floor gap
        pygame.draw.rect(
            screen,
            self.PADDLE_COLOR,
            (paddle.x, paddle.y + 1, paddle.width, paddle.height),
        )

    def render_ball(self, ball: BallView, screen: pygame.Surface) -> None:
        diameter = ball.radius * 2
        sprite = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        topleft = (ball.x - ball.radius, ball.y - ball.radius)

        if ball.color.a == 0:
            pygame.draw.circle(sprite, ball.color.as_rgb_tuple, (ball.radius, ball.radius), ball.radius)
            screen.blit(sprite, topleft, special_flags=pygame.BLEND_RGB_ADD)
        else:
            pygame.draw.circle(sprite, ball.color.as_tuple, (ball.radius, ball.radius), ball.radius)
            screen.blit(sprite, topleft)

    def render_hud(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        self._ensure_fonts()
        text = self._score_font.render(str(snapshot.score), True, self.TEXT_COLOR)
        rect = text.get_rect()
        rect.midtop = (snapshot.field_width // 2, snapshot.field_height + 20)
        screen.blit(text, rect)

    def render_start_screen(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        self._ensure_fonts()
        # Preview of the start ball in the middle of the field
        preview = BallView(
            x=snapshot.field_width // 2,
            y=snapshot.field_height // 2,
            radius=config.START_BALL_RADIUS,
            color=self.START_BALL_COLOR,
            speed_x=0,
            speed_y=0,
        )
        self.render_ball(preview, screen)
        self._blit_lines(screen, self.HELP_LINES)
        self.render_hud(snapshot, screen)

    def render_game_over(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        self._ensure_fonts()
        title = self._title_font.render("GAME OVER", True, self.GAME_OVER_COLOR)
        rect = title.get_rect()
        rect.center = (snapshot.field_width // 2, snapshot.field_height // 3)
        screen.blit(title, rect)

        verdict = "You won." if snapshot.winner == 'player' else "Machine won."
        self._blit_lines(screen, [
            verdict,
            f"Match duration {snapshot.timing.elapsed_seconds:.2f}s.",
            "Tap the screen to play again.",
        ])
        self.render_hud(snapshot, screen)

    def _blit_lines(self, screen: pygame.Surface, lines: List[str]) -> None:
        y = 4
        for line in lines:
            text = self._help_font.render(line, True, self.TEXT_COLOR)
            screen.blit(text, (4, y))
            y += text.get_height() + 2

    # =========================================================================
    # Audio
    # =========================================================================

    def play_hit_sound(self) -> None:
        if self._sounds is not None:
            self._sounds.play(MatchEvent.BALL_HIT)

    def play_miss_sound(self) -> None:
        if self._sounds is not None:
            self._sounds.play(MatchEvent.BALL_MISS)

    def play_over_sound(self) -> None:
        if self._sounds is not None:
            self._sounds.play(MatchEvent.MATCH_OVER)
