#!/usr/bin/env python3
"""Fronton - Standalone Entry Point.

Usage:
    fronton
    fronton --width 480 --height 800
    fronton --fullscreen --no-audio
    python -m fronton --log-level DEBUG
"""

import argparse
import sys

import pygame

from fronton import config
from fronton.game_mode import FrontonMode
from fronton.input.sources import PygameControls
from fronton.logging import configure_logging, get_logger
from fronton.skins import GeometricSkin, SoundBank

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the standalone game."""
    parser = argparse.ArgumentParser(description="Fronton - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=config.SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=config.SCREEN_HEIGHT,
                        help='Screen height, including the score strip')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--fps', type=int, default=config.FPS, help='Frames per second')

    # Audio / diagnostics
    parser.add_argument('--no-audio', action='store_true', help='Disable sound effects')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Default log level')
    return parser


def main(argv=None) -> int:
    """Run Fronton standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    # Initialize pygame
    pygame.init()
    pygame.font.init()

    # Create display
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        width, height = screen.get_size()
    else:
        width, height = args.width, args.height
        screen = pygame.display.set_mode((width, height))

    pygame.display.set_caption("Fronton")

    sounds = SoundBank(audio_enabled=not args.no_audio)
    controls = PygameControls(width, height, height - config.HUD_MARGIN)
    game = FrontonMode(
        input_source=controls,
        skin=GeometricSkin(sounds=sounds),
        width=width,
        height=height,
    )

    print("\n" + "=" * 50)
    print("FRONTON")
    print("=" * 50)
    print("Controls:")
    print("  - Left/Right arrows (keys, click or touch) move the racket")
    print("  - Tap, click or Space to start / play again")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    clock = pygame.time.Clock()
    running = True

    try:
        while running:
            dt = clock.tick(args.fps) / 1000.0

            # Advance the match first; controls re-post what they don't use
            game.step(dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            game.render(screen)
            pygame.display.flip()
    except Exception:
        log.exception("Game loop crashed")
        raise
    finally:
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
