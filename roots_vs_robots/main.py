#!/usr/bin/env python3
"""
Roots vs Robots - Main Entry Point

Robots roll in from the right along five lanes. Click to plant turrets
that fire on their own; every robot that reaches the left edge costs
one base health. Survive until the clock runs out.

Usage:
    python -m roots_vs_robots.main [--seed N] [--fps N] [--log-level LEVEL]

Controls:
    Enter: Start / restart
    1, 2: Easy / Hard
    Left click: Place turret (7 per match, one per lane slot)
    Escape: Quit
"""
import argparse
import logging
import random
import sys

import pygame
from pydantic import ValidationError

from roots_vs_robots.config import Settings, get_settings
from roots_vs_robots.gameplay.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from roots_vs_robots.gameplay.game import Game
from roots_vs_robots.ui.input_handler import InputHandler
from roots_vs_robots.ui.pygame_canvas import PygameCanvas
from roots_vs_robots.ui.renderer import Renderer

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Roots vs Robots")
    parser.add_argument("--seed", type=int, default=None, help="Seed for robot spawns")
    parser.add_argument("--fps", type=int, default=None, help="Frame rate cap")
    parser.add_argument("--log-level", type=str.upper, default=None, help="Logging level")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings, overridden by whatever was given on the command line."""
    settings = get_settings()
    overrides = {}
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    if args.fps is not None:
        overrides["target_fps"] = args.fps
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = Settings(**{**settings.model_dump(), **overrides})
    return settings


def run(settings: Settings) -> None:
    """Open the window and run the game loop until the player quits."""
    game = Game(rng=random.Random(settings.random_seed))

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(settings.window_title)
        clock = pygame.time.Clock()

        renderer = Renderer(game, PygameCanvas(screen))
        input_handler = InputHandler(game)

        logger.info(f"Starting game loop at {settings.target_fps} fps")
        should_quit = False
        while not should_quit:
            dt = clock.tick(settings.target_fps) / 1000.0

            for event in pygame.event.get():
                if input_handler.handle_event(event):
                    should_quit = True

            for event in game.update(dt):
                logger.debug(f"{event}")

            renderer.render()
            pygame.display.flip()
    finally:
        pygame.quit()
        logger.info("Window closed")


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        settings = load_settings(args)
    except ValidationError as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Invalid settings: {exc}")
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    run(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
