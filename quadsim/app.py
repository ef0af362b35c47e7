"""Command-line entry point that opens the simulation window."""

from __future__ import annotations

import argparse
import random

import pygame

from quadsim.game import Game
from quadsim.main_screen import MainScreen

SCREEN_FRACTION = 0.75


def screen_size(desktop_width: float, desktop_height: float) -> tuple[int, int]:
    """The window size: three quarters of the desktop, truncated to whole pixels."""
    return int(desktop_width * SCREEN_FRACTION), int(desktop_height * SCREEN_FRACTION)


def main(argv: list[str] | None = None) -> int:
    """Open a window on a fraction of the desktop and run the particle simulation."""
    parser = argparse.ArgumentParser(
        prog="quadsim",
        description="Visualise collision detection with and without a quadtree.",
    )
    parser.parse_args(argv)

    pygame.display.init()
    info = pygame.display.Info()
    width, height = screen_size(info.current_w, info.current_h)

    game = Game(width, height)
    game.change_screen(MainScreen(game, random.Random()))
    game.game_loop()
    return 0