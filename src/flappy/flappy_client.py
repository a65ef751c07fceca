"""
flappy_client.py

The pygame host: window, polled keyboard input, drawing and the frame loop.
"""

import argparse
import logging
import random
import sys
from typing import Optional

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, WINDOW_TITLE, COLOR_TEXT, FONT_SIZE
)
from .data_models import Game, InputState
from .physics_engine import GameEngine
from .render import Color, render_frame

logger = logging.getLogger(__name__)


# ----------------- Input / Render surfaces -----------------

class PygameInput:
    """Level-triggered keyboard input: SPACE jumps, R resets."""

    def poll(self) -> InputState:
        keys = pygame.key.get_pressed()
        return InputState(jump=bool(keys[pygame.K_SPACE]), reset=bool(keys[pygame.K_r]))


class PygameSurface:
    """Draws on a fixed logical resolution; pygame scales it to the window."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.font = pygame.font.Font(None, FONT_SIZE)

    def fill(self, color: Color):
        self.screen.fill(color)

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color):
        pygame.draw.rect(self.screen, color, pygame.Rect(x, y, width, height))

    def draw_text(self, text: str, x: float, y: float):
        self.screen.blit(self.font.render(text, True, COLOR_TEXT), (x, y))

    def present(self):
        pygame.display.flip()


# ----------------- Game Client (loop) -----------------

class FlappyClient:
    def __init__(self, seed: Optional[int] = None, fps: int = FPS):
        pygame.init()
        self.screen = pygame.display.set_mode(
            (SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SCALED | pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        self.input = PygameInput()
        self.surface = PygameSurface(self.screen)

        # --- Game Logic ---
        self.engine = GameEngine(rng=random.Random(seed))
        self.game = Game()

        self.clock = pygame.time.Clock()
        self.fps = fps

    def run(self):
        """The main execution loop. One update then one render per frame."""
        logger.info("Starting %s at %d fps", WINDOW_TITLE, self.fps)
        running = True
        try:
            while running:
                self.clock.tick(self.fps)

                # Pump events; keys themselves are polled below
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False

                self.engine.step(self.game, self.input.poll())
                render_frame(self.game, self.surface)
        finally:
            pygame.quit()
            logger.info("Stopped")


def configure_logging(level: str = "info"):
    """One-line stderr logging for the flappy package."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    root = logging.getLogger("flappy")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


def main(argv=None):
    parser = argparse.ArgumentParser(description=WINDOW_TITLE)
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe gap placement")
    parser.add_argument("--fps", type=int, default=FPS, help="frames per second")
    parser.add_argument("--log-level", default="info", help="debug, info, warning or error")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    try:
        FlappyClient(seed=args.seed, fps=args.fps).run()
    except pygame.error:
        logger.exception("Display failure")
        raise


if __name__ == "__main__":
    main()
