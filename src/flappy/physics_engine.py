"""
physics_engine.py: The per-frame game update: state machine, physics and pipe lifecycle.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Protocol

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, PIPE_GAP, PIPE_SPACING, PIPE_SPEED, BIRD_SIZE
from .data_models import Game, InputState, Phase, Pipe
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can pick a gap position. random.Random satisfies it."""

    def randrange(self, start: int, stop: int) -> int:
        ...


@dataclass
class GameEngine(PhysicsCore):
    """
    Advances a Game by one frame.
    Inherits physics and collision from PhysicsCore.
    """
    rng: RandomSource = field(default_factory=random.Random)

    def step(self, game: Game, inputs: InputState):
        """
        The main simulation step. Mutates only the given game.
        """
        # Game starts with the first jump input
        if game.phase is Phase.NOT_STARTED:
            if inputs.jump:
                game.phase = Phase.RUNNING
                logger.info("Session started")
            return

        # Frozen until reset
        if game.phase is Phase.GAME_OVER:
            if inputs.reset:
                game.reset()
                logger.info("Session reset")
            return

        self._step_bird(game, inputs.jump)
        self._step_pipes(game)

        if game.phase is Phase.GAME_OVER:
            logger.info("Game over with score %d", game.score)

    def _step_bird(self, game: Game, jump: bool):
        # 1. Apply jump input
        if jump:
            game.bird_velocity = self.jump()

        # 2. Apply gravity and movement
        game.bird_y, game.bird_velocity = self.apply_gravity_and_movement(
            game.bird_y, game.bird_velocity)

        # 3. Floor / ceiling
        game.bird_y, hit = self.clamp_to_field(game.bird_y)
        if hit:
            game.phase = Phase.GAME_OVER

    def _spawn_pipe(self, game: Game):
        """Appends a new pipe at the right edge with a random gap."""
        gap_top = self.rng.randrange(BIRD_SIZE, SCREEN_HEIGHT - PIPE_GAP - BIRD_SIZE)
        game.pipes.append(Pipe(x=float(SCREEN_WIDTH), gap_top=float(gap_top)))
        logger.debug("Spawned pipe with gap top %d", gap_top)

    def _step_pipes(self, game: Game):
        # 1. Spawn at intervals
        if game.next_pipe_spawn <= 0:
            self._spawn_pipe(game)
            game.next_pipe_spawn = PIPE_SPACING
        game.next_pipe_spawn -= PIPE_SPEED

        # 2. Move, score and collide, every pipe every frame
        for pipe in game.pipes:
            self.advance_pipe(pipe)

            if not pipe.passed and self.has_passed(pipe):
                pipe.passed = True
                game.score += 1

            if self.check_pipe_collision(game.bird_y, pipe):
                game.phase = Phase.GAME_OVER

        # 3. Retire at most the oldest pipe
        if game.pipes and self.is_off_screen(game.pipes[0]):
            game.pipes.popleft()
