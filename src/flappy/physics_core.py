"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Tuple

from .constants import (
    GRAVITY, JUMP_STRENGTH, FLOOR_Y,
    BIRD_CENTER_X, BIRD_SIZE, PIPE_WIDTH, PIPE_GAP, PIPE_SPEED
)
from .data_models import Pipe


class PhysicsCore:
    """
    Pure per-frame physics used by the game engine.
    None of these methods touch the session state directly.
    """

    GRAVITY = GRAVITY
    JUMP_STRENGTH = JUMP_STRENGTH
    FLOOR_Y = FLOOR_Y

    def jump(self) -> float:
        """Returns the velocity after a jump. A jump overwrites, never adds."""
        return self.JUMP_STRENGTH

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """
        Calculates new position and velocity after one frame.
        Gravity is integrated before the position so it already acts on the jump frame.
        """
        velocity += self.GRAVITY
        y += velocity
        return y, velocity

    def clamp_to_field(self, y: float) -> Tuple[float, bool]:
        """
        Clamps y into [0, FLOOR_Y].
        Returns the clamped value and whether a boundary (floor or ceiling) was hit.
        """
        if y > self.FLOOR_Y:
            return self.FLOOR_Y, True
        if y < 0:
            return 0.0, True
        return y, False

    def advance_pipe(self, pipe: Pipe):
        pipe.x -= PIPE_SPEED

    def has_passed(self, pipe: Pipe) -> bool:
        """True once the pipe's trailing edge is left of the bird center."""
        return pipe.x + PIPE_WIDTH < BIRD_CENTER_X

    def check_pipe_collision(self, y: float, pipe: Pipe) -> bool:
        """
        Checks the bird against one pipe.
        The bird center must be within the pipe's span (inclusive) and the bird
        must touch or cross either edge of the gap.
        """
        if not pipe.x <= BIRD_CENTER_X <= pipe.x + PIPE_WIDTH:
            return False
        return y <= pipe.gap_top or y + BIRD_SIZE >= pipe.gap_top + PIPE_GAP

    def is_off_screen(self, pipe: Pipe) -> bool:
        return pipe.x + PIPE_WIDTH < 0
