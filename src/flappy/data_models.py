"""
data_models.py: Data structures for the game state.
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque

from .constants import RESPAWN_Y, SCREEN_WIDTH


class Phase(Enum):
    """Which part of a session the game is in."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class InputState:
    """Polled input for one frame. Both flags are level-triggered."""
    jump: bool = False
    reset: bool = False


@dataclass
class Pipe:
    """One obstacle pair: a top block and a bottom block around a gap."""
    x: float
    gap_top: float
    passed: bool = False  # Bird center has cleared the trailing edge


@dataclass
class Game:
    """
    The single mutable session aggregate.
    Owned by the loop driver and passed into update and render.
    """
    bird_y: float = RESPAWN_Y
    bird_velocity: float = 0.0
    pipes: Deque[Pipe] = field(default_factory=deque)
    score: int = 0
    phase: Phase = Phase.NOT_STARTED
    next_pipe_spawn: float = SCREEN_WIDTH  # Distance left until the next spawn

    def reset(self):
        """Restores every field to its start-of-session value."""
        self.bird_y = RESPAWN_Y
        self.bird_velocity = 0.0
        self.pipes = deque()
        self.score = 0
        self.phase = Phase.NOT_STARTED
        self.next_pipe_spawn = SCREEN_WIDTH
