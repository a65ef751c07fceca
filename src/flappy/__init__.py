"""
Flappy: a single-player side-scrolling reflex game.
"""

from .data_models import Game, InputState, Phase, Pipe
from .physics_engine import GameEngine
from .render import build_frame, render_frame

__all__ = ["Game", "GameEngine", "InputState", "Phase", "Pipe", "build_frame", "render_frame"]
