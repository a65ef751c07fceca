"""
render.py: Turns a Game into draw data and replays it on a render surface.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from .constants import (
    SCREEN_HEIGHT, BIRD_CENTER_X, BIRD_SIZE, PIPE_WIDTH, PIPE_GAP,
    COLOR_BACKGROUND, COLOR_BIRD, COLOR_PIPE,
    TEXT_START_MESSAGE, TEXT_GAME_OVER, TEXT_SCORE_PREFIX,
    SCORE_POS, START_MESSAGE_POS, GAME_OVER_MESSAGE_POS
)
from .data_models import Game, InputState, Phase

Color = Tuple[int, int, int]


class InputSurface(Protocol):
    def poll(self) -> InputState:
        """Returns the input currently asserted."""
        ...


class RenderSurface(Protocol):
    def fill(self, color: Color):
        ...

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color):
        ...

    def draw_text(self, text: str, x: float, y: float):
        ...

    def present(self):
        ...


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class Text:
    text: str
    x: float
    y: float


@dataclass
class Frame:
    """Everything drawn for one frame, in draw order."""
    background: Color = COLOR_BACKGROUND
    rects: List[Rect] = field(default_factory=list)
    texts: List[Text] = field(default_factory=list)


def build_frame(game: Game) -> Frame:
    """Shapes the game state into draw data. Does not mutate the game."""
    frame = Frame()

    # Bird
    frame.rects.append(Rect(BIRD_CENTER_X - BIRD_SIZE / 2, game.bird_y,
                            BIRD_SIZE, BIRD_SIZE, COLOR_BIRD))

    # Pipes: top block then bottom block
    for pipe in game.pipes:
        bottom_y = pipe.gap_top + PIPE_GAP
        frame.rects.append(Rect(pipe.x, 0, PIPE_WIDTH, pipe.gap_top, COLOR_PIPE))
        frame.rects.append(Rect(pipe.x, bottom_y, PIPE_WIDTH, SCREEN_HEIGHT - bottom_y, COLOR_PIPE))

    # HUD
    frame.texts.append(Text(f"{TEXT_SCORE_PREFIX}{game.score}", *SCORE_POS))
    message = _phase_message(game.phase)
    if message is not None:
        frame.texts.append(message)

    return frame


def _phase_message(phase: Phase) -> Optional[Text]:
    if phase is Phase.NOT_STARTED:
        return Text(TEXT_START_MESSAGE, *START_MESSAGE_POS)
    if phase is Phase.GAME_OVER:
        return Text(TEXT_GAME_OVER, *GAME_OVER_MESSAGE_POS)
    return None


def render_frame(game: Game, surface: RenderSurface):
    """Draws one frame of the game and presents it."""
    frame = build_frame(game)
    surface.fill(frame.background)
    for rect in frame.rects:
        surface.draw_rect(rect.x, rect.y, rect.width, rect.height, rect.color)
    for text in frame.texts:
        surface.draw_text(text.text, text.x, text.y)
    surface.present()
