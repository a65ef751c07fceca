import pytest

from flappy.data_models import Game, Phase


class FixedRandom:
    """Returns gap values from a fixed sequence and records the requested ranges."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.values.pop(0)


class RecordingSurface:
    def __init__(self):
        self.calls = []

    def fill(self, color):
        self.calls.append(("fill", color))

    def draw_rect(self, x, y, width, height, color):
        self.calls.append(("rect", x, y, width, height, color))

    def draw_text(self, text, x, y):
        self.calls.append(("text", text, x, y))

    def present(self):
        self.calls.append(("present",))


@pytest.fixture
def fixed_random():
    return FixedRandom(100, 200, 50)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def running_game():
    game = Game()
    game.phase = Phase.RUNNING
    # Keep spawning out of the way unless a test asks for it
    game.next_pipe_spawn = 10_000
    return game
