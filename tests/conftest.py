"""
Pytest fixtures and fakes for Roots vs Robots tests.
"""
from collections import deque
from typing import Iterable, List, Optional, Tuple

import pytest

from roots_vs_robots.config import get_settings
from roots_vs_robots.gameplay.game import Game
from roots_vs_robots.gameplay.match import Difficulty
from roots_vs_robots.gameplay.store import EntityStore


class ScriptedRandom:
    """
    RandomSource that hands out queued values, then a fallback.
    A fallback of None means "return the upper bound", which never spawns.
    """

    def __init__(self, values: Iterable[int] = (), default: Optional[int] = None):
        self.values = deque(values)
        self.default = default
        self.calls: List[Tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if self.values:
            return self.values.popleft()
        return b if self.default is None else self.default


class RecordingCanvas:
    """Canvas that remembers every draw command."""

    def __init__(self):
        self.commands: List[tuple] = []

    def clear(self, color):
        self.commands.append(('clear', color))

    def fill_rect(self, x, y, width, height, color):
        self.commands.append(('rect', x, y, width, height, color))

    def fill_circle(self, x, y, radius, color):
        self.commands.append(('circle', x, y, radius, color))

    def draw_text(self, text, x, y, size, color):
        self.commands.append(('text', text, x, y, size, color))

    def of(self, kind: str) -> List[tuple]:
        return [c for c in self.commands if c[0] == kind]

    def texts(self) -> List[str]:
        return [c[1] for c in self.of('text')]


def start_game(difficulty: Difficulty = Difficulty.EASY, rng=None, store: Optional[EntityStore] = None) -> Game:
    """A game already in PLAYING at the given difficulty, spawning nothing by default."""
    game = Game(rng=rng if rng is not None else ScriptedRandom(), store=store)
    game.press_start()
    game.choose_difficulty(difficulty)
    return game


@pytest.fixture
def no_spawn_rng():
    return ScriptedRandom()


@pytest.fixture
def easy_game():
    return start_game(Difficulty.EASY)


@pytest.fixture
def hard_game():
    return start_game(Difficulty.HARD)


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Settings are cached; make every test see its own environment."""
    for name in ("RVR_TARGET_FPS", "RVR_WINDOW_TITLE", "RVR_LOG_LEVEL", "RVR_RANDOM_SEED"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
