import os

# Headless pygame for the whole test session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from retro_snake.config import Config
from retro_snake.game import make_rng
from retro_snake.session import GameSession


class FakeTimer:
    """Records arm/cancel calls instead of posting pygame events."""

    def __init__(self):
        self.calls = []

    def arm(self, interval_ms):
        self.calls.append(("arm", interval_ms))

    def cancel(self):
        self.calls.append(("cancel", None))


@pytest.fixture
def rng():
    return make_rng(1234)


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def session(timer):
    return GameSession(timer, Config(seed=7))
