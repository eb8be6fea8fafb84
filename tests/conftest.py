# tests/conftest.py
import os
import random

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame as pg
import pytest

from termsnake.config import AppConfig
from termsnake.core.context import GameContext
from termsnake.core.snake_rules import Rules


class ScriptedKeyboard:
    """Replays a fixed list of keys; None entries mean 'no key this poll'."""
    def __init__(self, polls=(), waits=()):
        self.polls = list(polls)
        self.waits = list(waits)
        self.flushes = 0
    def poll(self):
        return self.polls.pop(0) if self.polls else None
    def wait(self):
        if not self.waits:
            raise AssertionError("blocking wait with no scripted key left")
        return self.waits.pop(0)
    def flush(self):
        self.flushes += 1


class RecordingSleep:
    def __init__(self):
        self.calls = []
    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture(scope="session")
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def sleep():
    return RecordingSleep()

@pytest.fixture
def ctx_factory(sleep):
    def make(seed=1234):
        return GameContext(rng=random.Random(seed), sleep=sleep)
    return make

@pytest.fixture
def rules_factory(ctx_factory):
    def make(seed=1234, **cfg_kwargs):
        cfg = AppConfig().with_(**cfg_kwargs)
        return Rules(cfg, ctx_factory(seed))
    return make

@pytest.fixture
def keyboard_factory():
    return ScriptedKeyboard
