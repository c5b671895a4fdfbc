from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from dino_runner.config import GameConfig
from dino_runner.game import RunnerGame


class FixedRandom(random.Random):
    """random() always returns ``value``; randint/choice derive from it."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


class RecordingCues:
    def __init__(self) -> None:
        self.played: list[str] = []

    def play(self, name: str) -> None:
        self.played.append(name)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def cues() -> RecordingCues:
    return RecordingCues()


@pytest.fixture
def quiet_game(config: GameConfig, cues: RecordingCues) -> RunnerGame:
    """Every coin flip fails, so no obstacles ever spawn."""
    return RunnerGame(config, cues=cues, rng=FixedRandom(0.99))


@pytest.fixture
def busy_game(config: GameConfig, cues: RecordingCues) -> RunnerGame:
    """Every coin flip succeeds."""
    return RunnerGame(config, cues=cues, rng=FixedRandom(0.0))


@pytest.fixture
def fixed_random() -> type[FixedRandom]:
    return FixedRandom
