"""Shared fixtures for the dice engine test suite."""
from __future__ import annotations

import random

import pytest

from dice_engine.config import DiceSettings


class ScriptedRandom:
    """Random source that replays a fixed sequence of die results."""

    def __init__(self, values):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def seeded_rng():
    state = random.getstate()
    random.seed(42)
    yield
    random.setstate(state)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def settings() -> DiceSettings:
    return DiceSettings()


@pytest.fixture
def strict_settings() -> DiceSettings:
    return DiceSettings(strict=True)
