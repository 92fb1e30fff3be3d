"""Dice notation parser and roll simulator."""
from __future__ import annotations

from dice_engine.engine.roll_engine import RollEngine
from dice_engine.mechanics.dice import (
    DiceError,
    DiceLimitError,
    ParseError,
    evaluate,
    parse,
    parse_modifier_value,
    roll,
)
from dice_engine.models.roll import Bounds, RollDetail, RollOutcome, RollSpec

__all__ = [
    "Bounds",
    "DiceError",
    "DiceLimitError",
    "ParseError",
    "RollDetail",
    "RollEngine",
    "RollOutcome",
    "RollSpec",
    "evaluate",
    "parse",
    "parse_modifier_value",
    "roll",
]
