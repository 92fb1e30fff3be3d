"""Stateful roll engine holding one spec and the outcome of its last roll."""
from __future__ import annotations

import random
from typing import Optional, Union

from dice_engine.config import DiceSettings
from dice_engine.mechanics import dice
from dice_engine.mechanics.dice import RandomSource
from dice_engine.models.roll import DEFAULT_SIDES, Bounds, RollOutcome, RollSpec


class RollEngine:
    """Parses a notation once and rolls it on demand.

    Each call to ``interpret_notation`` replaces the held spec and each
    call to ``evaluate`` replaces the held outcome in full. Instances are
    not synchronised; use one engine per caller.
    """

    def __init__(
        self,
        notation: Optional[str] = None,
        rng: Optional[RandomSource] = None,
        settings: Optional[DiceSettings] = None,
    ):
        self.rng = rng if rng is not None else random
        self.settings = settings
        self._spec = RollSpec()
        self._outcome: RollOutcome | None = None
        if notation is not None:
            self.interpret_notation(notation)

    @property
    def spec(self) -> RollSpec:
        return self._spec

    def interpret_notation(self, notation: str) -> RollSpec:
        self._spec = dice.parse(notation, settings=self.settings)
        return self._spec

    @staticmethod
    def parse_modifier_value(modifier_text: str) -> int:
        return dice.parse_modifier_value(modifier_text)

    def roll_single_die(self, sides: int = DEFAULT_SIDES) -> int:
        return dice.roll_single_die(sides, self.rng)

    def evaluate(
        self, notation: Optional[str] = None, details: bool = False
    ) -> Union[int, RollOutcome]:
        """Roll the held spec, or interpret ``notation`` first and roll that.

        Returns the total, or the full RollOutcome when ``details`` is set.
        """
        if notation is not None:
            # Overrides whatever the engine was constructed with.
            self.interpret_notation(notation)
        self._outcome = dice.evaluate(self._spec, self.rng)
        return self._outcome if details else self._outcome.final_total

    def result(self) -> Optional[int]:
        return self._outcome.final_total if self._outcome else None

    def details(self) -> Optional[RollOutcome]:
        return self._outcome

    def total_bounds(self) -> Bounds:
        return self._outcome.total_bounds if self._outcome else Bounds()

    def die_bounds(self) -> Bounds:
        return self._outcome.die_bounds if self._outcome else Bounds()

    def __repr__(self) -> str:
        return f"RollEngine({self._spec.raw_text!r})"
