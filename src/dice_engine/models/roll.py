from __future__ import annotations

from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROLLS = 1
DEFAULT_DICE = 1
DEFAULT_SIDES = 20
DEFAULT_MODIFIER = "+0"
DEFAULT_NOTATION = f"{DEFAULT_ROLLS}x{DEFAULT_DICE}d{DEFAULT_SIDES}{DEFAULT_MODIFIER}"


class Bounds(NamedTuple):
    lower: Optional[int] = None
    upper: Optional[int] = None


class RollSpec(BaseModel):
    """Parsed roll parameters: `rolls_count` rolls of `dice_count`d`sides` plus a modifier each."""

    model_config = ConfigDict(frozen=True)

    rolls_count: int = Field(default=DEFAULT_ROLLS, ge=1)
    dice_count: int = Field(default=DEFAULT_DICE, ge=1)
    sides: int = Field(default=DEFAULT_SIDES, ge=1)
    modifier_text: str = DEFAULT_MODIFIER
    raw_text: Optional[str] = DEFAULT_NOTATION

    @property
    def notation(self) -> str:
        return f"{self.rolls_count}x{self.dice_count}d{self.sides}{self.modifier_text}"


class RollDetail(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    dice: list[int] = Field(default_factory=list)
    modifier: str = DEFAULT_MODIFIER


class RollOutcome(BaseModel):
    """Result of evaluating a RollSpec once."""

    model_config = ConfigDict(from_attributes=True)

    spec: RollSpec = Field(default_factory=RollSpec)
    final_total: int = 0
    rolls: list[RollDetail] = Field(default_factory=list)
    total_lower_bound: int = 0
    total_upper_bound: int = 0
    die_lower_bound: int = 1
    die_upper_bound: int = DEFAULT_SIDES

    @property
    def total_bounds(self) -> Bounds:
        return Bounds(self.total_lower_bound, self.total_upper_bound)

    @property
    def die_bounds(self) -> Bounds:
        return Bounds(self.die_lower_bound, self.die_upper_bound)

    def to_report(self) -> dict[str, Any]:
        """Render the outcome in the report shape existing consumers read.

        Rolls are keyed ``r1..rN`` and dice ``d1..dM``; a roll only carries
        a ``mod`` entry when its modifier differs from the default ``+0``.
        """
        details: dict[str, dict[str, Any]] = {}
        for i, detail in enumerate(self.rolls, start=1):
            entry: dict[str, Any] = {f"d{j}": value for j, value in enumerate(detail.dice, start=1)}
            if detail.modifier != DEFAULT_MODIFIER:
                entry["mod"] = detail.modifier
            details[f"r{i}"] = entry
        return {
            "result": self.final_total,
            "params": self.spec.raw_text,
            "details": details,
            "totalBounds": {
                "totalLowerBound": self.total_lower_bound,
                "totalUpperBound": self.total_upper_bound,
            },
            "dieBounds": {
                "dieLowerBound": self.die_lower_bound,
                "dieUpperBound": self.die_upper_bound,
            },
        }
