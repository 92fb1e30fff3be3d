from __future__ import annotations

from dice_engine.models.roll import Bounds, RollDetail, RollOutcome, RollSpec

__all__ = [
    "Bounds",
    "RollDetail",
    "RollOutcome",
    "RollSpec",
]
