"""Dice notation parsing and roll evaluation — pure math, no I/O.

Notation: ``[ROLLSx]DICEdSIDES[MODIFIER]``, e.g. ``2x3d6+1``.
A roll is DICEdSIDES plus the modifier; ROLLS independent rolls are summed.
"""
from __future__ import annotations

import logging
import random
import re
from typing import Optional, Protocol

from dice_engine.config import DiceSettings, get_settings
from dice_engine.models.roll import (
    DEFAULT_DICE,
    DEFAULT_MODIFIER,
    DEFAULT_ROLLS,
    DEFAULT_SIDES,
    Bounds,
    RollDetail,
    RollOutcome,
    RollSpec,
)
from dice_engine.utils import leading_int, safe_count

logger = logging.getLogger(__name__)

# Groups: rolls (optional "Nx" prefix), dice, sides, modifier.
# Letter modifiers (+L, -H, ...) are accepted but carry no arithmetic.
_NOTATION_RE = re.compile(
    r"(?:(\d+)\s*x\s*)?"
    r"(\d*)d(\d*)"
    r"([+\-*/]\d+|[+-][LH])?",
    re.IGNORECASE,
)


class DiceError(ValueError):
    """Raised when a dice notation cannot be turned into a roll."""


class ParseError(DiceError):
    """Raised in strict mode when no notation is found in the input."""


class DiceLimitError(DiceError):
    """Raised when a notation asks for more rolls, dice or sides than allowed."""


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _check_limit(name: str, value: int, limit: int) -> None:
    if value > limit:
        logger.warning("Rejected notation: %d %s exceeds limit of %d", value, name, limit)
        raise DiceLimitError(f"Too many {name}: {value} (max {limit})")


def parse(
    notation: str,
    *,
    strict: Optional[bool] = None,
    settings: Optional[DiceSettings] = None,
) -> RollSpec:
    """Parse the first dice notation found in a string.

    Args:
        notation: Free-form text containing e.g. "2x1d20+2". Anything
            after the first match is ignored.
        strict: Raise ParseError when nothing matches. Defaults to the
            configured setting; when off, a non-matching input yields the
            default spec with ``raw_text=None``.
        settings: Limits to enforce. Defaults to the project settings.

    Returns:
        A RollSpec. Missing, empty or zero captures take their defaults.

    Raises:
        ParseError: If strict and no notation matched.
        DiceLimitError: If a count or side number exceeds its limit.
    """
    if settings is None:
        settings = get_settings()
    if strict is None:
        strict = settings.strict

    m = _NOTATION_RE.search(notation)
    if not m:
        if strict:
            raise ParseError(f"No dice notation found in: {notation!r}")
        logger.info("No dice notation found in %r, using defaults", notation)
        return RollSpec(raw_text=None)

    rolls_text, dice_text, sides_text, modifier_text = m.groups()
    spec = RollSpec(
        rolls_count=safe_count(rolls_text, DEFAULT_ROLLS),
        dice_count=safe_count(dice_text, DEFAULT_DICE),
        sides=safe_count(sides_text, DEFAULT_SIDES),
        modifier_text=modifier_text or DEFAULT_MODIFIER,
        raw_text=m.group(0),
    )
    _check_limit("rolls", spec.rolls_count, settings.max_rolls)
    _check_limit("dice", spec.dice_count, settings.max_dice)
    _check_limit("sides", spec.sides, settings.max_sides)

    logger.debug("Parsed %r as %s", notation, spec.notation)
    return spec


def parse_modifier_value(modifier_text: str) -> int:
    """Convert a modifier token to the amount it adds to each roll.

    The first character is the sign; only "-" negates. The rest is read
    as a number, so letter tokens like "+H" or "-L" count as 0.
    """
    sign, magnitude = modifier_text[:1], leading_int(modifier_text[1:])
    if sign == "-":
        return -magnitude
    return magnitude


def roll_single_die(sides: int, rng: RandomSource = random) -> int:
    return rng.randint(1, sides)


def total_bounds(spec: RollSpec) -> Bounds:
    mod = parse_modifier_value(spec.modifier_text)
    return Bounds(
        spec.rolls_count * (spec.dice_count * 1 + mod),
        spec.rolls_count * (spec.dice_count * spec.sides + mod),
    )


def die_bounds(spec: RollSpec) -> Bounds:
    return Bounds(1, spec.sides)


def evaluate(spec: RollSpec, rng: RandomSource = random) -> RollOutcome:
    """Roll every die in the spec and compute the bounds of the total."""
    mod = parse_modifier_value(spec.modifier_text)
    final_total = 0
    rolls: list[RollDetail] = []
    for _ in range(spec.rolls_count):
        dice = []
        for _ in range(spec.dice_count):
            value = roll_single_die(spec.sides, rng)
            final_total += value
            dice.append(value)
        rolls.append(RollDetail(dice=dice, modifier=spec.modifier_text))
        final_total += mod

    lower, upper = total_bounds(spec)
    die_lower, die_upper = die_bounds(spec)
    logger.debug("Rolled %s: %d (bounds %d..%d)", spec.notation, final_total, lower, upper)
    return RollOutcome(
        spec=spec,
        final_total=final_total,
        rolls=rolls,
        total_lower_bound=lower,
        total_upper_bound=upper,
        die_lower_bound=die_lower,
        die_upper_bound=die_upper,
    )


def roll(
    notation: str,
    rng: RandomSource = random,
    *,
    strict: Optional[bool] = None,
    settings: Optional[DiceSettings] = None,
) -> RollOutcome:
    """Convenience: parse a notation and evaluate it once."""
    return evaluate(parse(notation, strict=strict, settings=settings), rng)
