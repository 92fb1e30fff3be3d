"""Tests for src/dice_engine/engine/roll_engine.py."""
from __future__ import annotations

import pytest

from dice_engine.engine.roll_engine import RollEngine
from dice_engine.mechanics.dice import ParseError
from dice_engine.models.roll import Bounds, RollOutcome, RollSpec


class TestCreate:
    def test_default_spec(self):
        engine = RollEngine()
        spec = engine.spec
        assert spec == RollSpec()
        assert (spec.rolls_count, spec.dice_count, spec.sides, spec.modifier_text) == (1, 1, 20, "+0")
        assert spec.raw_text == "1x1d20+0"

    def test_notation_interpreted(self, settings):
        engine = RollEngine("2x1d20+2", settings=settings)
        assert engine.spec.rolls_count == 2
        assert engine.spec.modifier_text == "+2"

    def test_no_match_defaults(self, settings):
        engine = RollEngine("hello", settings=settings)
        assert engine.spec == RollSpec(raw_text=None)

    def test_strict_settings_propagate(self, strict_settings):
        with pytest.raises(ParseError):
            RollEngine("hello", settings=strict_settings)

    def test_repr(self, settings):
        assert repr(RollEngine("3d6", settings=settings)) == "RollEngine('3d6')"


class TestBeforeEvaluation:
    def test_result_none(self):
        assert RollEngine().result() is None

    def test_details_none(self):
        assert RollEngine().details() is None

    def test_bounds_none(self):
        engine = RollEngine()
        assert engine.total_bounds() == Bounds(None, None)
        assert engine.die_bounds() == Bounds(None, None)


class TestEvaluate:
    def test_returns_total(self, scripted_rng, settings):
        engine = RollEngine("2x1d20+2", rng=scripted_rng([10, 11]), settings=settings)
        assert engine.evaluate() == 25
        assert engine.result() == 25
        assert engine.total_bounds() == Bounds(6, 44)
        assert engine.die_bounds() == Bounds(1, 20)

    def test_details_flag(self, scripted_rng, settings):
        engine = RollEngine("1x2d20+2", rng=scripted_rng([3, 9]), settings=settings)
        outcome = engine.evaluate(details=True)
        assert isinstance(outcome, RollOutcome)
        assert outcome is engine.details()
        assert outcome.final_total == 14
        assert outcome.total_bounds == Bounds(4, 42)
        assert outcome.spec.raw_text == "1x2d20+2"

    def test_notation_argument_overrides(self, scripted_rng, settings):
        engine = RollEngine("1d4", rng=scripted_rng([6]), settings=settings)
        assert engine.evaluate("1d6") == 6
        assert engine.spec.sides == 6
        assert engine.die_bounds() == Bounds(1, 6)

    def test_outcome_replaced(self, scripted_rng, settings):
        engine = RollEngine("3d6", rng=scripted_rng([1, 1, 1, 6, 6, 6]), settings=settings)
        first = engine.evaluate(details=True)
        second = engine.evaluate(details=True)
        assert first.final_total == 3
        assert second.final_total == 18
        assert engine.details() is second
        assert engine.result() == 18

    def test_result_matches_evaluate(self, seeded_rng, settings):
        engine = RollEngine("4x3d8-1", settings=settings)
        for _ in range(20):
            total = engine.evaluate()
            assert engine.result() == total
            lower, upper = engine.total_bounds()
            assert lower <= total <= upper

    def test_detail_counts(self, seeded_rng, settings):
        engine = RollEngine("3x2d4", settings=settings)
        outcome = engine.evaluate(details=True)
        assert len(outcome.rolls) == 3
        assert all(len(r.dice) == 2 for r in outcome.rolls)
        assert all(1 <= d <= 4 for r in outcome.rolls for d in r.dice)


class TestInterpretNotation:
    def test_replaces_spec(self, settings):
        engine = RollEngine("1d4", settings=settings)
        spec = engine.interpret_notation("2x3d6+1")
        assert spec is engine.spec
        assert spec.notation == "2x3d6+1"

    def test_idempotent(self, settings):
        engine = RollEngine(settings=settings)
        assert engine.interpret_notation("1x2d20+2") == engine.interpret_notation("1x2d20+2")

    def test_does_not_clear_outcome(self, scripted_rng, settings):
        engine = RollEngine("1d6", rng=scripted_rng([5]), settings=settings)
        engine.evaluate()
        engine.interpret_notation("1d20")
        assert engine.result() == 5


class TestHelpers:
    def test_roll_single_die(self, scripted_rng):
        rng = scripted_rng([7, 2])
        engine = RollEngine(rng=rng)
        assert engine.roll_single_die(8) == 7
        assert engine.roll_single_die() == 2
        assert rng.calls == [(1, 8), (1, 20)]

    def test_parse_modifier_value(self):
        assert RollEngine.parse_modifier_value("-4") == -4
        assert RollEngine().parse_modifier_value("+L") == 0
