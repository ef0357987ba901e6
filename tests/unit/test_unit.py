"""Unit tests for the Unit sentinel."""

from __future__ import annotations

from railtrack import UNIT, Outcome, Unit


class TestUnit:
    def test_single_inhabitant(self):
        assert Unit() is UNIT
        assert Unit() is Unit()

    def test_distinct_from_none(self):
        assert UNIT is not None
        assert Outcome.success_unit() != Outcome.success(None)

    def test_repr(self):
        assert repr(UNIT) == "UNIT"

    def test_equality_and_hash(self):
        assert UNIT == Unit()
        assert hash(UNIT) == hash(Unit())
