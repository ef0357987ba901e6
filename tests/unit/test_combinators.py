"""
Unit tests for the free-function combinators and pipeline().

The free functions delegate to Outcome methods; these tests check the
delegation keeps the laws, plus pipeline composition order.
"""

from __future__ import annotations

from functools import partial

import pytest

from railtrack import UNIT, CapturePolicy, Outcome, as_outcome, pipeline
from railtrack import combinators as rt


def _parse_size(text: str) -> Outcome[int]:
    return Outcome.of_computation(lambda: int(text), f"Not a number: {text!r}")


def _check_positive(size: int) -> Outcome[int]:
    return Outcome.success(size) if size > 0 else Outcome.failure("Size must be positive")


class TestConstruction:
    def test_as_outcome_wraps_value(self):
        assert as_outcome(5) == Outcome.success(5)

    def test_success_and_failure(self):
        assert rt.success("a") == Outcome.success("a")
        assert rt.success_unit().unwrap() is UNIT
        assert rt.failure("x").reason() == "x"

    def test_of_computation_with_override(self):
        assert rt.of_computation(lambda: 10 / 0, "ratio").reason() == "ratio"

    def test_of_action_with_policy(self):
        def broken():
            raise NameError("undefined_name")

        with pytest.raises(NameError):
            rt.of_action(broken, policy=CapturePolicy.EXPECTED)


class TestChaining:
    def test_then_map_chain(self):
        assert rt.then_map(rt.then_map(rt.success(2), lambda x: x + 3), lambda x: x * 2) == rt.success(10)

    def test_bind_short_circuit(self, counter):
        assert rt.bind(rt.failure("f"), counter) == rt.failure("f")
        assert counter.count == 0

    def test_then_bind(self):
        assert rt.then_bind(rt.success(-1), _check_positive).reason() == "Size must be positive"

    def test_then_run(self):
        sink: list[int] = []
        assert rt.then_run(rt.success(1), sink.append) == rt.success_unit()
        assert sink == [1]

    def test_partial_application(self):
        double_all = partial(rt.then_map, transform=lambda x: x * 2)
        assert [double_all(o) for o in (rt.success(1), rt.failure("e"))] == [rt.success(2), rt.failure("e")]


class TestFailureTrack:
    def test_on_failure(self, counter):
        original = rt.failure("gone")
        assert rt.on_failure(original, counter) is original
        assert counter.calls == ["gone"]

    def test_replace_and_refine(self):
        assert rt.replace_error(rt.failure("x"), lambda r: "wrapped:" + r) == rt.failure("wrapped:x")
        assert rt.refine_error(rt.failure("x"), "ctx") == rt.failure("ctx. x")

    def test_unwrap(self):
        assert rt.unwrap(rt.success(3)) == 3


class TestPipeline:
    def test_runs_steps_in_order(self):
        parse_and_check = pipeline(_parse_size, _check_positive)
        assert parse_and_check("640") == Outcome.success(640)

    def test_stops_at_first_failure(self, counter):
        parse_then_count = pipeline(_parse_size, _check_positive, counter)
        assert parse_then_count("-5").reason() == "Size must be positive"
        assert counter.count == 0

    def test_boundary_failure_inside_step(self):
        assert pipeline(_parse_size)("wide").reason() == "Not a number: 'wide'"

    def test_empty_pipeline_is_identity(self):
        assert pipeline()("value") == Outcome.success("value")
