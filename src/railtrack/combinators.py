"""
Free-function spellings of the Outcome operations.

Handy where a step is passed around as a value (functools.partial, map())
rather than chained fluently. Every function delegates to the Outcome method
of the same name, so both spellings share one short-circuit law.

    from railtrack.combinators import bind, pipeline, refine_error

    load_cloud = pipeline(read_words, filter_boring, count_frequencies)
    outcome = refine_error(load_cloud(path), "Can't build tag cloud")
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Optional, TypeVar

from railtrack.capture import CapturePolicy
from railtrack.outcome import Outcome
from railtrack.unit import Unit

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


def as_outcome(value: T) -> Outcome[T]:
    """Wrap a plain value. Explicit replacement for value-to-outcome conversion."""
    return Outcome.success(value)


def success(value: T) -> Outcome[T]:
    return Outcome.success(value)


def success_unit() -> Outcome[Unit]:
    return Outcome.success_unit()


def failure(reason: str) -> Outcome[Any]:
    return Outcome.failure(reason)


def of_computation(
    supplier: Callable[[], T],
    override_reason: Optional[str] = None,
    *,
    policy: Optional[CapturePolicy] = None,
) -> Outcome[T]:
    return Outcome.of_computation(supplier, override_reason, policy=policy)


def of_action(
    action: Callable[[], Any],
    override_reason: Optional[str] = None,
    *,
    policy: Optional[CapturePolicy] = None,
) -> Outcome[Unit]:
    return Outcome.of_action(action, override_reason, policy=policy)


def bind(outcome: Outcome[A], continuation: Callable[[A], Outcome[B]]) -> Outcome[B]:
    return outcome.bind(continuation)


def then_map(outcome: Outcome[A], transform: Callable[[A], B]) -> Outcome[B]:
    return outcome.then_map(transform)


def then_run(outcome: Outcome[A], effect: Callable[[A], Any]) -> Outcome[Unit]:
    return outcome.then_run(effect)


def then_bind(outcome: Outcome[A], continuation: Callable[[A], Outcome[B]]) -> Outcome[B]:
    return outcome.then_bind(continuation)


def on_failure(outcome: Outcome[A], handler: Callable[[str], Any]) -> Outcome[A]:
    return outcome.on_failure(handler)


def replace_error(outcome: Outcome[A], transform: Callable[[str], str]) -> Outcome[A]:
    return outcome.replace_error(transform)


def refine_error(outcome: Outcome[A], prefix: str) -> Outcome[A]:
    return outcome.refine_error(prefix)


def unwrap(outcome: Outcome[A]) -> A:
    return outcome.unwrap()


def pipeline(*steps: Callable[[Any], Outcome[Any]]) -> Callable[[Any], Outcome[Any]]:
    """
    Compose Outcome-returning steps into one step, left to right.

    The first step receives the pipeline's argument; each later step
    receives the previous payload. The first Failure stops the pipeline,
    so later steps never run.

        parse_and_check = pipeline(parse_size, check_positive)
        parse_and_check("640x480")  # → Success((640, 480)) or the first Failure

    With no steps the pipeline is the identity: it wraps its argument.
    """

    def run(value: Any) -> Outcome[Any]:
        return reduce(lambda outcome, step: outcome.bind(step), steps, Outcome.success(value))

    return run
