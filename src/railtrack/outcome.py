"""
Outcome monad — a computed value or the reason it could not be computed.

An Outcome[T] is either Success(payload: T) or Failure(reason: str).
Fallible steps return an Outcome instead of raising; .bind() connects the
steps and short-circuits on the first Failure, carrying its reason forward.

    ┌───────────┐     bind      ┌───────────┐   then_map    ┌──────────┐
    │   parse   │──Success──────│  validate │──Success──────│  render  │──→ Outcome[T]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Outcome[T]

Three chaining shapes share one short-circuit law:
  - then_map(f)   f returns a plain value          (exceptions captured)
  - then_run(f)   f returns nothing worth keeping  (exceptions captured)
  - then_bind(f)  f returns an Outcome itself      (exceptions propagate)

Exceptions only become failures at the fault-capture boundaries,
of_computation and of_action, which then_map and then_run are built on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Optional,
    TypeVar,
)

import structlog

from railtrack.capture import CapturePolicy, describe_fault, should_capture
from railtrack.config import RailtrackSettings, get_settings
from railtrack.errors import InvalidReasonError, UnwrapError
from railtrack.unit import UNIT, Unit

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

log = structlog.get_logger()

REFINE_SEPARATOR = ". "


class Outcome(Generic[T]):
    """
    Success-or-failure container.

    Two possible states:
      - Success(payload: T) — the value was computed
      - Failure(reason: str) — it was not, and here is why

    Outcomes are immutable; every combinator returns a new Outcome.

    Usage:
        >>> Outcome.success(2).then_map(lambda x: x + 3).then_map(lambda x: x * 2)
        Success(10)

        >>> Outcome.of_computation(lambda: 10 / 0)
        Failure('division by zero')
    """

    __slots__ = ()

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """True when this Outcome carries a payload."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """True when this Outcome carries a failure reason."""
        return isinstance(self, Failure)

    def unwrap(self) -> T:
        """
        Extract the payload. Raises UnwrapError if called on a Failure.

        Escape hatch only: use it where a failure already means a bug
        (tests, or right after checking is_success()). Never use it to
        handle expected failures — branch on is_success(), either() or
        match/case instead.
        """
        match self:
            case Success(payload):
                return payload
            case Failure(reason):
                raise UnwrapError(f"Cannot unwrap a Failure: {reason!r}", self)
        raise TypeError("unreachable")  # pragma: no cover

    def reason(self) -> str:
        """Extract the failure reason. Raises UnwrapError if called on a Success."""
        match self:
            case Failure(reason):
                return reason
            case Success(payload):
                raise UnwrapError(f"Cannot read a failure reason from a Success: {payload!r}", self)
        raise TypeError("unreachable")  # pragma: no cover

    def either(self, on_success: Callable[[T], R], on_failure: Callable[[str], R]) -> R:
        """
        Fold both tracks into one plain value.

            outcome.either(
                on_success=lambda cloud: f"{len(cloud)} tags",
                on_failure=lambda reason: f"error: {reason}",
            )
        """
        match self:
            case Success(payload):
                return on_success(payload)
            case Failure(reason):
                return on_failure(reason)
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, default: T) -> T:
        """Payload on success, `default` on failure. Never raises."""
        match self:
            case Success(payload):
                return payload
            case _:
                return default

    # ──────────────────────── Bind ────────────────────────

    def bind(self, continuation: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """
        Chain an Outcome-returning step. Short-circuits on failure.

        On Failure the continuation is never called and the reason is passed
        through untouched. On Success the continuation is called exactly once
        and its Outcome is returned as-is, failure included.

        Not a fault-capture boundary: an exception raised by the continuation
        propagates to the caller.
        """
        match self:
            case Success(payload):
                result = continuation(payload)
                if not isinstance(result, Outcome):
                    raise TypeError(
                        f"bind continuation must return an Outcome, got {type(result).__name__}"
                    )
                return result
            case Failure(reason):
                return Failure(reason)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Chaining ────────────────────────

    def then_map(self, transform: Callable[[T], U]) -> Outcome[U]:
        """
        Transform the payload with a plain function.

        An exception raised by `transform` becomes a Failure carrying the
        exception's own description.

            Outcome.success("12").then_map(int)    # → Success(12)
            Outcome.success("x").then_map(int)     # → Failure("invalid literal for int() ...")
        """
        return self.bind(lambda payload: Outcome.of_computation(lambda: transform(payload)))

    def then_run(self, effect: Callable[[T], Any]) -> Outcome[Unit]:
        """
        Run a side effect on the payload; succeed with UNIT.

        Whatever `effect` returns is discarded. An exception it raises
        becomes a Failure.
        """
        return self.bind(lambda payload: Outcome.of_action(lambda: effect(payload)))

    def then_bind(self, continuation: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Chain a step that is itself fallible. Same as bind()."""
        return self.bind(continuation)

    def ensure(self, predicate: Callable[[T], bool], reason: str) -> Outcome[T]:
        """
        Keep a Success only if `predicate` holds for its payload.

            Outcome.success(words).ensure(bool, "No words to lay out")
        """
        _check_reason(reason)
        return self.bind(
            lambda payload: Success(payload) if predicate(payload) else Failure(reason)
        )

    # ──────────────────────── Failure Track ────────────────────────

    def on_failure(self, handler: Callable[[str], Any]) -> Outcome[T]:
        """
        Observe the failure reason without altering the Outcome.

        `handler` runs exactly once on Failure and never on Success; the
        same Outcome object is returned in both cases.
        """
        match self:
            case Failure(reason):
                handler(reason)
        return self

    def replace_error(self, transform: Callable[[str], str]) -> Outcome[T]:
        """
        Rewrite the failure reason. Passes a Success through unchanged.

            Outcome.failure("x").replace_error(lambda r: "wrapped:" + r)  # → Failure("wrapped:x")
        """
        match self:
            case Success(_):
                return self
            case Failure(reason):
                return Failure(transform(reason))
        raise TypeError("unreachable")  # pragma: no cover

    def refine_error(self, prefix: str) -> Outcome[T]:
        """
        Prefix the failure reason with context from an enclosing stage.

            Outcome.failure("file not found").refine_error("Can't read stop words")
            # → Failure("Can't read stop words. file not found")
        """
        return self.replace_error(lambda reason: prefix + REFINE_SEPARATOR + reason)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Outcome[T]:
        """Wrap `value` as a Success. Total."""
        return Success(value)

    @staticmethod
    def success_unit() -> Outcome[Unit]:
        """Success with no meaningful payload."""
        return Success(UNIT)

    @staticmethod
    def failure(reason: str) -> Outcome[T]:
        """Failure carrying `reason` verbatim."""
        return Failure(reason)

    @staticmethod
    def of_computation(
        supplier: Callable[[], T],
        override_reason: Optional[str] = None,
        *,
        policy: Optional[CapturePolicy] = None,
    ) -> Outcome[T]:
        """
        Run a computation that may raise and capture the result.

        Returns Success(supplier()) on normal return. On a captured exception
        returns Failure(override_reason), or Failure(description of the
        exception) when no override is given.

        Before:
            try:
                return Outcome.success(path.read_text())
            except Exception as e:
                return Outcome.failure(str(e))

        After:
            return Outcome.of_computation(path.read_text, "Can't read tags file")

        `policy` overrides the configured CapturePolicy for this call.
        """
        if override_reason is not None:
            _check_reason(override_reason)
        settings = get_settings()
        try:
            value = supplier()
        except Exception as fault:
            if not should_capture(fault, policy or settings.capture_policy):
                raise
            return _failure_from(fault, override_reason, settings)
        return Success(value)

    @staticmethod
    def of_action(
        action: Callable[[], Any],
        override_reason: Optional[str] = None,
        *,
        policy: Optional[CapturePolicy] = None,
    ) -> Outcome[Unit]:
        """Same contract as of_computation() for an action with no result."""
        if override_reason is not None:
            _check_reason(override_reason)
        settings = get_settings()
        try:
            action()
        except Exception as fault:
            if not should_capture(fault, policy or settings.capture_policy):
                raise
            return _failure_from(fault, override_reason, settings)
        return Success(UNIT)

    @staticmethod
    def from_optional(value: Optional[T], reason: str) -> Outcome[T]:
        """
        Success(value) unless value is None.

            Outcome.from_optional(fonts.get(name), f"Unknown font {name}")
        """
        _check_reason(reason)
        if value is not None:
            return Success(value)
        return Failure(reason)

    @staticmethod
    def all_of(outcomes: Iterable[Outcome[T]]) -> Outcome[list[T]]:
        """
        Collect Outcomes into an Outcome of list.

        Returns the first Failure in iteration order, without consuming the
        rest of the iterable, or Success with every payload.
        """
        payloads: list[T] = []
        for outcome in outcomes:
            match outcome:
                case Success(payload):
                    payloads.append(payload)
                case Failure(reason):
                    return Failure(reason)
        return Success(payloads)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """`if outcome:` holds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Outcome[T]):
    """The success track — wraps a payload of type T (None included)."""

    _payload: T

    def __repr__(self) -> str:
        return f"Success({self._payload!r})"


@dataclass(frozen=True, slots=True)
class Failure(Outcome[T]):
    """The failure track — wraps a non-empty reason."""

    _reason: str

    def __post_init__(self) -> None:
        _check_reason(self._reason)

    def __repr__(self) -> str:
        return f"Failure({self._reason!r})"


def _check_reason(reason: object) -> None:
    if not isinstance(reason, str):
        raise InvalidReasonError(f"Failure reason must be a str, got {type(reason).__name__}")
    if not reason:
        raise InvalidReasonError("Failure reason must not be empty")


def _failure_from(
    fault: Exception,
    override_reason: Optional[str],
    settings: RailtrackSettings,
) -> Outcome[Any]:
    reason = override_reason if override_reason is not None else describe_fault(fault)
    if settings.log_captured_faults:
        log.debug("outcome.fault_captured", fault=type(fault).__name__, reason=reason)
    return Failure(reason)
