"""
Fault-capture policy — decides which exceptions a boundary turns into a Failure.

The boundaries (Outcome.of_computation, Outcome.of_action and therefore
then_map / then_run) run caller code and convert whatever it raises into a
failure reason. Two policies are available:

  ALL       every Exception is captured — the historical, permissive contract
  EXPECTED  exceptions that indicate a programming error propagate untouched

Never captured, whatever the policy:
  - UnwrapError — a broken programmer contract, must abort
  - BaseException that is not an Exception (KeyboardInterrupt, SystemExit, ...)
"""

from __future__ import annotations

from enum import Enum, unique

from railtrack.errors import UnwrapError


@unique
class CapturePolicy(str, Enum):
    """Breadth of exception capture at a fault-capture boundary."""

    ALL = "all"
    """Capture every Exception subclass (default)."""

    EXPECTED = "expected"
    """Capture only faults that are not programming errors."""


PROGRAMMING_FAULTS: tuple[type[BaseException], ...] = (
    AttributeError,
    NameError,
    TypeError,
    AssertionError,
    NotImplementedError,
    RecursionError,
)


def should_capture(fault: BaseException, policy: CapturePolicy) -> bool:
    """Return True when `fault` must become a Failure under `policy`."""
    match fault:
        case UnwrapError():
            return False
        case Exception() if policy is CapturePolicy.ALL:
            return True
        case Exception():
            return not isinstance(fault, PROGRAMMING_FAULTS)
        case _:
            return False


def describe_fault(fault: BaseException) -> str:
    """
    Textual description of a captured fault, used as the failure reason.

    Falls back to the exception class name when str(fault) is empty, so
    a captured reason is never blank:

        describe_fault(ZeroDivisionError("division by zero"))  # 'division by zero'
        describe_fault(RuntimeError())                         # 'RuntimeError'
    """
    return str(fault) or type(fault).__name__
