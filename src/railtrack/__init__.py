"""
railtrack — success-or-failure outcomes for composing fallible steps.

Failures are values, not exceptions: each step returns an Outcome, and the
first Failure in a chain short-circuits the rest while its reason travels on.

    from railtrack import Outcome

    def parse_size(text: str) -> Outcome[int]:
        return Outcome.of_computation(lambda: int(text), f"Not a number: {text!r}")

    outcome = (
        parse_size("640")
        .ensure(lambda size: size > 0, "Size must be positive")
        .then_map(lambda size: size * 2)
        .refine_error("Invalid image width")
    )
"""

from railtrack.assertions import OutcomeAssertions
from railtrack.capture import CapturePolicy
from railtrack.combinators import as_outcome, pipeline
from railtrack.config import RailtrackSettings, get_settings
from railtrack.errors import InvalidReasonError, RailtrackError, UnwrapError
from railtrack.handlers import collect_into, log_failure
from railtrack.outcome import Failure, Outcome, Success
from railtrack.unit import UNIT, Unit

__all__ = [
    "Outcome",
    "Success",
    "Failure",
    "Unit",
    "UNIT",
    "as_outcome",
    "pipeline",
    "CapturePolicy",
    "RailtrackSettings",
    "get_settings",
    "RailtrackError",
    "UnwrapError",
    "InvalidReasonError",
    "OutcomeAssertions",
    "log_failure",
    "collect_into",
]

__version__ = "1.0.0"
