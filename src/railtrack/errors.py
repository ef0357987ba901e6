"""
Library exceptions — raised for broken programmer contracts, never for modeled failures.

A modeled failure is a value (Failure). The exceptions below signal that the
caller used the library wrongly: unwrapping the wrong track, or building a
Failure without a usable reason. UnwrapError in particular is never
converted into a Failure by a fault-capture boundary.
"""

from __future__ import annotations

from typing import Any


class RailtrackError(Exception):
    """Base class for every exception raised by railtrack itself."""


class UnwrapError(RailtrackError):
    """
    Raised by unwrap() on a Failure, or by reason() on a Success.

    This is the escape hatch aborting: it must never be used to handle
    expected failure paths. Fault-capture boundaries always let it propagate.

    >>> from railtrack import Outcome
    >>> Outcome.failure("disk full").unwrap()
    Traceback (most recent call last):
    ...
    railtrack.errors.UnwrapError: Cannot unwrap a Failure: 'disk full'
    """

    def __init__(self, message: str, outcome: Any = None) -> None:
        super().__init__(message)
        self.outcome = outcome


class InvalidReasonError(RailtrackError, TypeError):
    """A failure reason must be a non-empty str."""
