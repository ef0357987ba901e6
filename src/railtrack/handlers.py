"""
Ready-made handlers for Outcome.on_failure().

railtrack never reports a failure on its own; surfacing is the caller's
decision. These helpers cover the two common choices:

    outcome.on_failure(log_failure("tag_cloud.render_failed", path=str(path)))
    outcome.on_failure(collect_into(errors))
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional

import structlog

log = structlog.get_logger()


def log_failure(
    event: str,
    logger: Optional[Any] = None,
    **context: Any,
) -> Callable[[str], None]:
    """
    Handler that logs `event` at warning level with the reason attached.

    `logger` defaults to railtrack's own structlog logger; pass a bound
    logger to keep the caller's context (request ids, stage names).
    """
    target = logger if logger is not None else log

    def handle(reason: str) -> None:
        target.warning(event, reason=reason, **context)

    return handle


def collect_into(sink: MutableSequence[str]) -> Callable[[str], None]:
    """Handler that appends every failure reason to `sink`."""
    return sink.append
