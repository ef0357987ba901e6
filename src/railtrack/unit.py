"""
Unit — the zero-information payload of outcomes that have nothing to report.

    Outcome.of_action(lambda: path.unlink())   # → Success(UNIT)

UNIT is the only inhabitant: Unit() always hands back the same object, so
`payload is UNIT` is a reliable check. It is deliberately not None — None is
an ordinary payload, UNIT means "succeeded, no value by design".
"""

from __future__ import annotations


class Unit:
    """Singleton marker type for payload-less success."""

    __slots__ = ()
    _instance: Unit | None = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit()
