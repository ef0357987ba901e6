"""
Configuration — typed settings loaded from the environment.

Uses pydantic-settings so a host application can tune railtrack without code
changes. Every field has a default that reproduces the library's documented
behaviour, so nothing needs to be set.

    RAILTRACK_CAPTURE_POLICY=expected    # let programming errors propagate
    RAILTRACK_LOG_CAPTURED_FAULTS=true   # emit outcome.fault_captured

Settings are read once and cached; call get_settings.cache_clear() after
changing the environment (tests do this through a fixture).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from railtrack.capture import CapturePolicy


class RailtrackSettings(BaseSettings):
    """Library-wide settings, prefixed RAILTRACK_ in the environment."""

    model_config = SettingsConfigDict(
        env_prefix="RAILTRACK_",
        extra="ignore",
        frozen=True,
    )

    capture_policy: CapturePolicy = Field(
        default=CapturePolicy.ALL,
        description="Which exceptions fault-capture boundaries convert into failures",
    )
    log_captured_faults: bool = Field(
        default=False,
        description="Emit an outcome.fault_captured debug event for every captured fault",
    )


@lru_cache(maxsize=1)
def get_settings() -> RailtrackSettings:
    """Return the process-wide settings, loading them on first use."""
    return RailtrackSettings()
