"""Configuration models for EventForge."""

from __future__ import annotations

import os
from dataclasses import dataclass


_TRUTHY = {"1", "true", "yes"}


@dataclass(slots=True)
class EmitterConfig:
    """Runtime switches shared by emitters."""

    max_listeners: int | None = None
    trace_emits: bool = False
    logger_name: str | None = None

    @property
    def listener_limit(self) -> int | None:
        """Effective per-event soft limit; ``None`` when the check is off."""
        return self.max_listeners or None

    @classmethod
    def from_env(cls) -> "EmitterConfig":
        """Create config from environment variables prefixed with EVENTFORGE_."""
        prefix = "EVENTFORGE_"
        return cls(
            max_listeners=_parse_max_listeners(os.getenv(f"{prefix}MAX_LISTENERS")),
            trace_emits=os.getenv(f"{prefix}TRACE_EMITS", "false").lower() in _TRUTHY,
            logger_name=os.getenv(f"{prefix}LOGGER_NAME") or None,
        )


def _parse_max_listeners(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError("Invalid integer for EVENTFORGE_MAX_LISTENERS") from exc
    if value < 0:
        raise ValueError("EVENTFORGE_MAX_LISTENERS cannot be negative")
    return value or None


__all__ = ["EmitterConfig"]
