"""Pytest fixtures for EventForge."""

from __future__ import annotations

from typing import Any

import pytest

from ..config import EmitterConfig
from ..emitter import EventEmitter


@pytest.fixture()
def emitter() -> EventEmitter[str]:
    return EventEmitter(EmitterConfig())


def emitter_fixture(**kwargs: Any) -> EventEmitter[str]:
    """Helper for ad-hoc tests where pytest is not available."""
    return EventEmitter(EmitterConfig(**kwargs))
