"""Testing utilities for EventForge."""

from .factory import EventFactory
from .fixtures import emitter, emitter_fixture
from .recorder import ListenerRecorder, RecordedCall

__all__ = [
    "EventFactory",
    "ListenerRecorder",
    "RecordedCall",
    "emitter",
    "emitter_fixture",
]
