"""EventForge public API."""

from .config import EmitterConfig
from .emitter import EventEmitter, Listener
from .token import ListenerToken

__all__ = [
    "EmitterConfig",
    "EventEmitter",
    "Listener",
    "ListenerToken",
]
