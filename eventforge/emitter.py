"""Synchronous, strongly typed event emitter."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Dict, Generic, Hashable, List, Set, TypeVar

from .config import EmitterConfig
from .token import ListenerToken


E = TypeVar("E", bound=Hashable)

logger = logging.getLogger(__name__)

_ALL_EVENTS: Any = object()

Listener = Callable[..., None]


class EventEmitter(Generic[E]):
    """Simple strongly typed event listener / emitter.

    ``E`` is the type of event names, e.g. ``EventEmitter[Literal["ready", "closed"]]``
    or an ``Enum``. Listener signatures are not checked at runtime: ``emit``
    forwards exactly the positional arguments it receives.
    """

    def __init__(self, config: EmitterConfig | None = None) -> None:
        self.config = config or EmitterConfig()
        self._logger = (
            logging.getLogger(self.config.logger_name) if self.config.logger_name else logger
        )
        # An event is a key here only while it has at least one listener.
        self._listeners: Dict[E, List[Listener]] = {}
        self._tokens: Set[ListenerToken] = set()
        self._over_limit: Set[E] = set()

    @property
    def event_names(self) -> list[E]:
        """Events which currently have registered listeners."""
        return list(self._listeners)

    def listeners_count(self, event: E = _ALL_EVENTS) -> int:
        """Count listeners of ``event``, or of all events when omitted.

        Any hashable value, ``None`` included, is counted as an event name.
        """
        if event is _ALL_EVENTS:
            return sum(len(listeners) for listeners in self._listeners.values())
        return len(self._listeners.get(event, ()))

    def listeners(self, event: E) -> tuple[Listener, ...]:
        return tuple(self._listeners.get(event, ()))

    def on(self, event: E, listener: Listener) -> ListenerToken:
        """Add ``event`` listener.

        Returns a token which unregisters exactly this registration when
        invalidated, so the same callable may be added several times.
        """
        listeners = self._listeners.get(event)
        if listeners is None:
            self._listeners[event] = [listener]
        else:
            listeners.append(listener)

        def invalidate_action() -> None:
            self._tokens.discard(token)
            self._remove_listener(event, listener)

        token = ListenerToken(invalidate_action)
        self._tokens.add(token)

        self._logger.debug(
            "Listener %s registered for event %r (%s total).",
            describe_listener(listener),
            event,
            len(self._listeners[event]),
        )
        self._check_limit(event)
        return token

    def once(self, event: E, listener: Listener) -> ListenerToken:
        """Add listener which is called for the next ``event`` only.

        The token is invalidated right after the listener returns. It can also
        be invalidated beforehand to drop the registration without a call.
        """

        @wraps(listener)
        def wrapper(*args: Any) -> None:
            listener(*args)
            token.invalidate()

        wrapper.__eventforge_once__ = True  # type: ignore[attr-defined]
        token = self.on(event, wrapper)
        return token

    def emit(self, event: E, *args: Any) -> None:
        """Call every listener registered for ``event`` with ``args``.

        Listeners are called in registration order from a copy of the list, so
        registrations and removals made by listeners take effect on the next
        emit. Listener exceptions propagate to the caller.
        """
        snapshot = list(self._listeners.get(event, ()))
        if self.config.trace_emits:
            self._logger.debug("Emitting %r to %s listener(s).", event, len(snapshot))
        for listener in snapshot:
            listener(*args)

    def remove_all_listeners(self) -> None:
        """Invalidate every outstanding token of this emitter."""
        tokens = list(self._tokens)
        for token in tokens:
            token.invalidate()
        if tokens:
            self._logger.debug("Removed all listeners (%s token(s) invalidated).", len(tokens))

    def _remove_listener(self, event: E, listener: Listener) -> None:
        listeners = self._listeners.get(event)
        if listeners is None:
            return

        for idx, candidate in enumerate(listeners):
            if candidate is listener:
                del listeners[idx]
                self._logger.debug(
                    "Listener %s removed from event %r.", describe_listener(listener), event
                )
                break

        if not listeners:
            del self._listeners[event]
            self._over_limit.discard(event)

    def _check_limit(self, event: E) -> None:
        limit = self.config.listener_limit
        if limit is None or event in self._over_limit:
            return
        count = len(self._listeners[event])
        if count > limit:
            self._over_limit.add(event)
            self._logger.warning(
                "Event %r has %s listeners, more than the configured limit of %s. "
                "This may indicate leaked registrations.",
                event,
                count,
                limit,
            )


def is_once_wrapper(listener: Listener) -> bool:
    return getattr(listener, "__eventforge_once__", False)


def describe_listener(listener: Listener) -> str:
    """Human readable listener name; ``once`` wrappers render as ``once(name)``."""
    if is_once_wrapper(listener):
        return f"once({describe_listener(listener.__wrapped__)})"  # type: ignore[attr-defined]
    return getattr(listener, "__qualname__", None) or type(listener).__qualname__


__all__ = ["EventEmitter", "Listener", "describe_listener", "is_once_wrapper"]
