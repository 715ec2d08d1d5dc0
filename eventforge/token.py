"""Disposal tokens handed out for every listener registration."""

from __future__ import annotations

from typing import Callable


InvalidateAction = Callable[[], None]


class ListenerToken:
    """One-shot handle that unregisters a single listener.

    The token does not know which emitter issued it. It only owns the
    teardown action the emitter gave it and runs that action at most once.
    """

    __slots__ = ("_invalidate_action", "_is_valid")

    def __init__(self, invalidate_action: InvalidateAction) -> None:
        self._invalidate_action: InvalidateAction | None = invalidate_action
        self._is_valid = True

    def invalidate(self) -> bool:
        """Unregister the listener.

        Returns ``True`` on the first call and ``False`` on every later one.
        """
        if not self._is_valid:
            return False

        # Flip state first so a reentrant call from the action is a no-op.
        self._is_valid = False
        action, self._invalidate_action = self._invalidate_action, None
        if action is not None:
            action()
        return True


__all__ = ["InvalidateAction", "ListenerToken"]
