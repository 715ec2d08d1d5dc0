"""Automated checks to highlight suspicious registrations."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any

from ..emitter import EventEmitter, describe_listener


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(emitter: EventEmitter[Any]) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    limit = emitter.config.listener_limit

    for event in emitter.event_names:
        listeners = emitter.listeners(event)
        if limit is not None and len(listeners) > limit:
            issues.append(
                ChecklistIssue(
                    "warning",
                    f"Event {event!r} has {len(listeners)} listeners (limit {limit}).",
                )
            )

        # Same object, matching how tokens remove listeners.
        counts = Counter(id(listener) for listener in listeners)
        unique = {id(listener): listener for listener in listeners}
        for key, listener in unique.items():
            count = counts[key]
            if count > 1:
                issues.append(
                    ChecklistIssue(
                        "warning",
                        f"Listener {describe_listener(listener)} is registered "
                        f"{count} times for event {event!r}.",
                    )
                )

    return issues


__all__ = ["ChecklistIssue", "run_checklist"]
