"""Render registered listeners as a rich table."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table

from ..emitter import EventEmitter, describe_listener


def render_listeners(emitter: EventEmitter[Any], console: Console | None = None) -> Table:
    """Print a table of events and their listeners, in call order."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Event")
    table.add_column("Listeners", justify="right")
    table.add_column("Callables")
    for event in emitter.event_names:
        listeners = emitter.listeners(event)
        table.add_row(
            str(event),
            str(len(listeners)),
            ", ".join(describe_listener(listener) for listener in listeners),
        )
    (console or Console()).print(table)
    return table


__all__ = ["render_listeners"]
