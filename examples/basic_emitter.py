"""Example of wiring an EventForge emitter into a small download job."""

from __future__ import annotations

import logging
from typing import Literal

from eventforge import EmitterConfig, EventEmitter
from eventforge.diagnostics import render_listeners, run_checklist


JobEvent = Literal["started", "progress", "finished"]


def register(emitter: EventEmitter[JobEvent]) -> None:
    """Attach listeners used by the job."""
    emitter.once("started", lambda job_id: print(f"Job {job_id} started"))
    emitter.on("progress", lambda job_id, percent: print(f"{job_id}: {percent}%"))
    emitter.once("finished", lambda job_id, ok: print(f"Job {job_id} {'done' if ok else 'failed'}"))


def run_job(emitter: EventEmitter[JobEvent], job_id: str) -> None:
    emitter.emit("started", job_id)
    for percent in (25, 50, 75, 100):
        emitter.emit("progress", job_id, percent)
    emitter.emit("finished", job_id, True)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    emitter: EventEmitter[JobEvent] = EventEmitter(EmitterConfig.from_env())
    register(emitter)
    render_listeners(emitter)

    run_job(emitter, "job-1")

    for issue in run_checklist(emitter):
        print(f"[{issue.severity.upper()}] {issue.message}")
    emitter.remove_all_listeners()


if __name__ == "__main__":
    main()
