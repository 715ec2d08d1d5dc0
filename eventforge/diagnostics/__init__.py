"""Inspection helpers for live emitters."""

from .checklist import ChecklistIssue, run_checklist
from .report import render_listeners

__all__ = ["ChecklistIssue", "render_listeners", "run_checklist"]
