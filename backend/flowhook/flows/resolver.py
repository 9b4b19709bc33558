"""Selecting the configured flow for a task."""
from __future__ import annotations

from collections.abc import Iterable

from .models import Flow, FlowTask


def resolve_flow(task: FlowTask, flows: Iterable[Flow]) -> Flow | None:
    """Return the first flow bound to the task's origin and branch, if any."""

    for flow in flows:
        if flow.origin == task.origin and flow.branch == task.branch:
            return flow
    return None
