"""Normalisation of inbound trigger events into flow tasks."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import FlowTask

FORM_FIELDS = ("origin", "branch", "selector")


class ValidationError(Exception):
    """Raised when an inbound event cannot be turned into a flow task."""

    def __init__(self, errors: list[str] | str) -> None:
        self.errors = [errors] if isinstance(errors, str) else list(errors)
        super().__init__("; ".join(self.errors))


def last_segment(value: Any, field: str) -> str:
    """Return the final segment of a slash-delimited path."""

    if not isinstance(value, str) or not value:
        raise ValidationError(f"{field} is required")

    segment = value.rstrip("/").rsplit("/", 1)[-1]
    if not segment:
        raise ValidationError(f"{field} has no path segment")
    return segment


def from_form(fields: Mapping[str, str]) -> FlowTask:
    """Build a task from the manual dispatch form."""

    missing = [name for name in FORM_FIELDS if not fields.get(name)]
    if missing:
        raise ValidationError([f"{name} is required" for name in missing])

    return FlowTask(
        origin=fields["origin"],
        branch=fields["branch"],
        selector=fields["selector"],
    )


def from_push_notification(body: Any) -> FlowTask:
    """Build a task from a GitHub push webhook payload."""

    if not isinstance(body, dict):
        raise ValidationError("push payload must be a JSON object")

    errors: list[str] = []

    repository = body.get("repository")
    origin = repository.get("html_url") if isinstance(repository, dict) else None
    if not isinstance(origin, str) or not origin:
        errors.append("repository.html_url is required")

    segments: dict[str, str] = {}
    for field in ("ref", "compare"):
        try:
            segments[field] = last_segment(body.get(field), field)
        except ValidationError as exc:
            errors.extend(exc.errors)

    if errors:
        raise ValidationError(errors)

    return FlowTask(origin=origin, branch=segments["ref"], selector=segments["compare"])
