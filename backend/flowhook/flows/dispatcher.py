"""Forwarding tasks to the downstream pipeline webhook."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

import requests

from .models import Flow, FlowTask

DEFAULT_TIMEOUT = 10.0


class DispatchTransportError(Exception):
    """Raised when the downstream webhook is unreachable or answers garbage."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


@dataclass(frozen=True)
class Dispatched:
    """The downstream pipeline accepted the task."""

    payload: dict[str, Any] = field(default_factory=dict)

    successful = True


@dataclass(frozen=True)
class Rejected:
    """The downstream pipeline explicitly declined the task."""

    error_code: Any
    error_msg: Any
    payload: dict[str, Any] = field(default_factory=dict)

    successful = False

    def to_dict(self) -> dict[str, Any]:
        body = dict(self.payload)
        body.update(
            {"successful": False, "errorCode": self.error_code, "errorMsg": self.error_msg}
        )
        return body


DispatchOutcome = Union[Dispatched, Rejected]


def build_payload(task: FlowTask, flow: Flow) -> dict[str, str]:
    return {"selector": task.selector, "notify": flow.notify}


def parse_response(body: Any) -> DispatchOutcome:
    """Interpret the tagged body returned by the pipeline webhook."""

    if not isinstance(body, dict) or not isinstance(body.get("successful"), bool):
        raise DispatchTransportError("downstream response lacks a successful flag")

    if body["successful"]:
        return Dispatched(payload=body)
    return Rejected(
        error_code=body.get("errorCode"),
        error_msg=body.get("errorMsg"),
        payload=body,
    )


def dispatch(task: FlowTask, flow: Flow, timeout: float = DEFAULT_TIMEOUT) -> DispatchOutcome:
    """Send the task to the flow's webhook and return the interpreted outcome."""

    try:
        response = requests.post(
            flow.webhook,
            json=build_payload(task, flow),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise DispatchTransportError(f"could not reach {flow.webhook}", exc) from exc

    try:
        body = response.json()
    except ValueError as exc:
        raise DispatchTransportError(
            f"{flow.webhook} returned a non-JSON body (HTTP {response.status_code})", exc
        ) from exc

    return parse_response(body)
