"""Endpoints receiving trigger events and dispatching them to pipelines."""

from __future__ import annotations

from flask import Blueprint, current_app, render_template, request

from ..extensions import get_registry, limiter
from ..flows.dispatcher import DispatchTransportError, Rejected, dispatch
from ..flows.events import ValidationError, from_form, from_push_notification
from ..flows.models import FlowTask
from ..flows.resolver import resolve_flow
from . import responses

bp = Blueprint("flows", __name__)


def _dispatch_rate_limit() -> str:
    return current_app.config.get("DISPATCH_RATE_LIMIT", "60 per minute")


def _run_task(task: FlowTask):
    flow = resolve_flow(task, get_registry())
    if flow is None:
        current_app.logger.warning("No flow configured for %s@%s", task.origin, task.branch)
        return responses.not_found()

    timeout = float(current_app.config.get("DISPATCH_TIMEOUT", 10))
    try:
        outcome = dispatch(task, flow, timeout=timeout)
    except DispatchTransportError as exc:
        current_app.logger.exception(
            "Dispatch of %s@%s to %s failed: %s", task.origin, task.branch, flow.webhook, exc
        )
        return responses.transport_failed()

    if isinstance(outcome, Rejected):
        current_app.logger.warning(
            "Pipeline %s rejected selector %r: %s %s",
            flow.webhook,
            task.selector,
            outcome.error_code,
            outcome.error_msg,
        )
    else:
        current_app.logger.info(
            "Dispatched selector %r for %s@%s to %s",
            task.selector,
            task.origin,
            task.branch,
            flow.webhook,
        )
    return responses.dispatched(outcome)


@bp.get("/", provide_automatic_options=False)
def list_flows():
    return render_template("flows.html", flows=get_registry().flows)


@bp.post("/dispatch", provide_automatic_options=False)
@limiter.limit(_dispatch_rate_limit)
def dispatch_form():
    try:
        task = from_form(request.form)
    except ValidationError as exc:
        return responses.validation_failed(exc)
    return _run_task(task)


@bp.post("/github", provide_automatic_options=False)
@limiter.limit(_dispatch_rate_limit)
def dispatch_github_push():
    payload = request.get_json(force=True, silent=True)
    try:
        task = from_push_notification(payload)
    except ValidationError as exc:
        return responses.validation_failed(exc)
    return _run_task(task)
