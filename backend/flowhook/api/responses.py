"""Turning dispatch outcomes into HTTP responses."""

from __future__ import annotations

from http import HTTPStatus

from flask import Response, jsonify, render_template

from ..flows.dispatcher import Dispatched, Rejected
from ..flows.events import ValidationError

FLOW_NOT_FOUND_MESSAGE = "flow not found for this repository or branch"
TRANSPORT_ERROR_MESSAGE = "downstream pipeline unavailable"


def not_found() -> tuple[Response, int]:
    return Response(FLOW_NOT_FOUND_MESSAGE, mimetype="text/plain"), HTTPStatus.NOT_FOUND


def validation_failed(exc: ValidationError) -> tuple[Response, int]:
    return jsonify({"errors": exc.errors}), HTTPStatus.BAD_REQUEST


def transport_failed() -> tuple[Response, int]:
    payload = {"successful": False, "error": TRANSPORT_ERROR_MESSAGE}
    return jsonify(payload), HTTPStatus.BAD_GATEWAY


def dispatched(outcome: Dispatched | Rejected) -> tuple[Response | str, int]:
    """Render the success page or echo the downstream rejection verbatim."""

    if isinstance(outcome, Rejected):
        return jsonify(outcome.to_dict()), HTTPStatus.OK
    return render_template("success.html"), HTTPStatus.OK
