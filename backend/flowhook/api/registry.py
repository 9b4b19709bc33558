"""Health check and read-only registry endpoints."""

from http import HTTPStatus

from flask import Blueprint, jsonify

from ..extensions import get_registry

bp = Blueprint("registry", __name__)


@bp.get("/health")
def health() -> tuple[object, int]:
    """Return the service health status."""
    return jsonify({"status": "ok", "flows": len(get_registry())}), HTTPStatus.OK


@bp.get("/flows")
def list_flows() -> tuple[object, int]:
    return jsonify([flow.to_dict() for flow in get_registry()]), HTTPStatus.OK
