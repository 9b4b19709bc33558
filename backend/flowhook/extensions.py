"""Extensions used by the Flask application."""

from flask import current_app
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .flows.registry import FlowRegistry

REGISTRY_EXTENSION_KEY = "flowhook.registry"

cors = CORS()
limiter = Limiter(key_func=get_remote_address, default_limits=[])


def get_registry() -> FlowRegistry:
    """Return the flow registry loaded for the current application."""

    return current_app.extensions[REGISTRY_EXTENSION_KEY]


__all__ = ["cors", "limiter", "get_registry", "REGISTRY_EXTENSION_KEY"]
