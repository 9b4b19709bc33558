"""Application factory for the flowhook dispatcher."""
from __future__ import annotations

from flask import Flask

from .config import Config
from .extensions import REGISTRY_EXTENSION_KEY, cors, limiter
from .flows.models import ConfigError
from .flows.registry import FlowRegistry, load_registry


def create_app(
    config_class: type[Config] = Config,
    registry: FlowRegistry | None = None,
) -> Flask:
    """Create and configure the Flask application instance.

    The flow registry is loaded once here; a ``ConfigError`` propagates so the
    process never starts serving without one.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    allowed_origins = [
        origin.strip()
        for origin in (app.config.get("CORS_ALLOWED_ORIGINS") or "").split(",")
        if origin.strip()
    ]
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": allowed_origins}},
        allow_headers=["Content-Type"],
    )

    limiter.init_app(app)

    if registry is None:
        registry = _load_registry(app)
    app.extensions[REGISTRY_EXTENSION_KEY] = registry
    app.logger.info("Loaded %s flows", len(registry))

    from .api.flows import bp as flows_bp
    from .api.proxy import bp as proxy_bp
    from .api.registry import bp as registry_bp

    app.register_blueprint(flows_bp, url_prefix="/flows")
    app.register_blueprint(registry_bp, url_prefix="/api")
    app.register_blueprint(proxy_bp)

    return app


def _load_registry(app: Flask) -> FlowRegistry:
    """Load the flows from ``FLOWS_URL`` when set, otherwise from ``FLOWS_FILE``."""

    try:
        return load_registry(
            flows_url=app.config.get("FLOWS_URL"),
            flows_file=app.config.get("FLOWS_FILE", "flows.json"),
            timeout=float(app.config.get("REGISTRY_TIMEOUT", 10)),
        )
    except ConfigError:
        app.logger.exception("Flow configuration could not be loaded.")
        raise


__all__ = ["Config", "create_app"]
