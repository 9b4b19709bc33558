"""Configuration for the flowhook dispatcher."""

from __future__ import annotations

import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration for the Flask application."""

    FLOWS_URL: str | None = os.getenv("FLOWS_URL")
    FLOWS_FILE: str = os.getenv("FLOWS_FILE", "flows.json")
    REGISTRY_TIMEOUT: float = float(os.getenv("REGISTRY_TIMEOUT", "10"))
    DISPATCH_TIMEOUT: float = float(os.getenv("DISPATCH_TIMEOUT", "10"))
    DISPATCH_RATE_LIMIT: str = os.getenv("DISPATCH_RATE_LIMIT", "60 per minute")
    RATELIMIT_ENABLED: bool = _env_flag("RATELIMIT_ENABLED", "false")
    PROXY_UPSTREAM_URL: str | None = os.getenv("PROXY_UPSTREAM_URL")
    PROXY_TIMEOUT: float = float(os.getenv("PROXY_TIMEOUT", "30"))
    CORS_ALLOWED_ORIGINS: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173")
