"""Data model for configured flows and the per-request tasks they serve."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class ConfigError(Exception):
    """Raised when the flow registry cannot be loaded."""


@dataclass(frozen=True)
class Flow:
    """A configured binding between a repository branch and a build pipeline."""

    origin: str
    branch: str
    host: tuple[str, ...]
    webhook: str
    notify: str

    @classmethod
    def from_dict(cls, data: Any, index: int = 0) -> Flow:
        """Build a flow from one entry of the registry document."""

        if not isinstance(data, dict):
            raise ConfigError(f"flow #{index} must be an object")

        values: dict[str, str] = {}
        for field in ("origin", "branch", "webhook"):
            value = data.get(field)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"flow #{index}: {field} must be a non-empty string")
            values[field] = value

        notify = data.get("notify", "")
        if not isinstance(notify, str):
            raise ConfigError(f"flow #{index}: notify must be a string")

        host = data.get("host") or []
        if not isinstance(host, list) or not all(isinstance(item, str) for item in host):
            raise ConfigError(f"flow #{index}: host must be a list of strings")

        return cls(host=tuple(host), notify=notify, **values)

    @property
    def key(self) -> tuple[str, str]:
        return self.origin, self.branch

    def to_dict(self) -> dict[str, Any]:
        return {
            "origin": self.origin,
            "branch": self.branch,
            "host": list(self.host),
            "webhook": self.webhook,
            "notify": self.notify,
        }


@dataclass(frozen=True)
class FlowTask:
    """Normalised description of what to build for a single request."""

    origin: str
    branch: str
    selector: str
