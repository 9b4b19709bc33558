"""Loading and holding the process-wide flow registry."""
from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Iterator
from typing import Any

import requests

from .models import ConfigError, Flow

logger = logging.getLogger(__name__)


class FlowRegistry:
    """Read-only, ordered collection of configured flows."""

    __slots__ = ("_flows",)

    def __init__(self, flows: Iterable[Flow] = ()) -> None:
        self._flows: tuple[Flow, ...] = tuple(flows)

    @property
    def flows(self) -> tuple[Flow, ...]:
        return self._flows

    def __iter__(self) -> Iterator[Flow]:
        return iter(self._flows)

    def __len__(self) -> int:
        return len(self._flows)

    def __repr__(self) -> str:  # pragma: no cover - repr not critical for tests
        return f"<FlowRegistry {len(self._flows)} flows>"


def _fetch_document(url: str, timeout: float) -> Any:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ConfigError(f"could not fetch flows from {url}: {exc}") from exc

    try:
        return response.json()
    except ValueError as exc:
        raise ConfigError(f"flows document at {url} is not valid JSON") from exc


def _read_document(path: str) -> Any:
    resolved = os.path.abspath(path)
    try:
        with open(resolved, encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise ConfigError(f"flow configuration file not found: {resolved}") from exc
    except ValueError as exc:
        raise ConfigError(f"flow configuration file {resolved} is not valid JSON") from exc


def parse_flows(document: Any) -> list[Flow]:
    """Validate a decoded registry document and return its flows in order."""

    if not isinstance(document, list):
        raise ConfigError("flow configuration must be a JSON array")

    flows = [Flow.from_dict(entry, index) for index, entry in enumerate(document)]

    seen: set[tuple[str, str]] = set()
    for flow in flows:
        if flow.key in seen:
            logger.warning(
                "Duplicate flow for %s@%s; the first entry wins.", flow.origin, flow.branch
            )
        seen.add(flow.key)
    return flows


def load_registry(
    flows_url: str | None = None,
    flows_file: str = "flows.json",
    timeout: float = 10.0,
) -> FlowRegistry:
    """Load the registry from ``flows_url`` when given, else from ``flows_file``."""

    if flows_url:
        document = _fetch_document(flows_url, timeout)
    else:
        document = _read_document(flows_file)
    return FlowRegistry(parse_flows(document))
