"""Flow registry, event normalisation, resolution and dispatch."""

from .dispatcher import Dispatched, DispatchTransportError, Rejected, dispatch
from .events import ValidationError, from_form, from_push_notification, last_segment
from .models import ConfigError, Flow, FlowTask
from .registry import FlowRegistry, load_registry
from .resolver import resolve_flow

__all__ = [
    "ConfigError",
    "DispatchTransportError",
    "Dispatched",
    "Flow",
    "FlowRegistry",
    "FlowTask",
    "Rejected",
    "ValidationError",
    "dispatch",
    "from_form",
    "from_push_notification",
    "last_segment",
    "load_registry",
    "resolve_flow",
]
