"""Terminal delivery for smartcopy."""

from .types import (
    CapabilityProbe,
    DeliveryContext,
    EngineVariant,
    Outcome,
    SendResult,
)

from .probe import (
    has_capability,
    try_invoke,
    try_invoke_any,
    get_field,
    try_get_related,
)

from .classifier import classify, walk_tree

from .host import HostServices, ReflectiveHost

from .sinks import push

from .dispatcher import (
    Dispatcher,
    deliver,
    find_terminal_surface,
    is_terminal_available,
)

from .reporter import report, log_notice

__all__ = [
    # Types
    "CapabilityProbe",
    "DeliveryContext",
    "EngineVariant",
    "Outcome",
    "SendResult",
    # Probing
    "has_capability",
    "try_invoke",
    "try_invoke_any",
    "get_field",
    "try_get_related",
    # Classification
    "classify",
    "walk_tree",
    # Host
    "HostServices",
    "ReflectiveHost",
    # Delivery
    "push",
    "Dispatcher",
    "deliver",
    "find_terminal_surface",
    "is_terminal_available",
    # Reporting
    "report",
    "log_notice",
]
