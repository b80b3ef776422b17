"""smartcopy - send code references and excerpts into an IDE's terminal."""

__version__ = "0.1.0"

from .delivery import (
    EngineVariant,
    SendResult,
    Dispatcher,
    HostServices,
    deliver,
    is_terminal_available,
)

from .formatting import CodeInfo, format_reference, format_selection

from .actions import send_reference, send_selection

__all__ = [
    "__version__",
    # Delivery
    "EngineVariant",
    "SendResult",
    "Dispatcher",
    "HostServices",
    "deliver",
    "is_terminal_available",
    # Formatting
    "CodeInfo",
    "format_reference",
    "format_selection",
    # Actions
    "send_reference",
    "send_selection",
]
