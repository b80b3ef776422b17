"""OS-level injection primitives for smartcopy."""

from .clipboard import copy_to_clipboard, clipboard_command

from .activation import activate_app

from .keystrokes import (
    resolve_backend,
    simulate_paste,
)

__all__ = [
    # Clipboard
    "copy_to_clipboard",
    "clipboard_command",
    # Activation
    "activate_app",
    # Keystrokes
    "resolve_backend",
    "simulate_paste",
]
