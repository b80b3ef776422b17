"""Utility functions for smartcopy."""

from .text import (
    to_snake_case,
    to_camel_case,
    name_variants,
    preview,
)

from .logging import (
    log_delivery,
)

__all__ = [
    "to_snake_case",
    "to_camel_case",
    "name_variants",
    "preview",
    "log_delivery",
]
