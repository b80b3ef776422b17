"""Text helpers for smartcopy."""

import re

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


def to_snake_case(name: str) -> str:
    """sendText -> send_text, getTTYConnector -> get_tty_connector."""
    if not name:
        return ""
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def to_camel_case(name: str) -> str:
    """send_text -> sendText. Leading underscores are kept."""
    if not name or '_' not in name.strip('_'):
        return name
    stripped = name.lstrip('_')
    prefix = name[:len(name) - len(stripped)]
    head, *rest = stripped.split('_')
    return prefix + head + ''.join(part[:1].upper() + part[1:] for part in rest if part)


def name_variants(name: str) -> list[str]:
    """Spellings a host might use for the same member, most literal first."""
    variants = [name]
    for candidate in (to_snake_case(name), to_camel_case(name)):
        if candidate and candidate not in variants:
            variants.append(candidate)
    return variants


def preview(text: str, limit: int = 50) -> str:
    """Single-line preview of a payload for log messages."""
    if not text:
        return ""
    flat = text.replace("\n", "\\n")
    return flat if len(flat) <= limit else flat[:limit] + "..."
