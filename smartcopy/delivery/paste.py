"""Synthetic paste fallback.

Copies the payload to the clipboard, brings the terminal forward and sends a
Cmd/Ctrl+V keystroke. There's no way to confirm the keystroke landed in the
terminal, so this reports success as soon as the keystroke goes out.
"""

import logging
import platform
import time

from smartcopy.config import get_host_app, get_paste_platforms, get_settle_delay
from smartcopy.config.constants import ACTIVATE_METHODS
from smartcopy.delivery.probe import try_invoke, type_name
from smartcopy.delivery.types import DeliveryContext, Outcome
from smartcopy.injection.activation import activate_app
from smartcopy.injection.clipboard import copy_to_clipboard
from smartcopy.injection.keystrokes import simulate_paste

logger = logging.getLogger("smartcopy")

PLATFORM = platform.system()


def paste_enabled(platform_name: str | None = None) -> bool:
    """True if synthetic paste is allowed on this platform."""
    return (platform_name or PLATFORM) in get_paste_platforms()


def activate_surface(surface) -> bool:
    """Bring the terminal surface forward, falling back to OS-level app activation."""
    for name in ACTIVATE_METHODS:
        for args in ((), (lambda: None,)):
            if try_invoke(surface, name, args).applicable:
                logger.debug("Activated %s via %s", type_name(surface), name)
                return True

    host_app = get_host_app()
    if host_app:
        return activate_app(host_app)
    return False


def paste_fallback(ctx: DeliveryContext) -> Outcome:
    if not paste_enabled():
        logger.info("Synthetic paste not enabled on %s", PLATFORM)
        return Outcome.NOT_APPLICABLE

    logger.info("Trying synthetic paste (%s terminal)", ctx.variant.value)
    if not copy_to_clipboard(ctx.payload):
        return Outcome.NOT_APPLICABLE

    if not activate_surface(ctx.surface):
        logger.warning("Could not activate the terminal, not pasting")
        return Outcome.NOT_APPLICABLE

    time.sleep(get_settle_delay())

    if not simulate_paste():
        return Outcome.NOT_APPLICABLE

    logger.info("Paste keystroke sent")
    return Outcome.DELIVERED
