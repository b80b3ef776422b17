"""Turn a delivery result into a user notice."""

import logging
from typing import Callable, Optional

from smartcopy.delivery.types import SendResult
from smartcopy.injection.clipboard import copy_to_clipboard
from smartcopy.utils.logging import log_delivery

logger = logging.getLogger("smartcopy")

# notify(level, message) where level is "info" or "warning"
Notifier = Callable[[str, str], None]


def log_notice(level: str, message: str) -> None:
    """Default notifier: write the notice to the smartcopy log."""
    if level == "warning":
        logger.warning(message)
    else:
        logger.info(message)


def report(result: SendResult, payload: str,
           notify: Optional[Notifier] = None,
           copy: Optional[Callable[[str], bool]] = None,
           success_message: Optional[str] = None) -> SendResult:
    """Show the outcome of a delivery.

    On failure the payload is copied to the clipboard first so the user can
    paste it by hand. Failures inside the notifier or the clipboard write are
    logged, never raised.
    """
    notify = notify or log_notice
    copy = copy or copy_to_clipboard

    if result.ok:
        level, message = "info", success_message or result.message
    else:
        try:
            copied = copy(payload)
        except Exception as e:
            logger.error("Clipboard copy failed: %s", e)
            copied = False
        if copied:
            message = f"{result.message}; copied to clipboard, paste it manually"
        else:
            message = f"{result.message}; clipboard copy failed too"
        level = "warning"

    try:
        notify(level, message)
    except Exception as e:
        logger.error("Notification failed: %s", e)

    log_delivery(result.ok, result.message, payload, result.strategy)
    return result
