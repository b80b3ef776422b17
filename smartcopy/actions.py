"""User-facing actions: send a code reference or a code excerpt to the terminal."""

import logging

from smartcopy.delivery.dispatcher import Dispatcher, get_dispatcher
from smartcopy.delivery.reporter import Notifier, log_notice, report
from smartcopy.delivery.types import SendResult
from smartcopy.formatting import CodeInfo, format_reference, format_selection

logger = logging.getLogger("smartcopy")


def send_reference(target, info: CodeInfo | None,
                   notify: Notifier | None = None,
                   dispatcher: Dispatcher | None = None) -> SendResult | None:
    """Send ``path:start-end`` for the current selection."""
    notify = notify or log_notice
    if info is None:
        notify("warning", "Select some code first")
        return None

    payload = format_reference(info)
    logger.debug("Sending reference %s", info.format())
    result = (dispatcher or get_dispatcher()).deliver(target, payload)
    return report(result, payload, notify=notify)


def send_selection(target, info: CodeInfo | None, text: str | None,
                   notify: Notifier | None = None,
                   dispatcher: Dispatcher | None = None) -> SendResult | None:
    """Send the selected code, headed by a ``# From: path:lines`` comment."""
    notify = notify or log_notice
    if info is None:
        notify("warning", "Select some code first")
        return None
    if not text or not text.strip():
        notify("warning", "Selection is empty")
        return None

    payload = format_selection(info, text)
    logger.debug("Sending selection from %s", info.format())
    result = (dispatcher or get_dispatcher()).deliver(target, payload)
    return report(result, payload, notify=notify, success_message="Sent selection to terminal")
