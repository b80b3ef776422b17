"""Logging utilities for smartcopy."""

import logging
from datetime import datetime

from smartcopy.config import DELIVERY_LOG
from smartcopy.utils.text import preview

logger = logging.getLogger("smartcopy")


def log_delivery(ok: bool, message: str, payload: str = "", strategy: str | None = None):
    """Append a delivery outcome to the history file."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    if ok:
        via = f" via {strategy}" if strategy else ""
        log_entry = f"[{timestamp}] ✅ Sent{via}: {preview(payload, 80)}"
    else:
        log_entry = f"[{timestamp}] ❌ {message}: {preview(payload, 80)}"

    try:
        DELIVERY_LOG.parent.mkdir(parents=True, exist_ok=True)
        with open(DELIVERY_LOG, "a", encoding="utf-8") as f:
            f.write(log_entry + "\n")
    except Exception as e:
        logger.debug("Failed to write delivery log: %s", e)

    logger.debug(log_entry)
