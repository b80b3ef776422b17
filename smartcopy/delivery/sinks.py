"""Probe chains for pushing text into terminal-shaped objects.

Each sink kind is an ordered tuple of steps:

- ``Send``: call a method with the payload in some shape (str, str + "no
  enter" flag, UTF-8 bytes). Optionally call a follow-up method with no
  arguments, for builder-style APIs.
- ``Descend``: fetch a related object (session, controller, connector...) and
  push into it as another sink kind, one level deeper.
- ``Delegate``: retry the same object as another sink kind.

The first step that succeeds wins. Descents stop at ``max_probe_depth``.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from smartcopy.config import get_max_probe_depth
from smartcopy.config.constants import CONNECTED_FLAGS
from smartcopy.delivery.probe import is_truthy_flag, try_get_related, try_invoke, type_name
from smartcopy.delivery.types import Outcome

logger = logging.getLogger("smartcopy")


def as_text(payload: str) -> tuple:
    return (payload,)


def as_text_no_enter(payload: str) -> tuple:
    return (payload, False)


def as_utf8(payload: str) -> tuple:
    return (payload.encode("utf-8"),)


@dataclass(frozen=True)
class Send:
    method: str
    shape: Callable[[str], tuple] = as_text
    then: Optional[str] = None


@dataclass(frozen=True)
class Descend:
    accessors: Tuple[str, ...]
    kind: str


@dataclass(frozen=True)
class Delegate:
    kind: str


def _sends(*methods: str) -> tuple:
    return tuple(Send(m) for m in methods)


SESSION_ACCESSORS = ("get_session", "get_block_terminal_session", "get_terminal_session",
                     "session", "block_session")
CONTROLLER_ACCESSORS = ("get_controller", "get_terminal_controller", "controller")
MODEL_ACCESSORS = ("get_model", "get_terminal_model", "model")
STARTER_ACCESSORS = ("get_terminal_starter", "terminal_starter")
CONNECTOR_ACCESSORS = ("get_tty_connector", "tty_connector", "connector")
CHANNEL_ACCESSORS = ("get_output_channel", "get_channel", "output_channel", "channel")
VIEW_ACCESSORS = ("terminal_view", "view", "get_terminal_view", "get_view")
INPUT_ACCESSORS = ("terminal_input", "input", "get_terminal_input", "get_input")

SINKS = {
    "block_widget": (
        Descend(SESSION_ACCESSORS, "block_session"),
        Descend(CONTROLLER_ACCESSORS, "controller"),
        Descend(MODEL_ACCESSORS, "model"),
        *_sends("send_text", "send_string", "type_text", "input_text",
                "execute_command", "send_to_terminal", "write"),
    ),
    "block_session": (
        *_sends("send_text", "send_string", "type_text", "write", "input"),
        Descend(STARTER_ACCESSORS, "starter"),
        Descend(CONNECTOR_ACCESSORS, "connector"),
        Descend(CHANNEL_ACCESSORS, "channel"),
    ),
    "controller": (
        *_sends("send_text", "send_string", "type_text", "input_text",
                "handle_input", "process_input", "write"),
        Descend(("get_session", "session"), "block_session"),
    ),
    "model": _sends("send_text", "send_string", "write", "input"),
    "starter": (
        Send("send_string", as_text_no_enter),
        Send("send_string", as_text),
    ),
    "connector": (
        Send("write", as_utf8),
        Send("write", as_text),
    ),
    "channel": (
        Send("write", as_utf8),
    ),
    "terminal_view": (
        Send("send_text", as_text),
        Descend(("create_send_text_builder",), "send_builder"),
        Descend(("get_terminal_input", "terminal_input"), "terminal_input"),
        Descend(("get_model", "model"), "model"),
    ),
    "send_builder": (
        Send("text", as_text, then="send"),
        Send("send", as_text),
    ),
    "terminal_input": _sends("send_string", "send_text", "type", "insert", "write"),
    "session": (
        Send("send_text", as_text),
        Descend(("get_channel", "get_output_channel", "channel"), "channel"),
        Descend(("get_tty_connector", "tty_connector"), "connector"),
    ),
    "new_widget": (
        Descend(VIEW_ACCESSORS, "terminal_view"),
        Descend(INPUT_ACCESSORS, "terminal_input"),
        *_sends("send_text", "send_string", "type_text", "insert_text",
                "write_text", "input_text", "type_string"),
        Descend(("get_term_session", "get_session", "get_terminal_session", "session"), "session"),
        Descend(CONTROLLER_ACCESSORS, "controller"),
        Delegate("classic_widget"),
    ),
    "classic_widget": (
        Descend(("get_terminal_starter",), "starter"),
        Descend(("get_tty_connector",), "connector"),
        Descend(("my_tty_connector", "tty_connector"), "connector"),
        Descend(("get_terminal",), "terminal"),
    ),
    "terminal": (
        Send("write_string", as_text),
    ),
    "executor": _sends("send_text", "execute_text", "send_to_terminal"),
}

# Sinks that only accept writes once the far end is confirmed live
SINK_GUARDS = {
    "connector": CONNECTED_FLAGS,
}


def _send(obj, step: Send, payload: str) -> bool:
    probe = try_invoke(obj, step.method, step.shape(payload))
    if not probe.applicable:
        return False
    if step.then:
        return try_invoke(obj, step.then).applicable
    return True


def _push(obj, kind: str, payload: str, depth: int, max_depth: int, visited: dict) -> Outcome:
    if obj is None:
        return Outcome.NOT_APPLICABLE
    key = (id(obj), kind)
    if key in visited:
        return Outcome.NOT_APPLICABLE
    # keep a reference so the id can't be recycled mid-walk
    visited[key] = obj

    guard = SINK_GUARDS.get(kind)
    if guard and not is_truthy_flag(obj, guard, default=False):
        logger.debug("%s is not connected, skipping", type_name(obj))
        return Outcome.NOT_APPLICABLE

    for step in SINKS[kind]:
        if isinstance(step, Send):
            if _send(obj, step, payload):
                logger.info("Sent via %s.%s (%s)", type_name(obj), step.method, kind)
                return Outcome.DELIVERED
        elif isinstance(step, Descend):
            if depth >= max_depth:
                continue
            related = try_get_related(obj, step.accessors)
            if related is None:
                continue
            logger.debug("%s -> %s (%s)", type_name(obj), type_name(related), step.kind)
            if _push(related, step.kind, payload, depth + 1, max_depth, visited) is Outcome.DELIVERED:
                return Outcome.DELIVERED
        elif isinstance(step, Delegate):
            if _push(obj, step.kind, payload, depth, max_depth, visited) is Outcome.DELIVERED:
                return Outcome.DELIVERED
    return Outcome.NOT_APPLICABLE


def push(obj, kind: str, payload: str, max_depth: int | None = None) -> Outcome:
    """Try to deliver ``payload`` into ``obj`` treated as a ``kind`` sink."""
    if kind not in SINKS:
        raise KeyError(f"unknown sink kind: {kind}")
    max_depth = max_depth if max_depth is not None else get_max_probe_depth()
    return _push(obj, kind, payload, 0, max_depth, {})
