"""Delivery strategies.

A strategy is one independent way of discovering where the terminal lives
(manager singleton, data context, focus chain, component tree, tab user data)
and pushing the payload into whatever it finds. Each returns an ``Outcome``
and never raises on a missing capability.
"""

import logging

from smartcopy.config import get_modern_tokens
from smartcopy.config.constants import (
    ACTIVE_WIDGET_ACCESSORS,
    BLOCK_DATA_KEYS,
    CLASSIC_MARKERS,
    CLASSIC_USER_DATA_KEY,
    MAX_FOCUS_CHAIN,
    TERMINAL_WIDGETS_ACCESSORS,
    VIEW_DATA_KEYS,
    VIEW_MARKERS,
    WIDGET_USER_DATA_KEYS,
)
from smartcopy.delivery.classifier import walk_tree
from smartcopy.delivery.probe import try_get_related, try_invoke, type_name
from smartcopy.delivery.sinks import push
from smartcopy.delivery.types import DeliveryContext, Outcome

logger = logging.getLogger("smartcopy")

DELIVERED = Outcome.DELIVERED
NOT_APPLICABLE = Outcome.NOT_APPLICABLE


def _push_any(obj, kinds, payload: str) -> Outcome:
    for kind in kinds:
        if push(obj, kind, payload) is DELIVERED:
            return DELIVERED
    return NOT_APPLICABLE


def _via_data_context(ctx: DeliveryContext, component, keys, kinds) -> Outcome:
    data_context = ctx.host.data_context(component)
    if data_context is None:
        return NOT_APPLICABLE
    for key in keys:
        obj = ctx.host.data(data_context, key)
        if obj is None:
            continue
        logger.info("Found %s in data context: %s", key, type_name(obj))
        if _push_any(obj, kinds, ctx.payload) is DELIVERED:
            return DELIVERED
    return NOT_APPLICABLE


def _widget_kinds(name: str) -> list[str]:
    """Sink kinds worth trying for a component, judged by its class name."""
    lower = name.lower()
    kinds = []
    if any(marker in lower for marker in VIEW_MARKERS):
        kinds.append("terminal_view")
    if any(marker in lower for marker in CLASSIC_MARKERS) or ("terminal" in lower and "widget" in lower):
        kinds.append("classic_widget")
    return kinds


# Block terminal

def block_via_manager(ctx: DeliveryContext) -> Outcome:
    manager = ctx.host.terminal_manager(ctx)
    if manager is None:
        return NOT_APPLICABLE
    for accessor in ACTIVE_WIDGET_ACCESSORS:
        probe = try_invoke(manager, accessor)
        if not probe.applicable or probe.value is None:
            continue
        logger.info("Got widget (%s): %s", accessor, type_name(probe.value))
        if push(probe.value, "block_widget", ctx.payload) is DELIVERED:
            return DELIVERED
    return NOT_APPLICABLE


def block_via_data_context(ctx: DeliveryContext) -> Outcome:
    return _via_data_context(ctx, ctx.component, BLOCK_DATA_KEYS, ("block_session",))


def block_component_search(ctx: DeliveryContext) -> Outcome:
    tokens = get_modern_tokens()
    for node in walk_tree(ctx.component):
        name = type_name(node)
        if not any(token in name for token in tokens):
            continue
        logger.info("Found block terminal component: %s", name)
        if push(node, "block_widget", ctx.payload) is DELIVERED:
            return DELIVERED
        if _via_data_context(ctx, node, BLOCK_DATA_KEYS, ("block_session",)) is DELIVERED:
            return DELIVERED
    return NOT_APPLICABLE


def block_command_executor(ctx: DeliveryContext) -> Outcome:
    for executor in ctx.host.command_executors(ctx):
        if push(executor, "executor", ctx.payload) is DELIVERED:
            return DELIVERED
    return NOT_APPLICABLE


# Shared fallback tail

def focused_component(ctx: DeliveryContext) -> Outcome:
    """Walk up from whatever has keyboard focus looking for a terminal."""
    node = ctx.host.focus_owner(ctx)
    seen = {}
    while node is not None and id(node) not in seen and len(seen) < MAX_FOCUS_CHAIN:
        seen[id(node)] = node
        if _push_any(node, _widget_kinds(type_name(node)), ctx.payload) is DELIVERED:
            return DELIVERED
        if _via_data_context(ctx, node, VIEW_DATA_KEYS, ("terminal_view", "new_widget")) is DELIVERED:
            return DELIVERED
        node = ctx.host.parent_of(node)
    return NOT_APPLICABLE


def _manager_widgets(ctx: DeliveryContext) -> list:
    manager = ctx.host.terminal_manager(ctx)
    if manager is None:
        return []

    widgets = []
    probe = try_invoke(manager, "find_widget_by_content", (ctx.content,))
    if probe.applicable and probe.value is not None:
        widgets.append(probe.value)
    probe = try_invoke(manager, "get_active_terminal_widget")
    if probe.applicable and probe.value is not None:
        widgets.append(probe.value)

    many = try_get_related(manager, TERMINAL_WIDGETS_ACCESSORS)
    if many is not None and not isinstance(many, (str, bytes)):
        try:
            widgets.extend(w for w in many if w is not None)
        except TypeError:
            logger.debug("Terminal widgets of %s are not iterable", type_name(manager))
    return widgets


def new_architecture(ctx: DeliveryContext) -> Outcome:
    for widget in _manager_widgets(ctx):
        logger.info("Trying widget: %s", type_name(widget))
        if push(widget, "new_widget", ctx.payload) is DELIVERED:
            return DELIVERED

    for key in WIDGET_USER_DATA_KEYS:
        widget = ctx.host.user_data(ctx.content, key)
        if widget is None:
            continue
        logger.info("Found widget in tab user data (%s): %s", key, type_name(widget))
        if push(widget, "new_widget", ctx.payload) is DELIVERED:
            return DELIVERED

    if _via_data_context(ctx, ctx.component, VIEW_DATA_KEYS, ("terminal_view", "new_widget")) is DELIVERED:
        return DELIVERED

    for node in walk_tree(ctx.component):
        lower = type_name(node).lower()
        if any(marker in lower for marker in VIEW_MARKERS):
            if push(node, "terminal_view", ctx.payload) is DELIVERED:
                return DELIVERED
        if any(marker in lower for marker in CLASSIC_MARKERS):
            if push(node, "classic_widget", ctx.payload) is DELIVERED:
                return DELIVERED

    # Last resort: the active tab object itself may be the widget
    targets = [ctx.content]
    if ctx.component is not ctx.content:
        targets.append(ctx.component)
    for obj in targets:
        if push(obj, "new_widget", ctx.payload) is DELIVERED:
            return DELIVERED
    return NOT_APPLICABLE


def classic_architecture(ctx: DeliveryContext) -> Outcome:
    widget = ctx.host.user_data(ctx.content, CLASSIC_USER_DATA_KEY)
    if widget is not None:
        if push(widget, "classic_widget", ctx.payload) is DELIVERED:
            return DELIVERED

    for node in walk_tree(ctx.component):
        name = type_name(node)
        if ("Terminal" in name and "Widget" in name) or "JediTerm" in name:
            if push(node, "classic_widget", ctx.payload) is DELIVERED:
                return DELIVERED
    return NOT_APPLICABLE
