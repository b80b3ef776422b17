"""Terminal delivery dispatcher.

Resolves the terminal surface and its active tab, classifies the engine, then
runs the strategy cascade for that engine followed by the shared fallback tail.
The first strategy that delivers wins.
"""

import logging

from smartcopy.config import get_terminal_tool_window_id
from smartcopy.config.constants import (
    COMPONENT_ACCESSORS,
    CONTENT_MANAGER_ACCESSORS,
    SELECTED_CONTENT_ACCESSORS,
    TOOL_WINDOW_LOOKUPS,
    TOOL_WINDOW_MANAGER_ACCESSORS,
    VISIBILITY_FLAGS,
)
from smartcopy.delivery.classifier import classify
from smartcopy.delivery.host import HostServices, ReflectiveHost
from smartcopy.delivery.paste import paste_fallback
from smartcopy.delivery.probe import is_truthy_flag, try_get_related, try_invoke, type_name
from smartcopy.delivery.strategies import (
    block_command_executor,
    block_component_search,
    block_via_data_context,
    block_via_manager,
    classic_architecture,
    focused_component,
    new_architecture,
)
from smartcopy.delivery.types import DeliveryContext, EngineVariant, Outcome, SendResult, Strategy
from smartcopy.utils.text import preview

logger = logging.getLogger("smartcopy")

NO_SURFACE_MESSAGE = "Terminal tool window not found"
NOT_OPEN_MESSAGE = "Terminal is not open"
NO_TAB_MESSAGE = "No active terminal tab"
EXHAUSTED_MESSAGE = "Could not send to the terminal; make sure it is open, focused and connected"

VARIANT_STRATEGIES = {
    EngineVariant.CLASSIC: (classic_architecture,),
    EngineVariant.MODERN_BLOCK: (
        block_via_manager,
        block_via_data_context,
        block_component_search,
        block_command_executor,
    ),
    EngineVariant.UNKNOWN: (),
}

FALLBACK_TAIL = (
    focused_component,
    new_architecture,
    classic_architecture,
    paste_fallback,
)


def strategy_name(strategy: Strategy) -> str:
    return getattr(strategy, "__name__", None) or repr(strategy)


def _lookup_tool_window(obj, window_id: str):
    """(matched, window) for the first tool-window lookup ``obj`` offers.

    A lookup that exists but raises counts as matched with no window.
    """
    for name in TOOL_WINDOW_LOOKUPS:
        lookup = try_invoke(obj, name, (window_id,))
        if lookup.applicable:
            return True, lookup.value
        if lookup.error is not None:
            logger.warning("%s.%s failed: %s", type_name(obj), lookup.member, lookup.error)
            return True, None
    return False, None


def find_terminal_surface(target):
    """Find the terminal tool window for a target, or None if the host has none.

    A target that can't look up tool windows is taken to be the surface itself.
    """
    if target is None:
        return None
    window_id = get_terminal_tool_window_id()

    matched, window = _lookup_tool_window(target, window_id)
    if matched:
        return window

    manager = try_get_related(target, TOOL_WINDOW_MANAGER_ACCESSORS)
    if manager is not None:
        matched, window = _lookup_tool_window(manager, window_id)
        if matched:
            return window

    return target


def selected_content(surface):
    """The active tab of a surface. A surface without tabs is its own content."""
    content_manager = try_get_related(surface, CONTENT_MANAGER_ACCESSORS)
    if content_manager is None:
        return surface
    return try_get_related(content_manager, SELECTED_CONTENT_ACCESSORS)


class Dispatcher:
    """Delivers a payload into a host terminal.

    Strategy tables can be swapped out per instance, which is how hosts with
    unusual terminals plug in extra strategies.
    """

    def __init__(self, host: HostServices | None = None,
                 variant_strategies: dict | None = None,
                 fallback_tail: tuple | None = None):
        self.host = host if host is not None else ReflectiveHost()
        self.variant_strategies = variant_strategies if variant_strategies is not None else VARIANT_STRATEGIES
        self.fallback_tail = fallback_tail if fallback_tail is not None else FALLBACK_TAIL

    def cascade(self, variant: EngineVariant) -> list:
        """Strategies to run for a variant, in order, each at most once."""
        ordered = []
        for strategy in list(self.variant_strategies.get(variant, ())) + list(self.fallback_tail):
            if all(strategy is not s for s in ordered):
                ordered.append(strategy)
        return ordered

    def is_terminal_available(self, root) -> bool:
        try:
            surface = find_terminal_surface(root)
            return surface is not None and is_truthy_flag(surface, VISIBILITY_FLAGS, default=True)
        except Exception as e:
            logger.debug("Terminal availability check failed: %s", e)
            return False

    def deliver(self, target, payload: str) -> SendResult:
        logger.info("Sending to terminal: %s", preview(payload))
        try:
            return self._deliver(target, payload)
        except Exception as e:
            logger.exception("Send to terminal failed")
            return SendResult.error(f"Send failed: {e}")

    def _deliver(self, target, payload: str) -> SendResult:
        surface = find_terminal_surface(target)
        if surface is None:
            return SendResult.error(NO_SURFACE_MESSAGE)

        if not is_truthy_flag(surface, VISIBILITY_FLAGS, default=True):
            return SendResult.error(NOT_OPEN_MESSAGE)

        content = selected_content(surface)
        if content is None:
            return SendResult.error(NO_TAB_MESSAGE)

        component = try_get_related(content, COMPONENT_ACCESSORS)
        if component is None:
            component = content

        variant = classify(component)
        logger.info("Terminal component: %s (%s)", type_name(component), variant.value)

        ctx = DeliveryContext(
            root=target,
            surface=surface,
            content=content,
            component=component,
            payload=payload,
            host=self.host,
            variant=variant,
        )

        for strategy in self.cascade(variant):
            name = strategy_name(strategy)
            try:
                outcome = strategy(ctx)
            except Exception:
                logger.exception("Strategy %s failed", name)
                continue
            if outcome is Outcome.DELIVERED:
                logger.info("Delivered via %s (%s terminal)", name, ctx.variant.value)
                return SendResult.success(f"Sent to terminal: {payload}", name)
            logger.debug("Strategy %s not applicable", name)

        return SendResult.error(EXHAUSTED_MESSAGE)


_dispatcher: Dispatcher | None = None


def get_dispatcher() -> Dispatcher:
    """Shared dispatcher using host reflection."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = Dispatcher()
    return _dispatcher


def deliver(target, payload: str) -> SendResult:
    """Send ``payload`` into the terminal reachable from ``target``. Never raises."""
    return get_dispatcher().deliver(target, payload)


def is_terminal_available(root) -> bool:
    """True if a terminal surface can be found from ``root``. Never raises."""
    return get_dispatcher().is_terminal_available(root)
