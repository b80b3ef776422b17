"""Host integration points.

Every place the dispatcher needs something from the host application (a
terminal manager singleton, the focus owner, per-component data) goes through
``HostServices``. The base class answers "nothing here" for everything, so a
host that only wires up some of these still works. ``ReflectiveHost`` fills
them in by probing the objects it was handed.
"""

from collections.abc import Mapping

from smartcopy.config.constants import (
    DATA_CONTEXT_ACCESSORS,
    EXECUTOR_ACCESSORS,
    FOCUS_MANAGER_ACCESSORS,
    FOCUS_OWNER_ACCESSORS,
    PARENT_ACCESSORS,
    PROJECT_ACCESSORS,
    TERMINAL_MANAGER_ACCESSORS,
    USER_DATA_FIELDS,
    USER_DATA_GETTERS,
)
from smartcopy.delivery.probe import try_get_related, try_invoke, try_invoke_any


class HostServices:
    """Optional host capabilities. Override what the host actually has."""

    def terminal_manager(self, ctx):
        return None

    def focus_owner(self, ctx):
        return None

    def data_context(self, component):
        return None

    def data(self, data_context, key: str):
        if data_context is None:
            return None
        if isinstance(data_context, Mapping):
            return data_context.get(key)
        probe = try_invoke(data_context, "get_data", (key,))
        return probe.value if probe.applicable else None

    def user_data(self, content, key: str):
        return None

    def command_executors(self, ctx) -> list:
        return []

    def parent_of(self, component):
        return None


def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [v for v in value if v is not None]
    return [value]


class ReflectiveHost(HostServices):
    """Finds host services by probing the root, surface, content and project objects."""

    def _scopes(self, ctx) -> list:
        scopes = []
        for obj in (ctx.root, ctx.surface, ctx.content):
            if obj is not None and all(obj is not s for s in scopes):
                scopes.append(obj)
        for obj in list(scopes):
            project = try_get_related(obj, PROJECT_ACCESSORS)
            if project is not None and all(project is not s for s in scopes):
                scopes.append(project)
        return scopes

    def terminal_manager(self, ctx):
        for scope in self._scopes(ctx):
            manager = try_get_related(scope, TERMINAL_MANAGER_ACCESSORS)
            if manager is not None:
                return manager
        return None

    def focus_owner(self, ctx):
        for scope in self._scopes(ctx):
            focus_manager = try_get_related(scope, FOCUS_MANAGER_ACCESSORS)
            owner = try_get_related(focus_manager or scope, FOCUS_OWNER_ACCESSORS)
            if owner is not None:
                return owner
        return None

    def data_context(self, component):
        return try_get_related(component, DATA_CONTEXT_ACCESSORS)

    def user_data(self, content, key: str):
        probe = try_invoke_any(content, USER_DATA_GETTERS, (key,))
        if probe.applicable and probe.value is not None:
            return probe.value
        store = try_get_related(content, USER_DATA_FIELDS)
        if isinstance(store, Mapping):
            return store.get(key)
        return None

    def command_executors(self, ctx) -> list:
        executors = []
        for scope in self._scopes(ctx):
            executors.extend(_as_list(try_get_related(scope, EXECUTOR_ACCESSORS)))
        return executors

    def parent_of(self, component):
        return try_get_related(component, PARENT_ACCESSORS)
