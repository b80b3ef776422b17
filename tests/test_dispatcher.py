import logging

from smartcopy.delivery.classifier import classify
from smartcopy.delivery.dispatcher import (
    EXHAUSTED_MESSAGE,
    NO_SURFACE_MESSAGE,
    NO_TAB_MESSAGE,
    NOT_OPEN_MESSAGE,
    Dispatcher,
    deliver,
    find_terminal_surface,
    is_terminal_available,
)
from smartcopy.delivery.host import HostServices
from smartcopy.delivery.paste import paste_fallback
from smartcopy.delivery.strategies import (
    classic_architecture,
    focused_component,
    new_architecture,
)
from smartcopy.delivery.types import EngineVariant, Outcome


class Inert:
    pass


class TextSink:
    def __init__(self):
        self.received = []

    def send_text(self, text):
        self.received.append(text)


class CamelTarget:
    def __init__(self):
        self.calls = []

    def sendText(self, text):
        self.calls.append(text)


class FlakyWidget:
    def __init__(self):
        self.received = []

    def send_text(self, text):
        raise RuntimeError("widget disposed")

    def send_string(self, text):
        self.received.append(text)


class Tab:
    def __init__(self, component=None, terminal_view=None):
        self.component = component
        self.terminal_view = terminal_view


class ContentManager:
    def __init__(self, selected):
        self.selected_content = selected


class ToolWindow:
    def __init__(self, component=None, content_manager=None, visible=True):
        self.component = component
        self.content_manager = content_manager
        self.visible = visible


class Project:
    def __init__(self, window):
        self._window = window

    def get_tool_window(self, window_id):
        return self._window if window_id == "Terminal" else None


class BrokenProject:
    def get_tool_window(self, window_id):
        raise RuntimeError("tool windows not ready")


class FrontWindow:
    def __init__(self):
        self.activated = 0

    def activate(self):
        self.activated += 1


class Starter:
    def __init__(self):
        self.calls = []

    def send_string(self, text, execute):
        self.calls.append((text, execute))


class BlockTerminalPanel:
    def __init__(self, *children):
        self.children = list(children)


class LocalTerminalWidget:
    def __init__(self, starter):
        self._starter = starter

    def get_terminal_starter(self):
        return self._starter


class BlockSession:
    def __init__(self):
        self.received = []

    def send_text(self, text):
        self.received.append(text)


class BlockWidget:
    def __init__(self, session):
        self._session = session

    def get_session(self):
        return self._session


class Manager:
    def __init__(self, widget):
        self._widget = widget

    def get_active_terminal_widget(self):
        return self._widget


class Executor:
    def __init__(self):
        self.received = []

    def execute_text(self, text):
        self.received.append(text)


class TerminalViewHost:
    def __init__(self):
        self.received = []

    def send_text(self, text):
        self.received.append(text)


class FakeHost(HostServices):
    def __init__(self, manager=None, focus=None, parents=None, data=None, executors=()):
        self.manager = manager
        self.focus = focus
        self.parents = parents or {}
        self.data_by_component = data or {}
        self.executors = list(executors)

    def terminal_manager(self, ctx):
        return self.manager

    def focus_owner(self, ctx):
        return self.focus

    def parent_of(self, component):
        return self.parents.get(id(component))

    def data_context(self, component):
        return self.data_by_component.get(id(component))

    def command_executors(self, ctx):
        return self.executors


def test_target_without_capabilities_is_an_error() -> None:
    result = deliver(Inert(), "echo hi")
    assert not result.ok
    assert result.message == EXHAUSTED_MESSAGE


def test_none_target_is_an_error() -> None:
    result = deliver(None, "echo hi")
    assert not result.ok
    assert result.message == NO_SURFACE_MESSAGE


def test_depth_one_send_text() -> None:
    sink = TextSink()
    project = Project(ToolWindow(content_manager=ContentManager(Tab(terminal_view=sink))))
    result = deliver(project, "echo hi")
    assert result.ok
    assert "sent" in result.message.lower()
    assert result.strategy == "new_architecture"
    assert sink.received == ["echo hi"]


def test_camel_case_target_at_depth_zero() -> None:
    target = CamelTarget()
    payload = "\n# From: src/a.txt:10-12\nfoo()\n"
    result = deliver(target, payload)
    assert result.ok
    assert result.message == "Sent to terminal: " + payload
    assert target.calls == [payload]


def test_raising_capability_lets_delivery_continue() -> None:
    widget = FlakyWidget()
    result = deliver(widget, "ls")
    assert result.ok
    assert widget.received == ["ls"]


def test_raising_strategy_lets_cascade_continue() -> None:
    def exploding(ctx):
        raise RuntimeError("boom")

    def accepting(ctx):
        return Outcome.DELIVERED

    dispatcher = Dispatcher(variant_strategies={}, fallback_tail=(exploding, accepting))
    result = dispatcher.deliver(Inert(), "x")
    assert result.ok
    assert result.strategy == "accepting"


def test_unexpected_failure_becomes_error(monkeypatch) -> None:
    def broken_classify(component):
        raise RuntimeError("boom")

    monkeypatch.setattr("smartcopy.delivery.dispatcher.classify", broken_classify)
    result = Dispatcher().deliver(Inert(), "x")
    assert not result.ok
    assert result.message == "Send failed: boom"


def test_missing_tool_window() -> None:
    result = deliver(Project(None), "x")
    assert not result.ok
    assert result.message == NO_SURFACE_MESSAGE


def test_hidden_tool_window() -> None:
    sink = TextSink()
    window = ToolWindow(content_manager=ContentManager(Tab(terminal_view=sink)), visible=False)
    result = deliver(Project(window), "x")
    assert not result.ok
    assert result.message == NOT_OPEN_MESSAGE
    assert sink.received == []


def test_no_selected_tab() -> None:
    result = deliver(Project(ToolWindow(content_manager=ContentManager(None))), "x")
    assert not result.ok
    assert result.message == NO_TAB_MESSAGE


def test_terminal_availability() -> None:
    assert not is_terminal_available(None)
    assert not is_terminal_available(Project(None))
    assert not is_terminal_available(Project(ToolWindow(visible=False)))
    assert is_terminal_available(Project(ToolWindow()))


def test_find_terminal_surface() -> None:
    window = ToolWindow()
    assert find_terminal_surface(Project(window)) is window
    assert find_terminal_surface(Project(None)) is None
    plain = Inert()
    assert find_terminal_surface(plain) is plain


def test_failing_tool_window_lookup_means_no_terminal() -> None:
    project = BrokenProject()
    assert find_terminal_surface(project) is None
    assert not is_terminal_available(project)

    result = deliver(project, "ls")
    assert not result.ok
    assert result.message == NO_SURFACE_MESSAGE


def test_block_terminal_falls_back_to_classic() -> None:
    starter = Starter()
    panel = BlockTerminalPanel(LocalTerminalWidget(starter))
    assert classify(panel) is EngineVariant.MODERN_BLOCK

    result = deliver(Project(ToolWindow(component=panel)), "make test")
    assert result.ok
    assert result.strategy == "classic_architecture"
    assert starter.calls == [("make test", False)]


def test_block_terminal_via_manager() -> None:
    session = BlockSession()
    dispatcher = Dispatcher(host=FakeHost(manager=Manager(BlockWidget(session))))
    result = dispatcher.deliver(ToolWindow(component=BlockTerminalPanel()), "x")
    assert result.ok
    assert result.strategy == "block_via_manager"
    assert session.received == ["x"]


def test_block_terminal_via_data_context() -> None:
    session = BlockSession()
    panel = BlockTerminalPanel()
    host = FakeHost(data={id(panel): {"BlockTerminalSession": session}})
    result = Dispatcher(host=host).deliver(ToolWindow(component=panel), "x")
    assert result.ok
    assert result.strategy == "block_via_data_context"
    assert session.received == ["x"]


def test_block_terminal_via_command_executor() -> None:
    executor = Executor()
    host = FakeHost(executors=[executor])
    result = Dispatcher(host=host).deliver(ToolWindow(component=BlockTerminalPanel()), "x")
    assert result.ok
    assert result.strategy == "block_command_executor"
    assert executor.received == ["x"]


def test_focus_chain() -> None:
    view = TerminalViewHost()
    leaf = Inert()
    host = FakeHost(focus=leaf, parents={id(leaf): view})
    result = Dispatcher(host=host).deliver(ToolWindow(component=Inert()), "x")
    assert result.ok
    assert result.strategy == "focused_component"
    assert view.received == ["x"]


def test_focus_chain_cycle_terminates() -> None:
    a, b = Inert(), Inert()
    host = FakeHost(focus=a, parents={id(a): b, id(b): a})
    result = Dispatcher(host=host).deliver(ToolWindow(component=Inert()), "x")
    assert not result.ok


def test_cascade_runs_each_strategy_once() -> None:
    cascade = Dispatcher().cascade(EngineVariant.CLASSIC)
    assert cascade == [classic_architecture, focused_component, new_architecture, paste_fallback]
    assert Dispatcher().cascade(EngineVariant.UNKNOWN)[0] is focused_component
    assert len(Dispatcher().cascade(EngineVariant.MODERN_BLOCK)) == 8


def test_paste_not_attempted_on_gated_platform(os_io) -> None:
    result = Dispatcher().deliver(Inert(), "x")
    assert not result.ok
    assert os_io.clipboard.calls == []
    assert os_io.keystrokes.calls == []


def test_paste_is_the_last_resort(os_io, monkeypatch) -> None:
    monkeypatch.setattr("smartcopy.delivery.paste.PLATFORM", "Darwin")
    window = FrontWindow()
    result = Dispatcher().deliver(window, "x")
    assert result.ok
    assert result.strategy == "paste_fallback"
    assert window.activated == 1
    assert os_io.clipboard.calls == [("x",)]
    assert len(os_io.keystrokes.calls) == 1


def test_delivery_log_names_the_terminal_kind(os_io, monkeypatch, caplog) -> None:
    monkeypatch.setattr("smartcopy.delivery.paste.PLATFORM", "Darwin")
    with caplog.at_level(logging.INFO, logger="smartcopy"):
        result = Dispatcher().deliver(FrontWindow(), "x")
    assert result.ok
    assert "Trying synthetic paste (unknown terminal)" in caplog.text
    assert "Delivered via paste_fallback (unknown terminal)" in caplog.text


def test_no_paste_without_an_activated_terminal(os_io, monkeypatch) -> None:
    monkeypatch.setattr("smartcopy.delivery.paste.PLATFORM", "Darwin")
    result = Dispatcher().deliver(Inert(), "x")
    assert not result.ok
    assert result.message == EXHAUSTED_MESSAGE
    assert os_io.keystrokes.calls == []
