"""Constants for smartcopy terminal delivery."""

import os
from pathlib import Path

SMARTCOPY_DIR = Path.home() / ".smartcopy"
CONFIG_FILE = SMARTCOPY_DIR / "config.json"
LOG_FILE = SMARTCOPY_DIR / "smartcopy.log"
DELIVERY_LOG = SMARTCOPY_DIR / "deliveries.log"
LOG_LEVEL = os.getenv("SMARTCOPY_LOG_LEVEL", "INFO")

TERMINAL_TOOL_WINDOW_ID = "Terminal"

# Synthetic paste is only sanctioned where window-manager keystroke injection is reliable
DEFAULT_PASTE_PLATFORMS = ["Darwin"]
DEFAULT_PASTE_BACKEND = "auto"
PASTE_BACKENDS = ("auto", "pyautogui", "osascript", "xdotool")
DEFAULT_SETTLE_DELAY = 0.2

DEFAULT_MAX_TREE_DEPTH = 32
DEFAULT_MAX_TREE_NODES = 2000
DEFAULT_MAX_PROBE_DEPTH = 3
MAX_FOCUS_CHAIN = 64

# Engine classification tokens, matched against fully-qualified type names.
# Modern wins when both are present.
MODERN_TOKENS = [
    "BlockTerminal",
    "TerminalBlocksComponent",
    "terminal.block",
    "terminal.exp",
]
CLASSIC_TOKENS = [
    "JediTerm",
    "ShellTerminalWidget",
    "TerminalPanel",
]

# Lowercased class-name markers used when walking component trees and focus chains
VIEW_MARKERS = ["terminalview", "blockterminal", "terminalwidgetimpl"]
CLASSIC_MARKERS = ["jediterm", "shellterminal"]

CHILD_ACCESSORS = ["components", "get_components", "children", "get_children", "winfo_children"]
PARENT_ACCESSORS = ["parent", "get_parent", "master"]
COMPONENT_ACCESSORS = ["component", "get_component"]
CONTENT_MANAGER_ACCESSORS = ["content_manager", "get_content_manager"]
SELECTED_CONTENT_ACCESSORS = ["selected_content", "get_selected_content"]
VISIBILITY_FLAGS = ["is_visible", "visible"]
CONNECTED_FLAGS = ["is_connected", "connected"]
ACTIVATE_METHODS = ["activate", "show"]

TOOL_WINDOW_LOOKUPS = ["get_tool_window", "find_tool_window"]
TOOL_WINDOW_MANAGER_ACCESSORS = ["tool_window_manager", "get_tool_window_manager"]
TERMINAL_MANAGER_ACCESSORS = [
    "terminal_tool_window_manager",
    "get_terminal_tool_window_manager",
    "terminal_manager",
    "get_terminal_manager",
]
FOCUS_MANAGER_ACCESSORS = ["focus_manager", "get_focus_manager"]
FOCUS_OWNER_ACCESSORS = ["focus_owner", "get_focus_owner", "focus_get"]
DATA_CONTEXT_ACCESSORS = ["data_context", "get_data_context"]
USER_DATA_GETTERS = ["get_user_data", "get_client_property"]
USER_DATA_FIELDS = ["user_data", "userdata"]
EXECUTOR_ACCESSORS = [
    "shell_command_executor",
    "get_shell_command_executor",
    "shell_terminal_runner",
    "command_executors",
    "get_command_executors",
]
PROJECT_ACCESSORS = ["project", "get_project"]

ACTIVE_WIDGET_ACCESSORS = [
    "get_active_terminal_widget",
    "get_current_terminal_widget",
    "get_focused_terminal_widget",
]
TERMINAL_WIDGETS_ACCESSORS = ["get_terminal_widgets", "terminal_widgets"]

BLOCK_DATA_KEYS = [
    "org.jetbrains.plugins.terminal.block.TerminalDataContextUtils.BLOCK_TERMINAL_SESSION",
    "org.jetbrains.plugins.terminal.exp.TerminalDataContextUtils.BLOCK_TERMINAL",
    "BlockTerminalSession",
    "blockTerminalSession",
    "BLOCK_TERMINAL_SESSION",
    "TerminalSession",
    "terminalSession",
]
VIEW_DATA_KEYS = [
    "TerminalView",
    "TerminalWidget",
    "terminalWidget",
    "TERMINAL_VIEW",
    "TERMINAL_WIDGET",
    "org.jetbrains.plugins.terminal.exp.TerminalDataContextUtils.TERMINAL_VIEW",
]
WIDGET_USER_DATA_KEYS = ["TerminalWidget", "TERMINAL_WIDGET", "terminalWidget"]
CLASSIC_USER_DATA_KEY = "TERMINAL_WIDGET"
