"""Configuration for smartcopy."""

from .constants import (
    SMARTCOPY_DIR,
    CONFIG_FILE,
    LOG_FILE,
    DELIVERY_LOG,
    LOG_LEVEL,
)

from .settings import (
    load_config,
    get_config,
    get_settle_delay,
    get_paste_platforms,
    get_paste_backend,
    get_host_app,
    get_terminal_tool_window_id,
    get_max_tree_depth,
    get_max_tree_nodes,
    get_max_probe_depth,
    get_modern_tokens,
    get_classic_tokens,
)

__all__ = [
    # Paths
    "SMARTCOPY_DIR",
    "CONFIG_FILE",
    "LOG_FILE",
    "DELIVERY_LOG",
    "LOG_LEVEL",
    # Settings
    "load_config",
    "get_config",
    "get_settle_delay",
    "get_paste_platforms",
    "get_paste_backend",
    "get_host_app",
    "get_terminal_tool_window_id",
    "get_max_tree_depth",
    "get_max_tree_nodes",
    "get_max_probe_depth",
    "get_modern_tokens",
    "get_classic_tokens",
]
