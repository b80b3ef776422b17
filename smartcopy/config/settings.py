"""Configuration settings for smartcopy."""

import json
import logging
import os

from .constants import (
    CONFIG_FILE,
    TERMINAL_TOOL_WINDOW_ID,
    DEFAULT_PASTE_PLATFORMS,
    DEFAULT_PASTE_BACKEND,
    PASTE_BACKENDS,
    DEFAULT_SETTLE_DELAY,
    DEFAULT_MAX_TREE_DEPTH,
    DEFAULT_MAX_TREE_NODES,
    DEFAULT_MAX_PROBE_DEPTH,
    MODERN_TOKENS,
    CLASSIC_TOKENS,
)

logger = logging.getLogger("smartcopy")


def load_config() -> dict:
    """Load configuration from ~/.smartcopy/config.json if it exists."""
    if CONFIG_FILE.exists():
        try:
            return json.loads(CONFIG_FILE.read_text())
        except Exception as e:
            logger.warning("Failed to load config: %s", e)
    return {}


def get_config(key: str, default=None):
    """Get config value from file, falling back to env var, then default."""
    config = load_config()
    if key in config:
        return config[key]
    env_key = f"SMARTCOPY_{key.upper()}"
    env_val = os.getenv(env_key)
    if env_val is not None:
        return env_val
    return default


def _get_int(key: str, default: int) -> int:
    val = get_config(key, default)
    if isinstance(val, bool):
        return default
    if isinstance(val, int):
        return val
    try:
        return int(val)
    except (ValueError, TypeError):
        logger.warning("Invalid %s %r, using %d", key, val, default)
        return default


def _get_list(key: str, default: list) -> list:
    val = get_config(key)
    if val is None:
        return list(default)
    if isinstance(val, list):
        return [str(v).strip() for v in val if str(v).strip()]
    return [v.strip() for v in str(val).split(",") if v.strip()]


def get_settle_delay() -> float:
    """Seconds to wait between activating the terminal and pasting.

    Activation is asynchronous and there is no reliable focus signal, so this is
    a fixed guess. Slow machines may need 0.5 or more.
    """
    val = get_config("settle_delay", DEFAULT_SETTLE_DELAY)
    try:
        delay = float(val)
    except (ValueError, TypeError):
        return DEFAULT_SETTLE_DELAY
    return max(delay, 0.0)


def get_paste_platforms() -> list[str]:
    """Platforms (platform.system() names) where synthetic paste may run."""
    return _get_list("paste_platforms", DEFAULT_PASTE_PLATFORMS)


def get_paste_backend() -> str:
    """Get keystroke backend: 'auto', 'pyautogui', 'osascript' or 'xdotool'."""
    val = get_config("paste_backend", DEFAULT_PASTE_BACKEND)
    if isinstance(val, str) and val.strip().lower() in PASTE_BACKENDS:
        return val.strip().lower()
    return DEFAULT_PASTE_BACKEND


def get_host_app() -> str | None:
    """Application to activate at OS level when the terminal surface can't be activated."""
    val = get_config("host_app")
    if val and isinstance(val, str) and val.strip():
        return val.strip()
    return None


def get_terminal_tool_window_id() -> str:
    val = get_config("terminal_tool_window_id", TERMINAL_TOOL_WINDOW_ID)
    if isinstance(val, str) and val.strip():
        return val.strip()
    return TERMINAL_TOOL_WINDOW_ID


def get_max_tree_depth() -> int:
    return max(_get_int("max_tree_depth", DEFAULT_MAX_TREE_DEPTH), 1)


def get_max_tree_nodes() -> int:
    return max(_get_int("max_tree_nodes", DEFAULT_MAX_TREE_NODES), 1)


def get_max_probe_depth() -> int:
    return max(_get_int("max_probe_depth", DEFAULT_MAX_PROBE_DEPTH), 0)


def get_modern_tokens() -> list[str]:
    return _get_list("modern_tokens", MODERN_TOKENS)


def get_classic_tokens() -> list[str]:
    return _get_list("classic_tokens", CLASSIC_TOKENS)
