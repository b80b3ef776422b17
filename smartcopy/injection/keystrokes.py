"""Paste keystroke synthesis for smartcopy."""

import logging
import platform
import shutil
import subprocess

from smartcopy.config import get_paste_backend

logger = logging.getLogger("smartcopy")

PLATFORM = platform.system()


def _paste_with_pyautogui() -> bool:
    import pyautogui
    modifier = "command" if PLATFORM == "Darwin" else "ctrl"
    pyautogui.hotkey(modifier, "v")
    return True


def _paste_with_osascript() -> bool:
    subprocess.run(
        ["osascript", "-e", 'tell application "System Events" to keystroke "v" using command down'],
        check=True, capture_output=True, timeout=5
    )
    return True


def _paste_with_xdotool() -> bool:
    if shutil.which("xdotool"):
        subprocess.run(["xdotool", "key", "ctrl+v"], check=True, timeout=5)
        return True
    elif shutil.which("ydotool"):
        subprocess.run(["ydotool", "key", "29:1", "47:1", "47:0", "29:0"], check=True, timeout=5)
        return True
    logger.error("No keystroke tool found (xdotool or ydotool)")
    return False


def resolve_backend(backend: str | None = None) -> str | None:
    """Pick the keystroke backend for this platform; 'auto' maps per platform."""
    backend = backend or get_paste_backend()
    if backend != "auto":
        return backend
    if PLATFORM == "Darwin":
        return "osascript"
    elif PLATFORM == "Linux":
        return "xdotool"
    elif PLATFORM == "Windows":
        return "pyautogui"
    return None


def simulate_paste(backend: str | None = None) -> bool:
    """Simulate Cmd/Ctrl+V in whatever window has focus. No Enter is sent."""
    resolved = resolve_backend(backend)
    try:
        if resolved == "pyautogui":
            return _paste_with_pyautogui()
        elif resolved == "osascript":
            if PLATFORM != "Darwin":
                logger.error("osascript paste needs macOS, running on %s", PLATFORM)
                return False
            return _paste_with_osascript()
        elif resolved == "xdotool":
            return _paste_with_xdotool()
        else:
            logger.error("Unsupported platform: %s", PLATFORM)
            return False
    except Exception as e:
        logger.error("Paste simulation failed: %s", e)
        return False
