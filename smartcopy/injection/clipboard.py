"""Clipboard utilities for smartcopy."""

import logging
import platform
import shutil
import subprocess

logger = logging.getLogger("smartcopy")

PLATFORM = platform.system()

LINUX_CLIPBOARD_TOOLS = [
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["wl-copy"],
]


def clipboard_command() -> list[str] | None:
    """Return the argv used to write the system clipboard, or None if there's no tool."""
    if PLATFORM == "Darwin":
        return ["pbcopy"]
    elif PLATFORM == "Linux":
        for argv in LINUX_CLIPBOARD_TOOLS:
            if shutil.which(argv[0]):
                return argv
        return None
    elif PLATFORM == "Windows":
        return ["clip.exe"]
    return None


def copy_to_clipboard(text: str) -> bool:
    """Copy text to clipboard (cross-platform)."""
    argv = clipboard_command()
    if argv is None:
        if PLATFORM == "Linux":
            logger.error("No clipboard tool found (xclip, xsel, or wl-copy)")
        else:
            logger.error("Unsupported platform: %s", PLATFORM)
        return False

    try:
        subprocess.run(argv, input=text.encode(), check=True, shell=PLATFORM == "Windows")
        return True
    except Exception as e:
        logger.error("Clipboard copy failed: %s", e)
        return False
