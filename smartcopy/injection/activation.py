"""OS-level application activation for smartcopy."""

import logging
import platform
import shutil
import subprocess

logger = logging.getLogger("smartcopy")

PLATFORM = platform.system()


def activate_app(app_name: str) -> bool:
    """Activate/focus an application window by name (cross-platform)."""
    try:
        if PLATFORM == "Darwin":
            applescript = f'''
            tell application "{app_name}"
                activate
            end tell
            '''
            subprocess.run(["osascript", "-e", applescript], check=True, capture_output=True, timeout=5)
            return True
        elif PLATFORM == "Linux":
            if shutil.which("xdotool"):
                subprocess.run(["xdotool", "search", "--name", app_name, "windowactivate"], check=True, timeout=5)
                return True
            elif shutil.which("wmctrl"):
                subprocess.run(["wmctrl", "-a", app_name], check=True, timeout=5)
                return True
            else:
                logger.warning("No window activation tool found (xdotool or wmctrl)")
                return False
        elif PLATFORM == "Windows":
            import pygetwindow as gw
            windows = gw.getWindowsWithTitle(app_name)
            if windows:
                windows[0].activate()
                return True
            logger.warning("No window titled %s", app_name)
            return False
        else:
            return False
    except Exception as e:
        logger.warning("App activation failed: %s", e)
        return False
