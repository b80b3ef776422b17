#!/usr/bin/env python
"""smartcopy CLI - diagnostics and clipboard helpers."""

import importlib.util
import platform
import shutil
import sys
from pathlib import Path

import click

from smartcopy.config import CONFIG_FILE, LOG_FILE, DELIVERY_LOG, get_settle_delay
from smartcopy.delivery.paste import paste_enabled
from smartcopy.formatting import CodeInfo, format_reference, format_selection, relative_path
from smartcopy.injection import clipboard_command, copy_to_clipboard, resolve_backend
from smartcopy.logging_setup import setup_logging

KEYSTROKE_TOOLS = {
    "osascript": ["osascript"],
    "xdotool": ["xdotool", "ydotool"],
}


def print_success(message: str):
    click.echo(click.style(f"✅ {message}", fg='green'))


def print_warning(message: str):
    click.echo('\033[38;5;208m' + f"⚠️  {message}" + '\033[0m')


def print_error(message: str):
    click.echo(click.style(f"❌ {message}", fg='red'))


def check_command(cmd: str) -> bool:
    return shutil.which(cmd) is not None


def keystroke_tool_available(backend: str | None) -> bool:
    if backend == "pyautogui":
        return importlib.util.find_spec("pyautogui") is not None
    return any(check_command(tool) for tool in KEYSTROKE_TOOLS.get(backend, []))


def read_lines(path: Path, start: int, end: int) -> str:
    lines = path.read_text(encoding="utf-8").splitlines()
    return "\n".join(lines[start - 1:end])


@click.group()
def cli():
    """smartcopy - Send code references to your IDE terminal."""
    setup_logging()


@cli.command()
def status():
    """Check what this machine can do for terminal delivery."""
    system = platform.system()
    click.echo(f"Platform: {system}\n")

    if paste_enabled(system):
        print_success("Synthetic paste: enabled")
    else:
        click.echo("  Synthetic paste: disabled on this platform")

    argv = clipboard_command()
    if argv and check_command(argv[0]):
        print_success(f"Clipboard: {argv[0]}")
    else:
        print_warning("Clipboard: no tool found")

    backend = resolve_backend()
    if backend and keystroke_tool_available(backend):
        print_success(f"Keystrokes: {backend}")
    else:
        print_warning(f"Keystrokes: {backend or 'unsupported'} not available")

    click.echo()
    click.echo("Configuration:")
    click.echo(f"  Config file:  {CONFIG_FILE}{'' if CONFIG_FILE.exists() else ' (not found)'}")
    click.echo(f"  Settle delay: {get_settle_delay()}s")
    click.echo(f"  Log file:     {LOG_FILE}")
    click.echo(f"  History:      {DELIVERY_LOG}")


@cli.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('start', type=click.IntRange(min=1))
@click.argument('end', type=click.IntRange(min=1), required=False)
@click.option('--base', type=click.Path(file_okay=False, path_type=Path), default=None,
              help='Project root the path is shown relative to (default: current directory)')
@click.option('--with-text', is_flag=True, help='Include the selected lines, not just the reference')
def copy(path, start, end, base, with_text):
    """Copy a path:line reference to the clipboard.

    \b
    Examples:
      smartcopy copy src/app.py 10          # src/app.py:10
      smartcopy copy src/app.py 10 12       # src/app.py:10-12
      smartcopy copy src/app.py 10 12 --with-text
    """
    end = end or start
    if end < start:
        print_error(f"END ({end}) is before START ({start})")
        sys.exit(2)

    base = base or Path.cwd()
    info = CodeInfo(relative_path(str(path.resolve()), str(base.resolve())), start, end)

    if with_text:
        try:
            payload = format_selection(info, read_lines(path, start, end))
        except (OSError, UnicodeDecodeError) as e:
            print_error(f"Could not read {path}: {e}")
            sys.exit(1)
    else:
        payload = format_reference(info)

    click.echo(payload.lstrip("\n"))

    if not copy_to_clipboard(payload):
        print_error("Clipboard copy failed")
        sys.exit(1)
    print_success("Copied to clipboard")


def main():
    cli()


if __name__ == "__main__":
    main()
