from __future__ import annotations

import os
from types import SimpleNamespace

import pytest


class Recorder:
    """Callable stand-in that records its arguments and returns a fixed result."""

    def __init__(self, result=True):
        self.calls = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        return self.result


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    for key in list(os.environ):
        if key.startswith("SMARTCOPY_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr("smartcopy.config.settings.CONFIG_FILE", tmp_path / "config.json")
    monkeypatch.setattr("smartcopy.utils.logging.DELIVERY_LOG", tmp_path / "deliveries.log")
    monkeypatch.setenv("SMARTCOPY_SETTLE_DELAY", "0")
    return tmp_path


@pytest.fixture(autouse=True)
def os_io(monkeypatch):
    """Keep tests away from the real clipboard, keyboard and window manager."""
    io = SimpleNamespace(
        clipboard=Recorder(),
        keystrokes=Recorder(),
        activations=Recorder(),
    )
    monkeypatch.setattr("smartcopy.delivery.paste.copy_to_clipboard", io.clipboard)
    monkeypatch.setattr("smartcopy.delivery.paste.simulate_paste", io.keystrokes)
    monkeypatch.setattr("smartcopy.delivery.paste.activate_app", io.activations)
    monkeypatch.setattr("smartcopy.delivery.reporter.copy_to_clipboard", io.clipboard)
    monkeypatch.setattr("smartcopy.cli.copy_to_clipboard", io.clipboard)
    # synthetic paste stays off unless a test opts in
    monkeypatch.setattr("smartcopy.delivery.paste.PLATFORM", "Linux")
    return io
