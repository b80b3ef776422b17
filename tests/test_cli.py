import pytest
from click.testing import CliRunner

from smartcopy.cli import cli


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setattr("smartcopy.cli.setup_logging", lambda: None)
    return CliRunner()


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "src" / "a.txt"
    path.parent.mkdir()
    path.write_text("\n".join(f"line {n}" for n in range(1, 21)), encoding="utf-8")
    return path


def test_copy_reference(runner, source, tmp_path, os_io) -> None:
    result = runner.invoke(cli, ["copy", str(source), "10", "12", "--base", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "src/a.txt:10-12" in result.output
    assert os_io.clipboard.calls == [("\nsrc/a.txt:10-12",)]


def test_copy_single_line(runner, source, tmp_path, os_io) -> None:
    result = runner.invoke(cli, ["copy", str(source), "7", "--base", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert os_io.clipboard.calls == [("\nsrc/a.txt:7",)]


def test_copy_with_text(runner, source, tmp_path, os_io) -> None:
    result = runner.invoke(cli, ["copy", str(source), "2", "3", "--base", str(tmp_path), "--with-text"])
    assert result.exit_code == 0, result.output
    assert os_io.clipboard.calls == [("\n# From: src/a.txt:2-3\nline 2\nline 3",)]


def test_copy_outside_base_uses_file_name(runner, source, tmp_path, os_io) -> None:
    other = tmp_path / "elsewhere"
    other.mkdir()
    result = runner.invoke(cli, ["copy", str(source), "1", "--base", str(other)])
    assert result.exit_code == 0, result.output
    assert os_io.clipboard.calls == [("\na.txt:1",)]


def test_copy_rejects_backwards_range(runner, source, os_io) -> None:
    result = runner.invoke(cli, ["copy", str(source), "5", "3"])
    assert result.exit_code == 2
    assert os_io.clipboard.calls == []


def test_copy_clipboard_failure(runner, source, tmp_path, os_io) -> None:
    os_io.clipboard.result = False
    result = runner.invoke(cli, ["copy", str(source), "1", "--base", str(tmp_path)])
    assert result.exit_code == 1


def test_status(runner) -> None:
    result = runner.invoke(cli, ["status"])
    assert result.exit_code == 0, result.output
    assert "Platform:" in result.output
    assert "Settle delay" in result.output
