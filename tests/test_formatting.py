import pytest

from smartcopy.formatting import (
    CodeInfo,
    format_reference,
    format_selection,
    line_number,
    relative_path,
)

DOCUMENT = "a\nb\nc\nd\n"


def test_single_line_and_range() -> None:
    assert CodeInfo("src/a.txt", 10, 10).format() == "src/a.txt:10"
    assert CodeInfo("src/a.txt", 10, 12).format() == "src/a.txt:10-12"


def test_invalid_ranges() -> None:
    with pytest.raises(ValueError):
        CodeInfo("a.py", 0, 1)
    with pytest.raises(ValueError):
        CodeInfo("a.py", 5, 4)


def test_line_number() -> None:
    assert line_number(DOCUMENT, 0) == 1
    assert line_number(DOCUMENT, 2) == 2
    assert line_number(DOCUMENT, 5) == 3
    assert line_number(DOCUMENT, 999) == 5


def test_from_selection() -> None:
    info = CodeInfo.from_selection("/proj/src/x.py", DOCUMENT, 2, 5, base_path="/proj")
    assert info == CodeInfo("src/x.py", 2, 3)


def test_from_reversed_selection() -> None:
    info = CodeInfo.from_selection("/proj/x.py", DOCUMENT, 5, 2, base_path="/proj")
    assert info.format() == "x.py:2-3"


def test_relative_path() -> None:
    assert relative_path("/proj/src/x.py", "/proj") == "src/x.py"
    assert relative_path("/other/y.py", "/proj") == "y.py"
    assert relative_path("/other/y.py", None) == "y.py"


def test_payloads() -> None:
    info = CodeInfo("src/a.txt", 10, 12)
    assert format_reference(info) == "\nsrc/a.txt:10-12"
    assert format_selection(info, "x = 1") == "\n# From: src/a.txt:10-12\nx = 1"
