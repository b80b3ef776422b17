"""Code reference formatting."""

from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class CodeInfo:
    """A file path and a 1-based, inclusive line range."""

    file_path: str
    start_line: int
    end_line: int

    def __post_init__(self):
        if self.start_line < 1:
            raise ValueError(f"start_line must be >= 1, got {self.start_line}")
        if self.end_line < self.start_line:
            raise ValueError(f"end_line {self.end_line} is before start_line {self.start_line}")

    def format(self) -> str:
        if self.start_line == self.end_line:
            return f"{self.file_path}:{self.start_line}"
        return f"{self.file_path}:{self.start_line}-{self.end_line}"

    @classmethod
    def from_selection(cls, file_path: str, text: str, sel_start: int, sel_end: int,
                       base_path: str | None = None) -> "CodeInfo":
        """Build from character offsets into a document's text."""
        start, end = sorted((sel_start, sel_end))
        return cls(
            relative_path(file_path, base_path),
            line_number(text, start),
            line_number(text, end),
        )


def line_number(text: str, offset: int) -> int:
    """1-based line containing a character offset."""
    offset = max(0, min(offset, len(text)))
    return text.count("\n", 0, offset) + 1


def relative_path(file_path: str, base_path: str | None) -> str:
    """Path relative to ``base_path``, or the bare file name if it's outside."""
    path = PurePath(file_path)
    if base_path:
        try:
            return path.relative_to(base_path).as_posix()
        except ValueError:
            pass
    return path.name


def format_reference(info: CodeInfo) -> str:
    return "\n" + info.format()


def format_selection(info: CodeInfo, text: str) -> str:
    return "\n# From: " + info.format() + "\n" + text
