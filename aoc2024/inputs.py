"""Reading puzzle input files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path


def split_lines(text: str) -> list[str]:
    """Split text on newlines, dropping the piece after the final newline."""
    return text.split("\n")[:-1]


@dataclass(frozen=True)
class InputFile:
    """The whole content of an input file together with its lines."""

    content: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> InputFile:
        return cls(content=text, lines=tuple(split_lines(text)))

    @property
    def line_count(self) -> int:
        return len(self.lines)


def read_input(path: str | PathLike[str]) -> InputFile:
    """Read an input file; raises ``OSError`` when it cannot be read."""
    return InputFile.from_text(Path(path).read_text())