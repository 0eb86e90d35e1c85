from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final


# `fn main(`, any number of `)`, then whitespace. Tolerates `fn main() -> Result<()> {`.
ENTRY_PATTERN: Final[re.Pattern[str]] = re.compile(r"^fn main\(\)*\s")


@dataclass(frozen=True)
class Line:
    content: str
    number: int


@dataclass(frozen=True)
class EntryPoint:
    line: int
    text: str


def split_lines(text: str) -> list[Line]:
    return [Line(content=s, number=i) for i, s in enumerate(text.split("\n"))]


def is_entry_line(content: str) -> bool:
    return ENTRY_PATTERN.match(content) is not None


def locate_entry_points(lines: list[Line]) -> list[EntryPoint]:
    """Return every line that looks like a runnable `main` signature, in document order."""

    return [
        EntryPoint(line=ln.number, text=ln.content)
        for ln in lines
        if is_entry_line(ln.content)
    ]
