from __future__ import annotations

from dataclasses import dataclass
from typing import Final


DELIMITER: Final[str] = "//# ---"


@dataclass(frozen=True)
class Block:
    index: int
    raw_text: str
    # Exclusive cumulative line count where this block ends in the whole document.
    line_span_end: int


def block_line_count(raw_text: str, *, is_last: bool) -> int:
    """Lines contributed by one block to the cumulative boundary.

    Every block but the last gives up one line to the delimiter that follows it.
    """

    count = len(raw_text.split("\n"))
    return count if is_last else count - 1


def split_blocks(text: str) -> list[Block]:
    """Split a multi-snippet document into blocks on the literal delimiter.

    A document without delimiters yields exactly one block holding the whole text.
    """

    chunks = text.split(DELIMITER)
    last = len(chunks) - 1

    blocks: list[Block] = []
    running = 0
    for i, chunk in enumerate(chunks):
        running += block_line_count(chunk, is_last=i == last)
        blocks.append(Block(index=i, raw_text=chunk, line_span_end=running))
    return blocks


def join_blocks(blocks: list[Block]) -> str:
    """Inverse of `split_blocks`: reinsert the delimiter between block texts."""

    return DELIMITER.join(b.raw_text for b in blocks)
