from __future__ import annotations

from .segmenter import Block


def compute_boundaries(blocks: list[Block]) -> list[int]:
    return [b.line_span_end for b in blocks]


def find_owner_index(line: int, boundaries: list[int]) -> int | None:
    """Map an absolute (zero-based) line to the index of its owning block.

    The owner is the first boundary, in ascending block order, strictly greater
    than `line + 1`. Returns None when the line lies past every boundary.
    """

    target = line + 1
    for index, boundary in enumerate(boundaries):
        if boundary > target:
            return index
    return None
