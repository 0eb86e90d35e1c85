"""Document -> code lens analysis.

One call is one pass over an immutable snapshot of the document:
- segment into blocks and locate entry points (once each)
- map every entry point to its owning block
- parse metadata lazily, once per owning block (memoized for this call only)
- synthesize one lens per resolved entry point, in document order

Entry points that cannot be mapped to a block are skipped. Metadata errors are
not: they propagate so the host can surface them.
"""

from __future__ import annotations

import logging
import tomllib

from snippet_lens_contracts.document import SourceDocument
from snippet_lens_contracts.lens import CodeLens

from .extractor import MetadataParser, package_name_for_block
from .locator import locate_entry_points, split_lines
from .mapper import compute_boundaries, find_owner_index
from .segmenter import split_blocks
from .synthesizer import build_code_lens

logger = logging.getLogger(__name__)


def analyze_document(
    document: SourceDocument, *, parse: MetadataParser = tomllib.loads
) -> list[CodeLens]:
    entries = locate_entry_points(split_lines(document.text))
    if not entries:
        return []

    blocks = split_blocks(document.text)
    boundaries = compute_boundaries(blocks)

    package_names: dict[int, str] = {}
    lenses: list[CodeLens] = []
    for entry in entries:
        index = find_owner_index(entry.line, boundaries)
        if index is None:
            logger.debug(
                "lenses.skip unmapped entry path=%s line=%d", document.path, entry.line
            )
            continue

        if index not in package_names:
            package_names[index] = package_name_for_block(blocks[index].raw_text, parse=parse)

        lenses.append(
            build_code_lens(entry, file_path=document.path, package=package_names[index])
        )

    logger.info(
        "lenses.analyze path=%s blocks=%d entries=%d lenses=%d",
        document.path,
        len(blocks),
        len(entries),
        len(lenses),
    )
    return lenses
