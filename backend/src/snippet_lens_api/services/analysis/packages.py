"""Snippet packages.

Each block of a snippet document is a self-contained cargo package:
- the leading `//#` comment run is its manifest (Cargo.toml)
- everything after it is its `src/main.rs`

Nothing here writes to disk; extraction returns file contents keyed by path.
"""

from __future__ import annotations

import hashlib
import tomllib
from dataclasses import dataclass
from itertools import dropwhile, takewhile
from typing import Final

from .extractor import MetadataParser, parse_metadata, resolve_package_name
from .segmenter import split_blocks


MANIFEST_PREFIX: Final[str] = "//#"
GITIGNORE: Final[str] = "/target\n"


def source_lines(text: str) -> list[str]:
    """Split on LF only, dropping one trailing CR per line and a final empty line.

    `str.splitlines` also breaks on form feeds and Unicode separators, which
    would rewrite string literals inside the snippet source.
    """

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


@dataclass(frozen=True)
class SnippetPackage:
    index: int
    name: str
    manifest: str
    source: str

    @classmethod
    def from_block(
        cls, raw_text: str, *, index: int = 0, parse: MetadataParser = tomllib.loads
    ) -> SnippetPackage:
        lines = source_lines(raw_text)

        manifest = "\n".join(
            line[len(MANIFEST_PREFIX) :].strip()
            for line in takewhile(
                lambda ln: ln.startswith(MANIFEST_PREFIX),
                dropwhile(lambda ln: ln == "", lines),
            )
        )
        source = "\n".join(
            dropwhile(lambda ln: ln == "" or ln.startswith(MANIFEST_PREFIX), lines)
        )

        name = resolve_package_name(parse_metadata(manifest, parse=parse))
        return cls(index=index, name=name, manifest=manifest, source=source)

    @property
    def identity_hash(self) -> str:
        h = hashlib.sha256()
        h.update(self.manifest.encode("utf-8"))
        h.update(self.source.encode("utf-8"))
        return h.hexdigest()


def packages_from_text(text: str, *, parse: MetadataParser = tomllib.loads) -> list[SnippetPackage]:
    return [
        SnippetPackage.from_block(b.raw_text, index=b.index, parse=parse)
        for b in split_blocks(text)
    ]


def find_package(text: str, name: str, *, parse: MetadataParser = tomllib.loads) -> SnippetPackage:
    """Return the first package called `name`.

    Raises:
        KeyError: if no block declares that package.
    """

    for package in packages_from_text(text, parse=parse):
        if package.name == name:
            return package
    raise KeyError(f"Package not found: {name}")


def extract_files(package: SnippetPackage) -> dict[str, str]:
    """Files of a standalone cargo project for `package`, rooted at its name."""

    return {
        f"{package.name}/Cargo.toml": package.manifest,
        f"{package.name}/src/main.rs": package.source,
        f"{package.name}/.gitignore": GITIGNORE,
    }
