"""Per-block metadata extraction.

Metadata lives in comment lines carrying the `//# ` marker, e.g.

    //# [package]
    //# name = "rand"

Stripping the marker gives a TOML document; only `package.name` is read from it.
"""

from __future__ import annotations

import tomllib
from typing import Any, Callable, Final, Mapping

from .errors import SnippetMetadataError


MARKER: Final[str] = "//# "

MetadataParser = Callable[[str], Mapping[str, Any]]


def extract_metadata_blob(raw_text: str) -> str:
    return "\n".join(
        line[len(MARKER) :] for line in raw_text.split("\n") if line.startswith(MARKER)
    )


def parse_metadata(blob: str, *, parse: MetadataParser = tomllib.loads) -> Mapping[str, Any]:
    # Parser failures propagate as-is.
    return parse(blob)


def resolve_package_name(metadata: Mapping[str, Any]) -> str:
    package = metadata.get("package")
    if not isinstance(package, Mapping):
        raise SnippetMetadataError("missing_package_name", "metadata has no [package] table")

    if "name" not in package:
        raise SnippetMetadataError("missing_package_name", "metadata has no package.name")

    name = package["name"]
    if not isinstance(name, str):
        raise SnippetMetadataError(
            "invalid_package_name",
            f"package.name must be a string, got {type(name).__name__}",
        )
    return name


def package_name_for_block(raw_text: str, *, parse: MetadataParser = tomllib.loads) -> str:
    return resolve_package_name(parse_metadata(extract_metadata_blob(raw_text), parse=parse))
