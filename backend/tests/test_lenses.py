from __future__ import annotations

import tomllib
from typing import Any

import pytest

from snippet_lens_api.services.analysis.commands import build_run_command
from snippet_lens_api.services.analysis.errors import SnippetMetadataError
from snippet_lens_api.services.analysis.lenses import analyze_document
from snippet_lens_contracts.document import SourceDocument


PATH = "/work/snippets.rs"

ALPHA = '//# [package]\n//# name = "alpha"\nfn main() {\n}\n'
BETA = '//# [package]\n//# name = "beta"\nfn main() {\n}\n'


class SpyParser:
    def __init__(self) -> None:
        self.blobs: list[str] = []

    def __call__(self, blob: str) -> dict[str, Any]:
        self.blobs.append(blob)
        return tomllib.loads(blob)


def _doc(text: str) -> SourceDocument:
    return SourceDocument(path=PATH, text=text)


def test_single_block_entry_point() -> None:
    lenses = analyze_document(_doc(ALPHA))

    assert len(lenses) == 1
    lens = lenses[0]
    assert (lens.range.start_line, lens.range.start_col) == (2, 0)
    assert (lens.range.end_line, lens.range.end_col) == (2, len("fn main() {"))

    arg = lens.command.arguments[0]
    assert (arg.file_path, arg.package) == (PATH, "alpha")
    assert lens.command.title == "▶ Run"
    assert lens.command.tooltip == "Run alpha package"
    assert build_run_command(arg.file_path, arg.package).command_line == (
        f"pit run {PATH} --package alpha"
    )


def test_two_blocks_resolve_their_own_packages_in_order() -> None:
    lenses = analyze_document(_doc(ALPHA + "//# ---\n" + BETA))

    assert [ln.range.start_line for ln in lenses] == [2, 7]
    assert [ln.command.arguments[0].package for ln in lenses] == ["alpha", "beta"]


def test_block_without_entry_point_is_never_parsed() -> None:
    # The second block's metadata is not even valid TOML.
    text = ALPHA + "//# ---\n//# [package\nfn helper() {}\n"
    spy = SpyParser()

    lenses = analyze_document(_doc(text), parse=spy)

    assert [ln.command.arguments[0].package for ln in lenses] == ["alpha"]
    assert spy.blobs == ['[package]\nname = "alpha"']


def test_missing_package_name_fails_whole_call() -> None:
    text = ALPHA + "//# ---\n" + '//# [package]\n//# version = "0.1.0"\nfn main() {\n}\n'

    with pytest.raises(SnippetMetadataError) as exc:
        analyze_document(_doc(text))
    assert exc.value.code == "missing_package_name"


def test_malformed_metadata_propagates() -> None:
    with pytest.raises(tomllib.TOMLDecodeError):
        analyze_document(_doc('//# [package\n//# name = "alpha"\nfn main() {\n}\n'))


def test_entry_point_past_last_boundary_is_skipped() -> None:
    # No trailing newline: the entry point sits on the document's last line.
    spy = SpyParser()

    lenses = analyze_document(_doc('//# [package]\n//# name = "alpha"\nfn main() {}'), parse=spy)

    assert lenses == []
    assert spy.blobs == []


def test_no_entry_points_yields_nothing() -> None:
    spy = SpyParser()
    assert analyze_document(_doc('//# [package]\n//# name = "alpha"\n'), parse=spy) == []
    assert spy.blobs == []


def test_metadata_parsed_once_per_block() -> None:
    spy = SpyParser()
    text = '//# [package]\n//# name = "alpha"\nfn main() {\n}\nfn main() {\n}\n'

    lenses = analyze_document(_doc(text), parse=spy)

    assert [ln.range.start_line for ln in lenses] == [2, 4]
    assert len(spy.blobs) == 1


def test_sample_document(sample_document: SourceDocument) -> None:
    lenses = analyze_document(sample_document)

    assert [(ln.range.start_line, ln.command.arguments[0].package) for ln in lenses] == [
        (10, "rand"),
        (27, "json"),
    ]
    assert lenses[1].range.end_col == len("fn main() -> Result<()> {")


def test_analysis_is_repeatable(sample_document: SourceDocument) -> None:
    first = analyze_document(sample_document)
    second = analyze_document(sample_document)
    assert [ln.model_dump() for ln in first] == [ln.model_dump() for ln in second]
