from __future__ import annotations

from pathlib import Path

import pytest

from snippet_lens_contracts.document import SourceDocument


FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def sample_path() -> Path:
    return FIXTURES / "snippet.rs"


@pytest.fixture
def sample_document(sample_path: Path) -> SourceDocument:
    return SourceDocument(path=str(sample_path), text=sample_path.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def _default_runner(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests assert on the default `pit` runner unless they override it.
    monkeypatch.delenv("SNIPPET_RUNNER_BIN", raising=False)
