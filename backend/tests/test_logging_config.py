from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from snippet_lens_api.logging_config import configure_logging
from snippet_lens_api.services.settings.env import load_env


@pytest.fixture
def root_level() -> Iterator[None]:
    root = logging.getLogger()
    saved = root.level
    yield
    root.setLevel(saved)


def test_log_level_from_dotenv_is_applied(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, root_level: None
) -> None:
    """LOG_LEVEL set only in .env must reach the root logger."""

    (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    load_env(repo_root=tmp_path)
    configure_logging()

    assert logging.getLogger().level == logging.DEBUG


def test_env_local_does_not_override_dotenv(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, root_level: None
) -> None:
    (tmp_path / ".env").write_text("LOG_LEVEL=WARNING\n", encoding="utf-8")
    (tmp_path / ".env.local").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    load_env(repo_root=tmp_path)
    configure_logging()

    assert logging.getLogger().level == logging.WARNING


def test_exported_log_level_wins_over_dotenv(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, root_level: None
) -> None:
    (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "error")

    load_env(repo_root=tmp_path)
    configure_logging()

    assert logging.getLogger().level == logging.ERROR


def test_unknown_log_level_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch, root_level: None
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    configure_logging()
    assert logging.getLogger().level == logging.INFO
