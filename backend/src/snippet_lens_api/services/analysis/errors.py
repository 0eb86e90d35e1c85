"""Exceptions raised by the analysis services.

They are plain exceptions suitable for mapping to HTTP errors by API layers.
TOML syntax errors are not wrapped; callers see the parser's own exception.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SnippetMetadataError(ValueError):
    code: str
    message: str = ""

    def __post_init__(self) -> None:
        # Ensure the base ValueError args contains the message for standard error behavior.
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}".strip()
