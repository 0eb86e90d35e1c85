"""Snippet package contracts.

These back the package-level helpers (list / extract / templates / run command).
None of them touch the filesystem; extracted files are returned as text.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .api_version import API_VERSION
from .document import SourceDocument


class PackageSummary(BaseModel):
    index: int = Field(..., ge=0, description="Block position inside the document.")
    name: str
    identity_hash: str = Field(..., description="sha256 of manifest + source.")


class PackageListRequest(BaseModel):
    document: SourceDocument


class PackageListResponse(BaseModel):
    api_version: str = Field(default=API_VERSION)
    packages: list[PackageSummary] = Field(default_factory=list)


class ExtractRequest(BaseModel):
    document: SourceDocument
    package: str


class ExtractResponse(BaseModel):
    api_version: str = Field(default=API_VERSION)
    package: str
    files: dict[str, str] = Field(
        default_factory=dict,
        description="Relative path -> file content for a standalone cargo project.",
    )


class SnippetTemplateRequest(BaseModel):
    name: str | None = Field(
        default=None,
        description="Package name for the new snippet. A random `tmp-*` name is used when omitted.",
    )
    text: str | None = Field(
        default=None,
        description="Existing document text (only used by /snippets/add).",
    )


class SnippetTemplateResponse(BaseModel):
    api_version: str = Field(default=API_VERSION)
    name: str
    text: str


class RunCommandRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(..., alias="filePath")
    package: str | None = Field(
        default=None,
        description="When omitted, the command runs every package in the file.",
    )


class RunCommandResponse(BaseModel):
    api_version: str = Field(default=API_VERSION)
    argv: list[str]
    command_line: str
