"""Code lens contracts.

A code lens is a clickable range plus the command the host invokes when it is
activated. Field names mirror the editor host (camelCase on the wire).

Notes:
- `LensRange` always spans exactly one line (the entry-point line).
- `RunSnippetArg` is passed back verbatim to the host's run-command handler.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .api_version import API_VERSION
from .document import SourceDocument


class LensRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_line: int = Field(..., ge=0, alias="startLine")
    start_col: int = Field(..., ge=0, alias="startCol")
    end_line: int = Field(..., ge=0, alias="endLine")
    end_col: int = Field(..., ge=0, alias="endCol")


class RunSnippetArg(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    file_path: str = Field(..., alias="filePath")
    package: str


class LensCommand(BaseModel):
    title: str
    command: str
    tooltip: str | None = None
    arguments: list[RunSnippetArg] = Field(default_factory=list)


class CodeLens(BaseModel):
    range: LensRange
    command: LensCommand


class LensRequest(BaseModel):
    document: SourceDocument


class LensResponse(BaseModel):
    api_version: str = Field(default=API_VERSION)
    lenses: list[CodeLens] = Field(default_factory=list)
