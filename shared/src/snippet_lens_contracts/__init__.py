"""Shared contract models (single source of truth).

Minimal re-exports for convenient importing.
"""

from .api_version import API_VERSION
from .document import SourceDocument
from .lens import (
    CodeLens,
    LensCommand,
    LensRange,
    LensRequest,
    LensResponse,
    RunSnippetArg,
)
from .snippets import (
    ExtractRequest,
    ExtractResponse,
    PackageListRequest,
    PackageListResponse,
    PackageSummary,
    RunCommandRequest,
    RunCommandResponse,
    SnippetTemplateRequest,
    SnippetTemplateResponse,
)

__all__ = [
    "API_VERSION",
    "SourceDocument",
    "CodeLens",
    "LensCommand",
    "LensRange",
    "LensRequest",
    "LensResponse",
    "RunSnippetArg",
    "ExtractRequest",
    "ExtractResponse",
    "PackageListRequest",
    "PackageListResponse",
    "PackageSummary",
    "RunCommandRequest",
    "RunCommandResponse",
    "SnippetTemplateRequest",
    "SnippetTemplateResponse",
]
