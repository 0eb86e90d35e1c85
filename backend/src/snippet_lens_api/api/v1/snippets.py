"""Snippet package endpoints (v1): list, extract and templates.

All of these return text; writing files is left to the caller.
"""

from __future__ import annotations

import tomllib

from fastapi import APIRouter, HTTPException

from snippet_lens_contracts.snippets import (
    ExtractRequest,
    ExtractResponse,
    PackageListRequest,
    PackageListResponse,
    PackageSummary,
    SnippetTemplateRequest,
    SnippetTemplateResponse,
)

from ...services.analysis.errors import SnippetMetadataError
from ...services.analysis.packages import extract_files, find_package, packages_from_text
from ...services.analysis.templates import (
    add_snippet_text,
    init_snippet_text,
    random_package_name,
)

router = APIRouter(prefix="/snippets", tags=["snippets"])


@router.post("/packages", response_model=PackageListResponse)
def list_packages(req: PackageListRequest) -> PackageListResponse:
    try:
        packages = packages_from_text(req.document.text)
    except (tomllib.TOMLDecodeError, SnippetMetadataError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return PackageListResponse(
        packages=[
            PackageSummary(index=p.index, name=p.name, identity_hash=p.identity_hash)
            for p in packages
        ]
    )


@router.post("/extract", response_model=ExtractResponse)
def extract_package(req: ExtractRequest) -> ExtractResponse:
    try:
        package = find_package(req.document.text, req.package)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=f"Package not found: {req.package}") from e
    except (tomllib.TOMLDecodeError, SnippetMetadataError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return ExtractResponse(package=package.name, files=extract_files(package))


@router.post("/init", response_model=SnippetTemplateResponse)
def init_snippet(req: SnippetTemplateRequest) -> SnippetTemplateResponse:
    name = req.name or random_package_name()
    return SnippetTemplateResponse(name=name, text=init_snippet_text(name))


@router.post("/add", response_model=SnippetTemplateResponse)
def add_snippet(req: SnippetTemplateRequest) -> SnippetTemplateResponse:
    if req.text is None:
        raise HTTPException(status_code=400, detail="text is required for /snippets/add")

    name = req.name or random_package_name()
    return SnippetTemplateResponse(name=name, text=add_snippet_text(req.text, name))
