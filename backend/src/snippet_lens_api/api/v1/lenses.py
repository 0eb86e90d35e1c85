"""Code lens endpoint (v1): /lenses.

The editor calls this with the full document on every refresh; there is no
incremental state on the server.
"""

from __future__ import annotations

import logging
import tomllib

from fastapi import APIRouter, HTTPException

from snippet_lens_contracts.lens import LensRequest, LensResponse

from ...services.analysis.errors import SnippetMetadataError
from ...services.analysis.lenses import analyze_document

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lenses", tags=["lenses"])


@router.post("", response_model=LensResponse)
def provide_lenses(req: LensRequest) -> LensResponse:
    try:
        lenses = analyze_document(req.document)
    except tomllib.TOMLDecodeError as e:
        logger.warning("lenses.metadata invalid toml path=%s", req.document.path)
        raise HTTPException(status_code=422, detail=str(e)) from e
    except SnippetMetadataError as e:
        logger.warning("lenses.metadata %s path=%s", e.code, req.document.path)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return LensResponse(lenses=lenses)
