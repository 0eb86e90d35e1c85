"""Document contracts.

The host (editor) owns the document; the backend only ever reads a snapshot of it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SourceDocument(BaseModel):
    path: str = Field(..., description="Absolute path of the document on the host.")
    text: str = Field(..., description="Full document text at the time of the request.")
