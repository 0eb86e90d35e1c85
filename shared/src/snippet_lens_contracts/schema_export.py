"""Schema export helpers.

Can be used by:
- backend: generate OpenAPI/JSON Schema artifacts
- editor extension: consume JSON Schema for types (codegen)
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from .lens import CodeLens, LensRequest, LensResponse
from .snippets import (
    ExtractRequest,
    ExtractResponse,
    PackageListRequest,
    PackageListResponse,
    RunCommandRequest,
    RunCommandResponse,
)


def export_json_schema() -> dict[str, Any]:
    """Return a single bundled JSON schema for the public contract models."""

    return {
        "title": "snippet-lens-contracts",
        "models": {
            "LensRequest": LensRequest.model_json_schema(),
            "LensResponse": LensResponse.model_json_schema(),
            "CodeLens": CodeLens.model_json_schema(),
            "PackageListRequest": PackageListRequest.model_json_schema(),
            "PackageListResponse": PackageListResponse.model_json_schema(),
            "ExtractRequest": ExtractRequest.model_json_schema(),
            "ExtractResponse": ExtractResponse.model_json_schema(),
            "RunCommandRequest": RunCommandRequest.model_json_schema(),
            "RunCommandResponse": RunCommandResponse.model_json_schema(),
        },
    }


def to_json(schema: dict[str, Any], *, indent: int = 2) -> str:
    """Serialize a schema dict to JSON."""

    return json.dumps(schema, indent=indent, sort_keys=True)


def model_schema(model: type[BaseModel]) -> dict[str, Any]:
    """Convenience helper for exporting a single model's JSON schema."""

    return model.model_json_schema()
