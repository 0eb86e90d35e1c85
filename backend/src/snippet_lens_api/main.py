"""FastAPI app entrypoint."""

from __future__ import annotations

import os

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from snippet_lens_contracts.api_version import API_VERSION

from .logging_config import configure_logging

# Load .env files if present (local dev convenience). In production, prefer real env vars.
from .services.settings.env import load_env

from .api.v1.commands import router as commands_router
from .api.v1.lenses import router as lenses_router
from .api.v1.snippets import router as snippets_router


_DEFAULT_CORS_ORIGINS = [
    "http://127.0.0.1:5173",
    "http://localhost:5173",
]


def _cors_origins() -> list[str]:
    raw = os.getenv("SNIPPET_LENS_CORS_ORIGINS") or ""
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(_DEFAULT_CORS_ORIGINS)


def _build_v1_router() -> APIRouter:
    v1 = APIRouter(prefix="/api/v1")

    @v1.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "api_version": API_VERSION}

    v1.include_router(lenses_router)
    v1.include_router(snippets_router)
    v1.include_router(commands_router)
    return v1


load_env()
configure_logging()

app = FastAPI(title="Snippet Lens API", version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(_build_v1_router())
