from __future__ import annotations

import logging
import os


def configure_logging() -> None:
    """Configure simple, low-noise console logging.

    Goals:
    - one summary line per analysis pass (never the document text)
    - keep output low-noise while the editor re-requests lenses on every edit

    Controlled by env vars (read at call time, so values from .env apply):
    - LOG_LEVEL=DEBUG|INFO|WARNING|ERROR (default INFO)

    Note: uvicorn also has its own logging config; this sets up our app logger
    and a reasonable default root handler.
    """

    name = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    level = getattr(logging, name, logging.INFO)

    # Avoid double-config when imported multiple times.
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    # Lens requests arrive on every edit; access logs drown everything else.
    if level >= logging.INFO:
        for noisy in [
            "uvicorn.access",
            "httpx",
        ]:
            logging.getLogger(noisy).setLevel(logging.WARNING)
