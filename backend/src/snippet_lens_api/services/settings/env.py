from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


def load_env(repo_root: Path | None = None) -> None:
    """Load local .env files if present.

    Dev convenience so the backend can be started without manually exporting
    variables (LOG_LEVEL, SNIPPET_RUNNER_BIN, SNIPPET_LENS_CORS_ORIGINS).
    Must run before `configure_logging()` for LOG_LEVEL to take effect.

    Load order (later does NOT override existing env vars):
    1) <repo_root>/.env
    2) <repo_root>/.env.local
    """

    if repo_root is None:
        # env.py -> settings -> services -> snippet_lens_api -> src -> backend -> repo root
        repo_root = Path(__file__).resolve().parents[5]

    load_dotenv(dotenv_path=repo_root / ".env", override=False)
    load_dotenv(dotenv_path=repo_root / ".env.local", override=False)
