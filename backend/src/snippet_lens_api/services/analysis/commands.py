"""Run command synthesis.

The backend never executes snippets. It only builds the command line the host's
run handler executes after saving the document and clearing its terminal.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from typing import Final


_DEFAULT_RUNNER: Final[str] = "pit"


@dataclass(frozen=True)
class RunCommand:
    argv: list[str]
    command_line: str


def _env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    return v


def runner_binary() -> str:
    return (_env("SNIPPET_RUNNER_BIN", _DEFAULT_RUNNER) or _DEFAULT_RUNNER).strip()


def build_run_command(
    file_path: str, package: str | None = None, *, runner: str | None = None
) -> RunCommand:
    """`<runner> run <file> --package <package>`; without a package every snippet runs."""

    argv = [runner or runner_binary(), "run", file_path]
    if package is not None:
        argv += ["--package", package]
    return RunCommand(argv=argv, command_line=shlex.join(argv))
