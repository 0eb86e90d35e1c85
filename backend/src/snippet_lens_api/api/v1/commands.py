"""Run command endpoint (v1): /commands/run.

Returns the shell command for a lens argument; the host executes it.
"""

from __future__ import annotations

from fastapi import APIRouter

from snippet_lens_contracts.snippets import RunCommandRequest, RunCommandResponse

from ...services.analysis.commands import build_run_command

router = APIRouter(prefix="/commands", tags=["commands"])


@router.post("/run", response_model=RunCommandResponse)
def run_command(req: RunCommandRequest) -> RunCommandResponse:
    cmd = build_run_command(req.file_path, req.package)
    return RunCommandResponse(argv=cmd.argv, command_line=cmd.command_line)
