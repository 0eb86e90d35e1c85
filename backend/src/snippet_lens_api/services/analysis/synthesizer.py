from __future__ import annotations

from typing import Final

from snippet_lens_contracts.lens import CodeLens, LensCommand, LensRange, RunSnippetArg

from .locator import EntryPoint


RUN_SNIPPET_COMMAND: Final[str] = "rspit.runSnippet"
RUN_TITLE: Final[str] = "▶ Run"


def build_run_arg(*, file_path: str, package: str) -> RunSnippetArg:
    return RunSnippetArg(file_path=file_path, package=package)


def build_lens_range(entry: EntryPoint) -> LensRange:
    return LensRange(
        start_line=entry.line,
        start_col=0,
        end_line=entry.line,
        end_col=len(entry.text),
    )


def build_code_lens(entry: EntryPoint, *, file_path: str, package: str) -> CodeLens:
    arg = build_run_arg(file_path=file_path, package=package)
    return CodeLens(
        range=build_lens_range(entry),
        command=LensCommand(
            title=RUN_TITLE,
            command=RUN_SNIPPET_COMMAND,
            tooltip=f"Run {package} package",
            arguments=[arg],
        ),
    )
