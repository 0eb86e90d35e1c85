"""Demo: print the code lenses and run commands for a snippet file.

Run:
  python backend/scripts/print_lenses.py path/to/snippet.rs

Note: This script is for local development/demo purposes.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from snippet_lens_api.services.analysis.commands import build_run_command
from snippet_lens_api.services.analysis.lenses import analyze_document
from snippet_lens_contracts.document import SourceDocument


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: print_lenses.py <snippet-file>", file=sys.stderr)
        return 2

    path = Path(args[0]).resolve()
    doc = SourceDocument(path=str(path), text=path.read_text(encoding="utf-8"))

    out = []
    for lens in analyze_document(doc):
        arg = lens.command.arguments[0]
        out.append(
            {
                "line": lens.range.start_line,
                "package": arg.package,
                "tooltip": lens.command.tooltip,
                "command_line": build_run_command(arg.file_path, arg.package).command_line,
            }
        )

    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
