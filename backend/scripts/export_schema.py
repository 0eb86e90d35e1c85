"""Print the JSON Schema of the lens contracts.

Run:
  python backend/scripts/export_schema.py            # every public model
  python backend/scripts/export_schema.py CodeLens   # a single model

The editor extension generates its TypeScript types from this output.
"""

from __future__ import annotations

import sys

import snippet_lens_contracts
from pydantic import BaseModel
from snippet_lens_contracts.schema_export import export_json_schema, model_schema, to_json


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(to_json(export_json_schema()))
        return 0

    model = getattr(snippet_lens_contracts, args[0], None)
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        print(f"unknown contract model: {args[0]}", file=sys.stderr)
        return 2

    print(to_json(model_schema(model)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
