from __future__ import annotations

import random
from typing import Final


_NAME_ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz0123456789"

_SNIPPET_TEMPLATE: Final[str] = """\
//# [package]
//# name = "{name}"
//# version = "0.1.0"
//# edition = "2021"
//#
//# [dependencies]
//#
//# [profile.release]
//# lto = true

fn main() {{
}}
"""


def random_package_name(rng: random.Random | None = None) -> str:
    """`tmp-` followed by 7 distinct lowercase alphanumerics."""

    rng = rng or random.Random()
    return "tmp-" + "".join(rng.sample(_NAME_ALPHABET, 7))


def init_snippet_text(name: str) -> str:
    return _SNIPPET_TEMPLATE.format(name=name)


def add_snippet_text(existing: str, name: str) -> str:
    """Prepend a fresh snippet to an existing document, separated by a delimiter line."""

    return f"{init_snippet_text(name)}\n//# ---\n\n{existing}"
