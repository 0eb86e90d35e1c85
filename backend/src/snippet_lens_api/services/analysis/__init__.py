"""Snippet document analysis.

Pure functions over document text. Failures are raised as exceptions; the API
layer maps them to HTTP statuses.
"""

from .commands import RunCommand, build_run_command
from .errors import SnippetMetadataError
from .extractor import extract_metadata_blob, package_name_for_block, resolve_package_name
from .lenses import analyze_document
from .locator import EntryPoint, Line, locate_entry_points, split_lines
from .mapper import compute_boundaries, find_owner_index
from .packages import SnippetPackage, extract_files, find_package, packages_from_text
from .segmenter import DELIMITER, Block, join_blocks, split_blocks
from .synthesizer import build_code_lens, build_lens_range, build_run_arg
from .templates import add_snippet_text, init_snippet_text, random_package_name

__all__ = [
    "RunCommand",
    "build_run_command",
    "SnippetMetadataError",
    "extract_metadata_blob",
    "package_name_for_block",
    "resolve_package_name",
    "analyze_document",
    "EntryPoint",
    "Line",
    "locate_entry_points",
    "split_lines",
    "compute_boundaries",
    "find_owner_index",
    "SnippetPackage",
    "extract_files",
    "find_package",
    "packages_from_text",
    "DELIMITER",
    "Block",
    "join_blocks",
    "split_blocks",
    "build_code_lens",
    "build_lens_range",
    "build_run_arg",
    "add_snippet_text",
    "init_snippet_text",
    "random_package_name",
]
