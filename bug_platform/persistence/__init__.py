"""XML persistence for bug collections (precheck, reader, writer)."""

from .precheck import check_input_stream
from .reader import read_bug_collection
from .source_map import reconcile_source_files, update_source_file
from .writer import build_document, write_bug_collection

__all__ = [
    "build_document",
    "check_input_stream",
    "read_bug_collection",
    "reconcile_source_files",
    "update_source_file",
    "write_bug_collection",
]
