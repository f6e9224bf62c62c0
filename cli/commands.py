"""
CLI subcommand implementations for working with saved bug collections.

Subcommands::

    bug-collection check       FILE
    bug-collection summary     FILE
    bug-collection upgrade     INPUT OUTPUT
    bug-collection export-json FILE [--output OUT]
"""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from bug_platform import (
    BugCollectionError,
    Project,
    SortedBugCollection,
    register_builtins,
)
from bug_platform.config import log_level
from bug_platform.mappers import collection_to_contract
from bug_platform.persistence import check_input_stream

logger = logging.getLogger(__name__)


def _load(path: str) -> tuple[SortedBugCollection, Project]:
    collection = SortedBugCollection()
    project = Project()
    collection.read_xml(path, project)
    return collection, project


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_check(args):
    """Run only the fast precheck on a file."""
    with open(args.file, "rb") as stream:
        check_input_stream(stream)
    print(f"OK: {args.file} looks like a saved bug collection")


def cmd_summary(args):
    """Print project details and counts for a saved collection."""
    collection, project = _load(args.file)
    bugs = list(collection)
    app_classes = list(collection.application_classes())
    interfaces = [name for name in app_classes if collection.is_interface(name)]
    errors = list(collection.errors())
    missing = list(collection.missing_classes())

    print(f"Project: {project.filename or '(unnamed)'}")
    if project.jars:
        print(f"  Files analyzed: {len(project.jars)}")
    if project.src_dirs:
        print(f"  Source dirs:    {', '.join(project.src_dirs)}")
    print(f"Application classes: {len(app_classes)} ({len(interfaces)} interface(s))")
    print(f"Bug instances: {len(bugs)}")
    for bug_type, count in sorted(Counter(b.type for b in bugs).items()):
        print(f"  {bug_type}: {count}")
    print(f"Analysis errors: {len(errors)}")
    print(f"Missing classes: {len(missing)}")


def cmd_upgrade(args):
    """Rewrite a (possibly legacy) document in the current format."""
    collection, project = _load(args.input)
    collection.write_xml(args.output, project)
    print(f"Wrote {len(collection)} bug instance(s) to {args.output}")


def cmd_export_json(args):
    """Export a saved collection as v1 contract JSON."""
    collection, project = _load(args.file)
    payload = collection_to_contract(collection, project).model_dump_json(indent=2)
    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
        print(f"Exported {len(collection)} bug instance(s) to {args.output}")
    else:
        print(payload)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="bug-collection",
        description="Inspect and convert saved bug collection XML files",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_check = subparsers.add_parser("check", help="Quick check that a file holds saved bug data")
    p_check.add_argument("file", help="Path to the XML file")

    p_summary = subparsers.add_parser("summary", help="Summarize a saved bug collection")
    p_summary.add_argument("file", help="Path to the XML file")

    p_upgrade = subparsers.add_parser(
        "upgrade", help="Rewrite a document, folding legacy SrcMap entries into annotations",
    )
    p_upgrade.add_argument("input", help="Path to the existing XML file")
    p_upgrade.add_argument("output", help="Path for the rewritten XML file")

    p_export = subparsers.add_parser("export-json", help="Export a collection as JSON")
    p_export.add_argument("file", help="Path to the XML file")
    p_export.add_argument("--output", help="Write JSON to this path instead of stdout")

    return parser


COMMANDS = {
    "check": cmd_check,
    "summary": cmd_summary,
    "upgrade": cmd_upgrade,
    "export-json": cmd_export_json,
}


def main(argv=None):
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    register_builtins()

    try:
        COMMANDS[args.command](args)
    except (BugCollectionError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)
