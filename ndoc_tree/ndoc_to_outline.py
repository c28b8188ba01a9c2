"""Assemble ndoc records into a documentation tree and print its outline.

Each input file is a record source (see ``load_record_source``); records are
merged, placed into sections, nested and cross-linked, then printed as an
indented outline.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from ndoc_tree.errors import SourceReadError, UnknownParserError
from ndoc_tree.load_config import load_config
from ndoc_tree.make_link_formatter import make_link_formatter
from ndoc_tree.parser_registry import ParserRegistry, register_ndoc
from ndoc_tree.render_outline import render_outline

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_outline(args: argparse.Namespace) -> int:
    """Execute the tree assembly and print the outline."""
    config = load_config(args.config)
    level = "DEBUG" if args.verbose else str(config.get("log_level") or "INFO")
    logging.basicConfig(
        level=level.upper(), format="%(levelname)s %(name)s: %(message)s"
    )

    options = {}
    link_format = args.link_format or config.get("link_format")
    if link_format:
        options["format_link"] = make_link_formatter(link_format)

    registry = ParserRegistry()
    register_ndoc(registry)

    try:
        tree = registry.invoke(config.get("parser") or "ndoc", args.files, options)
    except (SourceReadError, UnknownParserError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(render_outline(tree))
    print(f"{len(tree.elements)} elements in {len(tree.children)} top-level entries")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the outline command."""
    ap = argparse.ArgumentParser(
        description="Assemble ndoc documentation records into a tree.",
    )
    ap.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Record source files (YAML), merged in the given order",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--link-format",
        help="Source link template using {file} and {line} placeholders",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    return run_outline(args)


if __name__ == "__main__":
    raise SystemExit(main())
