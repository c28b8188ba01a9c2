"""Orchestration logic for assembling an ndoc documentation tree.

The pipeline runs five strictly sequential stages over a flat list keyed by
qualified id:

1. ingestion: read all sources, parse them and merge the records
2. section resolution: guess sections for records parsed without one
3. canonical ordering: sort keys case-insensitively
4. tree assembly: link each record to its nearest ancestor
5. finalization: final ids/paths, aliases, subclasses, types, flattening
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ndoc_tree.assemble_tree import assemble_tree
from ndoc_tree.canonical_order import canonical_order
from ndoc_tree.documentation_tree import DocumentationTree
from ndoc_tree.finalize_tree import finalize_tree
from ndoc_tree.ingest_records import ingest_records
from ndoc_tree.load_record_source import load_record_source
from ndoc_tree.read_sources import read_sources
from ndoc_tree.resolve_sections import resolve_sections

logger = logging.getLogger(__name__)


def parse_ndoc(
    files: Iterable[str | Path],
    options: Mapping[str, Any] | None = None,
) -> DocumentationTree:
    """Build the documentation tree for the given source files.

    Recognized options:

    - ``format_link``: ``(file, line) -> href`` callable; ``href`` is left
      unset without it.
    - ``parse``: ``text -> {id: record}`` callable; defaults to
      :func:`load_record_source`.

    Raises ``SourceReadError`` if any file can't be read, before anything is
    parsed. Parser errors propagate unchanged.
    """
    options = options or {}
    sources = read_sources(files)

    flat = ingest_records(
        sources,
        parse=options.get("parse") or load_record_source,
        format_link=options.get("format_link"),
    )
    flat = resolve_sections(flat)
    order = canonical_order(flat)
    arena = assemble_tree(flat, order)
    tree = finalize_tree(arena)

    logger.info(
        "Assembled %d elements under %d top-level entries from %d files",
        len(tree.elements),
        len(tree.children),
        len(sources),
    )
    return tree
