"""Data model for the indexed tree produced by the assembly stage."""

from dataclasses import dataclass, field

from ndoc_tree.doc_record import DocRecord


@dataclass
class TreeArena:
    """Records plus parent/child links, all addressed by flat-list key."""

    order: list[str]  # canonical (case-insensitive) key order
    records: dict[str, DocRecord]
    parent: dict[str, str | None] = field(default_factory=dict)
    children: dict[str, list[str]] = field(default_factory=dict)
    roots: list[str] = field(default_factory=list)  # top-level keys, in order
