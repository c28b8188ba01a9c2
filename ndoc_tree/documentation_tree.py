"""Data model for the final documentation tree handed to renderers."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from ndoc_tree.doc_record import DocRecord


@dataclass
class DocumentationTree:
    """Flat element lookup plus the ordered top-level children."""

    elements: dict[str, DocRecord] = field(default_factory=dict)  # sections excluded
    children: list[DocRecord] = field(default_factory=list)

    def walk(self) -> Iterator[tuple[int, DocRecord]]:
        """Yield ``(depth, record)`` pairs in document order."""
        stack = [(0, record) for record in reversed(self.children)]
        while stack:
            depth, record = stack.pop()
            yield depth, record
            stack.extend((depth + 1, child) for child in reversed(record.children))

    def to_dict(self) -> dict[str, Any]:
        """Return the ``{list, tree}`` mapping expected by renderers."""
        return {
            "list": {key: record.to_dict() for key, record in self.elements.items()},
            "tree": {"children": [record.to_dict() for record in self.children]},
        }
