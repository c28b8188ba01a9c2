"""Logic for guessing the section of records parsed without one."""

import logging
from dataclasses import dataclass, replace

from ndoc_tree.doc_record import DocRecord
from ndoc_tree.split_qualified_id import split_qualified_id

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    key: str
    parts: list[str]


def resolve_sections(flat: dict[str, DocRecord]) -> dict[str, DocRecord]:
    """Move section-less records into the section of a related record.

    For ``.Ajax.Updater`` we look for any ``SECTION.Ajax...`` key; if found,
    the record is re-keyed to ``SECTION.Ajax.Updater``. A single pass is made:
    a record can borrow the section of one resolved earlier in the same pass,
    but nothing is retried. Unmatched records stay section-less.
    """
    resolved = dict(flat)
    entries = [
        _Entry(key=key, parts=split_qualified_id(key))
        for key in sorted(flat)
        if key != ""
    ]

    for entry in entries:
        if entry.parts[0] != "":
            continue

        found = next(
            (
                other
                for other in entries
                if other.parts[0] and other.parts[1:2] == entry.parts[1:2]
            ),
            None,
        )
        if found is None:
            logger.debug("No section found for %s", entry.key)
            continue

        section = found.parts[0]
        record = resolved.pop(entry.key)
        new_key = section + entry.key
        resolved[new_key] = replace(record, section=section)
        entry.parts[0] = section
        logger.debug("Section of %s resolved to %s", entry.key, section)

    return resolved
