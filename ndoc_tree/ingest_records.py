"""Logic for merging per-file records into one flat list."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from ndoc_tree.clone_bound_method import clone_bound_method
from ndoc_tree.doc_record import DocRecord
from ndoc_tree.record_from_raw import record_from_raw

logger = logging.getLogger(__name__)

RecordParser = Callable[[str], Mapping[str, Mapping[str, Any]]]
LinkFormatter = Callable[[str, int | str | None], str]


def section_key(section: str | None, record_id: str) -> str:
    """Compose the flat-list key of a non-section record."""
    # Records without a section get the '' section and are resolved later,
    # once the full list is known.
    return f"{section or ''}.{record_id}"


def ingest_records(
    sources: Mapping[str, str],
    parse: RecordParser,
    format_link: LinkFormatter | None = None,
) -> dict[str, DocRecord]:
    """Parse every source and merge the records into a flat list.

    The list is seeded with the synthetic root section ``""``. Key collisions
    are resolved by last write.
    """
    flat: dict[str, DocRecord] = {"": DocRecord(id="", type="section")}

    for file, text in sources.items():
        logger.info("Compiling file %s", file)
        for record_id, raw in parse(text).items():
            record = record_from_raw(dict(raw), default_id=record_id)

            if format_link is not None:
                record = replace(record, href=format_link(file, record.line))

            if record.type == "section":
                _store(flat, record.id, record)
                continue

            key = section_key(record.section, record.id)
            if record.type == "method" and record.bound:
                if "." not in record.id.strip("."):
                    logger.debug("Bound method %s has no owner, not cloned", key)
                    _store(flat, key, replace(record, bound=None))
                    continue
                record, clone = clone_bound_method(record)
                _store(flat, key, record)
                _store(flat, section_key(record.section, clone.id), clone)
                continue

            _store(flat, key, record)

    return flat


def _store(flat: dict[str, DocRecord], key: str, record: DocRecord) -> None:
    if key in flat:
        logger.debug("Record %s overwritten by a later definition", key)
    flat[key] = record
