"""Logic for loading pre-tokenized documentation records from YAML text."""

from typing import Any

import yaml

from ndoc_tree.errors import RecordSourceError


def load_record_source(text: str) -> dict[str, dict[str, Any]]:
    """Parse a record source into a mapping of unqualified id to raw record.

    Accepts either a mapping (``Foo.bar: {type: method, ...}``), where a
    record's ``id`` defaults to its key, or a list of records that carry their
    own ``id``. An empty document yields no records.
    """
    doc = yaml.safe_load(text)
    if doc is None:
        return {}

    records: dict[str, dict[str, Any]] = {}
    if isinstance(doc, dict):
        for key, raw in doc.items():
            if not isinstance(raw, dict):
                msg = f"Record '{key}' must be a mapping, got {type(raw).__name__}"
                raise RecordSourceError(msg)
            record = dict(raw)
            record.setdefault("id", str(key))
            records[str(record["id"])] = record
        return records

    if isinstance(doc, list):
        for raw in doc:
            if not isinstance(raw, dict) or not raw.get("id"):
                msg = f"Record list entries need an 'id' field: {raw!r}"
                raise RecordSourceError(msg)
            records[str(raw["id"])] = dict(raw)
        return records

    msg = f"Record source must be a mapping or a list, got {type(doc).__name__}"
    raise RecordSourceError(msg)
