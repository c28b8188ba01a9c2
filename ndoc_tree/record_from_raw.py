"""Logic for turning raw parser output into DocRecord instances."""

from typing import Any

from ndoc_tree.doc_record import DocRecord

KNOWN_FIELDS = {
    "id",
    "type",
    "line",
    "section",
    "description",
    "short_description",
    "href",
    "alias_of",
    "superclass",
    "bound",
    "aliases",
    "children",
    "subclasses",
}


def record_from_raw(raw: dict[str, Any], default_id: str = "") -> DocRecord:
    """Build a DocRecord from a raw parser record.

    Hierarchy helpers (``aliases``, ``children``, ``subclasses``) always start
    empty; anything the model doesn't know about is kept in ``extra``.
    """
    kind = str(raw.get("type") or "").strip()
    line = raw.get("line")
    href = raw.get("href")
    section = raw.get("section")
    alias_of = raw.get("alias_of")
    superclass = raw.get("superclass")
    return DocRecord(
        id=str(raw.get("id") or default_id),
        type=kind,
        line=line,
        href=str(href) if href else None,
        section=str(section) if section else None,
        description=str(raw.get("description") or ""),
        short_description=str(raw.get("short_description") or ""),
        alias_of=str(alias_of) if alias_of else None,
        superclass=str(superclass) if superclass else None,
        bound=bool(raw.get("bound")) or None,
        subclasses=[] if kind == "class" else None,
        extra={k: v for k, v in raw.items() if k not in KNOWN_FIELDS},
    )
