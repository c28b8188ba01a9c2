"""Logic for expanding bound methods into class and instance variants."""

import copy
import re
from dataclasses import replace

from ndoc_tree.doc_record import DocRecord

LAST_DOT_RE = re.compile(r"(.+)\.(.+)")


def instance_member_id(record_id: str) -> str:
    """Convert the last ``.`` of a class member id into ``#``."""
    return LAST_DOT_RE.sub(r"\1#\2", record_id, count=1)


def clone_bound_method(record: DocRecord) -> tuple[DocRecord, DocRecord]:
    """Split a bound method into its class and instance variants.

    ``Element.foo(@element, a, b)`` is documented once but exists both as
    ``Element.foo(element, a, b)`` and ``Element#foo(a, b)``. Both variants
    reference each other through ``bound``.
    """
    clone_id = instance_member_id(record.id)
    original = replace(record, bound=clone_id)
    clone = replace(
        record,
        id=clone_id,
        bound=record.id,
        aliases=list(record.aliases),
        children=list(record.children),
        extra=copy.deepcopy(record.extra),
    )
    return original, clone
