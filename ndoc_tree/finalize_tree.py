"""Logic for turning the assembled arena into the final documentation tree."""

import logging
import re
from dataclasses import replace

from ndoc_tree.doc_record import DocRecord
from ndoc_tree.documentation_tree import DocumentationTree
from ndoc_tree.parent_boundary import parent_boundary
from ndoc_tree.record_path import record_path
from ndoc_tree.strip_section_prefix import strip_section_prefix
from ndoc_tree.tree_arena import TreeArena

logger = logging.getLogger(__name__)

CONSTRUCTOR_SUFFIX_RE = re.compile(r"\.new$")


def finalize_tree(arena: TreeArena) -> DocumentationTree:
    """Assign final ids, cross-link records and flatten the section hash."""
    finalized = {key: _finalize_ids(arena.records[key], key) for key in arena.order}

    # flat list of elements, sections pruned; last key in canonical order wins
    element_keys: dict[str, str] = {}
    for key in arena.order:
        if finalized[key].type != "section":
            element_keys[finalized[key].id] = key

    aliases: dict[str, list[str]] = {key: [] for key in arena.order}
    subclasses: dict[str, list[str]] = {key: [] for key in arena.order}
    for key in element_keys.values():
        record = finalized[key]
        if record.alias_of:
            target = element_keys.get(record.alias_of)
            if target is None:
                logger.debug(
                    "Alias target %s of %s not found", record.alias_of, record.id
                )
            else:
                aliases[target].append(record.id)
        if record.type == "class" and record.superclass:
            target = element_keys.get(record.superclass)
            if target is None or finalized[target].type != "class":
                logger.debug(
                    "Superclass %s of %s not found", record.superclass, record.id
                )
            else:
                subclasses[target].append(record.id)

    built: dict[str, DocRecord] = {}
    for key in reversed(arena.order):
        record = _retype(finalized[key])
        built[key] = replace(
            record,
            aliases=list(record.aliases) + aliases[key],
            subclasses=(
                list(record.subclasses) + subclasses[key]
                if record.subclasses is not None
                else None
            ),
            children=[built[child] for child in arena.children.get(key, [])],
        )

    # the tree is a hash of sections; the root section's children are spliced
    # into the top level in place of the root itself
    children: list[DocRecord] = []
    for key in arena.roots:
        if key == "":
            children.extend(built[key].children)
        else:
            children.append(built[key])

    elements = {record_id: built[key] for record_id, key in element_keys.items()}
    return DocumentationTree(elements=elements, children=children)


def _finalize_ids(record: DocRecord, key: str) -> DocRecord:
    record_id = strip_section_prefix(key)
    idx = parent_boundary(record_id)
    name = record_id if idx == -1 else record_id[idx + 1 :]

    # sections have lowercased ids, to not clash with other elements
    if record.type == "section":
        record_id = record_id.lower()

    return replace(
        record,
        id=record_id,
        name=name,
        path=record_path(record_id),
        section=None,
    )


def _retype(record: DocRecord) -> DocRecord:
    if record.type == "constructor":
        return replace(record, id="new " + CONSTRUCTOR_SUFFIX_RE.sub("", record.id))

    if record.type not in ("method", "prototype"):
        return record

    if record.id.startswith("$"):
        return replace(record, type="utility")
    # events first: an event name can contain '.' and '#'
    if "@" in record.id:
        return replace(record, type="event")
    if "#" in record.id:
        return replace(record, type="instance " + record.type)
    if "." in record.id:
        return replace(record, type="class " + record.type)
    return record
