"""Logic for rebuilding the documentation hierarchy from qualified keys."""

from ndoc_tree.doc_record import DocRecord
from ndoc_tree.parent_boundary import parent_boundary
from ndoc_tree.tree_arena import TreeArena


def assemble_tree(records: dict[str, DocRecord], order: list[str]) -> TreeArena:
    """Link every record to its nearest ancestor.

    ``order`` must be the canonical order of ``records``' keys. Walking it
    backwards, each key's parent is the prefix before its parent boundary
    (``Sec.Foo#bar`` -> ``Sec.Foo``, ``Sec.Foo@a.b`` -> ``Sec.Foo``). Since a
    parent sorts before its children, it is still unattached when its children
    are visited, and prepending keeps children in ascending order. Keys without
    a boundary or without a record at the prefix become top-level entries.
    """
    arena = TreeArena(order=list(order), records=dict(records))
    unattached = set(order)

    for key in reversed(order):
        arena.children.setdefault(key, [])
        idx = parent_boundary(key)
        parent_key = key[:idx] if idx != -1 else None

        if parent_key is None or parent_key not in unattached:
            arena.parent[key] = None
            continue

        arena.parent[key] = parent_key
        arena.children.setdefault(parent_key, []).insert(0, key)
        unattached.discard(key)

    arena.roots = [key for key in order if key in unattached]
    return arena
