"""Tests for rebuilding the hierarchy from sorted keys."""

from ndoc_tree.assemble_tree import assemble_tree
from ndoc_tree.canonical_order import canonical_order
from ndoc_tree.doc_record import DocRecord
from ndoc_tree.parent_boundary import parent_boundary


def build(*keys: str):
    """Assemble an arena over placeholder records for the given keys."""
    records = {"": DocRecord(id="", type="section")}
    for key in keys:
        records[key] = DocRecord(id=key, type="class")
    return assemble_tree(records, canonical_order(records))


def test_members_nest_under_their_owner() -> None:
    """Verify class, instance and event members attach to their owner."""
    arena = build(
        "Dom",
        "Dom.Element",
        "Dom.Element#hide",
        "Dom.Element.new",
        "Dom.Element@change",
    )
    assert arena.children["Dom.Element"] == [
        "Dom.Element#hide",
        "Dom.Element.new",
        "Dom.Element@change",
    ]
    assert arena.children["Dom"] == ["Dom.Element"]
    assert arena.parent["Dom.Element#hide"] == "Dom.Element"
    assert arena.parent["Dom.Element"] == "Dom"
    assert arena.parent["Dom"] is None


def test_top_level_entries() -> None:
    """Verify sections, orphans and records without a parent record."""
    arena = build("Dom", ".Orphan", "Nosec.Thing")
    assert arena.roots == ["", "Dom", "Nosec.Thing"]
    assert arena.children[""] == [".Orphan"]
    assert arena.parent["Nosec.Thing"] is None


def test_event_names_with_separators() -> None:
    """Verify an event name containing '.' still attaches to the event owner."""
    arena = build("Dom", "Dom.Element", "Dom.Element@a.b")
    assert arena.parent["Dom.Element@a.b"] == "Dom.Element"


def test_children_in_case_insensitive_order() -> None:
    """Verify children keep canonical order regardless of case."""
    arena = build("Dom", "Dom.b", "Dom.A", "Dom.C")
    assert arena.children["Dom"] == ["Dom.A", "Dom.b", "Dom.C"]


def test_every_record_placed_exactly_once() -> None:
    """Verify each key is either a root or a child of exactly one parent."""
    arena = build(
        "Dom",
        "Dom.Element",
        "Dom.Element#hide",
        "Dom.Element#hide.extra",
        "Dom.Element@change",
        ".Orphan",
        ".Orphan.inner",
        "Nosec.Thing",
    )
    placements = {key: 0 for key in arena.order}
    for key in arena.roots:
        placements[key] += 1
    for parent_key, child_keys in arena.children.items():
        for key in child_keys:
            placements[key] += 1
            assert key[: parent_boundary(key)] == parent_key
            assert arena.parent[key] == parent_key
    assert set(placements.values()) == {1}
