"""Tests for the qualified id helpers."""

from ndoc_tree.canonical_order import canonical_order
from ndoc_tree.parent_boundary import parent_boundary
from ndoc_tree.record_path import record_path
from ndoc_tree.split_qualified_id import split_qualified_id
from ndoc_tree.strip_section_prefix import strip_section_prefix


def test_split_qualified_id() -> None:
    """Verify splitting on all three separators."""
    assert split_qualified_id(".Ajax.Updater") == ["", "Ajax", "Updater"]
    assert split_qualified_id("Sec.Foo#bar@x") == ["Sec", "Foo", "bar", "x"]
    assert split_qualified_id("Utilities") == ["Utilities"]


def test_parent_boundary_members() -> None:
    """Verify the later of the last '.' and last '#' is the boundary."""
    assert parent_boundary("Sec.Foo#bar") == len("Sec.Foo")
    assert parent_boundary("Sec.Foo#bar.baz") == len("Sec.Foo#bar")
    assert parent_boundary(".Foo") == 0
    assert parent_boundary("Utilities") == -1


def test_parent_boundary_events() -> None:
    """Verify the first '@' wins even when the event name has separators."""
    assert parent_boundary("Sec.Foo@ready") == len("Sec.Foo")
    assert parent_boundary("Sec.Foo@a.b#c") == len("Sec.Foo")


def test_strip_section_prefix() -> None:
    """Verify only the leading section segment is dropped."""
    assert strip_section_prefix("Sec.Foo.bar") == "Foo.bar"
    assert strip_section_prefix(".Foo") == "Foo"
    assert strip_section_prefix("Utilities") == "Utilities"
    assert strip_section_prefix("") == ""


def test_record_path() -> None:
    """Verify prototype and event path rewriting."""
    assert record_path("Foo#bar") == "Foo.prototype.bar"
    assert record_path("Foo@ready") == "Foo.event.ready"
    assert record_path("Foo@a@b") == "Foo.event.a@b"
    assert record_path("Foo#bar@x") == "Foo.prototype.bar.event.x"
    assert record_path("Foo.bar") == "Foo.bar"


def test_canonical_order_case_insensitive() -> None:
    """Verify keys sort case-insensitively with parents before children."""
    keys = ["b", "A", "a.x", "B", ""]
    assert canonical_order(keys) == ["", "A", "a.x", "B", "b"]


def test_canonical_order_independent_of_input_order() -> None:
    """Verify the order doesn't depend on how keys were supplied."""
    keys = ["Dom.Element#hide", "dom", "Dom.Element", "DOM", "Dom.Element.hide"]
    assert canonical_order(keys) == canonical_order(reversed(keys))
