"""Utility for the case-insensitive ordering the tree assembly relies on."""

from collections.abc import Iterable


def canonical_order(keys: Iterable[str]) -> list[str]:
    """Sort flat-list keys case-insensitively.

    A parent key is a strict prefix of its children's keys, so it always sorts
    before them. Keys differing only in case are ordered by their raw value.
    """
    return sorted(keys, key=lambda k: (k.lower(), k))
