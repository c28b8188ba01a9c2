"""Utility for splitting qualified ids into path segments."""

import re

SEPARATOR_RE = re.compile(r"[.#@]")


def split_qualified_id(qualified_id: str) -> list[str]:
    """Split a qualified id on ``.``, ``#`` and ``@``.

    ``".Ajax.Updater"`` -> ``["", "Ajax", "Updater"]``
    """
    return SEPARATOR_RE.split(qualified_id)
