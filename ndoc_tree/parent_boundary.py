"""Utility for locating the parent/member boundary inside a qualified id."""


def parent_boundary(qualified_id: str) -> int:
    """Return the index separating the parent id from the member name.

    Events are checked first: everything after the first ``@`` is the event
    name, even if it contains ``.`` or ``#``. Otherwise the later of the last
    ``.`` (class member) and last ``#`` (instance member) wins. Returns -1 when
    the id has no separator.
    """
    idx = qualified_id.find("@")
    if idx == -1:
        idx = max(qualified_id.rfind("."), qualified_id.rfind("#"))
    return idx
