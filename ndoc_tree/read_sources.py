"""Logic for reading documentation source files up front."""

from collections.abc import Iterable
from pathlib import Path

from ndoc_tree.errors import SourceReadError


def read_sources(files: Iterable[str | Path]) -> dict[str, str]:
    """Read every file as UTF-8 text before any parsing happens.

    The first unreadable file aborts the whole batch; no partial result is
    returned.
    """
    sources: dict[str, str] = {}
    for f in files:
        name = str(f)
        if name in sources:
            continue
        try:
            sources[name] = Path(f).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(name, str(exc)) from exc
    return sources
