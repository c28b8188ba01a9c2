"""Data model for a single documented symbol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DocRecord:
    """Represents a documented symbol (section, class, method, event, etc.)."""

    id: str
    type: str  # section/class/constructor/method/prototype/event/utility/...
    line: int | str | None = None  # passed through as the parser gives it
    section: str | None = None
    description: str = ""
    short_description: str = ""
    href: str | None = None
    alias_of: str | None = None
    superclass: str | None = None
    bound: str | bool | None = None  # True on input, counterpart id once cloned
    name: str | None = None
    path: str | None = None
    aliases: list[str] = field(default_factory=list)
    children: list[DocRecord] = field(default_factory=list)
    subclasses: list[str] | None = None  # classes only
    extra: dict[str, Any] = field(default_factory=dict)  # other parser fields

    def to_dict(self) -> dict[str, Any]:
        """Return the renderer-facing mapping for this record and its children."""
        out: dict[str, Any] = dict(self.extra)
        out["id"] = self.id
        out["type"] = self.type
        for key in (
            "line",
            "section",
            "href",
            "alias_of",
            "superclass",
            "bound",
            "name",
            "path",
        ):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        out["description"] = self.description
        out["short_description"] = self.short_description
        out["aliases"] = list(self.aliases)
        out["children"] = [child.to_dict() for child in self.children]
        if self.subclasses is not None:
            out["subclasses"] = list(self.subclasses)
        return out
