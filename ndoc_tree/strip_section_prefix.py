"""Utility for dropping the section segment from a qualified key."""

import re

SECTION_PREFIX_RE = re.compile(r"^[^.]*\.")


def strip_section_prefix(key: str) -> str:
    """Remove the leading section segment: ``Sec.Foo.bar`` -> ``Foo.bar``."""
    return SECTION_PREFIX_RE.sub("", key, count=1)
