"""Utility for building source link formatters from a template string."""

from collections.abc import Callable


def make_link_formatter(template: str) -> Callable[[str, int | str | None], str]:
    """Return a ``(file, line) -> href`` callable filling ``{file}``/``{line}``."""

    def format_link(file: str, line: int | str | None) -> str:
        href = template.replace("{file}", file)
        return href.replace("{line}", "" if line is None else str(line))

    return format_link
