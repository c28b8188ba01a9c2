"""Registry of named documentation parsers."""

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from ndoc_tree.documentation_tree import DocumentationTree
from ndoc_tree.errors import SourceReadError, UnknownParserError
from ndoc_tree.parse_ndoc import parse_ndoc

logger = logging.getLogger(__name__)

ParserFunc = Callable[
    [Iterable[str | Path], Mapping[str, Any] | None], DocumentationTree
]
Callback = Callable[[Exception | None, DocumentationTree | None], None]


class ParserRegistry:
    """Owns the mapping of parser names to parser functions."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self.parsers: dict[str, ParserFunc] = {}

    def register(self, name: str, func: ParserFunc) -> None:
        """Register (or replace) the parser stored under ``name``."""
        if name in self.parsers:
            logger.info("Replacing parser %s", name)
        self.parsers[name] = func

    def invoke(
        self,
        name: str,
        files: Iterable[str | Path],
        options: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> DocumentationTree | None:
        """Run the named parser over ``files``.

        Without a callback the tree is returned and errors propagate. With a
        callback, it receives ``(None, tree)`` on success or ``(err, None)``
        exactly once when the sources can't be read.
        """
        func = self.parsers.get(name)
        if func is None:
            msg = f"No parser registered as '{name}'"
            raise UnknownParserError(msg)

        if callback is None:
            return func(files, options)

        try:
            tree = func(files, options)
        except SourceReadError as err:
            callback(err, None)
            return None
        callback(None, tree)
        return tree


def register_ndoc(registry: ParserRegistry) -> None:
    """Register the ndoc tree builder as ``ndoc``."""
    registry.register("ndoc", parse_ndoc)
