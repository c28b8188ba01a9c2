"""Exceptions raised by the ndoc tree pipeline."""


class SourceReadError(OSError):
    """Raised when an input file cannot be read; aborts the whole batch."""

    def __init__(self, file: str, reason: str) -> None:
        """Initialize the error with the failing file and the underlying reason."""
        super().__init__(f"Cannot read source file '{file}': {reason}")
        self.file = file


class RecordSourceError(ValueError):
    """Raised when a record source document has an unsupported shape."""


class UnknownParserError(KeyError):
    """Raised when a parser name is not registered."""
