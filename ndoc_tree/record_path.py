"""Utility for determining the output path of a record."""


def record_path(record_id: str) -> str:
    """Generate the output path for a final record id."""
    # Foo#bar -> Foo.prototype.bar, Foo@ready -> Foo.event.ready
    path = record_id.replace("#", ".prototype.")
    return path.replace("@", ".event.", 1)
