"""Logic for rendering a plain-text outline of a documentation tree."""

from ndoc_tree.documentation_tree import DocumentationTree


def render_outline(tree: DocumentationTree, indent: str = "  ") -> str:
    """Render one ``type id`` line per record, indented by depth."""
    lines = []
    for depth, record in tree.walk():
        line = f"{indent * depth}{record.type} {record.id}"
        if record.aliases:
            line += f" (aliases: {', '.join(record.aliases)})"
        lines.append(line)
    return "\n".join(lines) + "\n" if lines else ""
