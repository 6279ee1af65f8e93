"""Editor syntax hint lookup from label names."""

# Used when a label has no recognised extension
DEFAULT_SYNTAX_HINT = "javascript"

EXTENSION_HINTS: dict[str, str] = {
    "js": "javascript",
    "json": "json",
    "ts": "javascript",
    "jsx": "javascript",
    "tsx": "javascript",
    "md": "markdown",
    "py": "python",
    "rs": "rust",
    "html": "html",
    "htm": "html",
    "xml": "xml",
    "css": "css",
    "scss": "css",
    "sass": "css",
    "txt": "text",
}


def label_extension(name: str) -> str:
    """Lowercased suffix after the last dot (the whole name if there is none)."""
    return name.rsplit(".", 1)[-1].lower()


def syntax_hint_for(name: str) -> str:
    """Map a label name to an editor language name."""
    return EXTENSION_HINTS.get(label_extension(name), DEFAULT_SYNTAX_HINT)
