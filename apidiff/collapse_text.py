"""Logic for turning multi-line description text into a single line."""

import re

WHITESPACE_RE = re.compile(r"\s+")


def collapse_text(text: str | None) -> str:
    """Collapse line breaks into sentence breaks and squeeze whitespace."""
    if not text:
        return ""
    text = text.strip().replace(".\n", ". ").replace("\n", ". ")
    return WHITESPACE_RE.sub(" ", text)
