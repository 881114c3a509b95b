"""Markdown helpers for describing bundled templates."""

from __future__ import annotations

FRONTMATTER_FENCE = "---"


def describe_markdown(text: str) -> str:
    """Return a one-line description of a markdown template.

    The ``description:`` line of a leading ``---`` block wins. Without one,
    the first non-empty line after that block is used with heading marks
    stripped. An unterminated block is treated as ordinary body text.
    """
    lines = text.splitlines()
    body = lines
    if lines and lines[0].strip() == FRONTMATTER_FENCE:
        end = next(
            (idx for idx in range(1, len(lines)) if lines[idx].strip() == FRONTMATTER_FENCE),
            None,
        )
        if end is not None:
            for line in lines[1:end]:
                key, sep, value = line.partition(":")
                if sep and key.strip() == "description" and value.strip().strip('"'):
                    return value.strip().strip('"')
            body = lines[end + 1 :]

    for line in body:
        heading = line.strip().lstrip("#").strip()
        if heading:
            return heading
    return ""
