"""Doc-comment normalization.

Turns a raw comment token (one or more ``#`` lines) into the clean text stored
on types, endpoints and fields.
"""

from __future__ import annotations


def normalize_comment(raw: str) -> str:
    """Strip comment markers and the common indentation from a comment run.

    The indentation removed from every line is the one found on the first
    line that has content. Empty lines, and ``#`` lines with nothing after
    the marker, become paragraph breaks.

    Example:
        >>> normalize_comment("#   Lists comments\\n#     newest first")
        'Lists comments\\n  newest first'
    """
    lines: list[str] = []
    indent: int | None = None

    for line in raw.splitlines():
        text = line.strip()
        if not text:
            lines.append("")
            continue

        content = text[1:] if text.startswith("#") else text
        content = content.rstrip()
        if not content:
            lines.append("")
            continue

        if indent is None:
            indent = len(content) - len(content.lstrip(" \t"))
        lines.append(_dedent(content, indent))

    return "\n".join(lines)


def _dedent(content: str, indent: int) -> str:
    cut = 0
    while cut < indent and cut < len(content) and content[cut] in (" ", "\t"):
        cut += 1
    return content[cut:]
