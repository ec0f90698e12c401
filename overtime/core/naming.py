"""Identifier conventions derived from endpoint paths.

Shared by ``Endpoint.api_name`` and the resolver conventions; the parser
itself never calls these.
"""

from __future__ import annotations

_VOWELS = "aeiou"


def capitalize(s: str) -> str:
    """Upper-case the first character only (``userID`` -> ``UserID``)."""
    return s[:1].upper() + s[1:]


def uncapitalize(s: str) -> str:
    """Lower-case the first character only."""
    return s[:1].lower() + s[1:]


def api_name(path: str) -> str:
    """Build an API-friendly identifier from a route template.

    Literal segments are capitalized and concatenated. A ``:param`` segment
    becomes ``By<Param>`` unless the segment after it is also a parameter,
    in which case it only filters the parent and is skipped.

    Example:
        >>> api_name("/api/v1/users/:userID/comments")
        'ApiV1UsersByUserIDComments'
    """
    segments = [s for s in path.split("/") if s]
    parts: list[str] = []

    for i, segment in enumerate(segments):
        if not segment.startswith(":"):
            parts.append(capitalize(segment))
            continue

        following = segments[i + 1] if i + 1 < len(segments) else ""
        if following.startswith(":"):
            continue

        parts.append("By" + capitalize(segment[1:]))

    return "".join(parts)


def is_singular(word: str) -> bool:
    """Guess whether an English word is singular from its suffix.

    The rules are checked in order and the first match wins:
    ``ss``, ``us``, ``is`` and ``id`` are singular; ``ies``, ``es`` and ``ids``
    are plural; a trailing ``s`` after a vowel is singular, after a consonant
    plural. Anything else is treated as singular.
    """
    word = word.lower()

    if word.endswith("ss"):
        return True

    if word.endswith(("us", "is")):
        return True

    if word.endswith(("ies", "es")):
        return False

    if word.endswith("id"):
        return True

    if word.endswith("ids"):
        return False

    if word.endswith("s") and len(word) > 1:
        return word[-2] in _VOWELS

    return True
