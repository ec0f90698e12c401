"""Token types for the overtime schema lexer.

Defines all token kinds and the Token dataclass used by the lexer and parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """All token types recognized by the overtime lexer."""

    # Literals
    STRING = auto()  # "quoted string", quotes included in the value
    IDENTIFIER = auto()  # letter-initial name

    # Punctuation
    DASH = auto()  # -
    COLON = auto()  # :
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    QUESTION = auto()  # ?
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    SLASH = auto()  # /

    # Special
    WHITESPACE = auto()
    COMMENT = auto()  # one or more consecutive # lines
    EOF = auto()


# Map single-character punctuation to token kinds
PUNCTUATION: dict[str, TokenKind] = {
    "-": TokenKind.DASH,
    ":": TokenKind.COLON,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "?": TokenKind.QUESTION,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "/": TokenKind.SLASH,
}

WHITESPACE_CHARS = frozenset(" \t\r\n")

# Identifiers that open an endpoint declaration
HTTP_METHODS: frozenset[str] = frozenset(
    {
        "GET",
        "PUT",
        "POST",
        "DELETE",
        "PATCH",
        "HEAD",
        "OPTIONS",
        "TRACE",
        "CONNECT",
    }
)

TYPE_KEYWORD = "type"


@dataclass(frozen=True)
class Token:
    """A single token produced by the lexer.

    ``start`` and ``end`` are character offsets into the source, ``end``
    exclusive. Line and column are only computed when an error is reported.
    """

    kind: TokenKind
    value: str
    start: int
    end: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, {self.start}:{self.end})"
