"""Hand-written lexer for the overtime schema language.

Tokenizes schema source on demand: the parser pulls one token at a time with
``next()`` and looks ahead with ``peek()``. Whitespace and comments are real
tokens; deciding when they matter is left to the parser.
No external dependencies, pure Python scanning.
"""

from __future__ import annotations

from collections.abc import Iterator

from overtime.core.types import SchemaError
from overtime.dsl.tokens import PUNCTUATION, WHITESPACE_CHARS, Token, TokenKind


class LexerError(SchemaError):
    """Raised when the lexer encounters an invalid character sequence."""

    def __init__(self, message: str, line: int, column: int) -> None:
        self.line = line
        self.column = column
        super().__init__(f"Lexer error at L{line}:{column}: {message}")


class Lexer:
    """Tokenize overtime schema source text.

    Usage:
        lexer = Lexer(source_text)
        token = lexer.next()
        upcoming = lexer.peek()
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._start = 0

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token.kind == TokenKind.EOF:
                return
            yield token

    @property
    def source(self) -> str:
        return self._source

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Scan the remaining source and return all tokens including EOF."""
        tokens = list(self)
        tokens.append(self.next())
        return tokens

    def next(self) -> Token:
        """Consume and return the next token.

        Once the input is exhausted every call returns an EOF token.
        """
        if self._at_end():
            return Token(TokenKind.EOF, "", self._pos, self._pos)

        ch = self._advance()

        if ch in WHITESPACE_CHARS:
            return self._scan_whitespace()

        if ch == "#":
            return self._scan_comment()

        if ch in PUNCTUATION:
            return self._emit(PUNCTUATION[ch])

        if ch.isalpha():
            return self._scan_identifier()

        if ch == '"':
            return self._scan_string()

        line, column = self.position(self._start)
        raise LexerError(f"Unexpected character: {ch!r}", line, column)

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        token = self.next()
        self._pos = token.start
        self._start = token.start
        return token

    def backup(self) -> None:
        """Step back over the last consumed character."""
        if self._pos > 0:
            self._pos -= 1
            self._start = self._pos

    def position(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of a character offset.

        Scans from the start of the source, so it is only used when an
        error is being reported.
        """
        line = 1
        column = 1
        for ch in self._source[:offset]:
            if ch == "\n":
                line += 1
                column = 1
            else:
                column += 1
        return line, column

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan_whitespace(self) -> Token:
        while not self._at_end() and self._peek() in WHITESPACE_CHARS:
            self._advance()
        return self._emit(TokenKind.WHITESPACE)

    def _scan_comment(self) -> Token:
        """Consume a run of # lines with nothing but indentation between them."""
        while True:
            while not self._at_end() and self._peek() != "\n":
                self._advance()

            lookahead = self._pos + 1
            while lookahead < len(self._source) and self._source[lookahead] in (" ", "\t"):
                lookahead += 1

            if self._at_end() or lookahead >= len(self._source):
                break
            if self._source[lookahead] != "#":
                break

            # Fold the next comment line into this token
            self._pos = lookahead + 1

        return self._emit(TokenKind.COMMENT)

    def _scan_identifier(self) -> Token:
        while not self._at_end() and (self._peek().isalpha() or self._peek().isdigit()):
            self._advance()
        return self._emit(TokenKind.IDENTIFIER)

    def _scan_string(self) -> Token:
        """Scan a double-quoted string; escapes are kept verbatim."""
        while True:
            if self._at_end():
                line, column = self.position(self._start)
                raise LexerError("Unterminated string (hit EOF)", line, column)

            ch = self._advance()
            if ch == '"':
                break
            if ch == "\\" and not self._at_end():
                self._advance()

        return self._emit(TokenKind.STRING)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _emit(self, kind: TokenKind) -> Token:
        start = self._start
        self._start = self._pos
        return Token(kind, self._source[start : self._pos], start, self._pos)

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self) -> str:
        if self._at_end():
            return "\0"
        return self._source[self._pos]

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        return ch
