"""Hand-written recursive descent parser for the overtime schema language.

Pulls tokens from the lexer one at a time and builds a Graph. Whitespace is
significant: the grammar requires a separating whitespace token at fixed
positions and rejects input that omits it.
No external parsing libraries used.
"""

from __future__ import annotations

import logging
from pathlib import Path

from overtime.core.config import OvertimeConfig, get_config
from overtime.core.types import ParseResult, SchemaError
from overtime.dsl.comments import normalize_comment
from overtime.dsl.graph import LIST_PREFIX, Endpoint, Field, Graph, Type
from overtime.dsl.lexer import Lexer
from overtime.dsl.tokens import HTTP_METHODS, TYPE_KEYWORD, Token, TokenKind
from overtime.dsl.validator import validate_graph

logger = logging.getLogger(__name__)


class ParseError(SchemaError):
    """Raised when the parser encounters an unexpected token."""

    def __init__(self, message: str, token: Token, line: int, column: int) -> None:
        self.token = token
        self.line = line
        self.column = column
        super().__init__(f"Parse error at L{line}:{column}: {message}")


class Parser:
    """Parse overtime schema source into a validated Graph.

    A parser instance is single use.

    Usage:
        parser = Parser(source)
        graph = parser.parse()
    """

    def __init__(self, source: str, config: OvertimeConfig | None = None) -> None:
        self._source = source
        self._config = config or get_config()
        self._lexer = Lexer(source)
        self._graph = Graph()
        self._pending_comment: Token | None = None
        self._line = 1

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def parse(self) -> Graph:
        """Parse the whole source, validate it, and return the Graph.

        Raises the first LexerError, ParseError or ValidationError hit.
        """
        limit = self._config.max_source_size
        if limit and len(self._source) > limit:
            raise SchemaError(
                f"Schema source is {len(self._source)} characters, limit is {limit}"
            )

        self._parse_declarations()

        errors = validate_graph(self._graph)
        if errors:
            raise errors[0]

        logger.debug(
            "Parsed %d types and %d endpoints",
            len(self._graph.types),
            len(self._graph.endpoints),
        )
        return self._graph

    # ------------------------------------------------------------------
    # Top-level declarations
    # ------------------------------------------------------------------

    def _parse_declarations(self) -> None:
        while True:
            token = self._next()

            if token.kind == TokenKind.EOF:
                if self._pending_comment is not None:
                    logger.debug("Discarding trailing comment at offset %d", self._pending_comment.start)
                self._pending_comment = None
                return

            if token.kind == TokenKind.WHITESPACE:
                self._skip_whitespace(token)
            elif token.kind == TokenKind.COMMENT:
                self._pending_comment = token
            elif token.kind == TokenKind.IDENTIFIER and token.value in HTTP_METHODS:
                self._parse_endpoint(token)
            elif token.kind == TokenKind.IDENTIFIER and token.value == TYPE_KEYWORD:
                self._parse_type(token)
            else:
                raise self._error(token, "Expected 'type' or an HTTP method")

    def _parse_type(self, keyword: Token) -> None:
        """Parse `type Name { field: Type ... }`."""
        line = self._line
        doc_comment = self._take_comment()

        self._expect(TokenKind.WHITESPACE, "Expected whitespace after 'type'")
        name_token = self._expect(TokenKind.IDENTIFIER, "Expected type name")
        name = name_token.value

        if name in self._graph.types:
            if self._config.reject_duplicate_types:
                raise self._error(name_token, f"Type {name!r} already exists")
            logger.warning("Type %r declared more than once; keeping the last declaration", name)

        self._expect(TokenKind.WHITESPACE, f"Expected whitespace after type name {name!r}")
        self._expect(TokenKind.LBRACE, f"Expected '{{' after type name {name!r}")
        fields = self._parse_fields(supports_optional=False)

        self._graph.types.pop(name, None)
        self._graph.types[name] = Type(
            name=name,
            fields=fields,
            doc_comment=doc_comment,
            line=line,
        )
        logger.debug("Parsed type %s with %d fields", name, len(fields))

    def _parse_endpoint(self, method_token: Token) -> None:
        """Parse `METHOD "/path" { name: ... input: { ... } returns: ... }`."""
        line = self._line
        method = method_token.value
        doc_comment = self._take_comment()

        self._expect(TokenKind.WHITESPACE, f"Expected whitespace after {method}")
        path_token = self._expect(TokenKind.STRING, "Expected quoted endpoint path")
        path = path_token.value[1:-1]

        if path in self._graph.endpoints:
            raise self._error(path_token, f"Endpoint already exists: {method} {path}")

        endpoint = Endpoint(path=path, method=method, doc_comment=doc_comment, line=line)

        self._expect(TokenKind.WHITESPACE, "Expected whitespace after endpoint path")
        self._expect(TokenKind.LBRACE, "Expected '{' after endpoint path")
        self._expect(TokenKind.WHITESPACE, "Expected whitespace after '{'")

        while True:
            token = self._next()

            if token.kind == TokenKind.WHITESPACE:
                self._skip_whitespace(token)
                continue
            if token.kind == TokenKind.COMMENT:
                self._pending_comment = token
                continue
            if token.kind == TokenKind.RBRACE:
                self._pending_comment = None
                break
            if token.kind != TokenKind.IDENTIFIER:
                raise self._error(token, "Expected 'name', 'input', 'returns' or '}'")

            self._parse_endpoint_entry(endpoint, token)
            self._expect(TokenKind.WHITESPACE, f"Expected whitespace after '{token.value}' entry")

        self._graph.endpoints[path] = endpoint
        logger.debug("Parsed endpoint %s %s", method, path)

    # ------------------------------------------------------------------
    # Endpoint entries
    # ------------------------------------------------------------------

    def _parse_endpoint_entry(self, endpoint: Endpoint, key: Token) -> None:
        if key.value not in ("name", "input", "returns"):
            raise self._error(key, f"Unknown endpoint entry {key.value!r}")

        comment = self._take_comment()
        if comment and not endpoint.doc_comment:
            endpoint.doc_comment = comment
        elif comment:
            logger.debug("Dropping comment before '%s' in %s %s", key.value, endpoint.method, endpoint.path)

        self._expect(TokenKind.COLON, f"Expected ':' after '{key.value}'")
        self._expect(TokenKind.WHITESPACE, f"Expected whitespace after '{key.value}:'")

        if key.value == "name":
            endpoint.name = self._expect(TokenKind.IDENTIFIER, "Expected endpoint name").value
        elif key.value == "input":
            self._expect(TokenKind.LBRACE, "Expected '{' after 'input:'")
            endpoint.args = self._parse_fields(supports_optional=True)
        else:
            endpoint.returns = self._parse_type_ref()

    # ------------------------------------------------------------------
    # Field blocks
    # ------------------------------------------------------------------

    def _parse_fields(self, supports_optional: bool) -> dict[str, Field]:
        """Parse field declarations up to and including the closing '}'.

        The opening '{' has already been consumed.
        """
        fields: dict[str, Field] = {}
        self._expect(TokenKind.WHITESPACE, "Expected whitespace after '{'")

        while True:
            token = self._next()

            if token.kind == TokenKind.WHITESPACE:
                self._skip_whitespace(token)
                continue
            if token.kind == TokenKind.COMMENT:
                self._pending_comment = token
                continue
            if token.kind == TokenKind.RBRACE:
                self._pending_comment = None
                return fields
            if token.kind != TokenKind.IDENTIFIER:
                raise self._error(token, "Expected field name or '}'")

            field = self._parse_field(token, supports_optional)
            fields[field.name] = field
            self._expect(TokenKind.WHITESPACE, f"Expected whitespace after field {field.name!r}")

    def _parse_field(self, name_token: Token, supports_optional: bool) -> Field:
        line = self._line
        doc_comment = self._take_comment()
        name = name_token.value

        is_optional = False
        token = self._next()
        if token.kind == TokenKind.QUESTION:
            if not supports_optional:
                raise self._error(token, f"Optional marker '?' on {name!r} is only allowed in input blocks")
            is_optional = True
            token = self._next()

        if token.kind != TokenKind.COLON:
            raise self._error(token, f"Expected ':' after field name {name!r}")

        self._expect(TokenKind.WHITESPACE, f"Expected whitespace after '{name}:'")
        type_ref = self._parse_type_ref()

        return Field(
            name=name,
            type=type_ref,
            is_optional=is_optional,
            doc_comment=doc_comment,
            line=line,
        )

    def _parse_type_ref(self) -> str:
        """Parse `Name` or `[]Name`; the list marker is kept in the result."""
        token = self._lexer.peek()

        if token.kind == TokenKind.LBRACKET:
            self._next()
            self._expect(TokenKind.RBRACKET, "Expected ']' after '['")
            name = self._expect(TokenKind.IDENTIFIER, "Expected type name after '[]'").value
            return LIST_PREFIX + name

        if token.kind == TokenKind.IDENTIFIER:
            return self._next().value

        raise self._error(token, "Expected type name or '[]'")

    # ------------------------------------------------------------------
    # Doc comments
    # ------------------------------------------------------------------

    def _take_comment(self) -> str:
        """Return the pending doc comment, normalized, and clear it."""
        token = self._pending_comment
        self._pending_comment = None
        if token is None:
            return ""
        return normalize_comment(token.value)

    def _skip_whitespace(self, token: Token) -> None:
        # A blank line detaches a comment from whatever follows it
        if token.value.count("\n") >= 2 and self._pending_comment is not None:
            logger.debug("Discarding detached comment at offset %d", self._pending_comment.start)
            self._pending_comment = None

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _next(self) -> Token:
        token = self._lexer.next()
        self._line += token.value.count("\n")
        return token

    def _expect(self, kind: TokenKind, message: str) -> Token:
        token = self._next()
        if token.kind != kind:
            raise self._error(token, message)
        return token

    def _error(self, token: Token, message: str) -> ParseError:
        line, column = self._lexer.position(token.start)
        return ParseError(
            f"{message} (got {token.kind.name}: {token.value!r})",
            token,
            line,
            column,
        )


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def parse_schema(source: str, config: OvertimeConfig | None = None) -> ParseResult:
    """Parse schema source, returning the graph or the first error as a result."""
    try:
        graph = Parser(source, config).parse()
    except SchemaError as exc:
        logger.debug("Schema rejected: %s", exc)
        return ParseResult(error=exc)
    return ParseResult(graph=graph)


def parse_file(path: str | Path, config: OvertimeConfig | None = None) -> ParseResult:
    """Read a UTF-8 schema file and parse it. I/O errors propagate."""
    source = Path(path).read_text(encoding="utf-8")
    return parse_schema(source, config)
