"""overtime schema language: tokenizer, parser and validator.

Usage:
    from overtime.dsl import parse_schema

    result = parse_schema(source)
    if result.ok:
        graph = result.graph
    else:
        print(result.error)
"""

from overtime.dsl.comments import normalize_comment
from overtime.dsl.graph import Endpoint, Field, Graph, Type
from overtime.dsl.lexer import Lexer, LexerError
from overtime.dsl.parser import ParseError, Parser, parse_file, parse_schema
from overtime.dsl.tokens import Token, TokenKind
from overtime.dsl.validator import validate_endpoint, validate_graph

__all__ = [
    "Endpoint",
    "Field",
    "Graph",
    "Lexer",
    "LexerError",
    "ParseError",
    "Parser",
    "Token",
    "TokenKind",
    "Type",
    "normalize_comment",
    "parse_file",
    "parse_schema",
    "validate_endpoint",
    "validate_graph",
]
