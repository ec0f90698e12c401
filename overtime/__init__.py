"""overtime: schema front end for generated REST gateways.

    from overtime import parse_schema

    result = parse_schema(source)
    graph = result.unwrap()
"""

__version__ = "0.1.0"

from overtime.core.types import ParseResult, SchemaError, ValidationError  # noqa: E402
from overtime.dsl.graph import Endpoint, Field, Graph, Type  # noqa: E402
from overtime.dsl.parser import Parser, parse_file, parse_schema  # noqa: E402

__all__ = [
    "Endpoint",
    "Field",
    "Graph",
    "ParseResult",
    "Parser",
    "SchemaError",
    "Type",
    "ValidationError",
    "parse_file",
    "parse_schema",
]
