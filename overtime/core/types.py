"""Core types shared by the overtime front end.

Error hierarchy, the explicit parse result, and the builtin scalar type set
used by everything that consumes a parsed graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from overtime.dsl.graph import Graph


# ---------------------------------------------------------------------------
# Builtin types
# ---------------------------------------------------------------------------


# Scalar type names that never need a relationship resolver.
BUILTIN_TYPES: frozenset[str] = frozenset(
    {
        "int",
        "int64",
        "string",
        "bool",
        "float",
        "float64",
    }
)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class SchemaError(Exception):
    """Base class for every error reported while turning source into a graph."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(SchemaError):
    """A structurally complete but semantically incomplete declaration."""

    def __init__(
        self,
        message: str,
        path: str = "",
        method: str = "",
        attribute: str = "",
        line: int = 0,
    ) -> None:
        self.path = path
        self.method = method
        self.attribute = attribute
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        loc = f"line {self.line}" if self.line else "unknown"
        return f"Validation error at {loc}: {self.message}"


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class ParseResult:
    """Outcome of a single parse: either a graph or the first error hit."""

    graph: Graph | None = None
    error: SchemaError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.graph is not None

    def unwrap(self) -> Graph:
        """Return the graph, raising the stored error if the parse failed."""
        if self.error is not None:
            raise self.error
        if self.graph is None:
            raise SchemaError("Parse produced neither a graph nor an error")
        return self.graph
