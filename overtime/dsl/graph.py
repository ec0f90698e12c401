"""Graph node definitions for the overtime schema language.

These dataclasses form the intermediate representation produced by the
parser. The structure mirrors a schema file:

    Graph
      -> types      (name -> Type)
          -> fields (name -> Field)
      -> endpoints  (path -> Endpoint)
          -> args   (name -> Field)

Mappings are plain dicts, so iteration follows declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from overtime.core.naming import api_name

LIST_PREFIX = "[]"


def root_type(type_ref: str) -> str:
    """Strip the list-of marker from a type reference."""
    return type_ref[len(LIST_PREFIX) :] if type_ref.startswith(LIST_PREFIX) else type_ref


# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------


@dataclass
class Field:
    """A `name: Type` (or `name?: Type` in input blocks) declaration.

    ``type`` is kept as written, so list references keep their ``[]`` prefix.
    """

    name: str
    type: str
    is_optional: bool = False
    doc_comment: str = ""
    line: int = 0

    @property
    def is_list(self) -> bool:
        return self.type.startswith(LIST_PREFIX)

    @property
    def root_type(self) -> str:
        return root_type(self.type)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "is_optional": self.is_optional,
            "doc_comment": self.doc_comment,
            "line": self.line,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Field:
        return cls(
            name=data["name"],
            type=data["type"],
            is_optional=data.get("is_optional", False),
            doc_comment=data.get("doc_comment", ""),
            line=data.get("line", 0),
        )


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@dataclass
class Type:
    """A `type Name { ... }` declaration."""

    name: str
    fields: dict[str, Field] = field(default_factory=dict)
    doc_comment: str = ""
    line: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "doc_comment": self.doc_comment,
            "line": self.line,
            "fields": [f.to_dict() for f in self.fields.values()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Type:
        fields = [Field.from_dict(f) for f in data.get("fields", [])]
        return cls(
            name=data["name"],
            fields={f.name: f for f in fields},
            doc_comment=data.get("doc_comment", ""),
            line=data.get("line", 0),
        )


@dataclass
class Endpoint:
    """A `METHOD "/path" { name: ..., input: { ... }, returns: ... }` declaration."""

    path: str
    method: str
    name: str = ""
    args: dict[str, Field] = field(default_factory=dict)
    returns: str = ""
    doc_comment: str = ""
    line: int = 0

    @property
    def returns_list(self) -> bool:
        return self.returns.startswith(LIST_PREFIX)

    @property
    def api_name(self) -> str:
        """Identifier derived from the path, see ``overtime.core.naming``."""
        return api_name(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "method": self.method,
            "name": self.name,
            "returns": self.returns,
            "doc_comment": self.doc_comment,
            "line": self.line,
            "args": [a.to_dict() for a in self.args.values()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Endpoint:
        args = [Field.from_dict(a) for a in data.get("args", [])]
        return cls(
            path=data["path"],
            method=data["method"],
            name=data.get("name", ""),
            args={a.name: a for a in args},
            returns=data.get("returns", ""),
            doc_comment=data.get("doc_comment", ""),
            line=data.get("line", 0),
        )


# ---------------------------------------------------------------------------
# Root node
# ---------------------------------------------------------------------------


@dataclass
class Graph:
    """Root of the IR. Represents an entire schema file."""

    types: dict[str, Type] = field(default_factory=dict)
    endpoints: dict[str, Endpoint] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "types": [t.to_dict() for t in self.types.values()],
            "endpoints": [e.to_dict() for e in self.endpoints.values()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Graph:
        types = [Type.from_dict(t) for t in data.get("types", [])]
        endpoints = [Endpoint.from_dict(e) for e in data.get("endpoints", [])]
        return cls(
            types={t.name: t for t in types},
            endpoints={e.path: e for e in endpoints},
        )
