"""Resolver naming conventions for code generated from a Graph.

A field whose type is not a builtin scalar is a relationship: the generator
tags it with the name of a batch-loading method, ``Resolve<Type><Field>``,
and the runtime resolver calls that method by name. This module owns the
builtin set and the naming scheme so both sides agree on them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from overtime.core.naming import capitalize
from overtime.core.types import BUILTIN_TYPES
from overtime.dsl.graph import Field, Graph, Type, root_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverMethod:
    """A resolver method the generated code expects to exist."""

    name: str
    type_name: str
    field_name: str
    returns_list: bool = False


class ResolverConventions:
    """Decide which fields need resolvers and what the methods are called.

    The builtin set is fixed at construction; pass a custom one to treat
    extra scalar names (``uuid``, ``time`` ...) as builtins.
    """

    def __init__(self, builtins: Iterable[str] = BUILTIN_TYPES) -> None:
        self._builtins = frozenset(builtins)

    @property
    def builtins(self) -> frozenset[str]:
        return self._builtins

    def is_builtin(self, type_ref: str) -> bool:
        """True when the type (list marker ignored) is a builtin scalar."""
        return root_type(type_ref) in self._builtins

    @staticmethod
    def field_name(name: str) -> str:
        """Exported field name: ``id`` becomes ``ID``, everything else is capitalized."""
        if name == "id":
            return "ID"
        return capitalize(name)

    def method_name(self, type_name: str, field_name: str) -> str:
        """Return ``Resolve<Type><Field>``, e.g. ``ResolvePostComments``."""
        return f"Resolve{self.field_name(type_name)}{self.field_name(field_name)}"

    def resolver_fields(self, type_: Type) -> list[Field]:
        """Fields of a type that reference non-builtin types, in declaration order."""
        return [f for f in type_.fields.values() if not self.is_builtin(f.type)]

    def needs_resolver(self, type_: Type) -> bool:
        return any(not self.is_builtin(f.type) for f in type_.fields.values())

    def resolver_methods(self, graph: Graph) -> dict[str, ResolverMethod]:
        """Every resolver method implied by the graph, keyed by method name."""
        methods: dict[str, ResolverMethod] = {}

        for type_ in graph.types.values():
            for field in self.resolver_fields(type_):
                if field.root_type not in graph.types:
                    logger.warning(
                        "Field %s.%s references undeclared type %r",
                        type_.name,
                        field.name,
                        field.root_type,
                    )
                name = self.method_name(type_.name, field.name)
                methods[name] = ResolverMethod(
                    name=name,
                    type_name=type_.name,
                    field_name=field.name,
                    returns_list=field.is_list,
                )

        return methods
