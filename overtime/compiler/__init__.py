"""overtime compiler helpers: conventions shared with code generators.

Usage:
    from overtime.compiler import ResolverConventions, api_name
    from overtime.compiler.serializer import serialize_to_json

    conventions = ResolverConventions()
    methods = conventions.resolver_methods(graph)
    json_str = serialize_to_json(graph)
"""

from overtime.compiler.resolver import ResolverConventions, ResolverMethod
from overtime.compiler.serializer import (
    deserialize_from_json,
    graph_from_dict,
    graph_to_dict,
    serialize_to_json,
)
from overtime.core.naming import api_name, capitalize, is_singular, uncapitalize

__all__ = [
    "ResolverConventions",
    "ResolverMethod",
    "api_name",
    "capitalize",
    "deserialize_from_json",
    "graph_from_dict",
    "graph_to_dict",
    "is_singular",
    "serialize_to_json",
    "uncapitalize",
]
