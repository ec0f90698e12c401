"""Semantic validator for a parsed overtime Graph.

The grammar accepts an endpoint block with any subset of its entries, so the
checks for required attributes live here:
- every endpoint has a path and a method
- every endpoint has a `name`
- every endpoint has a `returns` type
Types are not checked beyond what the grammar guarantees.
"""

from __future__ import annotations

from overtime.core.types import ValidationError
from overtime.dsl.graph import Endpoint, Graph


def validate_graph(graph: Graph) -> list[ValidationError]:
    """Run all validation passes on a parsed Graph.

    Returns the issues in declaration order (may be empty if valid).
    """
    errors: list[ValidationError] = []

    for endpoint in graph.endpoints.values():
        error = validate_endpoint(endpoint)
        if error is not None:
            errors.append(error)

    return errors


def validate_endpoint(endpoint: Endpoint) -> ValidationError | None:
    """Return the first missing required attribute of an endpoint, if any."""
    if not endpoint.path:
        return _missing(endpoint, "path", f"Path is required for {endpoint.method} {endpoint.path!r}")

    if not endpoint.method:
        return _missing(endpoint, "method", f"Method is required for {endpoint.method!r} {endpoint.path}")

    if not endpoint.name:
        return _missing(
            endpoint,
            "name",
            f"`name` is not defined for {endpoint.method} {endpoint.path}",
        )

    if not endpoint.returns:
        return _missing(
            endpoint,
            "returns",
            f"`returns` is not defined for {endpoint.method} {endpoint.path}",
        )

    return None


def _missing(endpoint: Endpoint, attribute: str, message: str) -> ValidationError:
    return ValidationError(
        message=message,
        path=endpoint.path,
        method=endpoint.method,
        attribute=attribute,
        line=endpoint.line,
    )
