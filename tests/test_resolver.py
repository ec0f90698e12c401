"""Tests for the resolver naming conventions."""

from __future__ import annotations

import logging

import pytest

from overtime.compiler.resolver import ResolverConventions, ResolverMethod
from overtime.core.types import BUILTIN_TYPES
from overtime.dsl.parser import parse_schema

SCHEMA = """\
type Comment { id: int64  body: string }
type Post {
  id: int64
  body: string
  comments: []Comment
  author: User
}
"""


@pytest.fixture
def graph():
    return parse_schema(SCHEMA).unwrap()


class TestBuiltins:
    def test_default_set(self) -> None:
        assert BUILTIN_TYPES == {"int", "int64", "string", "bool", "float", "float64"}

    def test_list_of_builtin_is_builtin(self) -> None:
        conventions = ResolverConventions()
        assert conventions.is_builtin("int64")
        assert conventions.is_builtin("[]string")
        assert not conventions.is_builtin("Comment")
        assert not conventions.is_builtin("[]Comment")

    def test_custom_builtins(self) -> None:
        conventions = ResolverConventions(BUILTIN_TYPES | {"uuid"})
        assert conventions.is_builtin("uuid")
        assert "uuid" not in BUILTIN_TYPES


class TestNames:
    def test_field_name(self) -> None:
        assert ResolverConventions.field_name("id") == "ID"
        assert ResolverConventions.field_name("comments") == "Comments"

    def test_method_name(self) -> None:
        conventions = ResolverConventions()
        assert conventions.method_name("Post", "comments") == "ResolvePostComments"
        assert conventions.method_name("post", "id") == "ResolvePostID"


class TestGraphResolvers:
    def test_resolver_fields(self, graph) -> None:
        conventions = ResolverConventions()
        fields = conventions.resolver_fields(graph.types["Post"])

        assert [f.name for f in fields] == ["comments", "author"]
        assert conventions.needs_resolver(graph.types["Post"])
        assert not conventions.needs_resolver(graph.types["Comment"])

    def test_resolver_methods(self, graph, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="overtime.compiler.resolver"):
            methods = ResolverConventions().resolver_methods(graph)

        assert methods == {
            "ResolvePostComments": ResolverMethod(
                name="ResolvePostComments",
                type_name="Post",
                field_name="comments",
                returns_list=True,
            ),
            "ResolvePostAuthor": ResolverMethod(
                name="ResolvePostAuthor",
                type_name="Post",
                field_name="author",
                returns_list=False,
            ),
        }
        assert "undeclared type 'User'" in caplog.text

    def test_extra_builtins_drop_resolvers(self, graph) -> None:
        methods = ResolverConventions(BUILTIN_TYPES | {"User"}).resolver_methods(graph)
        assert list(methods) == ["ResolvePostComments"]
