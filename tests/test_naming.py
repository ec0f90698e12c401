"""Tests for path-derived names and the singular/plural heuristic."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from overtime.core.naming import api_name, capitalize, is_singular, uncapitalize
from overtime.dsl.graph import Endpoint


class TestApiName:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/api/v1/comments", "ApiV1Comments"),
            ("/api/v1/comments/:commentID", "ApiV1CommentsByCommentID"),
            ("/api/v1/users/:userID/comments", "ApiV1UsersByUserIDComments"),
            ("/orgs/:orgID/:repoID", "OrgsByRepoID"),
            ("/orgs/:orgID/:repoID/issues", "OrgsByRepoIDIssues"),
            ("//api//posts/", "ApiPosts"),
            ("/", ""),
            ("", ""),
        ],
    )
    def test_segments(self, path: str, expected: str) -> None:
        assert api_name(path) == expected

    def test_endpoint_property(self) -> None:
        endpoint = Endpoint(path="/api/v1/posts/:postID", method="GET")
        assert endpoint.api_name == "ApiV1PostsByPostID"

    @pytest.mark.parametrize("module", ["overtime.dsl.graph", "overtime.compiler", "overtime"])
    def test_graph_imports_cleanly_first(self, module: str) -> None:
        code = f"import {module}; from overtime.dsl.graph import Endpoint; print(Endpoint('/a/:id', 'GET').api_name)"
        completed = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True, cwd=Path(__file__).parents[1]
        )
        assert completed.returncode == 0, completed.stderr
        assert completed.stdout.strip() == "AById"


class TestIsSingular:
    @pytest.mark.parametrize(
        ("word", "singular"),
        [
            ("class", True),  # ss
            ("status", True),  # us
            ("analysis", True),  # is
            ("categories", False),  # ies
            ("boxes", False),  # es
            ("commentID", True),  # id
            ("commentIDs", False),  # ids
            ("gas", True),  # vowel before s
            ("users", False),  # consonant before s
            ("Comments", False),
            ("comment", True),
            ("s", True),
            ("", True),
        ],
    )
    def test_suffix_rules(self, word: str, singular: bool) -> None:
        assert is_singular(word) is singular


class TestCapitalize:
    def test_only_first_character_changes(self) -> None:
        assert capitalize("userID") == "UserID"
        assert uncapitalize("UserID") == "userID"

    def test_empty(self) -> None:
        assert capitalize("") == ""
        assert uncapitalize("") == ""
