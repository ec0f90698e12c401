"""Tests for the overtime command line."""

from __future__ import annotations

import json

import pytest

from overtime.cli import main


@pytest.fixture
def schema_file(tmp_path, blog_schema: str):
    path = tmp_path / "blog.ot"
    path.write_text(blog_schema, encoding="utf-8")
    return path


class TestCheck:
    def test_valid_schema(self, schema_file, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", str(schema_file)]) == 0
        assert "blog.ot: 2 types, 2 endpoints" in capsys.readouterr().out

    def test_invalid_schema(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "broken.ot"
        path.write_text('GET "/x" { name: X }\n', encoding="utf-8")

        assert main(["check", str(path)]) == 1
        err = capsys.readouterr().err
        assert "broken.ot" in err
        assert "`returns` is not defined for GET /x" in err

    def test_syntax_error_location(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "broken.ot"
        path.write_text("type A {\n  id?: int64\n}\n", encoding="utf-8")

        assert main(["check", str(path)]) == 1
        assert "L2:5" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", str(tmp_path / "nope.ot")]) == 1
        assert "Schema file not found" in capsys.readouterr().err

    def test_invalid_utf8(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "latin.ot"
        path.write_bytes(b"type A {\n  x: int\n}\n# \xff\xfe\n")

        assert main(["check", str(path)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: latin.ot: ")
        assert "can't decode" in err

    def test_directory(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        schemas = tmp_path / "schemas"
        schemas.mkdir()

        assert main(["check", str(schemas)]) == 1
        assert capsys.readouterr().err.startswith("Error: schemas: ")

    def test_unreadable_file_on_dump(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "blob.ot"
        path.write_bytes(b"\x80\x81")

        assert main(["dump", str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "blob.ot" in captured.err


class TestDump:
    def test_stdout(self, schema_file, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["dump", str(schema_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [e["name"] for e in data["endpoints"]] == ["GetCommentByID", "ListPosts"]

    def test_output_file(self, schema_file, tmp_path) -> None:
        output = tmp_path / "graph.json"
        assert main(["dump", str(schema_file), "-o", str(output)]) == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [t["name"] for t in data["types"]] == ["Comment", "Post"]


class TestNames:
    def test_names(self, schema_file, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["names", str(schema_file)]) == 0
        out = capsys.readouterr().out
        assert "api name: ApiV1CommentsByCommentID" in out
        assert "api name: ApiV1Posts" in out
        assert "ResolvePostComments -> Post.comments" in out


def test_no_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage: overtime" in capsys.readouterr().out


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "overtime 0.1.0" in capsys.readouterr().out
