from __future__ import annotations

import pytest

from overtime.core.config import OvertimeConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against default settings, ignoring OVERTIME_* env vars."""
    config = OvertimeConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def blog_schema() -> str:
    return """\
# A comment left on a post.
type Comment {
  id: int64
  # Raw markdown body
  body: string
}

type Post {
  id: int64
  body: string
  comments: []Comment
}

# Fetch a single comment.
GET "/api/v1/comments/:commentID" {
  name: GetCommentByID
  returns: Comment
}

GET "/api/v1/posts" {
  name: ListPosts
  input: {
    page?: int64
    authorID: int64
  }
  returns: []Post
}
"""
