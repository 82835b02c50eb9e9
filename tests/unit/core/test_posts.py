"""Unit tests for core/posts.py"""

from datetime import datetime, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

from statiko.core.models import Post
from statiko.core.posts import build_listing_markdown, metadata_path, read_post_metadata


def test_metadata_path_replaces_extension():
    """The sidecar sits next to the source with a .meta.json extension."""
    assert metadata_path(Path("pages-md/blog/20230101-hello.md")) == Path("pages-md/blog/20230101-hello.meta.json")


def test_read_metadata_missing_is_none(tmp_path):
    """No sidecar file means no metadata, not an error."""
    src = tmp_path / "20230101-hello.md"
    src.write_text("# Hello\n")
    assert read_post_metadata(src) is None


def test_read_metadata(tmp_path):
    """posted and edited timestamps are decoded in order."""
    src = tmp_path / "20230101-hello.md"
    (tmp_path / "20230101-hello.meta.json").write_text(
        '{"posted": "2023-01-01T10:00:00Z", "edited": ["2023-01-02T09:00:00Z", "2023-01-03T09:00:00Z"]}'
    )
    meta = read_post_metadata(src)
    assert meta.posted == datetime(2023, 1, 1, 10, 0, tzinfo=timezone.utc)
    assert [d.day for d in meta.edited] == [2, 3]


def test_read_metadata_edited_optional(tmp_path):
    """A sidecar without edit dates has an empty edit list."""
    src = tmp_path / "post.md"
    (tmp_path / "post.meta.json").write_text('{"posted": "2023-01-01T10:00:00+02:00"}')
    assert read_post_metadata(src).edited == []


@pytest.mark.parametrize("content", [
    "{not json",
    '{"edited": []}',
    '{"posted": "yesterday"}',
])
def test_read_metadata_malformed_raises(tmp_path, content):
    """A sidecar that exists but cannot be decoded is an error."""
    src = tmp_path / "post.md"
    (tmp_path / "post.meta.json").write_text(content)
    with pytest.raises(ValidationError):
        read_post_metadata(src)


def test_listing_markdown_exact():
    """Listing is a zero-based numbered list with indented summary sub-items."""
    posts = [
        Post(title="A", url="a.html", summary="sa"),
        Post(title="B", url="b.html", summary="sb"),
    ]
    assert build_listing_markdown(posts) == "0. [A](a.html)\n    - sa\n1. [B](b.html)\n    - sb\n"


def test_listing_markdown_empty():
    """No posts, no listing text."""
    assert build_listing_markdown([]) == ""
