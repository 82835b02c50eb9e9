"""Unit tests for core/paths.py"""

from pathlib import Path

import pytest

from statiko.core.paths import output_path, post_url, relative_root


def test_output_path_nested():
    """Source subdirectories are mirrored and the extension becomes .html."""
    out = output_path(Path("pages-md/blog/20230101-hello.md"), Path("pages-md"), Path("html"))
    assert out == Path("html/blog/20230101-hello.html")


def test_output_path_top_level():
    out = output_path(Path("pages-md/index.md"), Path("pages-md"), Path("html"))
    assert out == Path("html/index.html")


def test_output_path_single_file_source():
    """A source root that is itself a file maps to its own name."""
    out = output_path(Path("notes/about.md"), Path("notes/about.md"), Path("html"))
    assert out == Path("html/about.html")


def test_post_url_is_site_relative():
    """The URL drops the destination root and any leading separator."""
    assert post_url(Path("html/blog/20230101-hello.html"), Path("html")) == "blog/20230101-hello.html"


@pytest.mark.parametrize("out,expected", [
    ("html/index.html",            "."),
    ("html/blog/post.html",        ".."),
    ("html/blog/2023/post.html",   "../.."),
])
def test_relative_root(out, expected):
    """relative_root walks back from the output directory to the destination root."""
    assert relative_root(Path(out), Path("html")) == expected
