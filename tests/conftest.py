"""Root test configuration: environment isolation and a throwaway site layout"""

import os
from pathlib import Path

import pytest


TEMPLATE_HTML = """\
<html><head><title>{{ site_name }}</title>
<link rel="stylesheet" href="{{ rel_root }}/res/style.css"></head>
<body>
{{ body }}</body></html>
"""


@pytest.fixture(autouse=True)
def clear_statiko_env(monkeypatch):
    """Keep STATIKO_* variables from the developer's shell out of config loading."""
    for name in list(os.environ):
        if name.startswith("STATIKO_"):
            monkeypatch.delenv(name)


@pytest.fixture(name="site")
def site_fixture(tmp_path, monkeypatch) -> Path:
    """Default site layout (pages-md/, templates/, res/) with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pages-md").mkdir()
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "template.html").write_text(TEMPLATE_HTML)
    (tmp_path / "res").mkdir()
    (tmp_path / "res" / "style.css").write_text("body { margin: 0; }\n")
    return tmp_path
