"""Source-to-destination path derivation"""

import os
from pathlib import Path


HTML_SUFFIX = ".html"


def output_path(source: Path, source_root: Path, destination_root: Path) -> Path:
    """Mirror source under destination_root with an .html extension.

    pages-md/blog/20230101-hello.md -> html/blog/20230101-hello.html
    """
    source = Path(source)
    rel = source.relative_to(source_root) if source != Path(source_root) else Path(source.name)
    return Path(destination_root) / rel.with_suffix(HTML_SUFFIX)


def post_url(output: Path, destination_root: Path) -> str:
    """Site-relative URL of an output file, always with forward slashes."""
    return Path(output).relative_to(destination_root).as_posix()


def relative_root(output: Path, destination_root: Path) -> str:
    """Relative path from the output file's directory back to destination_root."""
    return Path(os.path.relpath(destination_root, Path(output).parent)).as_posix()
