"""Render pipeline: discovery, per-page rendering, post listing, and resource copying"""

import re
import shutil
from pathlib import Path

from jinja2 import Template

from statiko.config import Settings
from statiko.core import markdown
from statiko.core.inspector import extract_post_fields
from statiko.core.models import Post, RenderResult, TemplateData
from statiko.core.mutator import append_date_footer
from statiko.core.paths import output_path, post_url, relative_root
from statiko.core.posts import LISTING_NAME, build_listing_markdown, read_post_metadata
from statiko.core.template import load_template, render_page


MD_SUFFIX = '.md'
SITE_DIRS = ('images', 'res')


def discover_files(path: Path) -> list[Path]:
    """Return .md files under path in lexical walk order, or [path] if a single file."""
    path = Path(path)
    if path.is_file():
        return [path] if path.suffix == MD_SUFFIX else []
    if not path.is_dir():
        raise FileNotFoundError(f"Source path not found: {path}")
    return sorted((p for p in path.rglob('*') if p.suffix == MD_SUFFIX and p.is_file()), key=lambda p: p.parts)


def is_post(source: Path, pattern: re.Pattern) -> bool:
    """True when pattern matches anywhere in the source path."""
    return pattern.search(Path(source).as_posix()) is not None


def _write_page(template: Template, data: TemplateData, outpath: Path) -> None:
    outpath.parent.mkdir(parents=True, exist_ok=True)
    outpath.write_text(render_page(template, data), encoding='utf-8')


def render_file(
    source: Path,
    settings: Settings,
    template: Template,
    pattern: re.Pattern,
    ) -> tuple[Path, Post | None]:
    """Render one markdown file to its destination page.

    Returns (output_path, post) where post is None for pages that do not
    match the post pattern.
    """
    dest_root = Path(settings.destination_path)
    outpath = output_path(source, Path(settings.source_path), dest_root)
    tree = markdown.parse(source.read_bytes())

    post = None
    if is_post(source, pattern):
        # inspect before the footer is appended
        title, summary = extract_post_fields(tree)
        post = Post(
            title=title,
            summary=summary,
            url=post_url(outpath, dest_root),
            metadata=read_post_metadata(source),
        )
        if post.metadata is not None:
            append_date_footer(tree, post.metadata.posted)

    data = TemplateData(
        site_name=settings.site_name,
        body=markdown.render(tree),
        rel_root=relative_root(outpath, dest_root),
    )
    _write_page(template, data, outpath)
    return outpath, post


def render_listing(posts: list[Post], settings: Settings, template: Template) -> Path:
    """Write the posts.html listing page at the destination root."""
    outpath = Path(settings.destination_path) / LISTING_NAME
    tree = markdown.parse(build_listing_markdown(posts))
    data = TemplateData(site_name=settings.site_name, body=markdown.render(tree), rel_root='.')
    _write_page(template, data, outpath)
    return outpath


def run_render(settings: Settings) -> RenderResult:
    """Render every page under the source path, then the post listing if any posts exist.

    Any failure aborts the run; per-file failures are re-raised as
    RuntimeError naming the source file.
    """
    template = load_template(Path(settings.page_template_file))
    pattern = re.compile(settings.post_pattern)
    result = RenderResult()

    for source in discover_files(Path(settings.source_path)):
        try:
            outpath, post = render_file(source, settings, template, pattern)
        except Exception as e:
            raise RuntimeError(f"Failed to render {source}: {e}") from e
        result.pages.append((source, outpath))
        if post is not None:
            result.posts.append(post)

    if result.posts:
        result.listing = render_listing(result.posts, settings, template)
    return result


def create_dirs(settings: Settings) -> list[Path]:
    """Create the destination root and its fixed subdirectories."""
    dest_root = Path(settings.destination_path)
    dirs = [dest_root, *(dest_root / name for name in SITE_DIRS)]
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)
    return dirs


def copy_resources(settings: Settings) -> list[tuple[Path, Path]]:
    """Copy the resource tree to <destination>/<resource dir name>/. Returns (src, dst) file pairs."""
    res_root = Path(settings.resource_path)
    if not res_root.is_dir():
        raise FileNotFoundError(f"Resource path not found: {res_root}")
    dest_root = Path(settings.destination_path) / res_root.resolve().name
    copied = []
    for src in sorted(res_root.rglob('*'), key=lambda p: p.parts):
        dst = dest_root / src.relative_to(res_root)
        if src.is_dir():
            dst.mkdir(parents=True, exist_ok=True)
        elif src.is_file():
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dst)
            copied.append((src, dst))
    return copied
