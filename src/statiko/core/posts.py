"""Post sidecar metadata and the aggregate listing page source"""

from pathlib import Path

from statiko.core.models import Post, PostMetadata


METADATA_SUFFIX = ".meta.json"
LISTING_NAME = "posts.html"


def metadata_path(source: Path) -> Path:
    """Sidecar path for a source file: same stem, .meta.json extension."""
    source = Path(source)
    return source.with_name(source.stem + METADATA_SUFFIX)


def read_post_metadata(source: Path) -> PostMetadata | None:
    """Load the sidecar metadata for source, or None when there is no sidecar.

    A sidecar that exists but is not valid metadata JSON raises
    pydantic.ValidationError.
    """
    path = metadata_path(source)
    if not path.exists():
        return None
    return PostMetadata.model_validate_json(path.read_bytes())


def build_listing_markdown(posts: list[Post]) -> str:
    """Markdown for the listing page: a zero-based ordered list with summaries as sub-items."""
    return "".join(
        f"{idx}. [{p.title}]({p.url})\n    - {p.summary}\n"
        for idx, p in enumerate(posts)
    )
