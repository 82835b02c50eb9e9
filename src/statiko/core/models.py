"""Data models for the render pipeline"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class PostMetadata(BaseModel):
    """Sidecar metadata stored next to a post as <name>.meta.json."""
    posted: datetime
    edited: list[datetime] = []


@dataclass
class Post:
    """Listing entry derived from a rendered post; read-only once collected."""
    title:    str
    summary:  str
    url:      str                       # site-relative, POSIX separators
    metadata: Optional[PostMetadata] = None


@dataclass
class TemplateData:
    """Fields exposed to the page template; all are inserted verbatim."""
    site_name: str
    body:      str = ""
    rel_root:  str = "."


@dataclass
class RenderResult:
    """Outcome of a full render run."""
    pages:   list[tuple[Path, Path]] = field(default_factory=list)   # (source, output) in discovery order
    posts:   list[Post] = field(default_factory=list)
    listing: Optional[Path] = None
