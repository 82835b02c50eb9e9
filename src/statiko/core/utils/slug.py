"""Slug generation for heading anchors"""

import re


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def unique_slug(text: str, seen: dict[str, int]) -> str:
    """Slugify text, suffixing -1, -2, ... until the result is not in seen.

    Generated ids are recorded too, so a heading whose own slug matches an
    earlier suffixed id is suffixed in turn.

    seen is updated in place and should be scoped to a single document.
    Returns '' when text has no slug-able characters.
    """
    slug = slugify(text)
    if not slug:
        return slug
    candidate = slug
    while candidate in seen:
        seen[slug] += 1
        candidate = f"{slug}-{seen[slug]}"
    seen[candidate] = 0
    return candidate
