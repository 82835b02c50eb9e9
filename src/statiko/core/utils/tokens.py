"""Heading helpers shared by markdown-it tokens and syntax tree nodes"""


HEADING_TYPES = {'heading_open', 'heading'}


def heading_level(item) -> int | None:
    """Return the level (1-6) of a heading_open token or heading tree node, else None."""
    if item.type in HEADING_TYPES and item.tag[:1] == 'h' and item.tag[1:].isdigit():
        return int(item.tag[1:])
    return None
