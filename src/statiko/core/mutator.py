"""In-place document mutation: post date footer"""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode


FOOTER_PREFIX = "Posted: "


def format_post_date(posted: datetime) -> str:
    """Format a timestamp as RFC 1123 text, independent of the process locale.

    UTC renders as GMT, other offsets numerically; naive timestamps are taken as UTC.
    """
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=timezone.utc)
    if posted.utcoffset() == timedelta(0):
        return format_datetime(posted.astimezone(timezone.utc), usegmt=True)
    return format_datetime(posted)


def _footer_tokens(text: str) -> list[Token]:
    """Token stream for a horizontal rule followed by a one-text paragraph."""
    return [
        Token("hr", "hr", 0, markup="---", block=True),
        Token("paragraph_open", "p", 1, block=True),
        Token("inline", "", 0, content=text, children=[Token("text", "", 0, content=text)]),
        Token("paragraph_close", "p", -1, block=True),
    ]


def append_date_footer(tree: SyntaxTreeNode, posted: datetime) -> None:
    """Append an hr and a 'Posted: <date>' paragraph to the top level of tree."""
    footer = SyntaxTreeNode(_footer_tokens(FOOTER_PREFIX + format_post_date(posted)))
    for node in footer.children:
        node.parent = tree
        tree.children.append(node)
