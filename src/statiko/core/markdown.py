"""markdown-it adapters: per-call parser construction, tree building, and HTML rendering"""

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.tree import SyntaxTreeNode

from statiko.core.utils.slug import unique_slug
from statiko.core.utils.tokens import heading_level


PRESET = "gfm-like"


def _heading_text(inline) -> str:
    """Plain text of a heading's inline token (text and code spans only)."""
    return "".join(c.content for c in inline.children or [] if c.type in ("text", "code_inline"))


def _heading_ids(state: StateCore) -> None:
    """Core rule: give every heading a stable slug id, unique within the document."""
    seen: dict[str, int] = {}
    tokens = state.tokens
    for i, tok in enumerate(tokens[:-1]):
        if heading_level(tok) is None:
            continue
        slug = unique_slug(_heading_text(tokens[i + 1]), seen)
        if slug:
            tok.attrSet("id", slug)


def make_parser() -> MarkdownIt:
    """Build a new MarkdownIt instance; never share one between documents."""
    md = MarkdownIt(PRESET, options_update={"linkify": False})
    md.core.ruler.push("heading_ids", _heading_ids)
    return md


def parse(source: bytes | str) -> SyntaxTreeNode:
    """Parse markdown into a document tree. Undecodable bytes are replaced, never rejected."""
    if isinstance(source, bytes):
        source = source.decode("utf-8", errors="replace")
    return SyntaxTreeNode(make_parser().parse(source))


def render(tree: SyntaxTreeNode) -> str:
    """Serialize a document tree to an HTML fragment."""
    md = make_parser()
    return md.renderer.render(tree.to_tokens(), md.options, {})
