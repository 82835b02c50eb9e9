"""Read-only document inspection: post title and summary extraction"""

from markdown_it.tree import SyntaxTreeNode

from statiko.core.utils.tokens import heading_level


# soft breaks stay part of the text run; hard breaks carry no literal
BREAK_LITERALS = {'softbreak': "\n", 'hardbreak': ""}


def _leaf_literal(node: SyntaxTreeNode) -> str:
    """Literal text carried by a leaf node."""
    if node.type in BREAK_LITERALS:
        return BREAK_LITERALS[node.type]
    return node.content


def child_literals(node: SyntaxTreeNode) -> str:
    """Concatenate the literal text of every leaf under node, in child order."""
    return "".join(
        child_literals(child) if child.children else _leaf_literal(child)
        for child in node.children
    )


def extract_post_fields(tree: SyntaxTreeNode) -> tuple[str, str]:
    """Return (title, summary) from a single pre-order walk of tree.

    The title is the text of the first level-1 heading; later ones are ignored.
    The summary is the text of the first paragraph anywhere in the tree (list
    items and blockquotes included), and finding it ends the walk whether or
    not a title has been seen yet.
    """
    title = summary = ""
    for node in tree.walk():
        if node.type == 'heading':
            if heading_level(node) == 1 and not title:
                title = child_literals(node)
        elif node.type == 'paragraph':
            summary = child_literals(node)
            break
    return title, summary
