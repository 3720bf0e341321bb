"""Plain-text dumps of token lists and parse trees."""

from typing import Iterable

from .types import Node

RULE_WIDTH = 50


def format_tokens(tokens: Iterable[Node]) -> str:
    return "\n".join(f"{tok.category.value:<20}\t: {tok.text}" for tok in tokens)


def format_tree(node: Node, prefix: str = "") -> str:
    """Render a tree one node per line, children indented two spaces.

    Each line is the indentation plus the category name padded to 40
    columns, then the node's text (empty for grammar nodes).
    """
    lines = []
    stack = [(node, prefix)]
    while stack:
        current, indent = stack.pop()
        lines.append(f"{indent + current.category.value:<40} {current.text}")
        for child in reversed(current.children):
            stack.append((child, indent + "  "))
    return "\n".join(lines)


def rule(char: str = "-") -> str:
    return char * RULE_WIDTH
