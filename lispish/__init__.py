from .lexer import tokenize, LexError
from .parser import parse, ParseError
from .checker import check
from .printer import format_tokens, format_tree
from .types import Category, LispishError, Node, ParseOptions, Token, Tree, iter_leaves

__all__ = [
    "tokenize", "parse", "check", "format_tokens", "format_tree", "iter_leaves",
    "Category", "Node", "Token", "Tree", "ParseOptions",
    "LispishError", "LexError", "ParseError",
]
