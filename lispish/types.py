"""Node, category and option types shared by the lexer and the parser."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

# No cap on List nesting unless a caller asks for one
DEFAULT_MAX_DEPTH: Optional[int] = None


class Category(Enum):
    # Token categories, produced by the lexer
    REAL = "Real"
    IDENTIFIER = "Identifier"
    INTEGER = "Integer"
    STRING = "String"
    LITERAL = "Literal"
    # Grammar categories, produced by the parser
    PROGRAM = "Program"
    SEXPR = "SExpr"
    LIST = "List"
    SEQ = "Seq"
    ATOM = "Atom"

    @property
    def is_token(self) -> bool:
        return self in TOKEN_CATEGORIES


TOKEN_CATEGORIES = frozenset({
    Category.REAL,
    Category.IDENTIFIER,
    Category.INTEGER,
    Category.STRING,
    Category.LITERAL,
})

# Categories an Atom may wrap
ATOM_CATEGORIES = frozenset({
    Category.IDENTIFIER,
    Category.INTEGER,
    Category.REAL,
    Category.STRING,
})


class LispishError(SyntaxError):
    """Base class for lexer and parser failures."""


@dataclass(frozen=True)
class Token:
    """Leaf node: a lexical category plus the exact source text."""

    category: Category
    text: str

    @property
    def children(self) -> tuple:
        return ()

    @property
    def is_token(self) -> bool:
        return True


@dataclass(frozen=True)
class Tree:
    """Interior node: a grammar category plus its ordered children."""

    category: Category
    children: tuple["Node", ...] = ()

    @property
    def text(self) -> str:
        return ""

    @property
    def is_token(self) -> bool:
        return False


Node = Union[Token, Tree]


def iter_leaves(node: Node) -> Iterator[Token]:
    """Yield the leaves of a tree left to right."""
    # Seq chains nest once per list element, so walk with an explicit stack
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Token):
            yield current
        else:
            stack.extend(reversed(current.children))


@dataclass
class ParseOptions:
    check_close: bool = False
    flat_seq: bool = False
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH

    @classmethod
    def coerce(cls, options: Union["ParseOptions", dict, None]) -> "ParseOptions":
        """Accept a ParseOptions, a plain dict of the same keys, or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, dict):
            max_depth = options.get("max_depth", DEFAULT_MAX_DEPTH)
            return cls(
                check_close=bool(options.get("check_close", False)),
                flat_seq=bool(options.get("flat_seq", False)),
                max_depth=int(max_depth) if max_depth is not None else None,
            )
        raise TypeError(f"unsupported options type: {type(options).__name__}")
