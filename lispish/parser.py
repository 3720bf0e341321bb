"""Recursive-descent parser for lispish token streams.

Grammar:

    Program ::= { SExpr }
    SExpr   ::= Atom | List
    List    ::= "(" ")" | "(" Seq ")"
    Seq     ::= SExpr Seq | SExpr
    Atom    ::= Identifier | Integer | Real | String
"""

import logging
from typing import Sequence, Union

from .types import (
    ATOM_CATEGORIES,
    Category,
    LispishError,
    Node,
    ParseOptions,
    Token,
    Tree,
)

logger = logging.getLogger(__name__)


class ParseError(LispishError):
    pass


def _fail(reason: str) -> ParseError:
    logger.debug("parse failed: %s", reason)
    return ParseError(reason)


def _is_literal(tok: Node, text: str) -> bool:
    return tok.category is Category.LITERAL and tok.text == text


def _ends_seq(tok: Node) -> bool:
    # Stops a Seq body; a ")" text stops it whatever the category
    return tok.category is Category.LITERAL or tok.text == ")"


class _Cursor:
    __slots__ = ("tokens", "index")

    def __init__(self, tokens: Sequence[Node]):
        self.tokens = tokens
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def peek(self) -> Node:
        if self.at_end():
            raise _fail("unexpected end of input")
        return self.tokens[self.index]

    def advance(self) -> Node:
        tok = self.peek()
        self.index += 1
        return tok

    def at_close(self) -> bool:
        """True when the current token is a ")" literal; False once exhausted."""
        return not self.at_end() and _is_literal(self.tokens[self.index], ")")


class _Parser:
    def __init__(self, tokens: Sequence[Node], options: ParseOptions):
        self.cur = _Cursor(tokens)
        self.options = options
        self.depth = 0

    # Program ::= { SExpr }
    def parse_program(self) -> Tree:
        children: list[Node] = []
        while not self.cur.at_end():
            children.append(self.parse_sexpr())
        return Tree(Category.PROGRAM, tuple(children))

    # SExpr ::= Atom | List
    def parse_sexpr(self) -> Tree:
        if _is_literal(self.cur.peek(), "("):
            child = self.parse_list()
        else:
            child = self.parse_atom()
        return Tree(Category.SEXPR, (child,))

    # List ::= "(" ")" | "(" Seq ")"
    def parse_list(self) -> Tree:
        if not _is_literal(self.cur.peek(), "("):
            raise _fail("expected '('")
        self.depth += 1
        max_depth = self.options.max_depth
        if max_depth is not None and self.depth > max_depth:
            raise _fail("max nesting depth exceeded")
        try:
            opener = self.cur.advance()
            if self.options.flat_seq and self.cur.at_close():
                children = (opener, self._close())
            else:
                body = self.parse_seq()
                children = (opener, body, self._close())
        finally:
            self.depth -= 1
        return Tree(Category.LIST, children)

    def _close(self) -> Node:
        # Whatever token follows the body closes the list unless check_close is set
        tok = self.cur.advance()
        if self.options.check_close and not _is_literal(tok, ")"):
            raise _fail("expected ')'")
        return tok

    def _parse_flat_seq(self) -> Tree:
        items = [self.parse_sexpr()]
        # Running out of tokens does not stop the loop; the next parse_sexpr() fails
        while not self.cur.at_close():
            items.append(self.parse_sexpr())
        return Tree(Category.SEQ, tuple(items))

    # Seq ::= SExpr Seq | SExpr
    def parse_seq(self) -> Tree:
        """Build the nested Seq chain for a list body.

        Each Seq takes one SExpr. If the next token is not a literal it
        takes a nested Seq for what follows, and if that nested Seq stops
        on a "(" it takes one more Seq starting there. A Seq is complete
        once the cursor sits on a literal, so a body can stop on a "("
        right after its first expression or after a nested list, and the
        enclosing List then takes that "(" as its closing token.

        Pending Seqs are kept on an explicit stack so that a long run of
        atoms does not recurse once per element.
        """
        if self.options.flat_seq:
            return self._parse_flat_seq()
        pending: list[list[Node]] = []
        current = [self.parse_sexpr()]
        while True:
            if not _ends_seq(self.cur.peek()):
                pending.append(current)
                current = [self.parse_sexpr()]
                continue
            done = Tree(Category.SEQ, tuple(current))
            while pending:
                parent = pending.pop()
                parent.append(done)
                # Only a Seq whose nested Seq just finished gets the extra one
                if len(parent) == 2 and _is_literal(self.cur.peek(), "("):
                    pending.append(parent)
                    current = [self.parse_sexpr()]
                    break
                done = Tree(Category.SEQ, tuple(parent))
            else:
                return done

    # Atom ::= Identifier | Integer | Real | String
    def parse_atom(self) -> Node:
        tok = self.cur.peek()
        if tok.category in ATOM_CATEGORIES:
            return Tree(Category.ATOM, (self.cur.advance(),))
        if _is_literal(tok, ")"):
            # A stray ")" in atom position is kept as a bare Literal
            return Token(Category.LITERAL, self.cur.advance().text)
        raise _fail("expected atom")


def parse(tokens: Sequence[Node], options: Union[ParseOptions, dict, None] = None) -> Tree:
    """Parse a token sequence into a tree rooted at a Program node.

    Raises:
        ParseError: on the first token that does not fit the grammar, or
            when the tokens run out mid-expression, or when Lists nest
            past max_depth or past what the interpreter stack allows. No
            partial tree is returned.
    """
    opts = ParseOptions.coerce(options)
    try:
        tree = _Parser(tokens, opts).parse_program()
    except RecursionError:
        raise _fail("max nesting depth exceeded") from None
    logger.debug("parsed %d top-level expressions", len(tree.children))
    return tree
