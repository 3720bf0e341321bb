"""Tokenizer for lispish source text.

Patterns are tried in a fixed priority order at the current scan offset
and the first one that matches wins, even when a later pattern would match
a longer span. That ordering is what makes a lone ``+`` an Identifier:
the Identifier class only excludes whitespace, quotes and parentheses, so
the Literal pattern below it only ever sees ``(`` and ``)``.
"""

import logging
import re

from .types import Category, LispishError, Token

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s")

# (category, pattern) in match priority order
PATTERNS: tuple[tuple[Category, "re.Pattern[str]"], ...] = (
    (Category.REAL, re.compile(r"[+-]?[0-9]*\.[0-9]+")),
    (Category.INTEGER, re.compile(r"[+-]?[0-9]+")),
    (Category.STRING, re.compile(r'"(?:\\.|[^\\"])*"')),
    (Category.IDENTIFIER, re.compile(r'[^\s"()]+')),
    (Category.LITERAL, re.compile(r"[()+-]")),
)


class LexError(LispishError):
    pass


def _match_at(src: str, pos: int) -> Token:
    for category, pattern in PATTERNS:
        m = pattern.match(src, pos)
        if m:
            return Token(category, m.group())
    logger.debug("no token pattern matches")
    raise LexError("lexer error")


def tokenize(src: str) -> list[Token]:
    """Split source text into classified tokens.

    Raises:
        LexError: when no pattern matches at some position. No partial
            token list is returned.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(src):
        if WHITESPACE.match(src, pos):
            pos += 1
            continue
        tok = _match_at(src, pos)
        tokens.append(tok)
        pos += len(tok.text)
    logger.debug("tokenized %d tokens", len(tokens))
    return tokens
