"""Top-level check API: tokenize and parse without raising."""

import logging
from typing import Any, Optional, Union

from .lexer import LexError, tokenize
from .parser import ParseError, parse
from .types import ParseOptions

logger = logging.getLogger(__name__)


def check(source: str, options: Union[ParseOptions, dict, None] = None) -> dict[str, Any]:
    """Tokenize and parse source text, reporting the first failure.

    Args:
        source: Program text, already read into memory
        options: ParseOptions, or a dict with keys check_close, flat_seq,
                 max_depth

    Returns:
        {"ok": bool, "tokens": list, "tree": Tree | None, "error": str | None}
        On a parse failure "tokens" still holds the lexer output.
    """
    try:
        tokens = tokenize(source)
    except LexError as e:
        logger.debug("rejected during lexing: %s", e)
        return _result(False, error=f"lex error: {e}")

    try:
        tree = parse(tokens, options)
    except ParseError as e:
        logger.debug("rejected during parsing: %s", e)
        return _result(False, tokens=tokens, error=f"parse error: {e}")

    return _result(True, tokens=tokens, tree=tree)


def _result(ok: bool, tokens: Optional[list] = None, tree: Any = None, error: Optional[str] = None) -> dict[str, Any]:
    return {"ok": ok, "tokens": tokens or [], "tree": tree, "error": error}
