"""CLI: python -m lispish [source.lisp]

Reads the program from the given file, or from stdin when no file (or
"-") is given, then prints its tokens and parse tree.
"""

import logging
import os
import sys
from pathlib import Path

from .checker import check
from .printer import format_tokens, format_tree, rule

USAGE = "Usage: python -m lispish [source.lisp]"


def render(source: str) -> tuple[str, bool]:
    """Build the report for one program. Returns (text, ok)."""
    out = [rule("="), f"Input: {source}", rule()]
    result = check(source)
    if not result["ok"]:
        out.append("Threw an exception on invalid input.")
        return "\n".join(out), False

    out += ["Tokens", rule(), format_tokens(result["tokens"]), rule()]
    out += ["Parse Tree", rule(), format_tree(result["tree"]), rule()]
    return "\n".join(out), True


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("LISPISH_DEBUG") else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    if not args or args[0] == "-":
        source = sys.stdin.read()
    else:
        path = Path(args[0])
        if not path.is_file():
            print(f"{USAGE}\nno such file: {path}", file=sys.stderr)
            sys.exit(1)
        source = path.read_text()

    report, ok = render(source)
    print(report)
    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
