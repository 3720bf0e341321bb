from lispish import format_tokens, format_tree, parse, tokenize


def test_format_tokens():
    out = format_tokens(tokenize('(f "x")'))
    assert out.split("\n") == [
        "Literal" + " " * 13 + "\t: (",
        "Identifier" + " " * 10 + "\t: f",
        "String" + " " * 14 + '\t: "x"',
        "Literal" + " " * 13 + "\t: )",
    ]


def test_format_tokens_empty():
    assert format_tokens([]) == ""


def test_format_tree_stray_close():
    lines = format_tree(parse(tokenize(")"))).split("\n")
    assert [line.rstrip() for line in lines[:2]] == ["Program", "  SExpr"]
    assert lines[2] == "    Literal" + " " * 29 + " )"


def test_format_tree_layout():
    lines = format_tree(parse(tokenize("(a)"))).split("\n")
    assert [line.split() for line in lines] == [
        ["Program"],
        ["SExpr"],
        ["List"],
        ["Literal", "("],
        ["Seq"],
        ["SExpr"],
        ["Atom"],
        ["Identifier", "a"],
        ["Literal", ")"],
    ]
    indents = [len(line) - len(line.lstrip()) for line in lines]
    assert indents == [0, 2, 4, 6, 6, 8, 10, 12, 6]
    # Name column is padded to 40 characters before the text
    assert all(len(line) >= 41 for line in lines)


def test_format_tree_prefix():
    lines = format_tree(tokenize("x")[0], prefix="> ").split("\n")
    assert lines == ["> Identifier" + " " * 28 + " x"]
