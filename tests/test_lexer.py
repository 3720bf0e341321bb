import logging

import pytest
from lispish.lexer import LexError, tokenize
from lispish.types import Category, LispishError, Token


def cats(src):
    return [t.category for t in tokenize(src)]


def texts(src):
    return [t.text for t in tokenize(src)]


def test_real():
    assert tokenize("3.14") == [Token(Category.REAL, "3.14")]


def test_integer():
    assert tokenize("42") == [Token(Category.INTEGER, "42")]


def test_plus_is_identifier():
    assert tokenize("+") == [Token(Category.IDENTIFIER, "+")]


def test_minus_is_identifier():
    assert tokenize("-") == [Token(Category.IDENTIFIER, "-")]


def test_signed_numbers():
    assert tokenize("-7 +7 -.5 +0.25") == [
        Token(Category.INTEGER, "-7"),
        Token(Category.INTEGER, "+7"),
        Token(Category.REAL, "-.5"),
        Token(Category.REAL, "+0.25"),
    ]


def test_real_needs_digit_after_point():
    assert tokenize("5.") == [
        Token(Category.INTEGER, "5"),
        Token(Category.IDENTIFIER, "."),
    ]


def test_priority_beats_longest_match():
    # Integer wins at position 0 even though Identifier would take all six chars
    assert tokenize("123abc") == [
        Token(Category.INTEGER, "123"),
        Token(Category.IDENTIFIER, "abc"),
    ]


def test_repeated_points_split_into_reals():
    assert texts("1.2.3") == ["1.2", ".3"]
    assert cats("1.2.3") == [Category.REAL, Category.REAL]


def test_identifier_keeps_digits_after_letters():
    assert tokenize("abc123") == [Token(Category.IDENTIFIER, "abc123")]


def test_parens_are_literals():
    assert cats("(foo)") == [Category.LITERAL, Category.IDENTIFIER, Category.LITERAL]
    assert texts("(foo)") == ["(", "foo", ")"]


def test_parens_split_identifiers():
    assert texts("a(b)c") == ["a", "(", "b", ")", "c"]


def test_string_keeps_quotes_and_escapes():
    src = r'"say \"hi\" \\ now"'
    assert tokenize(src) == [Token(Category.STRING, src)]


def test_string_with_spaces_and_parens():
    assert tokenize('"( a b )"') == [Token(Category.STRING, '"( a b )"')]


def test_empty_string():
    assert tokenize('""') == [Token(Category.STRING, '""')]


def test_identifier_then_string():
    assert tokenize('a"b"') == [
        Token(Category.IDENTIFIER, "a"),
        Token(Category.STRING, '"b"'),
    ]


def test_whitespace_only():
    assert tokenize("  \n\t \r\n") == []


def test_empty_source():
    assert tokenize("") == []


def test_expression():
    assert tokenize("(+ 3.14 (* 4 7))") == [
        Token(Category.LITERAL, "("),
        Token(Category.IDENTIFIER, "+"),
        Token(Category.REAL, "3.14"),
        Token(Category.LITERAL, "("),
        Token(Category.IDENTIFIER, "*"),
        Token(Category.INTEGER, "4"),
        Token(Category.INTEGER, "7"),
        Token(Category.LITERAL, ")"),
        Token(Category.LITERAL, ")"),
    ]


def test_tokens_are_leaves():
    tok = tokenize("x")[0]
    assert tok.is_token
    assert tok.children == ()
    assert tok.category.is_token


def test_unterminated_string():
    with pytest.raises(LexError, match="lexer error"):
        tokenize('"abc')


def test_unterminated_string_after_tokens():
    with pytest.raises(LexError):
        tokenize('(concat "abc)')


def test_escaped_closing_quote_is_not_a_terminator():
    with pytest.raises(LexError):
        tokenize(r'"abc\"')


def test_lex_error_is_syntax_error():
    with pytest.raises(SyntaxError):
        tokenize('"')
    with pytest.raises(LispishError):
        tokenize('"')


def test_logs_token_count(caplog):
    with caplog.at_level(logging.DEBUG, logger="lispish.lexer"):
        tokenize("(a b)")
    assert "tokenized 4 tokens" in caplog.text
