import pytest

from proplogic.errors import LexError
from proplogic.lexer import (
    DEFAULT_RULES,
    Lexer,
    TokenKind,
    Tokenlib,
    tokenize,
)


def kinds(string, rules=None):
    return [t.kind for t in tokenize(string, rules)]


def test_every_token_kind():
    assert kinds("p := 1\n~p v (q <=> 0) => r ^ 1") == [
        TokenKind.IDENT,
        TokenKind.ASSIGN,
        TokenKind.LITERAL_1,
        TokenKind.NEWLINE,
        TokenKind.NOT,
        TokenKind.IDENT,
        TokenKind.OR,
        TokenKind.LPAREN,
        TokenKind.IDENT,
        TokenKind.IFF,
        TokenKind.LITERAL_0,
        TokenKind.RPAREN,
        TokenKind.IMPLIES,
        TokenKind.IDENT,
        TokenKind.AND,
        TokenKind.LITERAL_1,
        TokenKind.EOF,
    ]


def test_positions():
    tokens = list(tokenize("1 ^ 0"))

    assert [(t.value, t.start, t.end) for t in tokens] == [
        ("1", 0, 1),
        ("^", 2, 3),
        ("0", 4, 5),
        ("", 5, 5),
    ]


def test_v_is_only_or_when_alone():
    tokens = list(tokenize("vx v xv"))

    assert [t.kind for t in tokens] == [
        TokenKind.IDENT,
        TokenKind.OR,
        TokenKind.IDENT,
        TokenKind.EOF,
    ]
    assert tokens[0].value == "vx"
    assert tokens[2].value == "xv"


def test_identifiers_are_maximal_alphabetic_runs():
    tokens = list(tokenize("Alpha beta"))

    assert [t.value for t in tokens[:2]] == ["Alpha", "beta"]


def test_blank_lines_collapse_into_one_newline():
    assert kinds("p := 1\n\n   \nq") == [
        TokenKind.IDENT,
        TokenKind.ASSIGN,
        TokenKind.LITERAL_1,
        TokenKind.NEWLINE,
        TokenKind.IDENT,
        TokenKind.EOF,
    ]


def test_empty_input_is_just_eof():
    assert kinds("") == [TokenKind.EOF]
    assert kinds("   \t") == [TokenKind.EOF]


@pytest.mark.parametrize(
    "string, position, char",
    [
        ("1 & 0", 2, "&"),
        ("p := 2", 5, "2"),
        ("a < b", 2, "<"),
        ("p : 1", 2, ":"),
        ("p_q", 1, "_"),
    ],
)
def test_unexpected_character(string, position, char):
    with pytest.raises(LexError) as exc:
        list(tokenize(string))

    assert exc.value.position == position
    assert exc.value.unexpected_char == char
    assert str(exc.value).startswith(f"@[{position}]")


def test_tokens_are_produced_lazily():
    tokens = tokenize("1 ^ 0 $")

    assert next(tokens).kind == TokenKind.LITERAL_1
    assert next(tokens).kind == TokenKind.AND

    with pytest.raises(LexError):
        list(tokens)


def test_tokenize_restarts_on_every_call():
    lexer = Lexer()

    assert list(lexer.tokenize("~(p v 1)")) == list(lexer.tokenize("~(p v 1)"))


def test_tokens_are_immutable():
    token = next(tokenize("p"))

    with pytest.raises(AttributeError):
        token.value = "q"


def test_rules_are_configurable():
    rules = Tokenlib.load(Tokenlib.base, Tokenlib.logical)

    assert len(rules) == len(DEFAULT_RULES) - 1
    with pytest.raises(LexError) as exc:
        kinds("p := 1", rules)
    assert exc.value.position == 2


def test_lexer_rejects_non_token_rules():
    with pytest.raises(TypeError):
        Lexer([str])
