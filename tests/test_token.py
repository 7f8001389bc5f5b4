import dataclasses

import pytest

from monkeylex.token import KEYWORDS, Token, TokenType, lookup_ident


@pytest.mark.parametrize(
    ("ident", "expected"),
    [
        ("fn", TokenType.Function),
        ("let", TokenType.Let),
        ("true", TokenType.True_),
        ("false", TokenType.False_),
        ("if", TokenType.If),
        ("else", TokenType.Else),
        ("return", TokenType.Return),
        ("five", TokenType.Ident),
        ("Let", TokenType.Ident),
        ("function", TokenType.Ident),
        ("lets", TokenType.Ident),
    ],
)
def test_lookup_ident(ident: str, expected: TokenType) -> None:
    """Only the exact spelling of a keyword maps to its token type"""
    assert lookup_ident(ident) == expected


def test_keyword_table() -> None:
    assert set(KEYWORDS) == {"fn", "let", "true", "false", "if", "else", "return"}
    assert len(set(KEYWORDS.values())) == len(KEYWORDS)


@pytest.mark.parametrize(
    ("token", "rendered"),
    [
        (Token(TokenType.Let), "Let"),
        (Token(TokenType.True_), "True"),
        (Token(TokenType.False_), "False"),
        (Token(TokenType.Ident, "five"), 'Ident("five")'),
        (Token(TokenType.Int, "10"), 'Int("10")'),
        (Token(TokenType.GreaterThanOrEqual), "GreaterThanOrEqual"),
        (Token(TokenType.Illegal), "Illegal"),
        (Token(TokenType.Eof), "Eof"),
    ],
)
def test_str(token: Token, rendered: str) -> None:
    assert str(token) == rendered


def test_location_is_ignored_by_equality() -> None:
    assert Token(TokenType.Ident, "x", 0) == Token(TokenType.Ident, "x", 7)
    assert Token(TokenType.Ident, "x") != Token(TokenType.Ident, "y")
    assert Token(TokenType.Int, "1") != Token(TokenType.Ident, "1")


def test_token_is_immutable() -> None:
    token = Token(TokenType.Ident, "five")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.literal = "six"
