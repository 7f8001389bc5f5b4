from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Illegal = 1
    Eof = 2
    Ident = 3
    Int = 4
    Assign = 5
    Comma = 6
    Semicolon = 7
    Lparen = 8
    Rparen = 9
    Lsquirly = 10
    Rsquirly = 11

    Function = 12
    Let = 13
    True_ = 14
    False_ = 15
    If = 16
    Else = 17
    Return = 18

    Equal = 19
    NotEqual = 20
    LessThan = 21
    LessThanOrEqual = 22
    GreaterThan = 23
    GreaterThanOrEqual = 24
    Bang = 25
    Minus = 26
    Slash = 27
    Asterisk = 28
    Plus = 29

    @property
    def label(self) -> str:
        return self.name.rstrip("_")


KEYWORDS = {
    "fn": TokenType.Function,
    "let": TokenType.Let,
    "true": TokenType.True_,
    "false": TokenType.False_,
    "if": TokenType.If,
    "else": TokenType.Else,
    "return": TokenType.Return,
}


@dataclass(frozen=True)
class Token:
    kind: TokenType
    literal: Optional[str] = None
    location: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.literal is None:
            return self.kind.label
        return f'{self.kind.label}("{self.literal}")'


def new_token(token_type: TokenType, start: int = 0, literal: Optional[str] = None) -> Token:
    return Token(token_type, literal, start)


def lookup_ident(ident: str) -> TokenType:
    return KEYWORDS.get(ident, TokenType.Ident)
