from typing import Iterator, Optional, Union

from monkeylex.token import Token, TokenType, new_token, lookup_ident

WHITESPACE = frozenset(b" \t\n\r\x0c")

SINGLE_BYTE_TOKENS = {
    ord("{"): TokenType.Lsquirly,
    ord("}"): TokenType.Rsquirly,
    ord("("): TokenType.Lparen,
    ord(")"): TokenType.Rparen,
    ord(","): TokenType.Comma,
    ord(";"): TokenType.Semicolon,
    ord("+"): TokenType.Plus,
    ord("-"): TokenType.Minus,
    ord("/"): TokenType.Slash,
    ord("*"): TokenType.Asterisk,
}

# first byte -> (token without a trailing "=", token with one)
TWO_BYTE_TOKENS = {
    ord("="): (TokenType.Assign, TokenType.Equal),
    ord("!"): (TokenType.Bang, TokenType.NotEqual),
    ord("<"): (TokenType.LessThan, TokenType.LessThanOrEqual),
    ord(">"): (TokenType.GreaterThan, TokenType.GreaterThanOrEqual),
}


def is_letter(ch: Optional[int]) -> bool:
    return ch is not None and (
        ord("a") <= ch <= ord("z") or ord("A") <= ch <= ord("Z")
    )


def is_digit(ch: Optional[int]) -> bool:
    return ch is not None and ord("0") <= ch <= ord("9")


class Scanner:
    """Turns one input into tokens, one ``next_token`` call at a time.

    ``ch`` is the byte under the cursor, or ``None`` once the cursor has run
    past the end of the input.
    """

    source: bytes
    position: int
    read_position: int
    ch: Optional[int]

    def __init__(
        self, source: Union[str, bytes], extended_identifiers: bool = False
    ) -> None:
        if isinstance(source, str):
            source = source.encode("utf-8")
        elif not isinstance(source, (bytes, bytearray)):
            raise TypeError(
                f"expected str or bytes, got {type(source).__name__}"
            )
        self.source = bytes(source)
        self.extended_identifiers = extended_identifiers
        self.position = 0
        self.read_position = 0
        self.ch = None
        self.read_char()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenType.Eof:
                return

    def read_char(self) -> None:
        if self.read_position >= len(self.source):
            self.ch = None
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> Optional[int]:
        if self.read_position >= len(self.source):
            return None
        return self.source[self.read_position]

    def skip_whitespace(self) -> None:
        while self.ch is not None and self.ch in WHITESPACE:
            self.read_char()

    def next_token(self) -> Token:
        self.skip_whitespace()
        start = self.position
        ch = self.ch
        if ch is None:
            token = new_token(TokenType.Eof, min(start, len(self.source)))
        elif ch in SINGLE_BYTE_TOKENS:
            token = new_token(SINGLE_BYTE_TOKENS[ch], start)
        elif ch in TWO_BYTE_TOKENS:
            single, double = TWO_BYTE_TOKENS[ch]
            if self.peek_char() == ord("="):
                self.read_char()
                token = new_token(double, start)
            else:
                token = new_token(single, start)
        elif is_letter(ch) or ch == ord("_"):
            ident = self.read_identifier()
            kind = lookup_ident(ident)
            if kind == TokenType.Ident:
                return new_token(kind, start, ident)
            return new_token(kind, start)
        elif is_digit(ch):
            return new_token(TokenType.Int, start, self.read_number())
        else:
            token = new_token(TokenType.Illegal, start)
        self.read_char()
        return token

    def read_identifier(self) -> str:
        position = self.position
        # leading byte is a letter or "_"
        self.read_char()
        while is_letter(self.ch) or (
            self.extended_identifiers and (is_digit(self.ch) or self.ch == ord("_"))
        ):
            self.read_char()
        return self.source[position : self.position].decode("ascii")

    def read_number(self) -> str:
        position = self.position
        while is_digit(self.ch):
            self.read_char()
        return self.source[position : self.position].decode("ascii")


def tokenize(source: Union[str, bytes], extended_identifiers: bool = False) -> list[Token]:
    return list(Scanner(source, extended_identifiers))
