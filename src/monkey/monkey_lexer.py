"""
Lexical analyzer for the Monkey programming language.

The lexer walks the source one character at a time and hands out tokens on
demand; the parser pulls them one by one and never needs the full list.

Classes:
    Lexer: Converts a source string into a forward-only stream of Token objects.

Features:
    - Skips whitespace
    - Two-character lookahead for `==` and `!=`
    - Recognizes:
        * Identifiers and keywords (letters only, Unicode aware)
        * Integer literals (ASCII digit runs)
        * Operators and delimiters
    - Unknown characters become ILLEGAL tokens instead of raising

Example:
    >>> lexer = Lexer("let five = 5;")
    >>> lexer.next_token()
    Token(LET, 'let')
    >>> [tok.value for tok in Lexer("a + b")]
    ['a', '+', 'b']

Exports:
    - Lexer
    - Token
    - TokenType
    - tokenize
"""

from collections.abc import Iterator

from monkey.monkey_constants import SINGLE_CHAR_TOKENS, TokenType
from monkey.monkey_token import Token, lookup_ident


def is_letter(ch: str) -> bool:
    return ch.isalpha()


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Single-pass scanner over one source string.

    Attributes:
        source (str): The input text.
        position (int): Index of `ch` in `source`.
        read_position (int): Index of the next character to read.
        ch (str | None): The character under examination, None at end of input.
        line (int): 1-based line of `ch`.
        column (int): 1-based column of `ch`.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0
        self.read_position = 0
        self.ch: str | None = None
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self) -> None:
        """Moves the cursor one character forward; a no-op once past the end."""
        if self.ch == "\n":
            self.line += 1
            self.column = 0
        if self.read_position >= len(self.source):
            self.ch = None
            self.position = len(self.source)
            self.read_position = len(self.source) + 1
            return
        self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def peek_char(self) -> str | None:
        if self.read_position >= len(self.source):
            return None
        return self.source[self.read_position]

    def skip_whitespace(self) -> None:
        while self.ch is not None and self.ch.isspace():
            self.read_char()

    def read_identifier(self) -> str:
        start = self.position
        while self.ch is not None and is_letter(self.ch):
            self.read_char()
        return self.source[start : self.position]

    def read_number(self) -> str:
        start = self.position
        while self.ch is not None and is_digit(self.ch):
            self.read_char()
        return self.source[start : self.position]

    def next_token(self) -> Token:
        """Consumes and returns the next Token.

        Once the input is exhausted every further call returns an EOF token.
        """
        self.skip_whitespace()
        line, col = self.line, self.column
        ch = self.ch

        if ch is None:
            return Token(TokenType.EOF, "", line, col)

        if ch == "=" or ch == "!":
            if self.peek_char() == "=":
                self.read_char()
                type_ = TokenType.EQ if ch == "=" else TokenType.NOT_EQ
                token = Token(type_, ch + "=", line, col)
            else:
                type_ = TokenType.ASSIGN if ch == "=" else TokenType.BANG
                token = Token(type_, ch, line, col)
        elif ch in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[ch], ch, line, col)
        elif is_letter(ch):
            ident = self.read_identifier()
            return Token(lookup_ident(ident), ident, line, col)
        elif is_digit(ch):
            return Token(TokenType.INT, self.read_number(), line, col)
        else:
            token = Token(TokenType.ILLEGAL, ch, line, col)

        self.read_char()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yields tokens up to, not including, EOF."""
        while True:
            tok = self.next_token()
            if tok.type is TokenType.EOF:
                return
            yield tok


def tokenize(source: str) -> list[Token]:
    """Lexes `source` completely. The returned list always ends with EOF."""
    lexer = Lexer(source)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens


__all__ = ["Lexer", "Token", "TokenType", "tokenize"]
