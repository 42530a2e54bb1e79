"""
Token model for the Monkey language.

Classes:
    Token: A single classified lexeme with its source location.

Functions:
    lookup_ident(text): Classify identifier-shaped text as a keyword or IDENT.

Tokens compare by type and lexeme only; the line/column pair is diagnostic
metadata and never affects equality.

Example:
    >>> lookup_ident("fn")
    <TokenType.FUNCTION: 'FUNCTION'>
    >>> Token(TokenType.INT, "5") == Token(TokenType.INT, "5", line=3, col=9)
    True
"""

from typing import Any

from monkey.monkey_constants import KEYWORDS, TokenType


def lookup_ident(text: str) -> TokenType:
    """Returns the keyword token type for `text`, or IDENT if it is not reserved."""
    return KEYWORDS.get(text, TokenType.IDENT)


class Token:
    """Represents a single lexical token.

    Attributes:
        type (TokenType): The lexical category.
        value (str): The exact lexeme. Empty for EOF.
        line (int): 1-based line where the token starts (0 if unknown).
        col (int): 1-based column where the token starts (0 if unknown).
    """

    __slots__ = ("type", "value", "line", "col")

    def __init__(self, type_: TokenType, value: str, line: int = 0, col: int = 0):
        self.type = type_
        self.value = value
        self.line = line
        self.col = col

    def describe(self) -> str:
        """Human readable form used in diagnostics, e.g. `ASTERISK (*)`."""
        if self.type is TokenType.EOF:
            return "EOF"
        return f"{self.type.name} ({self.value})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value))


__all__ = ["Token", "TokenType", "lookup_ident"]
