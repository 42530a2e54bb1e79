"""
Shared lookup tables for the Monkey lexer and parser.

Everything here is built once at import time and exposed through read-only
mappings, so a lexer or parser instance never mutates global state.

Exports:
    TokenType: Closed enumeration of lexical categories.
    Precedence: Binding power of infix operators, lowest to highest.
    KEYWORDS: Reserved word -> keyword token type.
    SINGLE_CHAR_TOKENS: One-character lexeme -> token type.
    PRECEDENCES: Infix token type -> binding power.
"""

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping


class TokenType(str, Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers + literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "ASSIGN"
    PLUS = "PLUS"
    MINUS = "MINUS"
    BANG = "BANG"
    ASTERISK = "ASTERISK"
    SLASH = "SLASH"
    EQ = "EQ"
    NOT_EQ = "NOT_EQ"
    LT = "LT"
    GT = "GT"

    # Delimiters
    COMMA = "COMMA"
    SEMICOLON = "SEMICOLON"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self) -> str:
        return self.value


class Precedence(IntEnum):
    """Operator binding power. Higher binds tighter."""

    LOWEST = 1
    EQUALS = 2  # ==
    LESSGREATER = 3  # > or <
    SUM = 4  # +
    PRODUCT = 5  # *
    PREFIX = 6  # -X or !X
    CALL = 7  # myFunction(X)


KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "fn": TokenType.FUNCTION,
        "let": TokenType.LET,
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "if": TokenType.IF,
        "else": TokenType.ELSE,
        "return": TokenType.RETURN,
    }
)

# `=` and `!` are absent on purpose: the lexer peeks for `==` / `!=` first.
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType(
    {
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.ASTERISK,
        "/": TokenType.SLASH,
        "<": TokenType.LT,
        ">": TokenType.GT,
        ",": TokenType.COMMA,
        ";": TokenType.SEMICOLON,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
    }
)

PRECEDENCES: Mapping[TokenType, Precedence] = MappingProxyType(
    {
        TokenType.EQ: Precedence.EQUALS,
        TokenType.NOT_EQ: Precedence.EQUALS,
        TokenType.LT: Precedence.LESSGREATER,
        TokenType.GT: Precedence.LESSGREATER,
        TokenType.PLUS: Precedence.SUM,
        TokenType.MINUS: Precedence.SUM,
        TokenType.SLASH: Precedence.PRODUCT,
        TokenType.ASTERISK: Precedence.PRODUCT,
        TokenType.LPAREN: Precedence.CALL,
    }
)


__all__ = ["KEYWORDS", "PRECEDENCES", "SINGLE_CHAR_TOKENS", "Precedence", "TokenType"]
