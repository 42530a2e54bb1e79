"""
Parse errors raised by the Monkey parser.

All errors derive from `ParseError`, which is itself a `SyntaxError`, so
callers that already catch `SyntaxError` keep working. Each error keeps the
offending token so tooling can point at the exact source location.

Classes:
    ParseError: Base class for every parse failure.
    UnexpectedPrefixTokenError: The current token cannot start an expression.
    IllegalCharacterError: An ILLEGAL token reached expression position.
    UnexpectedTokenError: A required token was missing.
    InvalidIntegerLiteralError: A digit run too long to convert to int.
    NestingTooDeepError: Nesting exhausted the interpreter stack.
"""

from monkey.monkey_constants import TokenType
from monkey.monkey_token import Token


def _location(token: Token) -> str:
    if token.line:
        return f" at line {token.line}, col {token.col}"
    return ""


class ParseError(SyntaxError):
    """Base class for all Monkey parse errors.

    Attributes:
        token (Token): The token the parser was looking at when it failed.
    """

    def __init__(self, message: str, token: Token) -> None:
        super().__init__(message)
        self.token = token

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def col(self) -> int:
        return self.token.col

    def __str__(self) -> str:
        return str(self.msg)


class UnexpectedPrefixTokenError(ParseError):
    def __init__(self, token: Token) -> None:
        super().__init__(
            f"no prefix parse function for {token.describe()}{_location(token)}",
            token,
        )


class IllegalCharacterError(UnexpectedPrefixTokenError):
    def __init__(self, token: Token) -> None:
        ParseError.__init__(
            self,
            f"illegal character {token.value!r}{_location(token)}",
            token,
        )


class InvalidIntegerLiteralError(ParseError):
    def __init__(self, token: Token) -> None:
        super().__init__(
            f"could not parse {len(token.value)}-digit literal as integer{_location(token)}",
            token,
        )


class NestingTooDeepError(ParseError):
    """Input nested deeper than the interpreter stack allows."""

    def __init__(self, token: Token) -> None:
        super().__init__(
            f"expression nested too deeply near {token.describe()}{_location(token)}",
            token,
        )


class UnexpectedTokenError(ParseError):
    """A required token class was absent at the cursor.

    Attributes:
        expected (TokenType): What the grammar required.
    """

    def __init__(self, expected: TokenType, token: Token) -> None:
        super().__init__(
            f"expected next token to be {expected.name}, "
            f"got {token.describe()}{_location(token)}",
            token,
        )
        self.expected = expected


__all__ = [
    "IllegalCharacterError",
    "InvalidIntegerLiteralError",
    "NestingTooDeepError",
    "ParseError",
    "UnexpectedPrefixTokenError",
    "UnexpectedTokenError",
]
