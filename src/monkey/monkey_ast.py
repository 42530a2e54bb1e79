"""
Abstract syntax tree for the Monkey programming language.

Statements and expressions are closed unions of small dataclasses
(`Statement`, `Expression`), so consumers such as an evaluator can dispatch
with `isinstance` or `match` and know every case up front.

Every node keeps the token that introduced it:
    token_literal(): the exact source lexeme of that token.
    str(node): a canonical, fully parenthesized rendering of the subtree.
        This is NOT the original source text; `-15` renders as `(-15)`.
    to_dict(): nested plain-dict form for debugging and JSON dumps.

Example:
    >>> from monkey.monkey_parser import parse_program
    >>> str(parse_program("-a * b + c;"))
    '(((-a) * b) + c)'
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, TypedDict, Union

from monkey.monkey_constants import TokenType
from monkey.monkey_token import Token

if TYPE_CHECKING:
    from monkey.monkey_parser import Parser


class ASTDict(TypedDict, total=False):
    """Serialized node shape produced by `to_dict()`.

    Fields beyond `kind` and `literal` mirror the node's dataclass fields.
    """

    kind: str
    literal: str


def _serialize(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value


class Node:
    """Behavior shared by every AST node. Subclasses are dataclasses with a `token` field."""

    token: Token

    def token_literal(self) -> str:
        return self.token.value

    def to_dict(self) -> ASTDict:
        out: dict[str, Any] = {"kind": type(self).__name__, "literal": self.token_literal()}
        for f in fields(self):  # type: ignore[arg-type]
            if f.name != "token":
                out[f.name] = _serialize(getattr(self, f.name))
        return out  # type: ignore[return-value]


class PrefixOperator(Enum):
    NOT = "!"
    MINUS = "-"

    @classmethod
    def from_token(cls, token: Token) -> PrefixOperator:
        """BANG maps to NOT, anything else to MINUS."""
        return cls.NOT if token.type is TokenType.BANG else cls.MINUS

    def token_literal(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class InfixOperator(Enum):
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"

    def token_literal(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


INFIX_OPERATORS: Mapping[TokenType, InfixOperator] = MappingProxyType(
    {
        TokenType.PLUS: InfixOperator.PLUS,
        TokenType.MINUS: InfixOperator.MINUS,
        TokenType.ASTERISK: InfixOperator.MULTIPLY,
        TokenType.SLASH: InfixOperator.DIVIDE,
        TokenType.EQ: InfixOperator.EQUAL,
        TokenType.NOT_EQ: InfixOperator.NOT_EQUAL,
        TokenType.LT: InfixOperator.LESS_THAN,
        TokenType.GT: InfixOperator.GREATER_THAN,
    }
)


# Expressions


@dataclass
class Identifier(Node):
    token: Token
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class IntegerLiteral(Node):
    token: Token
    value: int

    def __str__(self) -> str:
        return self.token.value


@dataclass
class Boolean(Node):
    token: Token
    value: bool

    def __str__(self) -> str:
        return self.token.value


@dataclass
class PrefixExpression(Node):
    """`<operator><right>`, e.g. `-5` or `!ok`.

    The operator is derived from `token`; agreement between the two is the
    parser's job and is not re-validated here.
    """

    token: Token
    right: Expression
    operator: PrefixOperator = field(init=False)

    def __post_init__(self) -> None:
        self.operator = PrefixOperator.from_token(self.token)

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass
class InfixExpression(Node):
    token: Token
    left: Expression
    operator: InfixOperator
    right: Expression

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass
class IfExpression(Node):
    token: Token
    condition: Expression
    consequence: BlockStatement
    alternative: BlockStatement | None = None

    def __str__(self) -> str:
        out = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            out += f"else {self.alternative}"
        return out


@dataclass
class FunctionLiteral(Node):
    token: Token
    parameters: list[Identifier]
    body: BlockStatement

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.token_literal()}({params}) {self.body}"


@dataclass
class CallExpression(Node):
    token: Token  # the '(' token
    function: Expression  # Identifier or FunctionLiteral
    arguments: list[Expression]

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"


# Statements


@dataclass
class LetStatement(Node):
    token: Token
    name: Identifier
    value: Expression

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {self.value};"


@dataclass
class ReturnStatement(Node):
    token: Token
    return_value: Expression

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.return_value};"


@dataclass
class ExpressionStatement(Node):
    token: Token  # the first token of the expression
    expression: Expression

    def __str__(self) -> str:
        return str(self.expression)


@dataclass
class BlockStatement(Node):
    token: Token  # the '{' token
    statements: list[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


Expression = Union[
    Identifier,
    IntegerLiteral,
    Boolean,
    PrefixExpression,
    InfixExpression,
    IfExpression,
    FunctionLiteral,
    CallExpression,
]

Statement = Union[LetStatement, ReturnStatement, ExpressionStatement, BlockStatement]


@dataclass
class Program:
    """Root of the tree: the top-level statements in source order."""

    statements: list[Statement] = field(default_factory=list)

    @classmethod
    def parse(cls, parser: Parser) -> Program:
        """Parses a whole program from `parser`.

        Failures are recorded on `parser.errors`; see `Parser.parse_program`.
        """
        return parser.parse_program()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "Program", "statements": [s.to_dict() for s in self.statements]}

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


__all__ = [
    "ASTDict",
    "Boolean",
    "BlockStatement",
    "CallExpression",
    "Expression",
    "ExpressionStatement",
    "FunctionLiteral",
    "INFIX_OPERATORS",
    "Identifier",
    "IfExpression",
    "InfixExpression",
    "InfixOperator",
    "IntegerLiteral",
    "LetStatement",
    "Node",
    "PrefixExpression",
    "PrefixOperator",
    "Program",
    "ReturnStatement",
    "Statement",
]
