"""
Monkey Language Parser

Parses the token stream produced by `monkey.monkey_lexer.Lexer` into a
`monkey.monkey_ast.Program`.

The parser is a Pratt (top-down operator precedence) parser. Each token type
that can start an expression has a prefix rule and each token type that can
continue one has an infix rule; binding power comes from
`monkey.monkey_constants.PRECEDENCES`.

Supported Constructs
--------------------
- Statements:
    * `let <ident> = <expr>;`
    * `return <expr>;`
    * blocks `{ ... }`
    * expression statements (the trailing `;` is optional)
- Expressions:
    * identifiers, integers, `true` / `false`
    * prefix `!` and `-`
    * infix `+ - * / == != < >`, left associative
    * grouping with `( )`
    * `if (<cond>) { ... } else { ... }`
    * function literals `fn(a, b) { ... }` and calls `f(1, 2)`

Parser Behavior
---------------
- Pulls tokens lazily from the lexer and never looks more than one token
  past the current one.
- Failures raise a `monkey.monkey_errors.ParseError` subclass internally.
  `parse_program()` records the first one on `Parser.errors` and stops; it
  never resynchronizes. Input nested deeper than the interpreter stack
  allows is recorded as `NestingTooDeepError`.

Entry Points
------------
- `Parser.parse_program()` / `Program.parse(parser)`: parse a full program.
- `Parser.parse_statement()`: parse the statement at the cursor.
- `Parser.parse_expression(precedence)`: parse the expression at the cursor.
- `parse_program(source)`: lex and parse `source`, raising on the first error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import Mapping

from monkey.monkey_ast import (
    INFIX_OPERATORS,
    BlockStatement,
    Boolean,
    CallExpression,
    Expression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.monkey_constants import PRECEDENCES, Precedence, TokenType
from monkey.monkey_errors import (
    IllegalCharacterError,
    InvalidIntegerLiteralError,
    NestingTooDeepError,
    ParseError,
    UnexpectedPrefixTokenError,
    UnexpectedTokenError,
)
from monkey.monkey_lexer import Lexer
from monkey.monkey_token import Token

logger = logging.getLogger(__name__)

PrefixRule = Callable[["Parser"], Expression]
InfixRule = Callable[["Parser", Expression], Expression]


class Parser:
    """
    Monkey Parser Class

    Attributes
    ----------
    lexer : Lexer
        Token source, read one token at a time.
    current_token : Token
        The token under examination.
    peek_token : Token
        One token of lookahead.
    errors : list[ParseError]
        Failures recorded by `parse_program()`.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.errors: list[ParseError] = []
        # Prime current_token and peek_token.
        self.current_token: Token = lexer.next_token()
        self.peek_token: Token = lexer.next_token()

    # Cursor

    def next_token(self) -> None:
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def current_is(self, type_: TokenType) -> bool:
        return self.current_token.type is type_

    def peek_is(self, type_: TokenType) -> bool:
        return self.peek_token.type is type_

    def expect_peek(self, type_: TokenType) -> None:
        """Advances onto the peek token if it has type `type_`, else raises."""
        if not self.peek_is(type_):
            raise UnexpectedTokenError(type_, self.peek_token)
        self.next_token()

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def current_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.current_token.type, Precedence.LOWEST)

    def unexpected_prefix_error(self, token: Token) -> UnexpectedPrefixTokenError:
        if token.type is TokenType.ILLEGAL:
            return IllegalCharacterError(token)
        return UnexpectedPrefixTokenError(token)

    # Program / statements

    def parse_program(self) -> Program:
        """Parse statements until EOF.

        The first failure is appended to `errors` and ends the parse; the
        returned Program holds every statement completed before it.
        """
        program = Program()
        while not self.current_is(TokenType.EOF):
            try:
                program.statements.append(self.parse_statement())
            except ParseError as e:
                logger.debug("parse failed: %s", e)
                self.errors.append(e)
                break
            except RecursionError:
                err = NestingTooDeepError(self.current_token)
                logger.debug("parse failed: %s", err)
                self.errors.append(err)
                break
            self.next_token()
        logger.debug("parsed %d statement(s)", len(program.statements))
        return program

    def check_errors(self) -> None:
        """Raises the first recorded parse error, if any."""
        if self.errors:
            raise self.errors[0]

    def parse_statement(self) -> Statement:
        if self.current_is(TokenType.LET):
            return self.parse_let_statement()
        if self.current_is(TokenType.RETURN):
            return self.parse_return_statement()
        if self.current_is(TokenType.LBRACE):
            return self.parse_block_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> LetStatement:
        token = self.current_token
        self.expect_peek(TokenType.IDENT)
        name = Identifier(self.current_token, self.current_token.value)
        self.expect_peek(TokenType.ASSIGN)
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if self.peek_is(TokenType.SEMICOLON):
            self.next_token()
        return LetStatement(token, name, value)

    def parse_return_statement(self) -> ReturnStatement:
        token = self.current_token
        self.next_token()
        return_value = self.parse_expression(Precedence.LOWEST)
        if self.peek_is(TokenType.SEMICOLON):
            self.next_token()
        return ReturnStatement(token, return_value)

    def parse_expression_statement(self) -> ExpressionStatement:
        token = self.current_token
        expression = self.parse_expression(Precedence.LOWEST)
        if self.peek_is(TokenType.SEMICOLON):
            self.next_token()
        return ExpressionStatement(token, expression)

    def parse_block_statement(self) -> BlockStatement:
        block = BlockStatement(self.current_token)
        self.next_token()
        while not self.current_is(TokenType.RBRACE):
            if self.current_is(TokenType.EOF):
                raise UnexpectedTokenError(TokenType.RBRACE, self.current_token)
            block.statements.append(self.parse_statement())
            self.next_token()
        return block

    # Expressions

    def parse_expression(self, precedence: Precedence) -> Expression:
        prefix = PREFIX_RULES.get(self.current_token.type)
        if prefix is None:
            raise self.unexpected_prefix_error(self.current_token)
        left = prefix(self)

        while precedence < self.peek_precedence():
            infix = INFIX_RULES.get(self.peek_token.type)
            if infix is None:
                return left
            self.next_token()
            left = infix(self, left)
        return left

    def parse_identifier(self) -> Identifier:
        return Identifier(self.current_token, self.current_token.value)

    def parse_integer_literal(self) -> IntegerLiteral:
        token = self.current_token
        try:
            value = int(token.value)
        except ValueError:
            # CPython caps int() conversion of very long digit strings.
            raise InvalidIntegerLiteralError(token) from None
        return IntegerLiteral(token, value)

    def parse_boolean(self) -> Boolean:
        return Boolean(self.current_token, self.current_is(TokenType.TRUE))

    def parse_prefix_expression(self) -> PrefixExpression:
        token = self.current_token
        if token.type not in (TokenType.BANG, TokenType.MINUS):
            raise self.unexpected_prefix_error(token)
        self.next_token()
        right = self.parse_expression(Precedence.PREFIX)
        return PrefixExpression(token, right)

    def parse_grouped_expression(self) -> Expression:
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        self.expect_peek(TokenType.RPAREN)
        return expression

    def parse_if_expression(self) -> IfExpression:
        token = self.current_token
        self.expect_peek(TokenType.LPAREN)
        self.next_token()
        condition = self.parse_expression(Precedence.LOWEST)
        self.expect_peek(TokenType.RPAREN)
        self.expect_peek(TokenType.LBRACE)
        consequence = self.parse_block_statement()

        alternative = None
        if self.peek_is(TokenType.ELSE):
            self.next_token()
            self.expect_peek(TokenType.LBRACE)
            alternative = self.parse_block_statement()
        return IfExpression(token, condition, consequence, alternative)

    def parse_function_literal(self) -> FunctionLiteral:
        token = self.current_token
        self.expect_peek(TokenType.LPAREN)
        parameters = self.parse_function_parameters()
        self.expect_peek(TokenType.LBRACE)
        body = self.parse_block_statement()
        return FunctionLiteral(token, parameters, body)

    def parse_function_parameters(self) -> list[Identifier]:
        identifiers: list[Identifier] = []
        if self.peek_is(TokenType.RPAREN):
            self.next_token()
            return identifiers

        self.expect_peek(TokenType.IDENT)
        identifiers.append(self.parse_identifier())
        while self.peek_is(TokenType.COMMA):
            self.next_token()
            self.expect_peek(TokenType.IDENT)
            identifiers.append(self.parse_identifier())
        self.expect_peek(TokenType.RPAREN)
        return identifiers

    def parse_infix_expression(self, left: Expression) -> InfixExpression:
        token = self.current_token
        precedence = self.current_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        return InfixExpression(token, left, INFIX_OPERATORS[token.type], right)

    def parse_call_expression(self, function: Expression) -> CallExpression:
        token = self.current_token
        return CallExpression(token, function, self.parse_call_arguments())

    def parse_call_arguments(self) -> list[Expression]:
        args: list[Expression] = []
        if self.peek_is(TokenType.RPAREN):
            self.next_token()
            return args

        self.next_token()
        args.append(self.parse_expression(Precedence.LOWEST))
        while self.peek_is(TokenType.COMMA):
            self.next_token()
            self.next_token()
            args.append(self.parse_expression(Precedence.LOWEST))
        self.expect_peek(TokenType.RPAREN)
        return args


PREFIX_RULES: Mapping[TokenType, PrefixRule] = MappingProxyType(
    {
        TokenType.IDENT: Parser.parse_identifier,
        TokenType.INT: Parser.parse_integer_literal,
        TokenType.TRUE: Parser.parse_boolean,
        TokenType.FALSE: Parser.parse_boolean,
        TokenType.BANG: Parser.parse_prefix_expression,
        TokenType.MINUS: Parser.parse_prefix_expression,
        TokenType.LPAREN: Parser.parse_grouped_expression,
        TokenType.IF: Parser.parse_if_expression,
        TokenType.FUNCTION: Parser.parse_function_literal,
    }
)

INFIX_RULES: Mapping[TokenType, InfixRule] = MappingProxyType(
    {
        **{type_: Parser.parse_infix_expression for type_ in INFIX_OPERATORS},
        TokenType.LPAREN: Parser.parse_call_expression,
    }
)


def parse_program(source: str) -> Program:
    """Lex and parse `source` in one go.

    Raises:
        ParseError: The first failure encountered.
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    parser.check_errors()
    return program


__all__ = ["INFIX_RULES", "PREFIX_RULES", "Parser", "parse_program"]
