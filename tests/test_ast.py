from monkey.monkey_ast import (
    BlockStatement,
    CallExpression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    InfixOperator,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    PrefixOperator,
    Program,
    ReturnStatement,
)
from monkey.monkey_token import Token, TokenType


def ident(name: str) -> Identifier:
    return Identifier(Token(TokenType.IDENT, name), name)


def integer(n: int) -> IntegerLiteral:
    return IntegerLiteral(Token(TokenType.INT, str(n)), n)


def test_let_statement_str() -> None:
    program = Program(
        [LetStatement(Token(TokenType.LET, "let"), ident("myVar"), ident("anotherVar"))]
    )
    assert str(program) == "let myVar = anotherVar;"
    assert program.token_literal() == "let"


def test_return_statement_str() -> None:
    stmt = ReturnStatement(Token(TokenType.RETURN, "return"), integer(5))
    assert str(stmt) == "return 5;"
    assert stmt.token_literal() == "return"


def test_prefix_operator_derived_from_token() -> None:
    minus = PrefixExpression(Token(TokenType.MINUS, "-"), integer(15))
    bang = PrefixExpression(Token(TokenType.BANG, "!"), ident("ok"))
    assert minus.operator is PrefixOperator.MINUS
    assert bang.operator is PrefixOperator.NOT
    assert minus.operator.token_literal() == "-"
    assert bang.operator.token_literal() == "!"
    assert str(minus) == "(-15)"
    assert str(bang) == "(!ok)"
    assert minus.token_literal() == "-"
    assert minus.right.token_literal() == "15"


def test_infix_expression_str() -> None:
    expr = InfixExpression(
        Token(TokenType.PLUS, "+"),
        ident("a"),
        InfixOperator.PLUS,
        InfixExpression(Token(TokenType.ASTERISK, "*"), ident("b"), InfixOperator.MULTIPLY, ident("c")),
    )
    assert str(expr) == "(a + (b * c))"


def test_if_function_and_call_str() -> None:
    lbrace = Token(TokenType.LBRACE, "{")
    body = BlockStatement(lbrace, [ExpressionStatement(Token(TokenType.IDENT, "x"), ident("x"))])
    alt = BlockStatement(lbrace, [ExpressionStatement(Token(TokenType.IDENT, "y"), ident("y"))])
    cond = InfixExpression(Token(TokenType.LT, "<"), ident("x"), InfixOperator.LESS_THAN, ident("y"))

    if_expr = IfExpression(Token(TokenType.IF, "if"), cond, body, alt)
    assert str(if_expr) == "if(x < y) xelse y"
    assert str(IfExpression(Token(TokenType.IF, "if"), cond, body)) == "if(x < y) x"

    fn = FunctionLiteral(Token(TokenType.FUNCTION, "fn"), [ident("x"), ident("y")], body)
    assert str(fn) == "fn(x, y) x"

    call = CallExpression(Token(TokenType.LPAREN, "("), ident("add"), [integer(1), ident("z")])
    assert str(call) == "add(1, z)"
    assert call.token_literal() == "("


def test_empty_program() -> None:
    program = Program()
    assert program.token_literal() == ""
    assert str(program) == ""
    assert program.to_dict() == {"kind": "Program", "statements": []}


def test_structural_equality_ignores_location() -> None:
    a = PrefixExpression(Token(TokenType.MINUS, "-", 1, 1), integer(5))
    b = PrefixExpression(Token(TokenType.MINUS, "-", 4, 9), integer(5))
    assert a == b
    assert a != PrefixExpression(Token(TokenType.BANG, "!"), integer(5))


def test_to_dict() -> None:
    stmt = ExpressionStatement(
        Token(TokenType.MINUS, "-"),
        PrefixExpression(Token(TokenType.MINUS, "-"), integer(15)),
    )
    assert stmt.to_dict() == {
        "kind": "ExpressionStatement",
        "literal": "-",
        "expression": {
            "kind": "PrefixExpression",
            "literal": "-",
            "right": {"kind": "IntegerLiteral", "literal": "15", "value": 15},
            "operator": "-",
        },
    }
