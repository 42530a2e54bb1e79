import pytest
from hypothesis import given
from hypothesis import strategies as st

from monkey.monkey_constants import KEYWORDS
from monkey.monkey_token import Token, TokenType, lookup_ident


@pytest.mark.parametrize(
    "word,expected",
    [
        ("fn", TokenType.FUNCTION),
        ("let", TokenType.LET),
        ("true", TokenType.TRUE),
        ("false", TokenType.FALSE),
        ("if", TokenType.IF),
        ("else", TokenType.ELSE),
        ("return", TokenType.RETURN),
    ],
)  # type: ignore[misc]
def test_lookup_ident_keywords(word: str, expected: TokenType) -> None:
    assert lookup_ident(word) is expected


@pytest.mark.parametrize("word", ["foo", "Let", "FN", "iff", "returns", "x"])  # type: ignore[misc]
def test_lookup_ident_non_keywords(word: str) -> None:
    assert lookup_ident(word) is TokenType.IDENT


@given(st.text(alphabet=st.characters(whitelist_categories=["Ll", "Lu"]), min_size=1))  # type: ignore[misc]
def test_lookup_ident_only_reserved_words_are_keywords(word: str) -> None:
    if word in KEYWORDS:
        assert lookup_ident(word) is KEYWORDS[word]
    else:
        assert lookup_ident(word) is TokenType.IDENT


def test_token_eq_ignores_location() -> None:
    assert Token(TokenType.INT, "5", 1, 1) == Token(TokenType.INT, "5", 7, 3)
    assert Token(TokenType.INT, "5") != Token(TokenType.INT, "6")
    assert Token(TokenType.IDENT, "x") != Token(TokenType.INT, "x")
    assert Token(TokenType.PLUS, "+") != "+"


def test_token_hash_matches_eq() -> None:
    tokens = {Token(TokenType.IDENT, "x", 1, 1), Token(TokenType.IDENT, "x", 2, 4)}
    assert len(tokens) == 1


def test_token_repr_and_describe() -> None:
    tok = Token(TokenType.ASTERISK, "*")
    assert repr(tok) == "Token(ASTERISK, '*')"
    assert tok.describe() == "ASTERISK (*)"
    assert Token(TokenType.EOF, "").describe() == "EOF"
