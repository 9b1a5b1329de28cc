import enum
from dataclasses import dataclass

from arithcalc.errors import InvalidExpressionError
from arithcalc.utils import PrintableEnum


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    CARET = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


OPERATOR_TOKEN_TYPES = frozenset([TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH, TokenType.CARET])

SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def _is_valid_in_number(s: str) -> bool:
    return s in "0123456789."


def tokenize(expression: str) -> list[Token]:
    """Split an expression into tokens. Numbers are kept exactly as typed, so
    ``1.2.3`` or ``.`` become a single NUMBER token; whitespace only separates
    tokens"""
    i = 0
    tokens: list[Token] = []
    while i < len(expression):
        if _is_valid_in_number(expression[i]):
            number_end_idx = i + 1
            while number_end_idx < len(expression) and _is_valid_in_number(expression[number_end_idx]):
                number_end_idx += 1
            tokens.append(Token(type=TokenType.NUMBER, lexeme=expression[i:number_end_idx]))
            i = number_end_idx - 1  # to account for += 1 later
        elif expression[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[expression[i]], lexeme=expression[i]))
        elif expression[i].isspace():
            pass
        else:
            raise InvalidExpressionError(
                f"Invalid expression: unexpected character {expression[i]!r}",
                expression=expression,
                error_char_idx=i,
            )
        i += 1
    return tokens


def untokenize(tokens: list[Token]) -> str:
    return " ".join(t.lexeme for t in tokens)
