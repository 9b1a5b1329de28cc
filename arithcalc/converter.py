"""Infix to postfix conversion (shunting-yard).

Unary minus is rewritten as a subtraction from zero: ``-3`` becomes ``0 3 -``.
All binary operators, ``^`` included, are treated as left-associative, so
``2 ^ 3 ^ 2`` converts to ``2 3 ^ 2 ^``.
"""
import logging

from arithcalc.tokenizer import OPERATOR_TOKEN_TYPES, Token, TokenType, tokenize, untokenize
from arithcalc.utils import Stack
from arithcalc.validator import check_expression

logger = logging.getLogger(__name__)

ZERO_TOKEN = Token(type=TokenType.NUMBER, lexeme="0")


def get_op_precedence(op: TokenType) -> int:
    return {
        TokenType.CARET: 3,
        TokenType.STAR: 2,
        TokenType.SLASH: 2,
        TokenType.PLUS: 1,
        TokenType.MINUS: 1,
    }.get(op, 0)


def convert(expression: str) -> list[Token]:
    check_expression(expression)
    return convert_validated(expression)


def to_postfix(expression: str) -> list[str]:
    return [token.lexeme for token in convert(expression)]


def convert_validated(expression: str) -> list[Token]:
    """Convert an expression that already passed validation"""
    output: list[Token] = []
    operators: Stack[Token] = Stack()
    expect_unary = True  # at start or after '('

    for token in tokenize(expression):
        if token.type is TokenType.NUMBER:
            output.append(token)
            expect_unary = False
        elif token.type is TokenType.BRACKET_OPEN:
            operators.push(token)
            expect_unary = True
        elif token.type is TokenType.BRACKET_CLOSE:
            while operators and operators.peek().type is not TokenType.BRACKET_OPEN:
                output.append(operators.pop())
            if operators:
                operators.pop()
            expect_unary = False
        elif token.type is TokenType.MINUS and expect_unary:
            # expect_unary stays set so that "--3" and "-(...)" keep working
            output.append(ZERO_TOKEN)
            operators.push(token)
        elif token.type in OPERATOR_TOKEN_TYPES:
            precedence = get_op_precedence(token.type)
            while operators and get_op_precedence(operators.peek().type) >= precedence:
                output.append(operators.pop())
            operators.push(token)
            expect_unary = True

    while operators:
        op = operators.pop()
        if op.type is not TokenType.BRACKET_OPEN:
            output.append(op)

    logger.debug("Postfix for %r: %s", expression, untokenize(output))
    return output
