"""Syntactic checks run before any expression is tokenized.

Only the character set and parenthesis balance are checked here; inputs such as
``3 + + 4`` pass and fail later, during postfix evaluation.
"""
import re

from arithcalc.errors import InvalidExpressionError

ALLOWED_CHARS_PATT = re.compile(r"[0-9+\-*/^().\s]")


def validate(expression: str) -> bool:
    try:
        check_expression(expression)
    except InvalidExpressionError:
        return False
    return True


def check_expression(expression: str) -> None:
    """Raise InvalidExpressionError if the expression is empty, contains a
    disallowed character or has unbalanced parentheses"""
    if not expression.strip():
        raise InvalidExpressionError("Invalid expression: expression is empty")

    for i, char in enumerate(expression):
        if not ALLOWED_CHARS_PATT.fullmatch(char):
            raise InvalidExpressionError(
                f"Invalid expression: unexpected character {char!r}",
                expression=expression,
                error_char_idx=i,
            )

    open_brackets: list[int] = []
    for i, char in enumerate(expression):
        if char == "(":
            open_brackets.append(i)
        elif char == ")":
            if not open_brackets:
                raise InvalidExpressionError(
                    "Invalid expression: unmatched closing parenthesis",
                    expression=expression,
                    error_char_idx=i,
                )
            open_brackets.pop()

    if open_brackets:
        raise InvalidExpressionError(
            "Invalid expression: unclosed parenthesis",
            expression=expression,
            error_char_idx=open_brackets[-1],
        )
