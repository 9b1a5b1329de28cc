import logging
import operator
import re
from typing import Callable, Iterable, Optional, Union

import numpy as np

from arithcalc.errors import DivisionByZeroError, ExcessOperandsError, StackUnderflowError, UnknownOperatorError
from arithcalc.tokenizer import Token
from arithcalc.utils import Stack

logger = logging.getLogger(__name__)

NUMBER_PATT = re.compile(r"\d+\.?\d*|\.\d+", flags=re.ASCII)

BinaryOperationImpl = Callable[[float, float], float]


def _div(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError("Cannot divide by zero.")
    return a / b


def _pow(a: float, b: float) -> float:
    # IEEE-754 pow: 0 ^ -1 is inf and (-8) ^ 0.5 is nan instead of a Python error or complex number
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(a), np.float64(b)))


OPERATOR_IMPLS: dict[str, BinaryOperationImpl] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _div,
    "^": _pow,
}


def apply_operator(a: float, b: float, op: str) -> float:
    impl = OPERATOR_IMPLS.get(op)
    if impl is None:
        raise UnknownOperatorError(f"Unknown operator: {op}", operator=op)
    return impl(a, b)


def parse_number(lexeme: str) -> Optional[float]:
    if NUMBER_PATT.fullmatch(lexeme) is None:
        return None
    return float(lexeme)


def evaluate_postfix(postfix: Iterable[Union[Token, str]]) -> float:
    """Evaluate a postfix sequence of tokens or their lexemes.

    Anything that is not a number literal is applied as a binary operator to the
    two topmost values, the earlier operand being the deeper one.
    """
    stack: Stack[float] = Stack()
    for item in postfix:
        lexeme = item.lexeme if isinstance(item, Token) else item
        number = parse_number(lexeme)
        if number is not None:
            stack.push(number)
            continue
        if len(stack) < 2:
            raise StackUnderflowError(f"Not enough operands for operator {lexeme!r}")
        b = stack.pop()
        a = stack.pop()
        stack.push(apply_operator(a, b, lexeme))

    if not stack:
        raise StackUnderflowError("Expression produced no value")
    if len(stack) > 1:
        raise ExcessOperandsError(
            f"Expression left {len(stack)} values unconsumed, missing operator?", leftover=len(stack)
        )
    result = stack.pop()
    logger.debug("Postfix evaluated to %r", result)
    return result
