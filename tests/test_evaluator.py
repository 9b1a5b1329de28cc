import math

import pytest

from arithcalc.errors import (
    DivisionByZeroError,
    ErrorKind,
    ExcessOperandsError,
    StackUnderflowError,
    UnknownOperatorError,
)
from arithcalc.evaluator import apply_operator, evaluate_postfix, parse_number
from arithcalc.tokenizer import Token, TokenType


@pytest.mark.parametrize(
    "postfix, expected",
    [
        pytest.param(["3"], 3.0),
        pytest.param(["3", "4", "+"], 7.0),
        pytest.param(["3", "4", "-"], -1.0),
        pytest.param(["1", "4", "/"], 0.25),
        pytest.param(["3", "4", "2", "*", "+"], 11.0),
        pytest.param(["2", "3", "^", "2", "^"], 64.0),
        pytest.param(["0", "2.5", "-"], -2.5),
    ],
)
def test_evaluate_postfix(postfix: list[str], expected: float) -> None:
    assert evaluate_postfix(postfix) == expected


def test_evaluate_postfix_accepts_tokens() -> None:
    tokens = [Token(TokenType.NUMBER, "6"), Token(TokenType.NUMBER, "3"), Token(TokenType.SLASH, "/")]
    assert evaluate_postfix(tokens) == 2.0


@pytest.mark.parametrize(
    "a, b, op, expected",
    [
        pytest.param(1.0, 2.0, "+", 3.0),
        pytest.param(1.0, 2.0, "-", -1.0),
        pytest.param(3.0, 2.0, "*", 6.0),
        pytest.param(3.0, 2.0, "/", 1.5),
        pytest.param(9.0, 0.5, "^", 3.0),
        pytest.param(2.0, -2.0, "^", 0.25),
        pytest.param(0.0, -1.0, "^", math.inf),
        pytest.param(-0.0, -1.0, "^", -math.inf),
        pytest.param(10.0, 400.0, "^", math.inf),
    ],
)
def test_apply_operator(a: float, b: float, op: str, expected: float) -> None:
    assert apply_operator(a, b, op) == expected


def test_pow_of_negative_base_with_fractional_exponent_is_nan() -> None:
    assert math.isnan(apply_operator(-8.0, 1 / 3, "^"))


@pytest.mark.parametrize("b", [0.0, -0.0])
def test_divide_by_zero(b: float) -> None:
    with pytest.raises(DivisionByZeroError) as exc_info:
        apply_operator(1.0, b, "/")
    assert str(exc_info.value) == "Cannot divide by zero."
    assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO


def test_unknown_operator() -> None:
    with pytest.raises(UnknownOperatorError) as exc_info:
        evaluate_postfix(["1", "2", "%"])
    assert exc_info.value.operator == "%"
    assert str(exc_info.value) == "Unknown operator: %"


@pytest.mark.parametrize(
    "postfix",
    [
        pytest.param([]),
        pytest.param(["+"]),
        pytest.param(["3", "+"]),
        pytest.param(["3", "4", "+", "*"]),
    ],
)
def test_stack_underflow(postfix: list[str]) -> None:
    with pytest.raises(StackUnderflowError):
        evaluate_postfix(postfix)


def test_excess_operands() -> None:
    with pytest.raises(ExcessOperandsError) as exc_info:
        evaluate_postfix(["3", "4", "5", "+"])
    assert exc_info.value.leftover == 2


@pytest.mark.parametrize(
    "lexeme, expected",
    [
        pytest.param("42", 42.0),
        pytest.param("1.", 1.0),
        pytest.param(".25", 0.25),
        pytest.param("007", 7.0),
        pytest.param(".", None),
        pytest.param("1.2.3", None),
        pytest.param("1e5", None),
        pytest.param("inf", None),
        pytest.param("-1", None),
        pytest.param("+", None),
    ],
)
def test_parse_number(lexeme: str, expected: float | None) -> None:
    assert parse_number(lexeme) == expected
