from arithcalc.converter import convert, to_postfix
from arithcalc.errors import (
    CalcError,
    DivisionByZeroError,
    ErrorKind,
    ExcessOperandsError,
    InvalidExpressionError,
    StackUnderflowError,
    UnknownOperatorError,
)
from arithcalc.evaluator import evaluate_postfix
from arithcalc.runtime import EvaluationResult, Failure, Success, evaluate, try_evaluate
from arithcalc.validator import validate

__all__ = [
    "CalcError",
    "DivisionByZeroError",
    "ErrorKind",
    "EvaluationResult",
    "ExcessOperandsError",
    "Failure",
    "InvalidExpressionError",
    "StackUnderflowError",
    "Success",
    "UnknownOperatorError",
    "convert",
    "evaluate",
    "evaluate_postfix",
    "to_postfix",
    "try_evaluate",
    "validate",
]
