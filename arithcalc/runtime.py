import logging
from dataclasses import dataclass

from arithcalc.converter import convert_validated
from arithcalc.errors import CalcError, ErrorKind
from arithcalc.evaluator import evaluate_postfix
from arithcalc.validator import check_expression

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    value: float

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: CalcError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return str(self.error)


EvaluationResult = Success | Failure


def evaluate(expression: str) -> float:
    check_expression(expression)
    postfix = convert_validated(expression)
    return evaluate_postfix(postfix)


def try_evaluate(expression: str) -> EvaluationResult:
    """Like evaluate, but failures are returned instead of raised"""
    try:
        return Success(evaluate(expression))
    except CalcError as e:
        logger.debug("Evaluation of %r failed: %s", expression, e.kind)
        return Failure(e)
