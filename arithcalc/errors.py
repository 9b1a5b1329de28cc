import enum
import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from arithcalc.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    INVALID_EXPRESSION = enum.auto()
    DIVISION_BY_ZERO = enum.auto()
    UNKNOWN_OPERATOR = enum.auto()
    STACK_UNDERFLOW = enum.auto()
    EXCESS_OPERANDS = enum.auto()


@dataclass
class CalcError(Exception):
    errmsg: str

    kind: ClassVar[ErrorKind]

    def __str__(self) -> str:
        return self.errmsg


@dataclass
class InvalidExpressionError(CalcError):
    expression: str = ""
    error_char_idx: Optional[int] = None

    kind = ErrorKind.INVALID_EXPRESSION

    def __str__(self) -> str:
        if self.error_char_idx is None:
            return self.errmsg
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.expression), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.expression)
        return "\n".join(
            [
                self.errmsg,
                (
                    ("..." if print_ellipsis_pre else "")
                    + re.sub(r"\s", " ", self.expression[print_start_idx:print_end_idx])
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


@dataclass
class DivisionByZeroError(CalcError):
    kind = ErrorKind.DIVISION_BY_ZERO


@dataclass
class UnknownOperatorError(CalcError):
    operator: str = ""

    kind = ErrorKind.UNKNOWN_OPERATOR


@dataclass
class StackUnderflowError(CalcError):
    kind = ErrorKind.STACK_UNDERFLOW


@dataclass
class ExcessOperandsError(CalcError):
    """Postfix evaluation finished with more than one value on the stack, e.g. for ``3 4``"""

    leftover: int = 0

    kind = ErrorKind.EXCESS_OPERANDS
