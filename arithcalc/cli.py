import argparse
import logging
import math
import sys
from typing import Optional, Sequence

from arithcalc import config
from arithcalc.converter import convert_validated
from arithcalc.errors import CalcError, InvalidExpressionError
from arithcalc.evaluator import evaluate_postfix
from arithcalc.logging_config import setup_logging
from arithcalc.tokenizer import untokenize
from arithcalc.validator import check_expression, validate

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        if value == 0 and math.copysign(1, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def run_line(expression: str, show_postfix: bool) -> bool:
    """Evaluate one line and print postfix and result, or the error. Returns success"""
    logger.debug("Evaluating %r", expression)
    try:
        if not expression:
            raise InvalidExpressionError("Expression cannot be empty.")
        check_expression(expression)
        postfix = convert_validated(expression)
        if show_postfix:
            print(f"Postfix notation: {untokenize(postfix)}")
        result = evaluate_postfix(postfix)
    except CalcError as e:
        print(f"Error: {e}")
        return False
    print(f"Result: {format_number(result)}")
    return True


def repl(show_postfix: bool) -> None:
    while True:
        try:
            expression = input(config.PROMPT).strip()
        except EOFError:
            print()
            break
        if expression.lower() == config.EXIT_COMMAND:
            break
        run_line(expression, show_postfix)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="arithcalc", description="Evaluate infix arithmetic expressions")
    parser.add_argument("expressions", nargs="*", metavar="expression", help="evaluate and exit instead of prompting")
    parser.add_argument(
        "--postfix",
        dest="show_postfix",
        action=argparse.BooleanOptionalAction,
        default=config.SHOW_POSTFIX,
        help="print the postfix notation",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="logging level (default: %(default)s)")
    argv = list(sys.argv[1:] if argv is None else argv)
    args, extras = parser.parse_known_args(argv)

    # expressions such as "-(3+5)" or "--3" look like options to argparse
    unknown = [arg for arg in extras if not validate(arg)]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    pending = args.expressions + extras
    expressions = [arg for arg in argv if arg in pending]

    setup_logging(args.log_level)

    if expressions:
        results = [run_line(expression.strip(), args.show_postfix) for expression in expressions]
        return 0 if all(results) else 1

    repl(args.show_postfix)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
