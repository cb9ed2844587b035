"""Console — консольный front-end вычислителя

Читает одно выражение (аргумент командной строки или строка из stdin),
вычисляет его через ArithmeticEngine и печатает результат:
- "Result: <value>"              → exit 0
- "Error: <message>"             → exit 1 (InvalidFormat, невалидный payload)
- "Unexpected error: <message>"  → exit 2 (UnexpectedOperator)

Режим --json: на входе payload evaluation_request, на выходе evaluation_result.
"""

import argparse
import json
import logging
import sys
from typing import Final, Optional, Sequence

from jsonschema import ValidationError

from src.engine import ArithmeticEngine, EngineConfig, InvalidFormat, UnexpectedOperator

logger = logging.getLogger(__name__)

PROMPT: Final[str] = (
    "Enter an expression with large integers "
    "(e.g., '123456789 + 987654321' or '987654321 - 123456789'): "
)

EXIT_OK: Final[int] = 0
EXIT_INVALID_INPUT: Final[int] = 1
EXIT_INTERNAL_ERROR: Final[int] = 2


def build_parser() -> argparse.ArgumentParser:
    """
    Парсер аргументов командной строки bigint-calc.

    Returns:
        ArgumentParser с позиционным expression и опциями --json,
        --max-digits, --log-level
    """
    parser = argparse.ArgumentParser(
        prog="bigint-calc",
        description="Exact addition and subtraction of arbitrarily large non-negative integers.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="expression such as '123 + 456'; read from stdin when omitted",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help='treat input as a JSON request {"expression": "..."} and print a JSON result',
    )
    parser.add_argument(
        "--max-digits",
        type=int,
        default=None,
        help="reject operands longer than this many digits",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser


def _read_expression(args: argparse.Namespace) -> str:
    """
    Текст выражения: позиционный аргумент или одна строка из stdin.

    Args:
        args: Разобранные аргументы командной строки

    Returns:
        Выражение без завершающего перевода строки
    """
    if args.expression is not None:
        return args.expression
    print(PROMPT)
    return sys.stdin.readline().rstrip("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Точка входа консоли.

    Args:
        argv: Аргументы командной строки (None = sys.argv[1:])

    Returns:
        Код выхода: EXIT_OK, EXIT_INVALID_INPUT или EXIT_INTERNAL_ERROR
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        config = EngineConfig(max_operand_digits=args.max_digits)
    except ValueError as e:
        parser.error(str(e))

    engine = ArithmeticEngine(config)
    text = _read_expression(args)

    try:
        if args.json:
            print(json.dumps(engine.evaluate_payload(json.loads(text))))
        else:
            print(f"Result: {engine.evaluate(text)}")
    except json.JSONDecodeError as e:
        print(f"Error: request is not valid JSON: {e.msg}")
        return EXIT_INVALID_INPUT
    except ValidationError as e:
        print(f"Error: {e.message}")
        return EXIT_INVALID_INPUT
    except InvalidFormat as e:
        print(f"Error: {e}")
        return EXIT_INVALID_INPUT
    except UnexpectedOperator as e:
        logger.exception("Internal error while evaluating %r", text)
        print(f"Unexpected error: {e}")
        return EXIT_INTERNAL_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
