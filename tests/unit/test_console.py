"""Тесты для консольного front-end

Покрытие:
- Выражение из аргумента и из stdin (с приглашением)
- Коды возврата для ошибок ввода и внутренних ошибок
- Режим --json
- --max-digits
"""

import io
import json

import pytest

from src.console.main import (
    EXIT_INTERNAL_ERROR,
    EXIT_INVALID_INPUT,
    EXIT_OK,
    PROMPT,
    build_parser,
    main,
)
from src.engine import ArithmeticEngine, UnexpectedOperator


class TestArgumentParser:
    """Разбор аргументов командной строки."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.expression is None
        assert args.json is False
        assert args.max_digits is None
        assert args.log_level == "WARNING"

    def test_options(self):
        args = build_parser().parse_args(["--json", "--max-digits", "5", "--log-level", "DEBUG", "1 + 1"])
        assert (args.expression, args.json, args.max_digits, args.log_level) == ("1 + 1", True, 5, "DEBUG")


class TestExpressionArgument:
    """Выражение передано аргументом."""

    def test_result_printed(self, capsys):
        assert main(["123456789 + 987654321"]) == EXIT_OK
        assert capsys.readouterr().out == "Result: 1111111110\n"

    def test_negative_result(self, capsys):
        assert main(["5 - 10"]) == EXIT_OK
        assert capsys.readouterr().out == "Result: -5\n"

    def test_invalid_expression(self, capsys):
        assert main(["12 * 3"]) == EXIT_INVALID_INPUT
        out = capsys.readouterr().out
        assert out.startswith("Error: Invalid expression format")


class TestStdin:
    """Выражение читается из stdin."""

    def test_prompt_and_result(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("999 + 1\n"))
        assert main([]) == EXIT_OK
        out = capsys.readouterr().out
        assert out == f"{PROMPT}\nResult: 1000\n"

    def test_empty_line(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main([]) == EXIT_INVALID_INPUT
        assert "Error: Invalid expression format" in capsys.readouterr().out


class TestInternalError:
    """UnexpectedOperator печатается отдельно от ошибок ввода."""

    def test_unexpected_operator(self, capsys, monkeypatch):
        def broken_evaluate(self, expression):
            raise UnexpectedOperator("Unexpected operator: *")

        monkeypatch.setattr(ArithmeticEngine, "evaluate", broken_evaluate)
        assert main(["1 + 1"]) == EXIT_INTERNAL_ERROR
        assert capsys.readouterr().out == "Unexpected error: Unexpected operator: *\n"


class TestJsonMode:
    """Режим --json."""

    def test_valid_request(self, capsys):
        assert main(["--json", '{"expression": "10 - 10"}']) == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"expression": "10 - 10", "operator": "-", "value": "0"}

    def test_malformed_json(self, capsys):
        assert main(["--json", "{not json"]) == EXIT_INVALID_INPUT
        assert capsys.readouterr().out.startswith("Error: request is not valid JSON")

    def test_contract_violation(self, capsys):
        assert main(["--json", '{"expr": "1 + 1"}']) == EXIT_INVALID_INPUT
        assert capsys.readouterr().out.startswith("Error: ")


class TestMaxDigits:
    """Ограничение длины операнда."""

    def test_limit_applied(self, capsys):
        assert main(["--max-digits", "2", "100 + 1"]) == EXIT_INVALID_INPUT
        assert "limit of 2 digits" in capsys.readouterr().out

    def test_invalid_limit(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--max-digits", "0", "1 + 1"])
        assert exc_info.value.code == 2
