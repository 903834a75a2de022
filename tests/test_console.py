from __future__ import annotations

import builtins
from typing import Iterable

import pytest

from inequalities import console
from inequalities.console import INVALID_NUMBER_MESSAGE, ConsoleIO, parse_float, run_session
from inequalities.decorated import CHECK_BANNER, FORMAT_BANNER


class ScriptedIO(ConsoleIO):
    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []
        super().__init__(input_func=self._next_answer, output_func=self.output.append)

    def _next_answer(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


SYSTEM_ANSWERS = ["1", "1", "4", "-1", "2", "2"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3", 3.0),
        ("  -2.5 ", -2.5),
        ("+.5", 0.5),
        ("1e3", 1000.0),
        ("4.", 4.0),
    ],
)
def test_parse_float_accepts_invariant_numbers(text: str, expected: float) -> None:
    assert parse_float(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1,5", "1_000", "inf", "nan", "1e999", None])
def test_parse_float_rejects_garbage_and_non_finite(text: str | None) -> None:
    assert parse_float(text) is None


def test_read_float_reprompts_until_valid() -> None:
    io = ScriptedIO(["x", "Infinity", "", "7.25"])

    assert io.read_float("a11: ") == 7.25
    assert io.prompts == ["a11: "] * 4
    assert io.output == [INVALID_NUMBER_MESSAGE] * 3


def test_plain_session_prints_system_and_satisfied_vector() -> None:
    io = ScriptedIO(["1", *SYSTEM_ANSWERS, "oops", "1", "1"])

    assert run_session(io) is True

    assert "1*x1 + 1*x2 ≤ 4\n-1*x1 + 2*x2 ≤ 2" in io.output
    assert io.output.count(INVALID_NUMBER_MESSAGE) == 1
    assert io.output[-1] == "Vector satisfies the system"
    assert FORMAT_BANNER not in io.output
    assert CHECK_BANNER not in io.output
    assert "  Enter a12: " in io.prompts
    assert "  Enter b2: " in io.prompts
    assert io.prompts[-2:] == ["x1 = ", "x2 = "]


def test_special_session_announces_before_print_and_check() -> None:
    io = ScriptedIO(["2", *SYSTEM_ANSWERS, "5", "5"])

    assert run_session(io) is False

    header = "\nThe system of linear inequalities is:"
    assert io.output.index(FORMAT_BANNER) < io.output.index(header)
    assert io.output.index(CHECK_BANNER) < io.output.index("Vector does not satisfy the system")


def test_main_reads_dimensions_from_config(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("inequalities:\n  rows: 1\n  cols: 1\n", encoding="utf-8")
    answers = iter(["1", "2", "3", "1"])
    printed: list[str] = []
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    monkeypatch.setattr(builtins, "print", lambda *args, **kwargs: printed.append(" ".join(map(str, args))))

    assert console.main(["--config", str(config_path)]) == 0
    assert "2*x1 ≤ 3" in printed
    assert printed[-1] == "Vector satisfies the system"


def test_main_rejects_non_positive_dimensions(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("inequalities:\n  rows: 0\n", encoding="utf-8")
    monkeypatch.setattr(builtins, "input", lambda prompt="": "1")
    monkeypatch.setattr(builtins, "print", lambda *args, **kwargs: None)

    assert console.main(["--config", str(config_path)]) == 2


def test_main_returns_one_when_input_ends(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("inequalities:\n  log_level: error\n", encoding="utf-8")

    def _eof(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr(builtins, "input", _eof)
    monkeypatch.setattr(builtins, "print", lambda *args, **kwargs: None)

    assert console.main(["--config", str(config_path)]) == 1


def test_main_fails_fast_on_missing_explicit_config(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        console.main(["--config", str(tmp_path / "absent.yaml")])

    assert excinfo.value.code == 2


@pytest.mark.parametrize("rows", ["two", "null", "2.7", "true"])
def test_main_rejects_malformed_dimensions(tmp_path, monkeypatch, rows: str) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"inequalities:\n  rows: {rows}\n", encoding="utf-8")

    def _no_input(prompt: str = "") -> str:
        raise AssertionError("no prompt expected for a bad configuration")

    monkeypatch.setattr(builtins, "input", _no_input)
    monkeypatch.setattr(builtins, "print", lambda *args, **kwargs: None)

    assert console.main(["--config", str(config_path)]) == 2


def test_main_tolerates_empty_log_level(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("inequalities:\n  log_level:\n", encoding="utf-8")

    def _eof(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr(builtins, "input", _eof)
    monkeypatch.setattr(builtins, "print", lambda *args, **kwargs: None)

    assert console.main(["--config", str(config_path)]) == 1
