"""Interactive console entry point: enter a system, print it, check a vector."""

from __future__ import annotations

import argparse
import logging
import math
import re
from typing import Callable, List, Optional

from .config import load_config
from .decorated import EvaluatorLike, build_system
from .system import DimensionError

LOGGER = logging.getLogger("inequalities.console")

_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

INVALID_NUMBER_MESSAGE = "Invalid number, please try again."


class ConsoleIO:
    """Prompt/print pair; swapped out in tests."""

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._input = input_func or input
        self._output = output_func or print

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    def say(self, text: str = "") -> None:
        self._output(text)

    def read_float(self, prompt: str) -> float:
        """Prompt until the user enters a finite real number."""
        while True:
            raw = self._input(prompt)
            value = parse_float(raw)
            if value is not None:
                return value
            LOGGER.debug("Rejected numeric input %r", raw)
            self._output(INVALID_NUMBER_MESSAGE)


def parse_float(text: Optional[str]) -> Optional[float]:
    """Parse invariant-culture decimal text; ``None`` for anything else, including inf/nan."""
    if text is None:
        return None
    stripped = text.strip()
    if not _NUMBER_PATTERN.fullmatch(stripped):
        return None
    value = float(stripped)
    if not math.isfinite(value):
        return None
    return value


def input_coefficients(system: EvaluatorLike, io: ConsoleIO) -> None:
    io.say(
        f"\nEnter the coefficients for a system of {system.inequalities_count} "
        f"inequalities and {system.variables_count} variables:"
    )
    for i in range(system.inequalities_count):
        io.say(f"\nInequality {i + 1}:")
        for j in range(system.variables_count):
            system.set_coefficient(i, j, io.read_float(f"  Enter a{i + 1}{j + 1}: "))
        system.set_bound(i, io.read_float(f"  Enter b{i + 1}: "))


def print_system(system: EvaluatorLike, io: ConsoleIO) -> None:
    text = system.format()
    io.say("\nThe system of linear inequalities is:")
    io.say(text)


def input_vector(count: int, io: ConsoleIO) -> List[float]:
    io.say(f"\nEnter {count} variables to check:")
    return [io.read_float(f"x{j + 1} = ") for j in range(count)]


def run_session(io: ConsoleIO, rows: int = 2, cols: int = 2) -> bool:
    """Run one interactive session and return whether the entered vector satisfies the system."""
    io.say("=== Linear inequality system checker ===")
    io.say("Choose a mode:")
    io.say("1 - plain system")
    io.say("2 - special system")
    choice = io.ask("")

    system = build_system(choice, rows, cols, emit=io.say)
    input_coefficients(system, io)
    print_system(system, io)

    vector = input_vector(system.variables_count, io)
    result = system.satisfies(vector)
    io.say(
        "Vector satisfies the system" if result else "Vector does not satisfy the system"
    )
    return result


def _dimension(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return value


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check a vector against a system of linear inequalities")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to config.yaml (default: repo_root/config.yaml)",
    )
    parser.add_argument("--log-level", help="Python logging level (overrides config)")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, required=args.config is not None)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    settings = config["inequalities"]
    log_level = (args.log_level or settings.get("log_level") or "WARNING").upper()
    logging.basicConfig(level=log_level, format="[%(levelname)s] %(message)s")

    try:
        rows = _dimension(settings.get("rows"), "rows")
        cols = _dimension(settings.get("cols"), "cols")
    except ValueError as exc:
        LOGGER.error("Invalid system configuration: %s", exc)
        return 2

    try:
        run_session(ConsoleIO(), rows=rows, cols=cols)
    except DimensionError as exc:
        LOGGER.error("Invalid system configuration: %s", exc)
        return 2
    except (EOFError, KeyboardInterrupt):
        LOGGER.info("Session interrupted by user")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
