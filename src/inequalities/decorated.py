from __future__ import annotations

"""Optional decoration layer announcing format/check calls before delegating."""

import logging
from typing import Callable, List, Optional, Sequence, Union

from .system import InequalityCheckResult, InequalitySystem

LOGGER = logging.getLogger("inequalities.decorated")

FORMAT_BANNER = "--- Special inequality system ---"
CHECK_BANNER = "Checking the vector in the special system..."

PLAIN_MODE = "1"


class AnnouncingSystem:
    """Wraps an :class:`InequalitySystem` and emits a message before printing or checking.

    Results are always those of the wrapped system.
    """

    def __init__(
        self,
        system: InequalitySystem,
        *,
        emit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._system = system
        self._emit = emit or print

    @property
    def inner(self) -> InequalitySystem:
        return self._system

    @property
    def inequalities_count(self) -> int:
        return self._system.inequalities_count

    @property
    def variables_count(self) -> int:
        return self._system.variables_count

    def set_coefficient(self, row: int, column: int, value: float) -> None:
        self._system.set_coefficient(row, column, value)

    def set_bound(self, row: int, value: float) -> None:
        self._system.set_bound(row, value)

    def format_lines(self) -> List[str]:
        return self._system.format_lines()

    def format(self) -> str:
        self._emit(FORMAT_BANNER)
        return self._system.format()

    def evaluate(self, variables: Sequence[float]) -> InequalityCheckResult:
        self._emit(CHECK_BANNER)
        return self._system.evaluate(variables)

    def satisfies(self, variables: Sequence[float]) -> bool:
        return self.evaluate(variables).satisfied


EvaluatorLike = Union[InequalitySystem, AnnouncingSystem]


def build_system(
    mode: str,
    inequalities_count: int = 2,
    variables_count: int = 2,
    *,
    emit: Optional[Callable[[str], None]] = None,
) -> EvaluatorLike:
    """Mode ``"1"`` gives the plain evaluator; anything else gets the announcing layer."""
    system = InequalitySystem(inequalities_count, variables_count)
    if (mode or "").strip() == PLAIN_MODE:
        LOGGER.info("Using plain system (%sx%s)", inequalities_count, variables_count)
        return system
    LOGGER.info("Using special system (%sx%s)", inequalities_count, variables_count)
    return AnnouncingSystem(system, emit=emit)


__all__ = [
    "AnnouncingSystem",
    "CHECK_BANNER",
    "EvaluatorLike",
    "FORMAT_BANNER",
    "PLAIN_MODE",
    "build_system",
]
