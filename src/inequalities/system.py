from __future__ import annotations

"""Dense systems of linear inequalities of the form sum(a_ij * x_j) <= b_i."""

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

LOGGER = logging.getLogger("inequalities.system")

LESS_EQUAL = "≤"


class DimensionError(ValueError):
    """Raised when a system is built with a non-positive or ragged shape."""


class VectorLengthError(ValueError):
    """Raised when a check vector does not match the variable count."""


@dataclass
class InequalityCheckResult:
    satisfied: bool
    row_sums: List[float]
    bounds: List[float]
    violated_rows: List[int]
    summary: str

    def to_payload(self) -> dict:
        return {
            "satisfied": self.satisfied,
            "row_sums": self.row_sums,
            "bounds": self.bounds,
            "violated_rows": self.violated_rows,
            "summary": self.summary,
        }


class InequalitySystem:
    """A fixed-size system of linear inequalities, all entries zero until set."""

    def __init__(self, inequalities_count: int, variables_count: int) -> None:
        if inequalities_count <= 0 or variables_count <= 0:
            raise DimensionError(
                "Number of inequalities and variables must be greater than 0 "
                f"(got {inequalities_count}x{variables_count})."
            )
        self.inequalities_count = inequalities_count
        self.variables_count = variables_count
        self._coefficients = [[0.0] * variables_count for _ in range(inequalities_count)]
        self._bounds = [0.0] * inequalities_count

    @classmethod
    def from_rows(
        cls, coefficients: Sequence[Sequence[float]], bounds: Sequence[float]
    ) -> "InequalitySystem":
        """Build a populated system from a row-major matrix and its bounds."""
        if not coefficients or not coefficients[0]:
            raise DimensionError("Coefficient matrix must have at least one row and column.")
        width = len(coefficients[0])
        if any(len(row) != width for row in coefficients):
            raise DimensionError("All coefficient rows must have the same length.")
        if len(bounds) != len(coefficients):
            raise DimensionError(
                f"Expected {len(coefficients)} bounds, got {len(bounds)}."
            )

        system = cls(len(coefficients), width)
        for i, row in enumerate(coefficients):
            for j, value in enumerate(row):
                system.set_coefficient(i, j, value)
            system.set_bound(i, bounds[i])
        return system

    @property
    def coefficients(self) -> List[List[float]]:
        return [list(row) for row in self._coefficients]

    @property
    def bounds(self) -> List[float]:
        return list(self._bounds)

    def set_coefficient(self, row: int, column: int, value: float) -> None:
        _check_index(row, self.inequalities_count, "row")
        _check_index(column, self.variables_count, "column")
        self._coefficients[row][column] = float(value)

    def set_bound(self, row: int, value: float) -> None:
        _check_index(row, self.inequalities_count, "row")
        self._bounds[row] = float(value)

    def format_lines(self) -> List[str]:
        lines = []
        for row, bound in zip(self._coefficients, self._bounds):
            parts = []
            for j, coeff in enumerate(row):
                if j == 0:
                    sign = "-" if coeff < 0 else ""
                else:
                    sign = " - " if coeff < 0 else " + "
                parts.append(f"{sign}{format_number(abs(coeff))}*x{j + 1}")
            parts.append(f" {LESS_EQUAL} {format_number(bound)}")
            lines.append("".join(parts))
        return lines

    def format(self) -> str:
        return "\n".join(self.format_lines())

    def evaluate(self, variables: Sequence[float]) -> InequalityCheckResult:
        """Substitute ``variables`` into every row and compare against its bound."""
        if len(variables) != self.variables_count:
            raise VectorLengthError(
                f"Expected {self.variables_count} variables, got {len(variables)}."
            )

        row_sums: List[float] = []
        violated: List[int] = []
        for i, row in enumerate(self._coefficients):
            total = 0.0
            for coeff, value in zip(row, variables):
                total += coeff * float(value)
            row_sums.append(total)
            # NaN sums from overflowing products count as violated
            if not total <= self._bounds[i]:
                violated.append(i)

        satisfied = not violated
        if satisfied:
            summary = "Vector satisfies all inequalities."
        else:
            rows = ", ".join(str(i + 1) for i in violated)
            summary = f"Vector violates inequalities: {rows}."
        LOGGER.debug("Evaluated %s: sums=%s violated=%s", list(variables), row_sums, violated)

        return InequalityCheckResult(
            satisfied=satisfied,
            row_sums=row_sums,
            bounds=self.bounds,
            violated_rows=violated,
            summary=summary,
        )

    def satisfies(self, variables: Sequence[float]) -> bool:
        return self.evaluate(variables).satisfied

    def __repr__(self) -> str:
        return f"InequalitySystem({self.inequalities_count}, {self.variables_count})"


def format_number(value: float) -> str:
    """Render a float the invariant way: ``1`` for whole values, shortest repr otherwise."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def _check_index(index: int, size: int, label: str) -> None:
    if not 0 <= index < size:
        raise IndexError(f"{label} index {index} out of range 0..{size - 1}")


__all__ = [
    "DimensionError",
    "InequalityCheckResult",
    "InequalitySystem",
    "VectorLengthError",
    "format_number",
]
