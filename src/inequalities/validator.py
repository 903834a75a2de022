from __future__ import annotations

"""Lightweight validation for inequality-system payloads coming from tool calls."""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, List, Optional, Sequence


@dataclass
class SystemValidationIssue:
    """Represents a structural problem detected in a system payload."""

    location: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"location": self.location, "message": self.message}


def validate_system_payload(
    coefficients: Sequence[Sequence[Any]],
    bounds: Sequence[Any],
    vector: Optional[Sequence[Any]] = None,
) -> List[SystemValidationIssue]:
    """Scan a coefficient matrix, its bounds and an optional vector, returning issues."""

    issues: list[SystemValidationIssue] = []

    if not coefficients:
        issues.append(
            SystemValidationIssue("coefficients", "At least one inequality is required.")
        )
        return issues

    width = len(coefficients[0])
    if width == 0:
        issues.append(
            SystemValidationIssue("coefficients[0]", "At least one variable is required.")
        )

    for i, row in enumerate(coefficients):
        if len(row) != width:
            issues.append(
                SystemValidationIssue(
                    f"coefficients[{i}]",
                    f"Row has {len(row)} coefficients; expected {width} like the first row.",
                )
            )
        for j, value in enumerate(row):
            problem = _number_problem(value)
            if problem:
                issues.append(SystemValidationIssue(f"coefficients[{i}][{j}]", problem))

    if len(bounds) != len(coefficients):
        issues.append(
            SystemValidationIssue(
                "bounds",
                f"Expected {len(coefficients)} bounds (one per inequality), got {len(bounds)}.",
            )
        )
    for i, value in enumerate(bounds):
        problem = _number_problem(value)
        if problem:
            issues.append(SystemValidationIssue(f"bounds[{i}]", problem))

    if vector is not None:
        if width and len(vector) != width:
            issues.append(
                SystemValidationIssue(
                    "vector",
                    f"Expected {width} values (one per variable), got {len(vector)}.",
                )
            )
        for j, value in enumerate(vector):
            problem = _number_problem(value)
            if problem:
                issues.append(SystemValidationIssue(f"vector[{j}]", problem))

    return issues


def _number_problem(value: Any) -> str | None:
    if isinstance(value, bool) or not isinstance(value, Real):
        return f"Expected a number, got {value!r}."
    if not math.isfinite(value):
        return f"Value {value!r} is not finite."
    return None


__all__ = ["SystemValidationIssue", "validate_system_payload"]
