"""LangChain tool definitions for formatting and checking linear inequality systems."""

from typing import Any, Callable, List, Optional
import logging

from langchain_core.tools import tool
from pydantic import BaseModel, Field

from inequalities.system import InequalitySystem
from inequalities.validator import validate_system_payload


LOGGER = logging.getLogger("langchain_inequalities.tools")

SYSTEM_FORMAT_GUIDE = """
System Format Guide:

- coefficients: one list per inequality, one number per variable, in variable order.
  Every row has the same length; use 0 for a variable that does not appear.
- bounds: one right-hand side per inequality. Every inequality reads "<=";
  multiply a ">=" constraint by -1 before entering it.
- vector: one value per variable, in the same order as the coefficient columns.

Example: x1 + x2 <= 4 and -x1 + 2 x2 <= 2 become
  coefficients = [[1, 1], [-1, 2]], bounds = [4, 2]
"""


class FormatSystemInput(BaseModel):
    """Input schema for rendering a system."""

    coefficients: List[List[float]] = Field(
        description="Coefficient matrix, one row per inequality"
    )
    bounds: List[float] = Field(description="Right-hand side of each inequality")


class CheckVectorInput(BaseModel):
    """Input schema for checking a vector."""

    coefficients: List[List[float]] = Field(
        description="Coefficient matrix, one row per inequality"
    )
    bounds: List[float] = Field(description="Right-hand side of each inequality")
    vector: List[float] = Field(description="Candidate value of each variable")


def _require_coefficients(coefficients: Optional[List[List[Any]]]) -> Optional[dict]:
    """Return an error dict when no coefficient rows were supplied."""
    if not coefficients:
        return {
            "error": "coefficients are required",
            "issues": [
                {
                    "location": "coefficients",
                    "message": "coefficients are required",
                }
            ],
        }
    return None


def create_format_system_tool() -> Callable:
    """Create a LangChain tool that renders a system as text.

    Returns:
        A LangChain tool callable.
    """

    @tool(
        "format_system",
        args_schema=FormatSystemInput,
        description=(
            "Renders a system of linear inequalities as human-readable text, one "
            "inequality per line. Use it to confirm the system before checking vectors."
            f"\n\n{SYSTEM_FORMAT_GUIDE}"
        ),
    )
    def format_system_tool(coefficients: List[List[float]], bounds: List[float]) -> dict:
        error = _require_coefficients(coefficients)
        if error:
            return error

        LOGGER.info("format_system tool called")
        issues = validate_system_payload(coefficients, bounds)
        if issues:
            LOGGER.warning("System validation found %s issue(s)", len(issues))
            return {
                "error": "System validation failed",
                "issues": [issue.as_dict() for issue in issues],
            }

        system = InequalitySystem.from_rows(coefficients, bounds)
        lines = system.format_lines()
        return {"text": "\n".join(lines), "lines": lines}

    return format_system_tool


def create_check_vector_tool() -> Callable:
    """Create a LangChain tool that checks a vector against a system.

    Returns:
        A LangChain tool callable.
    """

    @tool(
        "check_vector",
        args_schema=CheckVectorInput,
        description=(
            "Substitutes a vector into every inequality and reports whether all of them "
            "hold, with the left-hand side of each row and the indices of violated rows. "
            "Validation is performed first; if any issues are found they are returned "
            "without evaluating."
            f"\n\n{SYSTEM_FORMAT_GUIDE}"
        ),
    )
    def check_vector_tool(
        coefficients: List[List[float]],
        bounds: List[float],
        vector: List[float],
    ) -> dict:
        error = _require_coefficients(coefficients)
        if error:
            return error

        LOGGER.info("check_vector tool called")
        issues = validate_system_payload(coefficients, bounds, vector)
        if issues:
            LOGGER.warning("System validation failed with %s issue(s)", len(issues))
            return {
                "error": "System validation failed",
                "issues": [issue.as_dict() for issue in issues],
            }

        system = InequalitySystem.from_rows(coefficients, bounds)
        payload = system.evaluate(vector).to_payload()
        LOGGER.info("check_vector completed (satisfied=%s)", payload["satisfied"])
        return payload

    return check_vector_tool
