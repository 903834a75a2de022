"""Evaluate small systems of linear inequalities against candidate vectors."""

from .decorated import AnnouncingSystem, build_system
from .system import (
    DimensionError,
    InequalityCheckResult,
    InequalitySystem,
    VectorLengthError,
)
from .validator import SystemValidationIssue, validate_system_payload

__all__ = [
    "AnnouncingSystem",
    "DimensionError",
    "InequalityCheckResult",
    "InequalitySystem",
    "SystemValidationIssue",
    "VectorLengthError",
    "build_system",
    "validate_system_payload",
]

__version__ = "0.1.0"
