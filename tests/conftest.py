from __future__ import annotations

import pytest

from inequalities.system import InequalitySystem


@pytest.fixture
def sample_system() -> InequalitySystem:
    """x1 + x2 <= 4 and -x1 + 2 x2 <= 2."""
    return InequalitySystem.from_rows([[1, 1], [-1, 2]], [4, 2])
