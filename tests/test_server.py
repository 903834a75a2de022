from __future__ import annotations

import asyncio

import pytest

from inequalities_mcp import server as server_module
from inequalities_mcp.server import InequalitiesMCPHandler, build_fastmcp_server

COEFFICIENTS = [[1, 1], [-1, 2]]
BOUNDS = [4, 2]


def test_fastmcp_server_exposes_format_and_check_tools() -> None:
    handler = InequalitiesMCPHandler()
    server = build_fastmcp_server(handler)
    tools = asyncio.run(server.get_tools())
    assert sorted(tools.keys()) == ["check_vector", "format_system"]


def test_format_system_requires_coefficients() -> None:
    handler = InequalitiesMCPHandler()
    with pytest.raises(ValueError):
        handler.format_system([], [])


def test_check_vector_requires_coefficients() -> None:
    handler = InequalitiesMCPHandler()
    with pytest.raises(ValueError):
        handler.check_vector([], [], [1.0])


def test_format_system_returns_lines() -> None:
    handler = InequalitiesMCPHandler()
    result = handler.format_system(COEFFICIENTS, BOUNDS)

    assert result.structured_content["lines"] == ["1*x1 + 1*x2 ≤ 4", "-1*x1 + 2*x2 ≤ 2"]
    assert result.structured_content["inequalities_count"] == 2
    assert "-1*x1 + 2*x2 ≤ 2" in getattr(result.content[0], "text", "")


def test_check_vector_reports_satisfied_vector() -> None:
    handler = InequalitiesMCPHandler()
    result = handler.check_vector(COEFFICIENTS, BOUNDS, [1, 1])

    assert result.structured_content["satisfied"] is True
    assert result.structured_content["row_sums"] == [2.0, 1.0]
    assert "satisfies" in getattr(result.content[0], "text", "")


def test_check_vector_reports_violated_rows() -> None:
    handler = InequalitiesMCPHandler()
    result = handler.check_vector(COEFFICIENTS, BOUNDS, [5, 5])

    assert result.structured_content["satisfied"] is False
    assert result.structured_content["violated_rows"] == [0, 1]


def test_check_vector_short_circuits_on_length_mismatch() -> None:
    handler = InequalitiesMCPHandler()
    result = handler.check_vector(COEFFICIENTS, BOUNDS, [1, 2, 3])

    assert result.structured_content["error"] == "System validation failed"
    assert result.structured_content["issues"][0]["location"] == "vector"
    assert "check_vector" in getattr(result.content[0], "text", "")


def test_format_system_flags_ragged_matrix() -> None:
    handler = InequalitiesMCPHandler()
    result = handler.format_system([[1, 2], [3]], [1, 2])

    assert result.structured_content["error"] == "System validation failed"
    assert result.structured_content["issues"]


def test_run_defaults_log_level_when_config_leaves_it_empty(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("mcp_server:\n  log_level:\n", encoding="utf-8")
    seen: list[str] = []

    async def _fake_stdio(server, log_level: str) -> None:
        seen.append(log_level)

    monkeypatch.setattr(server_module, "_serve_stdio", _fake_stdio)

    assert server_module.run(["--config", str(config_path)]) == 0
    assert seen == ["INFO"]
