from __future__ import annotations

"""Model Context Protocol server for formatting and checking linear inequality systems."""

import argparse
import asyncio
import logging
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult

from . import __version__
from inequalities.config import load_config
from inequalities.system import InequalitySystem
from inequalities.validator import SystemValidationIssue, validate_system_payload

LOGGER = logging.getLogger("inequalities_mcp.server")

INSTRUCTIONS = """Use inequalities-mcp to check candidate points against a system of linear inequalities of the form a_i1*x1 + ... + a_in*xn <= b_i. Workflow: (1) restate the constraints; (2) write them as a coefficient matrix (one row per inequality, one column per variable) and a bounds list (one right-hand side per inequality); (3) call format_system to confirm the system reads as intended; (4) call check_vector with the candidate values, one per variable, in column order; (5) report whether the vector satisfies the system and which inequalities are violated.

- Every inequality must be written with "<=". Multiply a ">=" constraint by -1 before entering it.
- All rows must have the same number of coefficients; use 0 for a variable that does not appear.
- Values must be finite numbers.

Example: x1 + x2 <= 4 and -x1 + 2 x2 <= 2 become coefficients [[1, 1], [-1, 2]] and bounds [4, 2].
"""

FORMAT_SYSTEM_DESCRIPTION = "This tool renders a system of linear inequalities (coefficient matrix plus bounds) as human-readable text, one inequality per line. Use it to confirm the system before checking vectors."

CHECK_VECTOR_DESCRIPTION = "This tool substitutes a vector into every inequality of the system and reports whether all of them hold (<=), together with the left-hand side of each row and the indices of violated rows."


def _issue_result(header: str, issues: list[SystemValidationIssue]) -> ToolResult:
    issue_lines = [
        header,
        *[f"  {issue.location}: {issue.message}" for issue in issues],
    ]
    return ToolResult(
        content="\n".join(issue_lines),
        structured_content={
            "error": "System validation failed",
            "issues": [issue.as_dict() for issue in issues],
        },
    )


class InequalitiesMCPHandler:
    """Business logic for the format_system and check_vector tools."""

    def __init__(self, *, instructions: str | None = None) -> None:
        self.instructions = instructions or INSTRUCTIONS

    def format_system(self, coefficients: list[list[Any]], bounds: list[Any]) -> ToolResult:
        if not coefficients:
            raise ValueError("coefficients are required")

        LOGGER.info("Tool call received: format_system")

        issues = validate_system_payload(coefficients, bounds)
        if issues:
            LOGGER.warning("System validation found %s issue(s)", len(issues))
            return _issue_result("System validation found the following issues:", issues)

        system = InequalitySystem.from_rows(coefficients, bounds)
        lines = system.format_lines()
        LOGGER.info("Tool format_system rendered %s inequalities", len(lines))
        return ToolResult(
            content="\n".join(lines),
            structured_content={
                "inequalities_count": system.inequalities_count,
                "variables_count": system.variables_count,
                "lines": lines,
            },
        )

    def check_vector(
        self,
        coefficients: list[list[Any]],
        bounds: list[Any],
        vector: list[Any],
    ) -> ToolResult:
        if not coefficients:
            raise ValueError("coefficients are required")

        LOGGER.info("Tool call received: check_vector")

        issues = validate_system_payload(coefficients, bounds, vector)
        if issues:
            LOGGER.warning("System validation failed with %s issue(s)", len(issues))
            return _issue_result(
                "System validation failed. Fix the issues below before calling check_vector:",
                issues,
            )

        system = InequalitySystem.from_rows(coefficients, bounds)
        payload = system.evaluate(vector).to_payload()
        LOGGER.info("Tool check_vector completed (satisfied=%s)", payload["satisfied"])
        return ToolResult(content=payload["summary"], structured_content=payload)


def build_fastmcp_server(handler: InequalitiesMCPHandler) -> FastMCP:
    server = FastMCP(
        name="inequalities-mcp",
        version=__version__,
        instructions=handler.instructions,
    )

    @server.tool(name="format_system", description=FORMAT_SYSTEM_DESCRIPTION)
    def format_system_tool(coefficients: list[list[float]], bounds: list[float]) -> ToolResult:
        return handler.format_system(coefficients=coefficients, bounds=bounds)

    @server.tool(name="check_vector", description=CHECK_VECTOR_DESCRIPTION)
    def check_vector_tool(
        coefficients: list[list[float]],
        bounds: list[float],
        vector: list[float],
    ) -> ToolResult:
        return handler.check_vector(coefficients=coefficients, bounds=bounds, vector=vector)

    return server


async def _serve_stdio(server: FastMCP, log_level: str) -> None:
    await server.run_stdio_async(show_banner=False, log_level=log_level)


async def _serve_http(server: FastMCP, host: str, port: int, log_level: str) -> None:
    await server.run_http_async(
        transport="streamable-http",
        host=host,
        port=port,
        path="/mcp",
        show_banner=False,
        log_level=log_level,
    )


def run(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="inequalities-mcp server")
    transport_group = parser.add_mutually_exclusive_group()
    transport_group.add_argument(
        "--stdio",
        action="store_true",
        help="Run using stdio transport (default)",
    )
    transport_group.add_argument(
        "--http",
        action="store_true",
        help="Run using the FastMCP streamable HTTP transport",
    )
    parser.add_argument("--http-host", help="HTTP bind host (overrides config)")
    parser.add_argument("--http-port", type=int, help="HTTP bind port (overrides config)")
    parser.add_argument("--log-level", help="Python logging level (overrides config)")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to config.yaml (default: repo_root/config.yaml)",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, required=args.config is not None)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    mcp_config = config["mcp_server"]
    http_host = args.http_host or mcp_config["http_host"]
    http_port = args.http_port or int(mcp_config["http_port"])
    log_level = (args.log_level or mcp_config.get("log_level") or "INFO").upper()

    logging.basicConfig(level=log_level, format="[%(levelname)s] %(message)s")

    handler = InequalitiesMCPHandler()
    fastmcp_server = build_fastmcp_server(handler)

    try:
        if args.http:
            LOGGER.info("Starting HTTP MCP server on %s:%s", http_host, http_port)
            asyncio.run(_serve_http(fastmcp_server, http_host, http_port, log_level))
        else:
            LOGGER.info("Starting stdio MCP server")
            asyncio.run(_serve_stdio(fastmcp_server, log_level))
    except KeyboardInterrupt:
        LOGGER.info("Server interrupted by user")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
