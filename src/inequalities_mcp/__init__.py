"""inequalities-mcp package.

Provides an MCP server that lets LLMs render systems of linear inequalities
and check candidate vectors against them.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
