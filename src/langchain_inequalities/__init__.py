"""LangChain tools for linear inequality systems."""

from .tools import (
	create_check_vector_tool,
	create_format_system_tool,
)

__all__ = [
	"create_check_vector_tool",
	"create_format_system_tool",
]
