"""Core tools-domain exports."""

from projectpilot.core.tools.definitions import ToolName, tool_definitions
from projectpilot.core.tools.dispatcher import ToolDispatcher, parse_tool_name, to_text_content

__all__ = ["ToolDispatcher", "ToolName", "parse_tool_name", "to_text_content", "tool_definitions"]
