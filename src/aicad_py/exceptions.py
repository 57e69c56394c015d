"""Custom exceptions for aicad-py."""

from __future__ import annotations


class AICadError(Exception):
    """Base exception class for all aicad-py errors."""


class ToolNotFoundError(AICadError):
    """Raised when a tool is invoked by a name that is not registered.

    Attributes:
        tool_name: The requested tool name.
    """

    def __init__(self, tool_name: str) -> None:
        """Initialize the exception with the tool name.

        Args:
            tool_name: The requested tool name.
        """
        self.tool_name = tool_name
        super().__init__(f"Tool {tool_name!r} not found")


class InvalidToolArgumentsError(AICadError):
    """Raised when tool arguments are missing or have the wrong type.

    Attributes:
        tool_name: The tool being invoked.
        parameter: The offending parameter, if known.
    """

    def __init__(self, tool_name: str, message: str, parameter: str | None = None) -> None:
        """Initialize the exception.

        Args:
            tool_name: The tool being invoked.
            message: Description of what is wrong.
            parameter: The offending parameter, if known.
        """
        self.tool_name = tool_name
        self.parameter = parameter
        super().__init__(f"Invalid arguments for {tool_name}: {message}")
