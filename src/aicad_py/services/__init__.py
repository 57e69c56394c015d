"""Services layer for aicad-py."""

from aicad_py.services.session import DrawingSession
from aicad_py.services.toolbox import TOOLS, ToolDefinition, Toolbox, parse_arguments

__all__ = ["TOOLS", "DrawingSession", "ToolDefinition", "Toolbox", "parse_arguments"]
