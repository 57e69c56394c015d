"""Web layer for aicad-py API."""

from aicad_py.web.controllers import SceneController, ToolController
from aicad_py.web.router import create_router

__all__ = ["SceneController", "ToolController", "create_router"]
