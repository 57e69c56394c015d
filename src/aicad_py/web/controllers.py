"""Litestar controllers for aicad-py API endpoints."""

from __future__ import annotations

from typing import Any, ClassVar

from litestar import Controller, delete, get, post
from litestar.exceptions import NotFoundException
from litestar.response import Response
from litestar.status_codes import HTTP_200_OK, HTTP_204_NO_CONTENT

from aicad_py.render.view import MemoryClipboard
from aicad_py.services.session import DrawingSession
from aicad_py.services.toolbox import Toolbox
from aicad_py.web.dto import (
    CopyResultDTO,
    SceneSummaryDTO,
    ShapeResponseDTO,
    ToolResultDTO,
    scene_to_summary,
    shape_to_response,
)


class ToolController(Controller):
    """Controller exposing the drawing tools.

    Agents discover the tools through ``GET /tools`` and call them through
    ``POST /tools/{name}`` with a JSON object of arguments.
    """

    path = "/tools"
    tags: ClassVar[list[str]] = ["Tools"]

    @get("/")
    async def list_tools(self, toolbox: Toolbox) -> list[dict[str, Any]]:
        """List all tools with their input schemas.

        Args:
            toolbox: The toolbox instance (injected).

        Returns:
            One descriptor per tool.
        """
        return toolbox.describe()

    @post("/{name:str}", status_code=HTTP_200_OK)
    async def invoke_tool(self, name: str, data: dict[str, Any], toolbox: Toolbox) -> ToolResultDTO:
        """Invoke a tool by name.

        Args:
            name: Tool name, e.g. ``draw-line``.
            data: Tool arguments keyed by parameter name.
            toolbox: The toolbox instance (injected).

        Returns:
            The tool name and its result.

        Raises:
            ToolNotFoundError: If the tool does not exist.
            InvalidToolArgumentsError: If an argument is missing or mistyped.
        """
        result = toolbox.invoke(name, data)
        return ToolResultDTO(tool=name, result=result)


class SceneController(Controller):
    """Controller for inspecting, clearing and exporting the drawing."""

    path = "/scene"
    tags: ClassVar[list[str]] = ["Scene"]

    @get("/")
    async def get_scene(self, session: DrawingSession) -> SceneSummaryDTO:
        """Get the paper size, shape count and bounds of the drawing."""
        return scene_to_summary(session.scene)

    @get("/shapes")
    async def list_shapes(self, session: DrawingSession) -> list[ShapeResponseDTO]:
        """List shapes in paint order."""
        return [shape_to_response(shape) for shape in session.scene]

    @delete("/", status_code=HTTP_204_NO_CONTENT)
    async def clear_scene(self, session: DrawingSession) -> None:
        """Remove every shape from the drawing."""
        session.scene.clear()

    @get("/view.png")
    async def view_png(self, session: DrawingSession) -> Response[bytes]:
        """Get the live view of the whole paper as PNG."""
        return Response(content=session.view.snapshot(), media_type="image/png")

    @get("/export.png")
    async def export_png(self, session: DrawingSession) -> Response[bytes]:
        """Get the drawing cropped to its bounds as PNG.

        Returns an empty 204 response when nothing has been drawn or the
        drawing is too large to export.
        """
        content = session.view.export_png()
        if content is None:
            return Response(content=b"", status_code=HTTP_204_NO_CONTENT)
        return Response(
            content=content,
            media_type="image/png",
            headers={"Content-Disposition": 'inline; filename="drawing.png"'},
        )

    @post("/copy", status_code=HTTP_200_OK)
    async def copy_to_clipboard(self, session: DrawingSession) -> CopyResultDTO:
        """Copy the cropped drawing to the session clipboard."""
        return CopyResultDTO(copied=session.copy_to_clipboard())

    @get("/clipboard.png")
    async def clipboard_png(self, session: DrawingSession) -> Response[bytes]:
        """Get the last image copied to the clipboard.

        Raises:
            NotFoundException: If the clipboard is empty or not readable.
        """
        clipboard = session.clipboard
        if not isinstance(clipboard, MemoryClipboard) or clipboard.data is None:
            raise NotFoundException(detail="Clipboard is empty")
        return Response(content=clipboard.data, media_type="image/png")
