"""Router configuration for the aicad-py API."""

from __future__ import annotations

from litestar import Router

from aicad_py.web.controllers import SceneController, ToolController


def create_router(path: str = "/api") -> Router:
    """Create the aicad-py API router.

    Args:
        path: The base path for all API routes. Defaults to "/api".

    Returns:
        A Router with the tool and scene controllers registered under ``path``.

    Example:
        >>> router = create_router("/api/v1")
        >>> # POST /api/v1/tools/draw-line now draws a line
    """
    return Router(
        path=path,
        route_handlers=[ToolController, SceneController],
    )
