"""aicad-py: vector drawing tools for tool-calling agents.

This package provides a small vector drawing model (shapes on a paper-sized
scene), a raster view that repaints incrementally as shapes arrive, cropped
PNG export and clipboard copy, and a set of named drawing tools that an agent
framework can discover and invoke, either in-process or over HTTP through a
Litestar plugin.

Key Components:
    - Core: Point, Rect, Size, Scene and the shape models
    - Render: render_shape, PillowSurface, CanvasView
    - Services: DrawingSession, Toolbox
    - Plugin: SketchPlugin / SketchConfig for Litestar integration

Quick Start:
    >>> from aicad_py import DrawingSession, Toolbox
    >>>
    >>> session = DrawingSession.create()
    >>> toolbox = Toolbox(session)
    >>> toolbox.invoke(
    ...     "draw-circle",
    ...     {"color": "Red", "line_width": 5, "center": {"x": 100, "y": 100}, "radius": 40, "filled": True},
    ... )
    >>> png = session.view.export_png()
"""

from __future__ import annotations

from aicad_py.core import (
    Circle,
    Curve,
    Ellipse,
    FreeFormStroke,
    Line,
    Point,
    Polyline,
    Rect,
    Rectangle,
    RoundedRectangle,
    Scene,
    SceneEvent,
    SceneEventType,
    Shape,
    ShapeType,
    Size,
)
from aicad_py.exceptions import AICadError, InvalidToolArgumentsError, ToolNotFoundError
from aicad_py.plugin import SketchConfig, SketchPlugin
from aicad_py.render import CanvasView, MemoryClipboard, PillowSurface, render_shape
from aicad_py.services import DrawingSession, Toolbox

__all__ = [
    "AICadError",
    "CanvasView",
    "Circle",
    "Curve",
    "DrawingSession",
    "Ellipse",
    "FreeFormStroke",
    "InvalidToolArgumentsError",
    "Line",
    "MemoryClipboard",
    "PillowSurface",
    "Point",
    "Polyline",
    "Rect",
    "Rectangle",
    "RoundedRectangle",
    "Scene",
    "SceneEvent",
    "SceneEventType",
    "Shape",
    "ShapeType",
    "Size",
    "SketchConfig",
    "SketchPlugin",
    "ToolNotFoundError",
    "Toolbox",
    "render_shape",
]

__version__ = "0.1.0"
