"""Rendering of scenes onto drawing surfaces."""

from aicad_py.render.renderer import render_shape
from aicad_py.render.surface import DrawingSurface, PillowSurface
from aicad_py.render.view import EXPORT_PADDING, CanvasView, Clipboard, MemoryClipboard

__all__ = [
    "EXPORT_PADDING",
    "CanvasView",
    "Clipboard",
    "DrawingSurface",
    "MemoryClipboard",
    "PillowSurface",
    "render_shape",
]
