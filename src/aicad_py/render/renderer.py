"""Per-shape rendering.

``render_shape`` is the only place that turns a shape into drawing calls.
Incremental painting, full repaints and exports all go through it, so they
always produce the same output for the same shapes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from aicad_py.core.colors import to_rgba
from aicad_py.core.types import ShapeType

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from aicad_py.core.colors import RGBA
    from aicad_py.core.geometry import Point
    from aicad_py.core.shapes import (
        Circle,
        Curve,
        Ellipse,
        Line,
        Polyline,
        Rectangle,
        RoundedRectangle,
        Shape,
    )
    from aicad_py.render.surface import DrawingSurface


def _draw_segments(surface: DrawingSurface, color: RGBA, width: float, points: Sequence[Point]) -> None:
    """Draw raw straight segments, the fallback for degenerate point lists."""
    if len(points) < 2:
        return
    if len(points) == 2:
        surface.draw_line(color, width, points[0], points[1])
    else:
        surface.draw_polyline(color, width, points)


def _render_line(shape: Line, surface: DrawingSurface, color: RGBA) -> None:
    surface.draw_line(color, shape.stroke_width, shape.start, shape.end)


def _render_rectangle(shape: Rectangle, surface: DrawingSurface, color: RGBA) -> None:
    if shape.filled:
        surface.fill_rectangle(color, shape.rect)
    surface.draw_rectangle(color, shape.stroke_width, shape.rect)


def _render_rounded_rectangle(shape: RoundedRectangle, surface: DrawingSurface, color: RGBA) -> None:
    if shape.filled:
        surface.fill_rounded_rectangle(color, shape.rect, shape.corner_radius)
    surface.draw_rounded_rectangle(color, shape.stroke_width, shape.rect, shape.corner_radius)


def _render_ellipse(shape: Circle | Ellipse, surface: DrawingSurface, color: RGBA) -> None:
    rect = shape.outline_bounds()
    if shape.filled:
        surface.fill_ellipse(color, rect)
    surface.draw_ellipse(color, shape.stroke_width, rect)


def _render_polyline(shape: Polyline, surface: DrawingSurface, color: RGBA) -> None:
    points = shape.points
    if shape.closed and len(points) >= 3:
        if shape.filled:
            surface.fill_polygon(color, points)
        surface.draw_polyline(color, shape.stroke_width, points, closed=True)
        return
    _draw_segments(surface, color, shape.stroke_width, points)


def _render_curve(shape: Curve, surface: DrawingSurface, color: RGBA) -> None:
    points = shape.points
    controls = shape.bezier_controls()
    if controls is None:
        _draw_segments(surface, color, shape.stroke_width, points)
        return

    if shape.closed:
        if shape.filled:
            surface.fill_bezier(color, points[1], controls)
        surface.draw_bezier(color, shape.stroke_width, points[1], controls)
        return

    # Smoothing covers points[1] .. points[-2]; the end spans stay straight.
    surface.draw_line(color, shape.stroke_width, points[0], points[1])
    surface.draw_bezier(color, shape.stroke_width, points[1], controls)
    surface.draw_line(color, shape.stroke_width, points[-2], points[-1])


_RENDERERS: dict[ShapeType, Callable[[Any, DrawingSurface, RGBA], None]] = {
    ShapeType.LINE: _render_line,
    ShapeType.RECTANGLE: _render_rectangle,
    ShapeType.ROUNDED_RECTANGLE: _render_rounded_rectangle,
    ShapeType.CIRCLE: _render_ellipse,
    ShapeType.ELLIPSE: _render_ellipse,
    ShapeType.POLYLINE: _render_polyline,
    ShapeType.CURVE: _render_curve,
    ShapeType.FREE_FORM: _render_curve,
}


def render_shape(shape: Shape, surface: DrawingSurface) -> None:
    """Draw a single shape.

    Filled shapes are filled before their outline is stroked, so the outline
    stays visible on top of the fill.

    Args:
        shape: The shape to draw.
        surface: Target drawing surface.
    """
    _RENDERERS[shape.shape_type](shape, surface, to_rgba(shape.color))
