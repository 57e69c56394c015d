"""Core drawing model for aicad-py."""

from aicad_py.core.colors import AVAILABLE_COLORS, DEFAULT_COLOR, FALLBACK_COLOR, resolve_color_name, to_rgba
from aicad_py.core.geometry import (
    Point,
    PointSequence,
    Rect,
    Size,
    distance,
    flatten_bezier,
    rounded_rect_outline,
    smoothed_polygon,
    smoothed_polyline,
)
from aicad_py.core.scene import DEFAULT_PAPER_SIZE, Scene, SceneEvent
from aicad_py.core.shapes import (
    Circle,
    Curve,
    Ellipse,
    FreeFormStroke,
    Line,
    Polyline,
    Rectangle,
    RoundedRectangle,
    Shape,
)
from aicad_py.core.types import SceneEventType, ShapeType

__all__ = [
    "AVAILABLE_COLORS",
    "DEFAULT_COLOR",
    "DEFAULT_PAPER_SIZE",
    "FALLBACK_COLOR",
    "Circle",
    "Curve",
    "Ellipse",
    "FreeFormStroke",
    "Line",
    "Point",
    "PointSequence",
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
    "distance",
    "flatten_bezier",
    "resolve_color_name",
    "rounded_rect_outline",
    "smoothed_polygon",
    "smoothed_polyline",
    "to_rgba",
]
