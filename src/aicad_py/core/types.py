"""Core type definitions for aicad-py."""

from __future__ import annotations

from enum import StrEnum


class ShapeType(StrEnum):
    """Enumeration of the drawable shape variants."""

    LINE = "line"
    RECTANGLE = "rectangle"
    ROUNDED_RECTANGLE = "rounded_rectangle"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    POLYLINE = "polyline"
    CURVE = "curve"
    FREE_FORM = "free_form"


class SceneEventType(StrEnum):
    """Enumeration of structural changes a scene reports to its observers."""

    ADDED = "added"
    CLEARED = "cleared"
