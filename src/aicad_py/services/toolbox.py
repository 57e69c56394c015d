"""Drawing tools exposed to agent frameworks.

Each tool is a plain method on ``Toolbox``. The registry in ``TOOLS`` names
every tool the way agents see it (``draw-line``, ``clear-all``, ...) and pairs
it with a msgspec ``Struct`` describing its arguments. The structs validate
incoming JSON arguments and produce the JSON schema an agent framework uses to
discover the tool.

Arguments are checked by type only. Ranges are left to the caller: the tool
descriptions ask for line widths between 3 and 30, but nothing enforces it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any

import msgspec
import structlog
from msgspec import Meta

from aicad_py.core.colors import AVAILABLE_COLORS, resolve_color_name
from aicad_py.core.geometry import Point, Rect, Size
from aicad_py.core.shapes import (
    Circle,
    Curve,
    Ellipse,
    FreeFormStroke,
    Line,
    Polyline,
    Rectangle,
    RoundedRectangle,
)
from aicad_py.exceptions import InvalidToolArgumentsError, ToolNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from aicad_py.core.shapes import Shape
    from aicad_py.services.session import DrawingSession

logger = structlog.get_logger(__name__)

# Geometry arguments are objects (``{"x": 1, "y": 2}``) or plain arrays (``[1, 2]``).
PointArg = Point | tuple[float, float]
RectArg = Rect | tuple[float, float, float, float]
SizeArg = Size | tuple[float, float]

_ERROR_PATH = re.compile(r"at `\$\.(\w+)")
_MISSING_FIELD = re.compile(r"missing required field `(\w+)`")


class NoArguments(msgspec.Struct):
    """Arguments of a tool that takes none."""


class LineArguments(msgspec.Struct):
    """Arguments of ``draw-line``."""

    color: Annotated[str, Meta(description="The color of the line.")]
    line_width: Annotated[float, Meta(description="The line width (3 to 30) of the line.")]
    start: Annotated[PointArg, Meta(description="The starting point of the line.")]
    end: Annotated[PointArg, Meta(description="The ending point of the line.")]


class RectangleArguments(msgspec.Struct):
    """Arguments of ``draw-rectangle``."""

    color: Annotated[str, Meta(description="The color of the rectangle.")]
    line_width: Annotated[float, Meta(description="The line width (3 to 30) of the rectangle.")]
    rect: Annotated[RectArg, Meta(description="The position and size of the rectangle.")]
    filled: Annotated[bool, Meta(description="Whether the rectangle is filled.")]


class RoundedRectangleArguments(msgspec.Struct):
    """Arguments of ``draw-rounded-rectangle``."""

    color: Annotated[str, Meta(description="The color of the rounded rectangle.")]
    line_width: Annotated[float, Meta(description="The line width (3 to 30) of the rounded rectangle.")]
    rect: Annotated[RectArg, Meta(description="The position and size of the rounded rectangle.")]
    corner_radius: Annotated[SizeArg, Meta(description="The corner radius of the rounded rectangle.")]
    filled: Annotated[bool, Meta(description="Whether the rounded rectangle is filled.")]


class CircleArguments(msgspec.Struct):
    """Arguments of ``draw-circle``."""

    color: Annotated[str, Meta(description="The color of the circle.")]
    line_width: Annotated[float, Meta(description="The line width (3 to 30) of the circle.")]
    center: Annotated[PointArg, Meta(description="The center point of the circle.")]
    radius: Annotated[float, Meta(description="The radius of the circle.")]
    filled: Annotated[bool, Meta(description="Whether the circle is filled.")]


class EllipseArguments(msgspec.Struct):
    """Arguments of ``draw-ellipse``."""

    color: Annotated[str, Meta(description="The color of the ellipse.")]
    line_width: Annotated[float, Meta(description="The line width (3 to 30) of the ellipse.")]
    center: Annotated[PointArg, Meta(description="The center point of the ellipse.")]
    radius_x: Annotated[float, Meta(description="The radius of the ellipse in the x-direction.")]
    radius_y: Annotated[float, Meta(description="The radius of the ellipse in the y-direction.")]
    filled: Annotated[bool, Meta(description="Whether the ellipse is filled.")]


class PolylineArguments(msgspec.Struct):
    """Arguments of ``draw-polyline-or-polygon``."""

    color: Annotated[str, Meta(description="The color of the polyline or polygon.")]
    line_width: Annotated[float, Meta(description="The line width (3 to 30) of the polyline or polygon.")]
    points: Annotated[list[PointArg], Meta(description="Points that make up the polyline or polygon.")]
    closed: Annotated[bool, Meta(description="Whether the polyline or polygon is closed.")]
    filled: Annotated[bool, Meta(description="Whether the polygon is filled.")]


class CurveArguments(msgspec.Struct):
    """Arguments of ``draw-curve``."""

    color: Annotated[str, Meta(description="The color of the curve.")]
    line_width: Annotated[float, Meta(description="The line width (3 to 30) of the curve.")]
    points: Annotated[list[PointArg], Meta(description="Points the curve passes through.")]
    closed: Annotated[bool, Meta(description="Whether the curve is closed.")]
    filled: Annotated[bool, Meta(description="Whether the curve is filled.")]


class FreeFormArguments(msgspec.Struct):
    """Arguments of ``draw-free-form-curve``."""

    color: Annotated[str, Meta(description="The color of the free-form curve.")]
    line_width: Annotated[float, Meta(description="The line width (3 to 30) of the free-form curve.")]
    points: Annotated[list[PointArg], Meta(description="Points that make up the free-form curve.")]
    closed: Annotated[bool, Meta(description="Whether the free-form curve is closed.")]


@dataclass(frozen=True)
class ToolDefinition:
    """Registry entry describing one tool.

    Attributes:
        name: Public tool name.
        description: Text shown to the model.
        method: Name of the Toolbox method implementing the tool.
        arguments: Struct type the JSON arguments are converted into.
    """

    name: str
    description: str
    method: str
    arguments: type[msgspec.Struct] = NoArguments

    @property
    def parameters(self) -> tuple[str, ...]:
        """Argument names in call order."""
        return self.arguments.__struct_fields__

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments, with shared types under ``$defs``."""
        schema = msgspec.json.schema(self.arguments)
        definitions = schema["$defs"]
        root = definitions.pop(self.arguments.__name__)
        root.setdefault("properties", {})
        root.setdefault("required", [])
        if definitions:
            root["$defs"] = definitions
        return root

    def to_dict(self) -> dict[str, Any]:
        """Describe the tool for discovery by an agent framework."""
        return {"name": self.name, "description": self.description, "input_schema": self.input_schema()}


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition("get-paper-size", "Get the paper size (width and height).", "get_paper_size"),
    ToolDefinition("clear-all", "Clear all drawn shapes to make the paper blank.", "clear_all"),
    ToolDefinition("get-available-colors", "Get the available colors for drawing.", "get_available_colors"),
    ToolDefinition("draw-line", "Draw a line.", "draw_line", LineArguments),
    ToolDefinition("draw-rectangle", "Draw a rectangle.", "draw_rectangle", RectangleArguments),
    ToolDefinition(
        "draw-rounded-rectangle",
        "Draw a rounded rectangle.",
        "draw_rounded_rectangle",
        RoundedRectangleArguments,
    ),
    ToolDefinition("draw-circle", "Draw a circle.", "draw_circle", CircleArguments),
    ToolDefinition("draw-ellipse", "Draw an ellipse.", "draw_ellipse", EllipseArguments),
    ToolDefinition(
        "draw-polyline-or-polygon",
        "Draw a polyline or polygon with points.",
        "draw_polyline_or_polygon",
        PolylineArguments,
    ),
    ToolDefinition("draw-curve", "Draw a smooth curve through points.", "draw_curve", CurveArguments),
    ToolDefinition(
        "draw-free-form-curve",
        "Draw a free-form curve with points.",
        "draw_free_form_curve",
        FreeFormArguments,
    ),
)

TOOLS_BY_NAME: dict[str, ToolDefinition] = {tool.name: tool for tool in TOOLS}


def _as_point(value: PointArg) -> Point:
    return value if isinstance(value, Point) else Point(*value)


def _as_rect(value: RectArg) -> Rect:
    return value if isinstance(value, Rect) else Rect(*value)


def _as_size(value: SizeArg) -> Size:
    return value if isinstance(value, Size) else Size(*value)


def _as_points(values: list[PointArg]) -> list[Point]:
    return [_as_point(value) for value in values]


_GEOMETRY: dict[str, Callable[[Any], Any]] = {
    "start": _as_point,
    "end": _as_point,
    "center": _as_point,
    "rect": _as_rect,
    "corner_radius": _as_size,
    "points": _as_points,
}


def _failed_parameter(error: msgspec.ValidationError) -> str | None:
    message = str(error)
    match = _ERROR_PATH.search(message) or _MISSING_FIELD.search(message)
    return match.group(1) if match else None


def parse_arguments(tool: ToolDefinition, arguments: Any) -> dict[str, Any]:
    """Validate JSON arguments for a tool and convert them to method keywords.

    Unknown keys are ignored. Points, rectangles and sizes given as arrays are
    turned into their geometry types.

    Args:
        tool: The tool being invoked.
        arguments: Decoded JSON arguments, normally an object.

    Returns:
        Keyword arguments for the tool's Toolbox method.

    Raises:
        InvalidToolArgumentsError: If an argument is missing or has the wrong type.
    """
    try:
        parsed = msgspec.convert(arguments, type=tool.arguments)
    except msgspec.ValidationError as e:
        raise InvalidToolArgumentsError(tool.name, str(e), _failed_parameter(e)) from e
    return {name: _GEOMETRY.get(name, _identity)(getattr(parsed, name)) for name in tool.parameters}


def _identity(value: Any) -> Any:
    return value


class Toolbox:
    """Drawing tools bound to one drawing session.

    Draw tools build a shape, resolve its color and add it to the session's
    scene. Unknown color names fall back to black instead of raising.
    """

    def __init__(self, session: DrawingSession) -> None:
        """Initialize the toolbox.

        Args:
            session: The session whose scene the tools draw into.
        """
        self._session = session

    @property
    def session(self) -> DrawingSession:
        return self._session

    def describe(self) -> list[dict[str, Any]]:
        """Describe every tool for discovery by an agent framework."""
        return [tool.to_dict() for tool in TOOLS]

    def invoke(self, name: str, arguments: Mapping[str, Any] | None = None) -> Any:
        """Invoke a tool by its public name.

        Args:
            name: Tool name, e.g. ``draw-line``.
            arguments: JSON arguments keyed by parameter name.

        Returns:
            The tool result (None for drawing tools).

        Raises:
            ToolNotFoundError: If no tool has this name.
            InvalidToolArgumentsError: If an argument is missing or has the wrong type.
        """
        tool = TOOLS_BY_NAME.get(name)
        if tool is None:
            raise ToolNotFoundError(name)

        kwargs = parse_arguments(tool, {} if arguments is None else arguments)
        logger.info("Tool invoked", tool=name)
        return getattr(self, tool.method)(**kwargs)

    def _add(self, shape: Shape) -> None:
        shape.color = resolve_color_name(shape.color)
        self._session.scene.add(shape)

    def get_paper_size(self) -> dict[str, float]:
        size = self._session.scene.size
        return {"width": size.width, "height": size.height}

    def clear_all(self) -> None:
        self._session.scene.clear()

    def get_available_colors(self) -> list[str]:
        return list(AVAILABLE_COLORS)

    def draw_line(self, color: str, line_width: float, start: Point, end: Point) -> None:
        self._add(Line(color=color, stroke_width=line_width, start=start, end=end))

    def draw_rectangle(self, color: str, line_width: float, rect: Rect, filled: bool) -> None:
        self._add(Rectangle(color=color, stroke_width=line_width, rect=rect, filled=filled))

    def draw_rounded_rectangle(
        self,
        color: str,
        line_width: float,
        rect: Rect,
        corner_radius: Size,
        filled: bool,
    ) -> None:
        self._add(
            RoundedRectangle(
                color=color,
                stroke_width=line_width,
                rect=rect,
                corner_radius=corner_radius,
                filled=filled,
            )
        )

    def draw_circle(self, color: str, line_width: float, center: Point, radius: float, filled: bool) -> None:
        self._add(Circle(color=color, stroke_width=line_width, center=center, radius=radius, filled=filled))

    def draw_ellipse(
        self,
        color: str,
        line_width: float,
        center: Point,
        radius_x: float,
        radius_y: float,
        filled: bool,
    ) -> None:
        self._add(
            Ellipse(
                color=color,
                stroke_width=line_width,
                center=center,
                radius_x=radius_x,
                radius_y=radius_y,
                filled=filled,
            )
        )

    def draw_polyline_or_polygon(
        self,
        color: str,
        line_width: float,
        points: list[Point],
        closed: bool,
        filled: bool,
    ) -> None:
        self._add(Polyline(color=color, stroke_width=line_width, points=list(points), closed=closed, filled=filled))

    def draw_curve(self, color: str, line_width: float, points: list[Point], closed: bool, filled: bool) -> None:
        self._add(Curve(color=color, stroke_width=line_width, points=list(points), closed=closed, filled=filled))

    def draw_free_form_curve(self, color: str, line_width: float, points: list[Point], closed: bool) -> None:
        stroke = FreeFormStroke(color=color, stroke_width=line_width, closed=closed)
        rejected = sum(1 for point in points if not stroke.add(point))
        if rejected:
            logger.debug("Free-form points thinned", accepted=len(stroke.points), rejected=rejected)
        self._add(stroke)
