"""Tests for the drawing tools."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from aicad_py.core.colors import AVAILABLE_COLORS
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
from aicad_py.core.types import ShapeType
from aicad_py.exceptions import AICadError, InvalidToolArgumentsError, ToolNotFoundError
from aicad_py.services.session import DrawingSession
from aicad_py.services.toolbox import TOOLS, TOOLS_BY_NAME, Toolbox, parse_arguments

TOOL_NAMES = [
    "get-paper-size",
    "clear-all",
    "get-available-colors",
    "draw-line",
    "draw-rectangle",
    "draw-rounded-rectangle",
    "draw-circle",
    "draw-ellipse",
    "draw-polyline-or-polygon",
    "draw-curve",
    "draw-free-form-curve",
]

ZIGZAG = [{"x": 0, "y": 0}, {"x": 20, "y": 20}, {"x": 40, "y": 0}, {"x": 60, "y": 20}]


def _only_shape(session: DrawingSession):
    shapes = list(session.scene)
    assert len(shapes) == 1
    return shapes[0]


class TestRegistry:
    """Tests for tool discovery."""

    def test_tool_names(self) -> None:
        """Test the full tool set is registered in order."""
        assert [tool.name for tool in TOOLS] == TOOL_NAMES
        assert set(TOOLS_BY_NAME) == set(TOOL_NAMES)

    def test_every_tool_has_a_method(self, toolbox: Toolbox) -> None:
        """Test each registered tool maps to a toolbox method."""
        for tool in TOOLS:
            assert callable(getattr(toolbox, tool.method))

    def test_describe(self, toolbox: Toolbox) -> None:
        """Test tool descriptors carry a JSON input schema."""
        described = {entry["name"]: entry for entry in toolbox.describe()}

        line = described["draw-line"]
        assert line["description"] == "Draw a line."
        schema = line["input_schema"]
        assert schema["type"] == "object"
        assert schema["required"] == ["color", "line_width", "start", "end"]
        assert schema["properties"]["line_width"]["type"] == "number"
        start = schema["properties"]["start"]
        assert start["description"] == "The starting point of the line."
        assert {"$ref": "#/$defs/Point"} in start["anyOf"]
        assert schema["$defs"]["Point"]["required"] == ["x", "y"]

        assert described["clear-all"]["input_schema"]["properties"] == {}
        assert described["clear-all"]["input_schema"]["required"] == []

    def test_schema_lists_rect_and_size(self, toolbox: Toolbox) -> None:
        """Test nested geometry types are described under $defs."""
        described = {entry["name"]: entry for entry in toolbox.describe()}
        schema = described["draw-rounded-rectangle"]["input_schema"]

        assert schema["required"] == ["color", "line_width", "rect", "corner_radius", "filled"]
        assert schema["$defs"]["Rect"]["required"] == ["x", "y", "width", "height"]
        assert schema["$defs"]["Size"]["required"] == ["width", "height"]
        assert schema["properties"]["filled"]["type"] == "boolean"

    def test_parameters(self) -> None:
        """Test argument names are exposed in call order."""
        assert TOOLS_BY_NAME["draw-free-form-curve"].parameters == ("color", "line_width", "points", "closed")
        assert TOOLS_BY_NAME["clear-all"].parameters == ()

    def test_line_width_range_is_documented(self, toolbox: Toolbox) -> None:
        """Test the recommended line width range appears in descriptions."""
        described = {entry["name"]: entry for entry in toolbox.describe()}
        description = described["draw-circle"]["input_schema"]["properties"]["line_width"]["description"]
        assert "3 to 30" in description


class TestQueryTools:
    """Tests for tools that do not draw."""

    def test_get_paper_size(self, toolbox: Toolbox) -> None:
        """Test the paper size is reported as width and height."""
        assert toolbox.invoke("get-paper-size") == {"width": 400.0, "height": 300.0}

    def test_get_available_colors(self, toolbox: Toolbox) -> None:
        """Test the color palette."""
        colors = toolbox.invoke("get-available-colors", {})
        assert colors == list(AVAILABLE_COLORS)
        assert "Navy" in colors
        assert "Transparent" in colors

    def test_clear_all(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test clearing the drawing."""
        toolbox.draw_line("Red", 3, Point(0, 0), Point(10, 10))
        assert toolbox.invoke("clear-all") is None
        assert len(session.scene) == 0


class TestDrawTools:
    """Tests for the drawing tools invoked by name."""

    def test_draw_line(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test draw-line."""
        result = toolbox.invoke(
            "draw-line",
            {"color": "Red", "line_width": 5, "start": {"x": 1, "y": 2}, "end": {"x": 30, "y": 40}},
        )

        assert result is None
        shape = _only_shape(session)
        assert isinstance(shape, Line)
        assert shape.color == "Red"
        assert shape.stroke_width == 5.0
        assert shape.start == Point(1, 2)
        assert shape.end == Point(30, 40)

    def test_draw_rectangle(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test draw-rectangle."""
        toolbox.invoke(
            "draw-rectangle",
            {
                "color": "Blue",
                "line_width": 3,
                "rect": {"x": 10, "y": 20, "width": 100, "height": 50},
                "filled": True,
            },
        )

        shape = _only_shape(session)
        assert type(shape) is Rectangle
        assert shape.rect == Rect(10, 20, 100, 50)
        assert shape.filled is True

    def test_draw_rounded_rectangle(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test draw-rounded-rectangle."""
        toolbox.invoke(
            "draw-rounded-rectangle",
            {
                "color": "Green",
                "line_width": 4,
                "rect": {"x": 0, "y": 0, "width": 100, "height": 60},
                "corner_radius": {"width": 10, "height": 5},
                "filled": False,
            },
        )

        shape = _only_shape(session)
        assert isinstance(shape, RoundedRectangle)
        assert shape.shape_type == ShapeType.ROUNDED_RECTANGLE
        assert shape.corner_radius == Size(10, 5)

    def test_draw_circle(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test draw-circle."""
        toolbox.invoke(
            "draw-circle",
            {"color": "Orange", "line_width": 6, "center": {"x": 50, "y": 60}, "radius": 25, "filled": True},
        )

        shape = _only_shape(session)
        assert isinstance(shape, Circle)
        assert shape.center == Point(50, 60)
        assert shape.radius == 25.0
        assert shape.bounds == Rect(22, 32, 56, 56)

    def test_draw_ellipse(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test draw-ellipse."""
        toolbox.invoke(
            "draw-ellipse",
            {
                "color": "Purple",
                "line_width": 3,
                "center": {"x": 100, "y": 100},
                "radius_x": 40,
                "radius_y": 20,
                "filled": False,
            },
        )

        shape = _only_shape(session)
        assert isinstance(shape, Ellipse)
        assert (shape.radius_x, shape.radius_y) == (40.0, 20.0)

    def test_draw_polygon(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test draw-polyline-or-polygon with a closed, filled polygon."""
        toolbox.invoke(
            "draw-polyline-or-polygon",
            {"color": "Teal", "line_width": 3, "points": ZIGZAG[:3], "closed": True, "filled": True},
        )

        shape = _only_shape(session)
        assert isinstance(shape, Polyline)
        assert shape.points == [Point(0, 0), Point(20, 20), Point(40, 0)]
        assert shape.closed is True
        assert shape.filled is True

    def test_draw_curve(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test draw-curve."""
        toolbox.invoke(
            "draw-curve",
            {"color": "Maroon", "line_width": 3, "points": ZIGZAG, "closed": False, "filled": False},
        )

        shape = _only_shape(session)
        assert type(shape) is Curve
        assert len(shape.points) == 4
        assert shape.bezier_controls() is not None

    def test_draw_free_form_curve_thins_points(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test draw-free-form-curve drops points closer than the minimum distance."""
        points = [{"x": 0, "y": 0}, {"x": 5, "y": 0}, {"x": 12, "y": 0}, {"x": 15, "y": 0}, {"x": 30, "y": 0}]

        with capture_logs() as logs:
            toolbox.invoke(
                "draw-free-form-curve",
                {"color": "Black", "line_width": 3, "points": points, "closed": False},
            )

        shape = _only_shape(session)
        assert isinstance(shape, FreeFormStroke)
        assert shape.points == [Point(0, 0), Point(12, 0), Point(30, 0)]
        assert shape.filled is False
        assert any(entry["event"] == "Free-form points thinned" and entry["rejected"] == 2 for entry in logs)

    def test_draws_accumulate_in_order(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test each draw call appends one shape in call order."""
        toolbox.draw_circle("Red", 3, Point(10, 10), 5, filled=False)
        toolbox.draw_line("Blue", 3, Point(0, 0), Point(5, 5))
        assert [shape.shape_type for shape in session.scene] == [ShapeType.CIRCLE, ShapeType.LINE]

    def test_draw_updates_view(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test drawing through a tool paints the session's view."""
        toolbox.draw_rectangle("Red", 3, Rect(10, 10, 50, 50), filled=True)
        assert session.view.image.getpixel((30, 30)) == (255, 0, 0)

    def test_invoke_logs(self, toolbox: Toolbox) -> None:
        """Test tool invocations are logged."""
        with capture_logs() as logs:
            toolbox.invoke("get-paper-size")
        assert {"event": "Tool invoked", "tool": "get-paper-size", "log_level": "info"} in logs


class TestArguments:
    """Tests for argument checking and conversion."""

    def test_points_as_pairs(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test that points may be given as two-element arrays."""
        toolbox.invoke("draw-line", {"color": "Red", "line_width": 3, "start": [1, 2], "end": [3, 4]})
        shape = _only_shape(session)
        assert (shape.start, shape.end) == (Point(1, 2), Point(3, 4))

    def test_rect_and_size_as_arrays(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test rectangles and sizes may be given as arrays."""
        toolbox.invoke(
            "draw-rounded-rectangle",
            {"color": "Red", "line_width": 3, "rect": [10, 20, 100, 50], "corner_radius": [8, 6], "filled": True},
        )
        shape = _only_shape(session)
        assert shape.rect == Rect(10, 20, 100, 50)
        assert shape.corner_radius == Size(8, 6)

    def test_mixed_point_forms(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test a point list may mix objects and arrays."""
        toolbox.invoke(
            "draw-polyline-or-polygon",
            {
                "color": "Red",
                "line_width": 3,
                "points": [{"x": 0, "y": 0}, [10, 0], {"x": 10, "y": 10}],
                "closed": True,
                "filled": False,
            },
        )
        assert _only_shape(session).points == [Point(0, 0), Point(10, 0), Point(10, 10)]

    def test_parse_arguments(self) -> None:
        """Test arguments are converted to Toolbox method keywords."""
        kwargs = parse_arguments(
            TOOLS_BY_NAME["draw-circle"],
            {"color": "Red", "line_width": 3, "center": {"x": 5, "y": 6}, "radius": 2, "filled": False},
        )

        assert kwargs == {"color": "Red", "line_width": 3.0, "center": Point(5, 6), "radius": 2.0, "filled": False}
        assert isinstance(kwargs["line_width"], float)
        assert isinstance(kwargs["center"], Point)

    def test_parse_no_arguments(self) -> None:
        """Test tools without parameters produce no keywords."""
        assert parse_arguments(TOOLS_BY_NAME["clear-all"], {"unused": 1}) == {}

    @pytest.mark.parametrize("arguments", [[1, 2], "Red", 3])
    def test_arguments_must_be_object(self, toolbox: Toolbox, session: DrawingSession, arguments: object) -> None:
        """Test non-object arguments are rejected without naming a parameter."""
        with pytest.raises(InvalidToolArgumentsError) as exc_info:
            toolbox.invoke("draw-line", arguments)  # type: ignore[arg-type]
        assert exc_info.value.parameter is None
        assert exc_info.value.tool_name == "draw-line"
        assert len(session.scene) == 0

    def test_nested_error_names_parameter(self, toolbox: Toolbox) -> None:
        """Test an error inside a point list names the list parameter."""
        with pytest.raises(InvalidToolArgumentsError) as exc_info:
            toolbox.invoke(
                "draw-curve",
                {
                    "color": "Red",
                    "line_width": 3,
                    "points": [[0, 0], {"x": "ten", "y": 0}],
                    "closed": False,
                    "filled": False,
                },
            )
        assert exc_info.value.parameter == "points"

    def test_extra_arguments_ignored(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test unknown arguments are ignored."""
        toolbox.invoke(
            "draw-line",
            {"color": "Red", "line_width": 3, "start": [0, 0], "end": [1, 1], "opacity": 0.5},
        )
        assert len(session.scene) == 1

    def test_unknown_tool(self, toolbox: Toolbox) -> None:
        """Test invoking an unknown tool."""
        with pytest.raises(ToolNotFoundError) as exc_info:
            toolbox.invoke("draw-star", {})
        assert exc_info.value.tool_name == "draw-star"
        assert "draw-star" in str(exc_info.value)
        assert isinstance(exc_info.value, AICadError)

    def test_missing_argument(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test a missing argument is rejected before drawing."""
        with pytest.raises(InvalidToolArgumentsError) as exc_info:
            toolbox.invoke("draw-line", {"color": "Red", "line_width": 3, "start": [0, 0]})
        assert exc_info.value.parameter == "end"
        assert len(session.scene) == 0

    @pytest.mark.parametrize(
        ("arguments", "parameter"),
        [
            ({"color": 1, "line_width": 3, "start": [0, 0], "end": [1, 1]}, "color"),
            ({"color": "Red", "line_width": "3", "start": [0, 0], "end": [1, 1]}, "line_width"),
            ({"color": "Red", "line_width": True, "start": [0, 0], "end": [1, 1]}, "line_width"),
            ({"color": "Red", "line_width": 3, "start": {"x": 0}, "end": [1, 1]}, "start"),
            ({"color": "Red", "line_width": 3, "start": [0, 0, 0], "end": [1, 1]}, "start"),
            ({"color": "Red", "line_width": 3, "start": [0, 0], "end": "1,1"}, "end"),
        ],
    )
    def test_wrong_types(self, toolbox: Toolbox, arguments: dict, parameter: str) -> None:
        """Test mistyped arguments name the offending parameter."""
        with pytest.raises(InvalidToolArgumentsError) as exc_info:
            toolbox.invoke("draw-line", arguments)
        assert exc_info.value.parameter == parameter
        assert exc_info.value.tool_name == "draw-line"

    def test_filled_must_be_boolean(self, toolbox: Toolbox) -> None:
        """Test boolean parameters reject numbers."""
        with pytest.raises(InvalidToolArgumentsError):
            toolbox.invoke(
                "draw-circle",
                {"color": "Red", "line_width": 3, "center": [0, 0], "radius": 5, "filled": 1},
            )

    def test_points_must_be_array(self, toolbox: Toolbox) -> None:
        """Test the points parameter must be an array."""
        with pytest.raises(InvalidToolArgumentsError) as exc_info:
            toolbox.invoke(
                "draw-curve",
                {"color": "Red", "line_width": 3, "points": {"x": 0, "y": 0}, "closed": False, "filled": False},
            )
        assert exc_info.value.parameter == "points"

    def test_ranges_not_enforced(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test widths and radii outside the recommended range are accepted."""
        toolbox.invoke(
            "draw-circle",
            {"color": "Red", "line_width": 100, "center": [0, 0], "radius": -5, "filled": False},
        )
        assert _only_shape(session).stroke_width == 100.0


class TestColorResolution:
    """Tests for color names passed to drawing tools."""

    def test_canonical_casing(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test color names are matched case-insensitively and stored canonically."""
        toolbox.draw_line("darkslateblue", 3, Point(0, 0), Point(1, 1))
        assert _only_shape(session).color == "DarkSlateBlue"

    def test_hex_color(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test hex colors are accepted."""
        toolbox.draw_line("#336699", 3, Point(0, 0), Point(1, 1))
        assert _only_shape(session).color == "#336699"

    @pytest.mark.parametrize("color", ["rgb(255,0,0)", "rgb(255, 0, 0)", "hsl(0, 100%, 50%)"])
    def test_css_color_functions(self, toolbox: Toolbox, session: DrawingSession, color: str) -> None:
        """Test CSS color functions are kept and draw in their color."""
        toolbox.draw_line(color, 3, Point(10, 10), Point(100, 10))

        assert _only_shape(session).color == color
        assert session.view.image.getpixel((50, 10)) == (255, 0, 0)

    def test_unknown_color_falls_back(self, toolbox: Toolbox, session: DrawingSession) -> None:
        """Test an unknown color draws in black and logs a warning."""
        with capture_logs() as logs:
            toolbox.draw_line("Sparkly", 3, Point(0, 0), Point(1, 1))

        assert _only_shape(session).color == "Black"
        assert any(entry["log_level"] == "warning" for entry in logs)
