"""Pytest configuration and fixtures for aicad-py tests."""

from __future__ import annotations

from typing import Any

import pytest
from litestar import Litestar
from litestar.testing import TestClient

from aicad_py.core.geometry import Point, Rect, Size
from aicad_py.core.scene import Scene
from aicad_py.core.shapes import Circle, Line, Rectangle
from aicad_py.plugin import SketchConfig, SketchPlugin
from aicad_py.render.view import CanvasView
from aicad_py.services.session import DrawingSession
from aicad_py.services.toolbox import Toolbox


class RecordingSurface:
    """DrawingSurface fake that records every call as ``(method, args)``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    @property
    def methods(self) -> list[str]:
        return [name for name, _ in self.calls]

    def _record(self, name: str, *args: Any) -> None:
        # Materialize lazy point sequences so recordings can be compared.
        materialized = tuple(list(a) if hasattr(a, "__iter__") and not isinstance(a, tuple) else a for a in args)
        self.calls.append((name, materialized))

    def clear(self, color):
        self._record("clear", color)

    def draw_line(self, color, width, start, end):
        self._record("draw_line", color, width, start, end)

    def draw_polyline(self, color, width, points, *, closed=False):
        self._record("draw_polyline", color, width, points, closed)

    def fill_polygon(self, color, points):
        self._record("fill_polygon", color, points)

    def draw_bezier(self, color, width, start, controls):
        self._record("draw_bezier", color, width, start, controls)

    def fill_bezier(self, color, start, controls):
        self._record("fill_bezier", color, start, controls)

    def draw_rectangle(self, color, width, rect):
        self._record("draw_rectangle", color, width, rect)

    def fill_rectangle(self, color, rect):
        self._record("fill_rectangle", color, rect)

    def draw_rounded_rectangle(self, color, width, rect, radius):
        self._record("draw_rounded_rectangle", color, width, rect, radius)

    def fill_rounded_rectangle(self, color, rect, radius):
        self._record("fill_rounded_rectangle", color, rect, radius)

    def draw_ellipse(self, color, width, rect):
        self._record("draw_ellipse", color, width, rect)

    def fill_ellipse(self, color, rect):
        self._record("fill_ellipse", color, rect)


# Surface fixtures


@pytest.fixture
def surface() -> RecordingSurface:
    """Create an empty recording surface."""
    return RecordingSurface()


# Model fixtures


@pytest.fixture
def scene() -> Scene:
    """Create a small empty scene."""
    return Scene(Size(200.0, 150.0))


@pytest.fixture
def view(scene: Scene) -> CanvasView:
    """Create a view observing the small scene."""
    return CanvasView(scene)


@pytest.fixture
def sample_line() -> Line:
    """Create a horizontal line with stroke width 2."""
    return Line(color="Red", stroke_width=2.0, start=Point(0.0, 0.0), end=Point(10.0, 0.0))


@pytest.fixture
def sample_rectangle() -> Rectangle:
    """Create a filled rectangle."""
    return Rectangle(color="Blue", stroke_width=4.0, rect=Rect(20.0, 20.0, 60.0, 40.0), filled=True)


@pytest.fixture
def sample_circle() -> Circle:
    """Create a filled circle overlapping the sample rectangle."""
    return Circle(color="Orange", stroke_width=6.0, center=Point(70.0, 50.0), radius=25.0, filled=True)


# Service fixtures


@pytest.fixture
def session() -> DrawingSession:
    """Create a drawing session on small paper."""
    return DrawingSession.create(paper_size=Size(400.0, 300.0))


@pytest.fixture
def toolbox(session: DrawingSession) -> Toolbox:
    """Create a toolbox bound to the session."""
    return Toolbox(session)


# App fixtures


@pytest.fixture
def app() -> Litestar:
    """Create a Litestar app with SketchPlugin on small paper."""
    return Litestar(plugins=[SketchPlugin(SketchConfig(paper_width=400.0, paper_height=300.0))])


@pytest.fixture
def client(app: Litestar) -> TestClient[Litestar]:
    """Create a test client for the app."""
    return TestClient(app=app)
