"""Drawable shape models for aicad-py.

Every shape derives its bounding box from its own data on each access, so a
bounds value can never go stale. Rendering lives in ``aicad_py.render``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from aicad_py.core.colors import DEFAULT_COLOR
from aicad_py.core.geometry import Point, PointSequence, Rect, Size, distance, smoothed_polygon, smoothed_polyline
from aicad_py.core.types import ShapeType

DEFAULT_STROKE_WIDTH = 3.0
DEFAULT_MINIMUM_DISTANCE = 10.0


@dataclass
class Shape:
    """Base class for all drawable shapes.

    Attributes:
        shape_type: Tag identifying the shape variant.
        color: Color name or hex string of the outline (and fill, when filled).
        stroke_width: Width of the outline in logical units.
    """

    shape_type: ShapeType = field(init=False)
    color: str = DEFAULT_COLOR
    stroke_width: float = DEFAULT_STROKE_WIDTH

    @property
    def bounds(self) -> Rect:
        """Geometric bounds inflated by half the stroke width on every side.

        Shapes without any geometry (e.g. a polyline with no points) report
        ``Rect.EMPTY``.
        """
        outline = self.outline_bounds()
        if outline is None:
            return Rect.EMPTY
        half = self.stroke_width / 2
        return outline.inflate(half, half)

    def outline_bounds(self) -> Rect | None:
        """Tight geometric bounds of the shape, ignoring stroke width."""
        raise NotImplementedError


@dataclass
class Line(Shape):
    """A straight segment.

    Attributes:
        start: First end point.
        end: Second end point.
    """

    start: Point = field(default_factory=lambda: Point(0.0, 0.0))
    end: Point = field(default_factory=lambda: Point(0.0, 0.0))

    def __post_init__(self) -> None:
        """Set the shape type to LINE after initialization."""
        self.shape_type = ShapeType.LINE

    def outline_bounds(self) -> Rect | None:
        return Rect.from_points((self.start, self.end))


@dataclass
class Rectangle(Shape):
    """An axis-aligned rectangle.

    Attributes:
        rect: Position and extent of the rectangle.
        filled: Whether the interior is filled with the shape color.
    """

    rect: Rect = field(default_factory=lambda: Rect.EMPTY)
    filled: bool = False

    def __post_init__(self) -> None:
        """Set the shape type to RECTANGLE after initialization."""
        self.shape_type = ShapeType.RECTANGLE

    def outline_bounds(self) -> Rect | None:
        return self.rect.normalized()


@dataclass
class RoundedRectangle(Rectangle):
    """A rectangle with elliptical corners.

    Attributes:
        corner_radius: Horizontal and vertical corner radii.
    """

    corner_radius: Size = field(default_factory=lambda: Size(0.0, 0.0))

    def __post_init__(self) -> None:
        """Set the shape type to ROUNDED_RECTANGLE after initialization."""
        self.shape_type = ShapeType.ROUNDED_RECTANGLE


@dataclass
class Circle(Shape):
    """A circle given by center and radius."""

    center: Point = field(default_factory=lambda: Point(0.0, 0.0))
    radius: float = 0.0
    filled: bool = False

    def __post_init__(self) -> None:
        """Set the shape type to CIRCLE after initialization."""
        self.shape_type = ShapeType.CIRCLE

    def outline_bounds(self) -> Rect | None:
        r = abs(self.radius)
        return Rect(self.center.x - r, self.center.y - r, 2 * r, 2 * r)


@dataclass
class Ellipse(Shape):
    """An axis-aligned ellipse given by center and the two radii."""

    center: Point = field(default_factory=lambda: Point(0.0, 0.0))
    radius_x: float = 0.0
    radius_y: float = 0.0
    filled: bool = False

    def __post_init__(self) -> None:
        """Set the shape type to ELLIPSE after initialization."""
        self.shape_type = ShapeType.ELLIPSE

    def outline_bounds(self) -> Rect | None:
        rx, ry = abs(self.radius_x), abs(self.radius_y)
        return Rect(self.center.x - rx, self.center.y - ry, 2 * rx, 2 * ry)


@dataclass
class Polyline(Shape):
    """A sequence of straight segments, optionally closed into a polygon.

    Attributes:
        points: Vertices in drawing order.
        closed: Whether the last vertex connects back to the first.
        filled: Whether a closed polygon is filled. Ignored for open polylines.
    """

    points: list[Point] = field(default_factory=list)
    closed: bool = False
    filled: bool = False

    def __post_init__(self) -> None:
        """Set the shape type to POLYLINE after initialization."""
        self.shape_type = ShapeType.POLYLINE

    def outline_bounds(self) -> Rect | None:
        if not self.points:
            return None
        return Rect.from_points(self.points)


@dataclass
class Curve(Shape):
    """A smooth curve through a sequence of points.

    Open curves are smoothed between their interior points and use straight
    segments for the first and last spans. Closed curves are smoothed all the
    way around.

    Attributes:
        points: Points the curve passes through.
        closed: Whether the curve is a closed loop.
        filled: Whether a closed curve is filled. Ignored for open curves.
    """

    points: list[Point] = field(default_factory=list)
    closed: bool = False
    filled: bool = False

    def __post_init__(self) -> None:
        """Set the shape type to CURVE after initialization."""
        self.shape_type = ShapeType.CURVE

    def bezier_controls(self) -> PointSequence | None:
        """Bezier control points for the smoothed part of the curve.

        Returns None when there are too few points to smooth, in which case the
        curve is drawn with straight segments.
        """
        if self.closed:
            return smoothed_polygon(self.points) if len(self.points) >= 3 else None
        return smoothed_polyline(self.points) if len(self.points) >= 4 else None

    def outline_bounds(self) -> Rect | None:
        if not self.points:
            return None
        # A Bezier segment stays inside the hull of its control points.
        controls = self.bezier_controls()
        if controls is None:
            return Rect.from_points(self.points)
        return Rect.from_points([*self.points, *controls])


@dataclass
class FreeFormStroke(Curve):
    """A free-hand stroke thinned by a minimum-distance filter.

    Points closer than ``minimum_distance`` to the last accepted point are
    dropped. Points passed to the constructor go through the same filter.

    Attributes:
        minimum_distance: Smallest distance between consecutive accepted points.
    """

    minimum_distance: float = DEFAULT_MINIMUM_DISTANCE

    def __post_init__(self) -> None:
        """Set the shape type to FREE_FORM and filter the initial points."""
        self.shape_type = ShapeType.FREE_FORM
        self.filled = False
        candidates, self.points = self.points, []
        for point in candidates:
            self.add(point)

    def add(self, point: Point) -> bool:
        """Append a point if it is far enough from the last accepted point.

        Args:
            point: Candidate point.

        Returns:
            True if the point was accepted, False if it was rejected.
        """
        if self.points and distance(self.points[-1], point) < self.minimum_distance:
            return False
        self.points.append(point)
        return True
