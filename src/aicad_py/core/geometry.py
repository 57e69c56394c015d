"""Geometry primitives and curve construction for aicad-py.

Nothing in this module knows about drawing surfaces. Coordinates are plain
floats; callers are expected to supply finite values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Sequence

TANGENT_FACTOR = 1.0 / 6.0


@dataclass(frozen=True)
class Point:
    """Represents an immutable point (or vector) in 2D space.

    Attributes:
        x: X-coordinate position.
        y: Y-coordinate position.
    """

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Size:
    """Represents a width/height pair.

    Attributes:
        width: Extent along the x axis.
        height: Extent along the y axis.
    """

    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and extent.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent.
        height: Vertical extent.
    """

    EMPTY: ClassVar[Rect]

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Rect:
        """Build the tightest rectangle containing every point.

        Args:
            points: Points to enclose.

        Returns:
            The enclosing rectangle, or ``Rect.EMPTY`` when no points are given.
        """
        xs: list[float] = []
        ys: list[float] = []
        for point in points:
            xs.append(point.x)
            ys.append(point.y)
        if not xs:
            return cls.EMPTY
        left, top = min(xs), min(ys)
        return cls(left, top, max(xs) - left, max(ys) - top)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        """Whether the rectangle covers no area."""
        return self.width <= 0 or self.height <= 0

    def normalized(self) -> Rect:
        """Return an equivalent rectangle with non-negative width and height."""
        left = min(self.left, self.right)
        top = min(self.top, self.bottom)
        return Rect(left, top, abs(self.width), abs(self.height))

    def inflate(self, dx: float, dy: float) -> Rect:
        """Grow the rectangle by ``dx`` on the left and right and ``dy`` on the top and bottom."""
        return Rect(self.x - dx, self.y - dy, self.width + 2 * dx, self.height + 2 * dy)

    def union(self, other: Rect) -> Rect:
        """Smallest rectangle containing both rectangles.

        Empty rectangles contribute nothing to the union.
        """
        if other.is_empty:
            return self
        if self.is_empty:
            return other
        left = min(self.left, other.left)
        top = min(self.top, other.top)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Rect(left, top, right - left, bottom - top)


Rect.EMPTY = Rect(0.0, 0.0, 0.0, 0.0)


class PointSequence:
    """Lazy, restartable sequence of points.

    Every iteration re-runs the underlying generator, so the sequence can be
    consumed any number of times without materializing it.
    """

    def __init__(self, source: Callable[[], Iterator[Point]]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[Point]:
        return self._source()


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def _catmull_rom(points: Sequence[Point]) -> Iterator[Point]:
    for index in range(len(points) - 3):
        p0, p1, p2, p3 = points[index : index + 4]
        yield p1 + (p2 - p0) * TANGENT_FACTOR
        yield p2 + (p1 - p3) * TANGENT_FACTOR
        yield p2


def smoothed_polyline(points: Iterable[Point]) -> PointSequence:
    """Convert an open polyline into cubic Bezier control points.

    Each window of four consecutive points ``(p0, p1, p2, p3)`` yields the two
    inner control points and the end point of the Bezier segment running from
    ``p1`` to ``p2``. The run therefore starts at ``points[1]`` and ends at
    ``points[-2]``; the first and last spans are left to the caller to draw as
    straight segments.

    With fewer than four points the input is returned unchanged and the caller
    should fall back to straight segments.

    Args:
        points: Ordered points of the polyline.

    Returns:
        A restartable sequence of Bezier control points, three per segment.
    """
    snapshot = tuple(points)
    if len(snapshot) < 4:
        return PointSequence(lambda: iter(snapshot))
    return PointSequence(lambda: _catmull_rom(snapshot))


def smoothed_polygon(points: Iterable[Point]) -> PointSequence:
    """Convert a closed point loop into cubic Bezier control points.

    The first three points are appended to the end before smoothing, so the
    run starts at ``points[1]``, covers every span including the seam, and
    returns to ``points[1]``. With fewer than three points the input is
    returned unchanged.
    """
    snapshot = tuple(points)
    if len(snapshot) < 3:
        return PointSequence(lambda: iter(snapshot))
    return smoothed_polyline(snapshot + snapshot[:3])


def flatten_bezier(start: Point, controls: Iterable[Point], steps: int = 16) -> list[Point]:
    """Sample a chain of cubic Bezier segments into a polyline.

    Args:
        start: Start point of the first segment.
        controls: Control points, three per segment (two handles and the end point).
            A trailing incomplete group is ignored.
        steps: Number of samples per segment.

    Returns:
        The sampled points, beginning with ``start``.
    """
    result = [start]
    current = start
    group: list[Point] = []
    for control in controls:
        group.append(control)
        if len(group) < 3:
            continue
        c1, c2, end = group
        for step in range(1, steps + 1):
            t = step / steps
            u = 1.0 - t
            result.append(current * (u * u * u) + c1 * (3 * u * u * t) + c2 * (3 * u * t * t) + end * (t * t * t))
        current = end
        group = []
    return result


def rounded_rect_outline(rect: Rect, radius: Size, segments: int = 8) -> list[Point]:
    """Outline of a rectangle with elliptical corners, clockwise from the top edge.

    Corner radii are clamped to half the rectangle's extent. A zero radius
    produces the four plain corners.
    """
    rect = rect.normalized()
    rx = min(max(radius.width, 0.0), rect.width / 2)
    ry = min(max(radius.height, 0.0), rect.height / 2)
    if rx <= 0 or ry <= 0:
        return [
            Point(rect.left, rect.top),
            Point(rect.right, rect.top),
            Point(rect.right, rect.bottom),
            Point(rect.left, rect.bottom),
        ]

    corners = (
        (Point(rect.right - rx, rect.top + ry), -90.0),
        (Point(rect.right - rx, rect.bottom - ry), 0.0),
        (Point(rect.left + rx, rect.bottom - ry), 90.0),
        (Point(rect.left + rx, rect.top + ry), 180.0),
    )
    outline: list[Point] = []
    for center, start_angle in corners:
        for step in range(segments + 1):
            angle = math.radians(start_angle + 90.0 * step / segments)
            outline.append(Point(center.x + rx * math.cos(angle), center.y + ry * math.sin(angle)))
    return outline
