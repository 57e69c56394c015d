"""Drawing surfaces that shapes are rendered onto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from PIL import ImageDraw

from aicad_py.core.geometry import Point, Rect, Size, flatten_bezier, rounded_rect_outline

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from PIL import Image

    from aicad_py.core.colors import RGBA


class DrawingSurface(Protocol):
    """Primitive 2D drawing operations in logical coordinates.

    Stroke widths are logical units centered on the outline. Bezier paths are
    given as a start point followed by control points, three per segment.
    """

    def clear(self, color: RGBA) -> None: ...

    def draw_line(self, color: RGBA, width: float, start: Point, end: Point) -> None: ...

    def draw_polyline(self, color: RGBA, width: float, points: Sequence[Point], *, closed: bool = False) -> None: ...

    def fill_polygon(self, color: RGBA, points: Sequence[Point]) -> None: ...

    def draw_bezier(self, color: RGBA, width: float, start: Point, controls: Iterable[Point]) -> None: ...

    def fill_bezier(self, color: RGBA, start: Point, controls: Iterable[Point]) -> None: ...

    def draw_rectangle(self, color: RGBA, width: float, rect: Rect) -> None: ...

    def fill_rectangle(self, color: RGBA, rect: Rect) -> None: ...

    def draw_rounded_rectangle(self, color: RGBA, width: float, rect: Rect, radius: Size) -> None: ...

    def fill_rounded_rectangle(self, color: RGBA, rect: Rect, radius: Size) -> None: ...

    def draw_ellipse(self, color: RGBA, width: float, rect: Rect) -> None: ...

    def fill_ellipse(self, color: RGBA, rect: Rect) -> None: ...


class PillowSurface:
    """DrawingSurface backed by a Pillow image.

    Logical coordinates are mapped to pixels as ``(p - origin) * scale``, so an
    export can move the top-left of the drawing to the image corner and a live
    view can shrink large paper onto a smaller raster.
    """

    def __init__(self, image: Image.Image, *, origin: Point | None = None, scale: float = 1.0) -> None:
        """Initialize the surface.

        Args:
            image: Target image. Drawing blends RGBA colors onto it.
            origin: Logical point mapped to pixel (0, 0).
            scale: Pixels per logical unit.
        """
        self.image = image
        self.origin = origin or Point(0.0, 0.0)
        self.scale = scale
        self._draw = ImageDraw.Draw(image, "RGBA")

    def _map(self, point: Point) -> tuple[float, float]:
        return ((point.x - self.origin.x) * self.scale, (point.y - self.origin.y) * self.scale)

    def _pixels(self, width: float) -> int:
        return max(1, round(width * self.scale))

    def _box(self, rect: Rect) -> list[float]:
        rect = rect.normalized()
        x0, y0 = self._map(Point(rect.left, rect.top))
        x1, y1 = self._map(Point(rect.right, rect.bottom))
        return [x0, y0, x1, y1]

    def clear(self, color: RGBA) -> None:
        # Paste instead of draw so transparent backgrounds replace existing pixels.
        self.image.paste(color[: len(self.image.getbands())], (0, 0, *self.image.size))

    def draw_line(self, color: RGBA, width: float, start: Point, end: Point) -> None:
        self._draw.line([self._map(start), self._map(end)], fill=color, width=self._pixels(width))

    def draw_polyline(self, color: RGBA, width: float, points: Sequence[Point], *, closed: bool = False) -> None:
        if len(points) < 2:
            return
        mapped = [self._map(point) for point in points]
        if closed:
            mapped.append(mapped[0])
        self._draw.line(mapped, fill=color, width=self._pixels(width), joint="curve")

    def fill_polygon(self, color: RGBA, points: Sequence[Point]) -> None:
        if len(points) < 3:
            return
        self._draw.polygon([self._map(point) for point in points], fill=color)

    def draw_bezier(self, color: RGBA, width: float, start: Point, controls: Iterable[Point]) -> None:
        self.draw_polyline(color, width, flatten_bezier(start, controls))

    def fill_bezier(self, color: RGBA, start: Point, controls: Iterable[Point]) -> None:
        self.fill_polygon(color, flatten_bezier(start, controls))

    def draw_rectangle(self, color: RGBA, width: float, rect: Rect) -> None:
        # Pillow strokes inside the box; grow it so the stroke is centered on the edge.
        half = width / 2
        self._draw.rectangle(self._box(rect.normalized().inflate(half, half)), outline=color, width=self._pixels(width))

    def fill_rectangle(self, color: RGBA, rect: Rect) -> None:
        self._draw.rectangle(self._box(rect), fill=color)

    def draw_rounded_rectangle(self, color: RGBA, width: float, rect: Rect, radius: Size) -> None:
        self.draw_polyline(color, width, rounded_rect_outline(rect, radius), closed=True)

    def fill_rounded_rectangle(self, color: RGBA, rect: Rect, radius: Size) -> None:
        self.fill_polygon(color, rounded_rect_outline(rect, radius))

    def draw_ellipse(self, color: RGBA, width: float, rect: Rect) -> None:
        half = width / 2
        self._draw.ellipse(self._box(rect.normalized().inflate(half, half)), outline=color, width=self._pixels(width))

    def fill_ellipse(self, color: RGBA, rect: Rect) -> None:
        self._draw.ellipse(self._box(rect), fill=color)
