"""Canvas view: keeps a raster of the scene up to date and exports it."""

from __future__ import annotations

import io
import math
from typing import TYPE_CHECKING, Protocol

import structlog
from PIL import Image

from aicad_py.core.colors import to_rgba
from aicad_py.core.geometry import Point
from aicad_py.core.types import SceneEventType
from aicad_py.render.renderer import render_shape
from aicad_py.render.surface import PillowSurface

if TYPE_CHECKING:
    from aicad_py.core.scene import Scene, SceneEvent
    from aicad_py.core.shapes import Shape
    from aicad_py.render.surface import DrawingSurface

logger = structlog.get_logger(__name__)

EXPORT_PADDING = 10.0
BOUNDS_OVERLAY_COLOR = (128, 128, 128, 160)


class Clipboard(Protocol):
    """Destination for copied images."""

    def set_image(self, image: Image.Image) -> None: ...


class MemoryClipboard:
    """Process-local clipboard that keeps the last copied image as PNG bytes."""

    def __init__(self) -> None:
        self._data: bytes | None = None

    @property
    def data(self) -> bytes | None:
        """PNG bytes of the last copied image, or None if nothing was copied."""
        return self._data

    def set_image(self, image: Image.Image) -> None:
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        self._data = buffer.getvalue()

    def clear(self) -> None:
        self._data = None


class CanvasView:
    """Render/view controller for a scene.

    The view holds a raster "window" of the whole paper. When a shape is added
    only that shape is painted onto the raster; when the scene is cleared or
    the view is resized everything is repainted. Both paths use the same
    per-shape routine, so they always agree.

    The view does not own the scene; it only observes it.
    """

    def __init__(
        self,
        scene: Scene,
        *,
        background: str = "white",
        scale: float = 1.0,
        padding: float = EXPORT_PADDING,
        show_bounds: bool = False,
    ) -> None:
        """Initialize the view and subscribe to scene changes.

        Args:
            scene: The scene to display.
            background: Background color name or hex string.
            scale: Pixels per logical unit of the live raster.
            padding: Margin added around the scene bounds on export.
            show_bounds: Draw each shape's bounding box on top of it.
        """
        self._scene = scene
        self.background = background
        self.padding = padding
        self.show_bounds = show_bounds
        self._scale = scale
        self._image = self._allocate()
        self._surface = PillowSurface(self._image, scale=scale)
        self._unsubscribe = scene.subscribe(self._on_scene_changed)
        self.repaint()

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def image(self) -> Image.Image:
        """The live raster. Treat as read-only."""
        return self._image

    def _allocate(self) -> Image.Image:
        width = max(1, math.ceil(self._scene.size.width * self._scale))
        height = max(1, math.ceil(self._scene.size.height * self._scale))
        return Image.new("RGB", (width, height), to_rgba(self.background)[:3])

    def _on_scene_changed(self, event: SceneEvent) -> None:
        if event.event_type == SceneEventType.ADDED and event.shape is not None:
            self.paint(event.shape)
        else:
            self.repaint()

    def _paint(self, shape: Shape, surface: DrawingSurface) -> None:
        render_shape(shape, surface)
        if self.show_bounds:
            surface.draw_rectangle(BOUNDS_OVERLAY_COLOR, 1.0, shape.bounds)

    def paint(self, shape: Shape) -> None:
        """Paint a single shape onto the live raster (incremental update)."""
        self._paint(shape, self._surface)

    def paint_scene(self, surface: DrawingSurface) -> None:
        """Paint every shape of the scene, in insertion order, onto ``surface``."""
        for shape in self._scene:
            self._paint(shape, surface)

    def repaint(self) -> None:
        """Clear the live raster and paint the whole scene again."""
        self._surface.clear(to_rgba(self.background))
        self.paint_scene(self._surface)

    def resize(self, scale: float) -> None:
        """Change the live raster scale, reallocating and repainting it."""
        self._scale = scale
        old_image = self._image
        self._image = self._allocate()
        self._surface = PillowSurface(self._image, scale=scale)
        old_image.close()
        self.repaint()

    def detach(self) -> None:
        """Stop observing the scene."""
        self._unsubscribe()

    def snapshot(self, image_format: str = "PNG") -> bytes:
        """Encode the live raster.

        Args:
            image_format: Pillow image format name.

        Returns:
            The encoded image.
        """
        buffer = io.BytesIO()
        self._image.save(buffer, format=image_format)
        return buffer.getvalue()

    def export_image(self) -> Image.Image | None:
        """Render the scene cropped to its bounds onto a new image.

        The bounds are grown by ``padding`` on every side and the image size is
        rounded up to whole pixels, at one pixel per logical unit.

        Returns:
            The new image, owned by the caller, or None when there is nothing
            to export or the image would exceed ``Image.MAX_IMAGE_PIXELS``.
        """
        bounds = self._scene.bounds
        if len(self._scene) == 0 or bounds.is_empty:
            return None
        padded = bounds.inflate(self.padding, self.padding)
        size = (math.ceil(padded.width), math.ceil(padded.height))
        if Image.MAX_IMAGE_PIXELS is not None and size[0] * size[1] > Image.MAX_IMAGE_PIXELS:
            logger.warning("Drawing too large to export", width=size[0], height=size[1])
            return None
        image = Image.new("RGB", size, to_rgba(self.background)[:3])
        try:
            self.paint_scene(PillowSurface(image, origin=Point(padded.left, padded.top)))
        except BaseException:
            image.close()
            raise
        return image

    def export_png(self) -> bytes | None:
        """Export the cropped scene as PNG bytes, or None for an empty scene."""
        image = self.export_image()
        if image is None:
            return None
        with image:
            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
            return buffer.getvalue()

    def copy_to_clipboard(self, clipboard: Clipboard) -> bool:
        """Copy the cropped scene to a clipboard.

        Failures are logged and reported through the return value; they never
        propagate. The offscreen image is released before returning.

        Args:
            clipboard: Destination clipboard.

        Returns:
            True if an image was handed to the clipboard.
        """
        try:
            image = self.export_image()
            if image is None:
                logger.debug("Nothing to copy, scene is empty")
                return False
            with image:
                clipboard.set_image(image)
        except Exception:  # noqa: BLE001
            logger.exception("Failed to copy scene to clipboard")
            return False
        logger.info("Scene copied to clipboard", shape_count=len(self._scene))
        return True
