"""Drawing session: the scene and the view that displays it."""

from __future__ import annotations

from dataclasses import dataclass, field

from aicad_py.core.geometry import Size
from aicad_py.core.scene import DEFAULT_PAPER_SIZE, Scene
from aicad_py.render.view import EXPORT_PADDING, CanvasView, Clipboard, MemoryClipboard


@dataclass
class DrawingSession:
    """A scene together with its view and clipboard.

    The session is handed to everything that needs to draw, instead of tools
    reaching for a shared "current window".

    Attributes:
        scene: The shapes drawn so far.
        view: The view observing the scene.
        clipboard: Destination for copied images.
    """

    scene: Scene
    view: CanvasView
    clipboard: Clipboard = field(default_factory=MemoryClipboard)

    @classmethod
    def create(
        cls,
        *,
        paper_size: Size = DEFAULT_PAPER_SIZE,
        background: str = "white",
        view_scale: float = 1.0,
        export_padding: float = EXPORT_PADDING,
        show_bounds: bool = False,
        clipboard: Clipboard | None = None,
    ) -> DrawingSession:
        """Create a session with an empty scene.

        Args:
            paper_size: Logical paper size of the scene.
            background: Background color of the view and exports.
            view_scale: Pixels per logical unit of the live view.
            export_padding: Margin around the scene bounds on export.
            show_bounds: Draw bounding boxes over shapes.
            clipboard: Clipboard to copy into. Defaults to a MemoryClipboard.

        Returns:
            The new session.
        """
        scene = Scene(paper_size)
        view = CanvasView(
            scene,
            background=background,
            scale=view_scale,
            padding=export_padding,
            show_bounds=show_bounds,
        )
        return cls(scene=scene, view=view, clipboard=clipboard or MemoryClipboard())

    def copy_to_clipboard(self) -> bool:
        """Copy the current drawing to the session clipboard."""
        return self.view.copy_to_clipboard(self.clipboard)
