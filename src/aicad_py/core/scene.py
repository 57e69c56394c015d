"""Scene model: the ordered collection of shapes on the paper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from aicad_py.core.geometry import Rect, Size
from aicad_py.core.types import SceneEventType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from aicad_py.core.shapes import Shape

logger = structlog.get_logger(__name__)

DEFAULT_PAPER_SIZE = Size(3000.0, 2000.0)


@dataclass(frozen=True)
class SceneEvent:
    """Notification sent to scene observers.

    Attributes:
        event_type: What happened to the scene.
        shape: The added shape for ADDED events, None for CLEARED.
    """

    event_type: SceneEventType
    shape: Shape | None = None


class Scene:
    """Ordered, append-only collection of shapes.

    Insertion order is paint order: later shapes are drawn on top. Shapes can
    only be removed all at once through ``clear``. Observers are notified
    synchronously, on the caller's thread, after every change.

    The scene performs no locking; all mutation is expected to happen on a
    single thread.
    """

    def __init__(self, size: Size = DEFAULT_PAPER_SIZE) -> None:
        """Initialize an empty scene.

        Args:
            size: Logical paper size.
        """
        self.size = size
        self._shapes: list[Shape] = []
        self._observers: list[Callable[[SceneEvent], None]] = []

    def subscribe(self, observer: Callable[[SceneEvent], None]) -> Callable[[], None]:
        """Register a change observer.

        Args:
            observer: Callable invoked with a SceneEvent after every change.

        Returns:
            A callable that removes the observer again.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def add(self, shape: Shape) -> None:
        """Append a shape and notify observers.

        The shape is not validated; argument checks belong to the caller.
        """
        self._shapes.append(shape)
        logger.debug("Shape added", shape_type=str(shape.shape_type), shape_count=len(self._shapes))
        self._notify(SceneEvent(SceneEventType.ADDED, shape))

    def clear(self) -> None:
        """Remove every shape and notify observers."""
        self._shapes.clear()
        logger.debug("Scene cleared")
        self._notify(SceneEvent(SceneEventType.CLEARED))

    @property
    def bounds(self) -> Rect:
        """Union of all shape bounds, or ``Rect.EMPTY`` for an empty scene."""
        result = Rect.EMPTY
        for shape in self._shapes:
            result = result.union(shape.bounds)
        return result

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def _notify(self, event: SceneEvent) -> None:
        for observer in list(self._observers):
            observer(event)
