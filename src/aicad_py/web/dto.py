"""Data Transfer Objects (DTOs) for the aicad-py API."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any

from aicad_py.core.types import ShapeType

if TYPE_CHECKING:
    from aicad_py.core.geometry import Rect
    from aicad_py.core.scene import Scene
    from aicad_py.core.shapes import Shape

_COMMON_FIELDS = frozenset({"shape_type", "color", "stroke_width"})


@dataclass
class RectDTO:
    """DTO for an axis-aligned rectangle.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent.
        height: Vertical extent.
    """

    x: float
    y: float
    width: float
    height: float


@dataclass
class SceneSummaryDTO:
    """DTO for scene summary responses.

    Attributes:
        width: Logical paper width.
        height: Logical paper height.
        shape_count: Number of shapes on the paper.
        bounds: Union of all shape bounds, None when the scene is empty.
    """

    width: float
    height: float
    shape_count: int
    bounds: RectDTO | None = None


@dataclass
class ShapeResponseDTO:
    """DTO for a shape in paint order.

    Attributes:
        shape_type: Shape variant.
        color: Resolved color name or hex string.
        stroke_width: Outline width.
        bounds: Bounds inflated by half the stroke width.
        data: Variant-specific geometry (points, radii, flags).
    """

    shape_type: ShapeType
    color: str
    stroke_width: float
    bounds: RectDTO
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolResultDTO:
    """DTO for the result of a tool invocation.

    Attributes:
        tool: Name of the invoked tool.
        result: Tool return value, None for drawing tools.
    """

    tool: str
    result: Any = None


@dataclass
class CopyResultDTO:
    """DTO for a clipboard copy request."""

    copied: bool


def rect_to_dto(rect: Rect) -> RectDTO:
    """Convert a domain Rect to a RectDTO."""
    return RectDTO(x=rect.x, y=rect.y, width=rect.width, height=rect.height)


def scene_to_summary(scene: Scene) -> SceneSummaryDTO:
    """Convert a Scene to a SceneSummaryDTO.

    Args:
        scene: The scene to summarize.

    Returns:
        The corresponding SceneSummaryDTO.
    """
    bounds = scene.bounds
    return SceneSummaryDTO(
        width=scene.size.width,
        height=scene.size.height,
        shape_count=len(scene),
        bounds=None if bounds.is_empty else rect_to_dto(bounds),
    )


def shape_to_response(shape: Shape) -> ShapeResponseDTO:
    """Convert a Shape domain model to a ShapeResponseDTO.

    Args:
        shape: The shape to convert.

    Returns:
        The corresponding ShapeResponseDTO.
    """
    data = {key: value for key, value in asdict(shape).items() if key not in _COMMON_FIELDS}
    return ShapeResponseDTO(
        shape_type=shape.shape_type,
        color=shape.color,
        stroke_width=shape.stroke_width,
        bounds=rect_to_dto(shape.bounds),
        data=data,
    )
