"""Named colors available to drawing tools."""

from __future__ import annotations

import structlog
from PIL import ImageColor

logger = structlog.get_logger(__name__)

RGBA = tuple[int, int, int, int]

DEFAULT_COLOR = "Navy"
FALLBACK_COLOR = "Black"

AVAILABLE_COLORS: tuple[str, ...] = (
    "AliceBlue",
    "AntiqueWhite",
    "Aqua",
    "Aquamarine",
    "Azure",
    "Beige",
    "Bisque",
    "Black",
    "BlanchedAlmond",
    "Blue",
    "BlueViolet",
    "Brown",
    "BurlyWood",
    "CadetBlue",
    "Chartreuse",
    "Chocolate",
    "Coral",
    "CornflowerBlue",
    "Cornsilk",
    "Crimson",
    "Cyan",
    "DarkBlue",
    "DarkCyan",
    "DarkGoldenrod",
    "DarkGray",
    "DarkGreen",
    "DarkKhaki",
    "DarkMagenta",
    "DarkOliveGreen",
    "DarkOrange",
    "DarkOrchid",
    "DarkRed",
    "DarkSalmon",
    "DarkSeaGreen",
    "DarkSlateBlue",
    "DarkSlateGray",
    "DarkTurquoise",
    "DarkViolet",
    "DeepPink",
    "DeepSkyBlue",
    "DimGray",
    "DodgerBlue",
    "Firebrick",
    "FloralWhite",
    "ForestGreen",
    "Fuchsia",
    "Gainsboro",
    "GhostWhite",
    "Gold",
    "Goldenrod",
    "Gray",
    "Green",
    "GreenYellow",
    "Honeydew",
    "HotPink",
    "IndianRed",
    "Indigo",
    "Ivory",
    "Khaki",
    "Lavender",
    "LavenderBlush",
    "LawnGreen",
    "LemonChiffon",
    "LightBlue",
    "LightCoral",
    "LightCyan",
    "LightGoldenrodYellow",
    "LightGray",
    "LightGreen",
    "LightPink",
    "LightSalmon",
    "LightSeaGreen",
    "LightSkyBlue",
    "LightSlateGray",
    "LightSteelBlue",
    "LightYellow",
    "Lime",
    "LimeGreen",
    "Linen",
    "Magenta",
    "Maroon",
    "MediumAquamarine",
    "MediumBlue",
    "MediumOrchid",
    "MediumPurple",
    "MediumSeaGreen",
    "MediumSlateBlue",
    "MediumSpringGreen",
    "MediumTurquoise",
    "MediumVioletRed",
    "MidnightBlue",
    "MintCream",
    "MistyRose",
    "Moccasin",
    "NavajoWhite",
    "Navy",
    "OldLace",
    "Olive",
    "OliveDrab",
    "Orange",
    "OrangeRed",
    "Orchid",
    "PaleGoldenrod",
    "PaleGreen",
    "PaleTurquoise",
    "PaleVioletRed",
    "PapayaWhip",
    "PeachPuff",
    "Peru",
    "Pink",
    "Plum",
    "PowderBlue",
    "Purple",
    "RebeccaPurple",
    "Red",
    "RosyBrown",
    "RoyalBlue",
    "SaddleBrown",
    "Salmon",
    "SandyBrown",
    "SeaGreen",
    "SeaShell",
    "Sienna",
    "Silver",
    "SkyBlue",
    "SlateBlue",
    "SlateGray",
    "Snow",
    "SpringGreen",
    "SteelBlue",
    "Tan",
    "Teal",
    "Thistle",
    "Tomato",
    "Transparent",
    "Turquoise",
    "Violet",
    "Wheat",
    "White",
    "WhiteSmoke",
    "Yellow",
    "YellowGreen",
)

_BY_LOWER_NAME = {name.lower(): name for name in AVAILABLE_COLORS}

# Names Pillow's color table does not know about.
_SPECIAL_RGBA: dict[str, RGBA] = {
    "transparent": (0, 0, 0, 0),
    "rebeccapurple": (102, 51, 153, 255),
}


def resolve_color_name(color: str) -> str:
    """Resolve a caller-supplied color to a known color.

    Palette names match case-insensitively and are returned in their canonical
    spelling. Other color strings Pillow can parse (``#rrggbb``,
    ``rgb(255, 0, 0)``, ``hsl(0, 100%, 50%)``, ...) are accepted as-is.
    Anything else falls back to ``FALLBACK_COLOR``.

    Args:
        color: Color name, hex string or CSS color function.

    Returns:
        A color string that ``to_rgba`` understands.
    """
    name = color.strip()
    canonical = _BY_LOWER_NAME.get(name.lower())
    if canonical is not None:
        return canonical
    try:
        ImageColor.getrgb(name)
    except ValueError:
        pass
    else:
        return name
    logger.warning("Unknown color, using fallback", color=color, fallback=FALLBACK_COLOR)
    return FALLBACK_COLOR


def to_rgba(color: str) -> RGBA:
    """Convert a color name or hex string to an RGBA tuple."""
    key = color.strip().lower()
    if key in _SPECIAL_RGBA:
        return _SPECIAL_RGBA[key]
    try:
        rgb = ImageColor.getrgb(key)
    except ValueError:
        logger.warning("Unparseable color at render time", color=color, fallback=FALLBACK_COLOR)
        rgb = ImageColor.getrgb(FALLBACK_COLOR.lower())
    if len(rgb) == 4:
        return rgb  # type: ignore[return-value]
    return (rgb[0], rgb[1], rgb[2], 255)
