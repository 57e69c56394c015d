"""Drive the toolbox in-process, the way an agent framework would.

Each step is a tool name plus JSON arguments, exactly as a model would emit
them. The finished drawing is saved cropped to its bounds.

Running the Example:
    python examples/draw_house.py house.png
"""

from __future__ import annotations

import sys
from pathlib import Path

from aicad_py import DrawingSession, Toolbox

STEPS = [
    ("draw-rectangle", {"color": "Tan", "line_width": 4, "rect": [200, 300, 400, 260], "filled": True}),
    (
        "draw-polyline-or-polygon",
        {
            "color": "Firebrick",
            "line_width": 4,
            "points": [[170, 300], [400, 120], [630, 300]],
            "closed": True,
            "filled": True,
        },
    ),
    (
        "draw-rounded-rectangle",
        {
            "color": "SaddleBrown",
            "line_width": 3,
            "rect": [360, 420, 80, 140],
            "corner_radius": [12, 12],
            "filled": True,
        },
    ),
    ("draw-circle", {"color": "Gold", "line_width": 3, "center": [760, 140], "radius": 50, "filled": True}),
    (
        "draw-curve",
        {
            "color": "ForestGreen",
            "line_width": 6,
            "points": [[80, 580], [220, 560], [400, 590], [580, 565], [760, 585]],
            "closed": False,
            "filled": False,
        },
    ),
]


def main(output: Path) -> None:
    session = DrawingSession.create()
    toolbox = Toolbox(session)

    for name, arguments in STEPS:
        toolbox.invoke(name, arguments)

    content = session.view.export_png()
    if content is None:
        sys.exit("nothing was drawn")
    output.write_bytes(content)
    print(f"Wrote {output} with {len(session.scene)} shapes")  # noqa: T201


if __name__ == "__main__":
    main(Path(sys.argv[1] if len(sys.argv) > 1 else "house.png"))
