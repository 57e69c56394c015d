"""Minimal example serving the drawing tools with Litestar.

The application will:
    - Create a drawing session on 1200x800 paper
    - Mount the tool and scene endpoints at /api
    - Make ``session`` and ``toolbox`` injectable in your own route handlers

Running the Application:
    python examples/app.py

Then visit:
    - http://127.0.0.1:8000/schema - OpenAPI documentation
    - http://127.0.0.1:8000/api/tools - Tool descriptors for an agent
    - http://127.0.0.1:8000/api/scene/view.png - The whole paper

Example API Usage:
    # Draw a filled circle
    curl -X POST http://127.0.0.1:8000/api/tools/draw-circle \\
        -H "Content-Type: application/json" \\
        -d '{"color": "Gold", "line_width": 5, "center": {"x": 600, "y": 400}, "radius": 120, "filled": true}'

    # Download the drawing cropped to what was drawn
    curl -o drawing.png http://127.0.0.1:8000/api/scene/export.png

    # Start over
    curl -X DELETE http://127.0.0.1:8000/api/scene
"""

from __future__ import annotations

from litestar import Litestar, get

from aicad_py import SketchConfig, SketchPlugin, Toolbox


@get("/stats")
async def stats(toolbox: Toolbox) -> dict[str, int]:
    """Count shapes drawn so far, using the injected toolbox."""
    return {"shapes": len(toolbox.session.scene)}


app = Litestar(
    route_handlers=[stats],
    plugins=[
        SketchPlugin(
            SketchConfig(
                paper_width=1200,
                paper_height=800,
                # Live view at half size keeps /view.png small
                view_scale=0.5,
                api_path="/api",
            )
        )
    ],
    debug=True,
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="127.0.0.1",
        port=8000,
        log_level="info",
    )
