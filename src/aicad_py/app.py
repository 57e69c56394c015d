"""Main Litestar application for aicad-py.

This module provides the application factory and a configured app instance
for running aicad-py as a standalone drawing tool server.
"""

from __future__ import annotations

import os

from litestar import Litestar, get
from litestar.openapi import OpenAPIConfig

from aicad_py import SketchConfig, SketchPlugin
from aicad_py.cli import AICadCLIPlugin
from aicad_py.core.error_handling import get_exception_handlers
from aicad_py.core.logging import CorrelationIdMiddleware, configure_logging


def create_app(
    config: SketchConfig | None = None,
    *,
    debug: bool = False,
    json_logs: bool = False,
) -> Litestar:
    """Create and configure the Litestar application.

    Args:
        config: Drawing configuration. Defaults to ``SketchConfig.from_env()``.
        debug: Whether to enable debug mode and debug logging.
        json_logs: Whether to output logs as JSON (for production).

    Returns:
        Configured Litestar application instance.
    """
    configure_logging(debug=debug, json_logs=json_logs)

    @get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "healthy"}

    return Litestar(
        route_handlers=[health],
        plugins=[AICadCLIPlugin(), SketchPlugin(config or SketchConfig.from_env())],
        debug=debug,
        middleware=[CorrelationIdMiddleware],
        exception_handlers=get_exception_handlers(),
        openapi_config=OpenAPIConfig(
            title="aicad-py API",
            version="0.1.0",
            description="Drawing tools for tool-calling agents",
            path="/schema",
            use_handler_docstrings=True,
        ),
    )


# Default application instance for uvicorn
# Use AICAD_DEBUG=true for dev mode and AICAD_JSON_LOGS=true for JSON log lines
_debug = os.environ.get("AICAD_DEBUG", "").lower() in ("true", "1", "yes")
_json_logs = os.environ.get("AICAD_JSON_LOGS", "").lower() in ("true", "1", "yes")
app = create_app(debug=_debug, json_logs=_json_logs)
