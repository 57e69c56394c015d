"""Litestar plugin for aicad-py integration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from litestar.di import Provide
from litestar.plugins import InitPluginProtocol

from aicad_py.core.error_handling import get_exception_handlers
from aicad_py.core.geometry import Size
from aicad_py.render.view import EXPORT_PADDING
from aicad_py.services.session import DrawingSession
from aicad_py.services.toolbox import Toolbox
from aicad_py.web.router import create_router

if TYPE_CHECKING:
    from litestar.config.app import AppConfig

    from aicad_py.render.view import Clipboard


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("true", "1", "yes")


@dataclass
class SketchConfig:
    """Configuration for the aicad plugin.

    Attributes:
        paper_width: Logical paper width.
        paper_height: Logical paper height.
        background_color: Background of the live view and exports.
        export_padding: Margin around the drawing bounds on export.
        view_scale: Pixels per logical unit of the live view.
        show_bounds: Draw each shape's bounding box on top of it.
        enable_api: Whether to mount the REST API routes.
        api_path: Base path for mounting API routes.
        session: Optional pre-built session. If None, one is created from
            the settings above.
        clipboard: Optional clipboard for a newly created session.

    Example:
        >>> config = SketchConfig(paper_width=800, paper_height=600, api_path="/api/v1")
    """

    paper_width: float = 3000.0
    paper_height: float = 2000.0
    background_color: str = "white"
    export_padding: float = EXPORT_PADDING
    view_scale: float = 1.0
    show_bounds: bool = False
    enable_api: bool = True
    api_path: str = "/api"
    session: DrawingSession | None = field(default=None)
    clipboard: Clipboard | None = field(default=None)

    @classmethod
    def from_env(cls) -> SketchConfig:
        """Build a configuration from ``AICAD_*`` environment variables.

        Unset variables keep their defaults.
        """
        defaults = cls()
        return cls(
            paper_width=float(os.environ.get("AICAD_PAPER_WIDTH", defaults.paper_width)),
            paper_height=float(os.environ.get("AICAD_PAPER_HEIGHT", defaults.paper_height)),
            background_color=os.environ.get("AICAD_BACKGROUND", defaults.background_color),
            view_scale=float(os.environ.get("AICAD_VIEW_SCALE", defaults.view_scale)),
            show_bounds=_env_flag("AICAD_SHOW_BOUNDS"),
        )

    def create_session(self) -> DrawingSession:
        """Return the configured session, creating one if none was given."""
        if self.session is not None:
            return self.session
        return DrawingSession.create(
            paper_size=Size(self.paper_width, self.paper_height),
            background=self.background_color,
            view_scale=self.view_scale,
            export_padding=self.export_padding,
            show_bounds=self.show_bounds,
            clipboard=self.clipboard,
        )


class SketchPlugin(InitPluginProtocol):
    """Litestar plugin wiring a drawing session into an application.

    On app init the plugin creates (or reuses) the DrawingSession and its
    Toolbox, registers both as dependencies (``session`` and ``toolbox``),
    installs the domain exception handlers and mounts the API router.

    Example:
        >>> from litestar import Litestar
        >>> from aicad_py import SketchConfig, SketchPlugin
        >>>
        >>> app = Litestar(plugins=[SketchPlugin(SketchConfig(paper_width=800, paper_height=600))])
    """

    def __init__(self, config: SketchConfig | None = None) -> None:
        """Initialize the plugin with optional configuration.

        Args:
            config: Plugin configuration. Defaults to SketchConfig().
        """
        self._config = config or SketchConfig()
        self._session: DrawingSession | None = None
        self._toolbox: Toolbox | None = None

    def on_app_init(self, app_config: AppConfig) -> AppConfig:
        """Register dependencies, exception handlers and routes.

        Args:
            app_config: The Litestar application configuration object.

        Returns:
            The modified application configuration.
        """
        self._session = self._config.create_session()
        self._toolbox = Toolbox(self._session)

        def provide_session() -> DrawingSession:
            """Dependency provider for DrawingSession."""
            return self.session

        def provide_toolbox() -> Toolbox:
            """Dependency provider for Toolbox."""
            return self.toolbox

        app_config.dependencies["session"] = Provide(provide_session, sync_to_thread=False)
        app_config.dependencies["toolbox"] = Provide(provide_toolbox, sync_to_thread=False)

        for exc_type, handler in get_exception_handlers(include_generic=False).items():
            app_config.exception_handlers.setdefault(exc_type, handler)

        if self._config.enable_api:
            app_config.route_handlers.append(create_router(path=self._config.api_path))

        return app_config

    @property
    def session(self) -> DrawingSession:
        """Get the initialized drawing session.

        Raises:
            RuntimeError: If on_app_init has not been called yet.
        """
        if self._session is None:
            msg = "Plugin not initialized. Call on_app_init first."
            raise RuntimeError(msg)
        return self._session

    @property
    def toolbox(self) -> Toolbox:
        """Get the initialized toolbox.

        Raises:
            RuntimeError: If on_app_init has not been called yet.
        """
        if self._toolbox is None:
            msg = "Plugin not initialized. Call on_app_init first."
            raise RuntimeError(msg)
        return self._toolbox
