"""Command line tools for aicad-py.

Lists the drawing tools and replays scripted tool calls into an image without
starting the web server.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import msgspec
import rich_click as click
from litestar.plugins import CLIPluginProtocol
from rich.console import Console
from rich.table import Table

from aicad_py.core.geometry import Size
from aicad_py.exceptions import AICadError
from aicad_py.services.session import DrawingSession
from aicad_py.services.toolbox import TOOLS, Toolbox

console = Console()


class ScriptCall(msgspec.Struct):
    """One scripted tool call."""

    tool: str
    arguments: dict[str, Any] | None = None


def _load_script(path: Path) -> list[ScriptCall]:
    """Read a JSON list of ``{"tool": ..., "arguments": {...}}`` calls."""
    try:
        return msgspec.json.decode(path.read_bytes(), type=list[ScriptCall])
    except msgspec.ValidationError as e:
        msg = f"script must be a list of objects with a 'tool' key and object arguments ({e}): {path}"
        raise click.ClickException(msg) from e
    except msgspec.DecodeError as e:
        msg = f"invalid JSON in script {path}: {e}"
        raise click.ClickException(msg) from e


@click.group(name="sketch", help="Inspect and run the drawing tools.")
def sketch_group() -> None:
    """Inspect and run the drawing tools."""


@sketch_group.command(name="tools", help="List the available drawing tools.")
def list_tools() -> None:
    """List the available drawing tools."""
    table = Table(title=f"Drawing tools ({len(TOOLS)})")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Parameters", style="green")
    table.add_column("Description")

    for tool in TOOLS:
        table.add_row(tool.name, ", ".join(tool.parameters) or "-", tool.description)

    console.print(table)


@sketch_group.command(name="render", help="Replay a JSON script of tool calls and save the drawing as PNG.")
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=Path("drawing.png"))
@click.option("--width", default=3000.0, show_default=True, help="Paper width")
@click.option("--height", default=2000.0, show_default=True, help="Paper height")
@click.option("--background", default="white", show_default=True, help="Background color")
def render_script(script: Path, output: Path, width: float, height: float, background: str) -> None:
    """Replay a JSON script of tool calls and save the drawing as PNG."""
    calls = _load_script(script)
    session = DrawingSession.create(paper_size=Size(width, height), background=background)
    toolbox = Toolbox(session)

    for index, call in enumerate(calls):
        try:
            toolbox.invoke(call.tool, call.arguments)
        except AICadError as e:
            msg = f"call #{index} failed: {e}"
            raise click.ClickException(msg) from e

    content = session.view.export_png()
    if content is None:
        msg = "Nothing was drawn, or the drawing is too large to export"
        raise click.ClickException(msg)

    output.write_bytes(content)
    console.print(f"[green]Wrote {len(session.scene)} shapes[/green] to {output}")


class AICadCLIPlugin(CLIPluginProtocol):
    """Adds the ``sketch`` command group to the Litestar CLI."""

    def on_cli_init(self, cli: click.Group) -> None:
        cli.add_command(sketch_group)
