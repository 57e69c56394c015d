"""CLI commands for aicad-py."""

from aicad_py.cli.commands import AICadCLIPlugin, sketch_group

__all__ = ["AICadCLIPlugin", "sketch_group"]
