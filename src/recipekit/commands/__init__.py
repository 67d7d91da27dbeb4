"""Subcommand modules for recipekit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from recipekit.commands.format_cmd import format_cmd
    from recipekit.commands.routes import routes
    from recipekit.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(format_cmd)
    cli.add_command(routes)
