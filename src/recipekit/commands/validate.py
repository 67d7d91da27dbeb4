"""Command: decode and validate a recipe request payload."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from recipekit.commands._base import RecipeKitCommand

if TYPE_CHECKING:
    from recipekit.commands._context import AppContext
    from recipekit.services.recipes import PayloadKind


@click.command(
    cls=RecipeKitCommand,
    examples="""\
  recipekit validate create payload.json
  recipekit validate update patch.json
  cat payload.json | recipekit --json validate create -""",
)
@click.argument("kind", type=click.Choice(["create", "update"]))
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def validate(app: AppContext, kind: PayloadKind, source: IO[str]) -> None:
    """Validate a create or update payload read from SOURCE ('-' for stdin)."""
    from recipekit.services.recipes import RecipeService

    svc = RecipeService(app.settings)
    app.emit(svc.validate_payload(kind, source.read()))
