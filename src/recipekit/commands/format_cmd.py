"""Command: re-emit a payload in the canonical wire format."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click
from pydantic import BaseModel

from recipekit.commands._base import RecipeKitCommand
from recipekit.domain.dto import CreateRecipeDTO, CurrentUserDTO, UpdateRecipeDTO
from recipekit.domain.models import Recipe, User

if TYPE_CHECKING:
    from recipekit.commands._context import AppContext

MODEL_KINDS: dict[str, type[BaseModel]] = {
    "recipe": Recipe,
    "user": User,
    "create": CreateRecipeDTO,
    "update": UpdateRecipeDTO,
    "current-user": CurrentUserDTO,
}


@click.command(
    "format",
    cls=RecipeKitCommand,
    examples="""\
  recipekit format recipe recipe.json
  recipekit format user - < user.json""",
)
@click.argument("kind", type=click.Choice(sorted(MODEL_KINDS)))
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def format_cmd(app: AppContext, kind: str, source: IO[str]) -> None:
    """Decode SOURCE as KIND and print it with sorted keys and ISO dates."""
    from recipekit.domain.wire import DecodeError
    from recipekit.services.result import DECODE_ERROR, ServiceResult

    codec = app.settings.codec()
    try:
        model = codec.decode(MODEL_KINDS[kind], source.read())
    except DecodeError as exc:
        app.emit(
            ServiceResult.failure(
                f"format_{kind}", DECODE_ERROR, exc.message, detail={"errors": exc.errors}
            )
        )
        return
    click.echo(codec.encode(model))
