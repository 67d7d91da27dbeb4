"""Command: list the HTTP route surface."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recipekit.commands._base import RecipeKitCommand

if TYPE_CHECKING:
    from recipekit.commands._context import AppContext


@click.command(cls=RecipeKitCommand)
@click.pass_obj
def routes(app: AppContext) -> None:
    """List every method and path template."""
    from recipekit.api.endpoints import ALL_ENDPOINTS
    from recipekit.services.result import ServiceResult

    listed = [f"{method} {path}" for method, path in ALL_ENDPOINTS]
    app.emit(ServiceResult.success("routes", {"count": len(listed), "routes": listed}))
