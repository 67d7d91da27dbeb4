"""Route surface shared by the server and its clients.

Only paths and methods live here; transport and routing belong to the
callers.
"""

from __future__ import annotations

from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel

from recipekit.domain.ids import format_uuid


class HTTPMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class APIEndpoint(BaseModel):
    """A method plus a concrete path."""

    model_config = {"frozen": True}

    path: str
    method: HTTPMethod = HTTPMethod.GET

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


RECIPES_PATH = "/api/recipes"

# --- Recipes ---

GET_ALL_RECIPES = APIEndpoint(path=RECIPES_PATH, method=HTTPMethod.GET)
CREATE_RECIPE = APIEndpoint(path=RECIPES_PATH, method=HTTPMethod.POST)


def _recipe_path(recipe_id: UUID) -> str:
    return f"{RECIPES_PATH}/{format_uuid(recipe_id)}"


def get_recipe(recipe_id: UUID) -> APIEndpoint:
    return APIEndpoint(path=_recipe_path(recipe_id), method=HTTPMethod.GET)


def update_recipe(recipe_id: UUID) -> APIEndpoint:
    return APIEndpoint(path=_recipe_path(recipe_id), method=HTTPMethod.PUT)


def delete_recipe(recipe_id: UUID) -> APIEndpoint:
    return APIEndpoint(path=_recipe_path(recipe_id), method=HTTPMethod.DELETE)


def toggle_favorite(recipe_id: UUID) -> APIEndpoint:
    return APIEndpoint(path=f"{_recipe_path(recipe_id)}/favorite", method=HTTPMethod.PATCH)


# --- Auth ---

GET_CURRENT_USER = APIEndpoint(path="/api/auth/me", method=HTTPMethod.GET)
LOGOUT = APIEndpoint(path="/api/auth/logout", method=HTTPMethod.POST)
GOOGLE_LOGIN = APIEndpoint(path="/api/auth/google", method=HTTPMethod.GET)

# Templates as (method, path) pairs, in documentation order.
ALL_ENDPOINTS: tuple[tuple[HTTPMethod, str], ...] = (
    (HTTPMethod.GET, "/api/recipes"),
    (HTTPMethod.POST, "/api/recipes"),
    (HTTPMethod.GET, "/api/recipes/{id}"),
    (HTTPMethod.PUT, "/api/recipes/{id}"),
    (HTTPMethod.DELETE, "/api/recipes/{id}"),
    (HTTPMethod.PATCH, "/api/recipes/{id}/favorite"),
    (HTTPMethod.GET, "/api/auth/me"),
    (HTTPMethod.POST, "/api/auth/logout"),
    (HTTPMethod.GET, "/api/auth/google"),
)
