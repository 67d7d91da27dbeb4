"""Shared pytest fixtures for recipekit tests."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

import pytest
from click.testing import CliRunner

from recipekit.domain.dto import CreateRecipeDTO
from recipekit.domain.models import Recipe, User

RECIPE_ID = UUID("550e8400-e29b-41d4-a716-446655440000")
USER_ID = UUID("660e8400-e29b-41d4-a716-446655440000")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def recipe(now: datetime) -> Recipe:
    """A valid recipe with fixed id and timestamps."""
    return Recipe(
        id=RECIPE_ID,
        user_id=USER_ID,
        name="Pancakes",
        description="Fluffy breakfast pancakes",
        ingredients=["Flour", "Milk", "Eggs"],
        instructions=["Whisk", "Rest the batter", "Fry"],
        prep_time=10,
        cook_time=20,
        servings=4,
        tags=["breakfast"],
        image="https://example.com/pancakes.jpg",
        is_favorite=False,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def user(now: datetime) -> User:
    return User(
        id=USER_ID,
        google_id="123456",
        email="test@example.com",
        name="Test User",
        picture="https://example.com/pic.jpg",
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def create_dto() -> CreateRecipeDTO:
    return CreateRecipeDTO(
        name="Test Recipe",
        description="A test",
        ingredients=["Flour", "Sugar"],
        instructions=["Mix", "Bake"],
        prep_time=10,
        cook_time=20,
        servings=4,
        tags=["dessert"],
    )


@pytest.fixture
def create_payload() -> dict[str, Any]:
    """Wire-shaped create payload (camelCase keys)."""
    return {
        "name": "Test Recipe",
        "description": "A test",
        "ingredients": ["Flour", "Sugar"],
        "instructions": ["Mix", "Bake"],
        "prepTime": 10,
        "cookTime": 20,
        "servings": 4,
        "tags": ["dessert"],
    }
