"""Tests for request DTOs, the current-user projection, and envelopes."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from recipekit.domain.dto import (
    CreateRecipeDTO,
    CurrentUserDTO,
    ErrorResponse,
    SuccessResponse,
    UpdateRecipeDTO,
)
from recipekit.domain.errors import ValidationError
from recipekit.domain.models import Recipe, User
from recipekit.domain.wire import DecodeError


class TestCreateRecipeDTO:
    def test_defaults(self) -> None:
        dto = CreateRecipeDTO(name="Test", ingredients=["Flour"], instructions=["Mix"])
        assert dto.description is None
        assert dto.prep_time == 0
        assert dto.cook_time == 0
        assert dto.servings == 1
        assert dto.tags == []
        assert dto.image is None
        assert dto.is_favorite is None

    def test_accepts_wire_aliases(self) -> None:
        dto = CreateRecipeDTO.model_validate(
            {"name": "T", "ingredients": ["a"], "instructions": ["b"], "prepTime": 5}
        )
        assert dto.prep_time == 5

    def test_ingredients_required(self) -> None:
        with pytest.raises(PydanticValidationError):
            CreateRecipeDTO.model_validate({"name": "T", "instructions": ["b"]})


class TestUpdateRecipeDTO:
    def test_empty_has_no_updates(self) -> None:
        assert UpdateRecipeDTO().has_updates is False

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", "New Name"),
            ("description", ""),
            ("ingredients", []),
            ("prep_time", 0),
            ("servings", 3),
            ("tags", []),
            ("image", ""),
            ("is_favorite", False),
        ],
    )
    def test_single_field_has_updates(self, field: str, value: object) -> None:
        dto = UpdateRecipeDTO(**{field: value})  # type: ignore[arg-type]
        assert dto.has_updates is True
        assert dto.present_fields() == {field: value}

    def test_null_is_absent(self) -> None:
        dto = UpdateRecipeDTO.model_validate({"name": None, "image": None})
        assert dto.has_updates is False
        assert dto.present_fields() == {}

    def test_from_recipe_snapshot(self, recipe: Recipe) -> None:
        dto = UpdateRecipeDTO.from_recipe(recipe)
        assert dto.name == recipe.name
        assert dto.description == recipe.description
        assert dto.ingredients == recipe.ingredients
        assert dto.instructions == recipe.instructions
        assert dto.prep_time == recipe.prep_time
        assert dto.cook_time == recipe.cook_time
        assert dto.servings == recipe.servings
        assert dto.tags == recipe.tags
        assert dto.image == recipe.image
        assert dto.is_favorite == recipe.is_favorite
        assert dto.has_updates is True

    def test_snapshot_then_apply_is_noop_on_content(self, recipe: Recipe) -> None:
        merged = recipe.apply_update(UpdateRecipeDTO.from_recipe(recipe), now=recipe.updated_at)
        assert merged == recipe


class TestCurrentUserDTO:
    def test_from_user_drops_private_fields(self, user: User) -> None:
        dto = CurrentUserDTO.from_user(user)
        assert dto.id == user.id
        assert dto.email == user.email
        assert dto.picture == user.picture
        assert not hasattr(dto, "google_id")

    def test_to_user(self) -> None:
        dto = CurrentUserDTO(id=uuid4(), email="test@example.com", name="Test User")
        rebuilt = dto.to_user(google_id="123")
        assert rebuilt.id == dto.id
        assert rebuilt.email == dto.email
        assert rebuilt.name == dto.name
        assert rebuilt.google_id == "123"
        assert rebuilt.created_at <= rebuilt.updated_at

    def test_to_user_defaults(self) -> None:
        before = datetime.now(UTC).replace(microsecond=0)
        rebuilt = CurrentUserDTO(id=uuid4(), email="a@b.com", name="A").to_user()
        assert rebuilt.google_id == ""
        assert rebuilt.created_at >= before

    def test_to_user_explicit_timestamps(self) -> None:
        created = datetime(2023, 5, 1, tzinfo=UTC)
        rebuilt = CurrentUserDTO(id=uuid4(), email="a@b.com", name="A").to_user(
            created_at=created
        )
        assert rebuilt.created_at == created
        assert rebuilt.updated_at >= created


class TestEnvelopes:
    def test_error_response_str(self) -> None:
        assert str(ErrorResponse(error="Not found")) == "Not found"

    def test_error_response_status_optional(self) -> None:
        assert ErrorResponse(error="x").status_code is None

    def test_from_validation_error(self) -> None:
        err = ValidationError.field_required("Recipe name is required")
        resp = ErrorResponse.from_validation_error(err)
        assert resp.error == "Recipe name is required"
        assert resp.status_code == 400

    def test_from_decode_error(self) -> None:
        resp = ErrorResponse.from_decode_error(DecodeError("bad json"), status_code=422)
        assert resp.error == "bad json"
        assert resp.status_code == 422

    def test_success_default(self) -> None:
        assert SuccessResponse().success is True
