"""Tests for UserService projections."""

from recipekit.domain.models import User
from recipekit.services.users import UserService


def test_current_user_hides_provider_fields(user: User) -> None:
    result = UserService().current_user(user)
    assert result.ok
    assert result.data["user"] == {
        "id": str(user.id),
        "email": "test@example.com",
        "name": "Test User",
        "picture": "https://example.com/pic.jpg",
    }


def test_logout() -> None:
    result = UserService().logout()
    assert result.ok
    assert result.data == {"success": True}
