"""UserService — public projections for the auth routes."""

from __future__ import annotations

from recipekit.domain.dto import CurrentUserDTO, SuccessResponse
from recipekit.domain.models import User
from recipekit.services.base import BaseService
from recipekit.services.result import ServiceResult


class UserService(BaseService):
    def current_user(self, user: User) -> ServiceResult:
        """``GET /api/auth/me``: the user without provider id or timestamps."""
        dto = CurrentUserDTO.from_user(user)
        return ServiceResult.success("current_user", {"user": self._codec.to_dict(dto)})

    def logout(self) -> ServiceResult:
        """``POST /api/auth/logout``: session teardown is the caller's job."""
        return ServiceResult.success("logout", self._codec.to_dict(SuccessResponse()))
