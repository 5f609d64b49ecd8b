"""Meal logging service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from daily_diet.domain.meals import MealDraft, MealRecord
from daily_diet.domain.sessions import SessionContext
from daily_diet.errors import NotFoundError
from daily_diet.services.access import AccessService

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        """Return a user's meals ordered by creation time."""

    def get_meal(self, meal_id: UUID, user_id: UUID) -> MealRecord | None:
        """Return a user's meal by id."""

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealRecord:
        """Create a meal row and return it."""

    def update_meal(
        self, meal_id: UUID, user_id: UUID, draft: MealDraft
    ) -> MealRecord | None:
        """Replace the editable fields of a meal; None when nothing matched."""

    def delete_meal(self, meal_id: UUID, user_id: UUID) -> None:
        """Delete a meal row if present."""


@dataclass
class MealService:
    """Session-scoped meal operations."""

    access_service: AccessService
    repository: MealRepository

    def list_meals(self, user_id: UUID, session: SessionContext) -> list[MealRecord]:
        """Return all meals of a user owned by the session."""
        self.access_service.authorize_user(user_id, session)
        return self.repository.list_meals(user_id)

    def get_meal(
        self, user_id: UUID, meal_id: UUID, session: SessionContext
    ) -> MealRecord:
        """Return a single meal or raise NotFoundError."""
        self.access_service.authorize_user(user_id, session)
        meal = self.repository.get_meal(meal_id, user_id)
        if meal is None:
            raise NotFoundError("Meal not found")
        return meal

    def create_meal(
        self, user_id: UUID, draft: MealDraft, session: SessionContext
    ) -> MealRecord:
        """Persist a new meal for the user."""
        self.access_service.authorize_user(user_id, session)
        meal = self.repository.create_meal(user_id, draft)
        _logger.info("Meal created: meal_id=%s user_id=%s", meal.id, user_id)
        return meal

    def update_meal(
        self,
        user_id: UUID,
        meal_id: UUID,
        draft: MealDraft,
        session: SessionContext,
    ) -> MealRecord:
        """Replace a meal's fields or raise NotFoundError when none matched."""
        self.access_service.authorize_user(user_id, session)
        updated = self.repository.update_meal(meal_id, user_id, draft)
        if updated is None:
            raise NotFoundError("Meal not found")
        _logger.info("Meal updated: meal_id=%s user_id=%s", meal_id, user_id)
        return updated

    def delete_meal(
        self, user_id: UUID, meal_id: UUID, session: SessionContext
    ) -> None:
        """Delete a meal; absent meals are ignored."""
        self.access_service.authorize_user(user_id, session)
        self.repository.delete_meal(meal_id, user_id)
        _logger.info("Meal deleted: meal_id=%s user_id=%s", meal_id, user_id)
