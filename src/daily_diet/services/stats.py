"""Statistics service for logged meals."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from daily_diet.domain.sessions import SessionContext
from daily_diet.domain.stats import DietSummary, MealFlagRow
from daily_diet.services.access import AccessService


class StatsRepository(Protocol):
    """Persistence interface for meal statistics."""

    def list_meal_flags(self, user_id: UUID) -> list[MealFlagRow]:
        """Return the diet flags of every meal of a user."""


@dataclass
class StatsService:
    """Service computing diet counts and streaks."""

    access_service: AccessService
    repository: StatsRepository

    def get_summary(self, user_id: UUID, session: SessionContext) -> DietSummary:
        """Return meal counts and the best on-diet streak for a user."""
        self.access_service.authorize_user(user_id, session)
        rows = sorted(
            self.repository.list_meal_flags(user_id),
            key=lambda row: (row.created_at, row.date),
        )
        flags = [row.fulfil_diet for row in rows]
        on_diet = sum(1 for flag in flags if flag)
        return DietSummary(
            total_meals=len(flags),
            meals_on_diet=on_diet,
            meals_off_diet=len(flags) - on_diet,
            best_on_diet_sequence=best_streak(flags),
        )


def best_streak(flags: list[bool]) -> int:
    """Return the longest run of consecutive True values."""
    best = 0
    current = 0
    for flag in flags:
        if flag:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best
