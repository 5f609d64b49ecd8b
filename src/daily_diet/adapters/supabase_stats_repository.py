"""Supabase repository for meal statistics."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from daily_diet.domain.stats import MealFlagRow
from daily_diet.services.stats import StatsRepository


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for stats queries."""

    client: Client

    def list_meal_flags(self, user_id: UUID) -> list[MealFlagRow]:
        """Return diet flags for a user's meals in creation order."""
        response = (
            self.client.table("meals")
            .select("created_at, date, fulfil_diet")
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> MealFlagRow:
    return MealFlagRow(
        created_at=datetime.fromisoformat(str(row["created_at"])),
        date=datetime.fromisoformat(str(row["date"])),
        fulfil_diet=bool(row.get("fulfil_diet", False)),
    )
