"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from daily_diet.domain.meals import MealDraft, MealRecord
from daily_diet.services.meals import MealRepository

_MEAL_COLUMNS = "id, user_id, name, description, date, fulfil_diet, created_at"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        """Return a user's meals ordered by creation time."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, meal_id: UUID, user_id: UUID) -> MealRecord | None:
        """Return a meal by id scoped to its owner."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealRecord:
        """Create a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert({"user_id": str(user_id), **_draft_payload(draft)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def update_meal(
        self, meal_id: UUID, user_id: UUID, draft: MealDraft
    ) -> MealRecord | None:
        """Update a meal row; None when no row matched."""
        response = (
            self.client.table("meals")
            .update(_draft_payload(draft))
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID, user_id: UUID) -> None:
        """Delete a meal row if present."""
        self.client.table("meals").delete().eq("id", str(meal_id)).eq(
            "user_id", str(user_id)
        ).execute()


def _draft_payload(draft: MealDraft) -> dict[str, object]:
    return {
        "name": draft.name,
        "description": draft.description,
        "date": draft.date.isoformat(),
        "fulfil_diet": draft.fulfil_diet,
    }


def _parse_meal(row: dict[str, object]) -> MealRecord:
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description", "")),
        date=datetime.fromisoformat(str(row["date"])),
        fulfil_diet=bool(row.get("fulfil_diet", False)),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
