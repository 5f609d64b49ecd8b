"""Request and response models for the HTTP API."""

from datetime import UTC, datetime

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
)

from daily_diet.domain.meals import MealDraft, MealRecord, validate_meal_date
from daily_diet.domain.models import UserRecord
from daily_diet.domain.stats import DietSummary


class CreateUserRequest(BaseModel):
    """Registration payload."""

    name: str
    email: EmailStr


def _require_iso_string(value: object) -> object:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("date must be an ISO 8601 string")
    try:
        float(value)
    except ValueError:
        return value
    raise ValueError("date must be an ISO 8601 string, not an epoch")


class MealRequest(BaseModel):
    """Payload for creating a meal; an omitted date means now."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    date: AwareDatetime | None = None
    fulfil_diet: bool = Field(alias="fulfilDiet")

    @field_validator("date", mode="before")
    @classmethod
    def _check_date_format(cls, value: object) -> object:
        return _require_iso_string(value)

    @field_validator("date")
    @classmethod
    def _check_date_window(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return validate_meal_date(value)

    def to_draft(self) -> MealDraft:
        """Return the domain draft, defaulting the date to now."""
        return MealDraft(
            name=self.name,
            description=self.description,
            date=self.date or datetime.now(tz=UTC),
            fulfil_diet=self.fulfil_diet,
        )


class MealUpdateRequest(MealRequest):
    """Payload replacing every editable field of a meal."""

    date: AwareDatetime


def serialize_user(user: UserRecord) -> dict[str, object]:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "created_at": user.created_at.isoformat(),
    }


def serialize_meal(meal: MealRecord) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "user_id": str(meal.user_id),
        "name": meal.name,
        "description": meal.description,
        "date": meal.date.isoformat(),
        "fulfil_diet": meal.fulfil_diet,
        "created_at": meal.created_at.isoformat(),
    }


def serialize_summary(summary: DietSummary) -> dict[str, int]:
    return {
        "total_meals": summary.total_meals,
        "meals_on_diet": summary.meals_on_diet,
        "meals_off_diet": summary.meals_off_diet,
        "best_on_diet_sequence": summary.best_on_diet_sequence,
    }
