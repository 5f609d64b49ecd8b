"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

MEAL_DATE_HORIZON_YEARS = 5


@dataclass(frozen=True)
class MealDraft:
    """Editable fields of a meal."""

    name: str
    description: str
    date: datetime
    fulfil_diet: bool


@dataclass(frozen=True)
class MealRecord:
    """Meal row with identifiers."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    date: datetime
    fulfil_diet: bool
    created_at: datetime


def add_years(moment: datetime, years: int) -> datetime:
    """Shift a datetime by whole years, clamping Feb 29 to Feb 28."""
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, day=28)


def validate_meal_date(value: datetime, now: datetime | None = None) -> datetime:
    """Return the meal date in UTC or raise ValueError outside the window.

    The accepted window is ``[now, now + MEAL_DATE_HORIZON_YEARS]``.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("date must include a UTC offset")
    reference = now or datetime.now(tz=UTC)
    normalized = value.astimezone(UTC)
    if normalized < reference:
        raise ValueError("date must not be in the past")
    if normalized > add_years(reference, MEAL_DATE_HORIZON_YEARS):
        raise ValueError(
            f"date must be within {MEAL_DATE_HORIZON_YEARS} years from now"
        )
    return normalized
