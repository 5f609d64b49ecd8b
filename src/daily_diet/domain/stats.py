"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MealFlagRow:
    """Diet flag of a logged meal with its ordering timestamps."""

    created_at: datetime
    date: datetime
    fulfil_diet: bool


@dataclass(frozen=True)
class DietSummary:
    """Aggregate meal counts for a user."""

    total_meals: int
    meals_on_diet: int
    meals_off_diet: int
    best_on_diet_sequence: int
