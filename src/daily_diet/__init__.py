"""Daily diet meal-tracking API."""
