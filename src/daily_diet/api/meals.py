"""Meal endpoints scoped to a user and the caller's session."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from daily_diet.api.dependencies import get_container, require_session
from daily_diet.api.schemas import (
    MealRequest,
    MealUpdateRequest,
    serialize_meal,
    serialize_summary,
)
from daily_diet.containers import AppContainer
from daily_diet.domain.sessions import SessionContext

router = APIRouter(tags=["meals"])


@router.get("/{user_id}/meals")
async def list_meals(
    user_id: UUID,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return every meal of the user."""
    meals = container.meal_service.list_meals(user_id, session)
    return {"meals": [serialize_meal(meal) for meal in meals]}


@router.get("/{user_id}/meals/{meal_id}")
async def get_meal(
    user_id: UUID,
    meal_id: UUID,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a single meal."""
    meal = container.meal_service.get_meal(user_id, meal_id, session)
    return {"meal": serialize_meal(meal)}


@router.post("/{user_id}/meals", status_code=status.HTTP_201_CREATED)
async def create_meal(
    user_id: UUID,
    body: MealRequest,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a new meal for the user."""
    meal = container.meal_service.create_meal(user_id, body.to_draft(), session)
    return {"meal": serialize_meal(meal)}


@router.patch("/{user_id}/meals/{meal_id}")
async def update_meal(
    user_id: UUID,
    meal_id: UUID,
    body: MealUpdateRequest,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Replace the fields of an existing meal."""
    meal = container.meal_service.update_meal(
        user_id, meal_id, body.to_draft(), session
    )
    return {"meal": serialize_meal(meal)}


@router.delete("/{user_id}/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    user_id: UUID,
    meal_id: UUID,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Delete a meal; missing meals are not an error."""
    container.meal_service.delete_meal(user_id, meal_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/stats")
async def get_stats(
    user_id: UUID,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return meal counts and the best on-diet streak."""
    summary = container.stats_service.get_summary(user_id, session)
    return {"stats": serialize_summary(summary)}
