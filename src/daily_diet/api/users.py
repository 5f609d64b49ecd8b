"""User registration and lookup endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from daily_diet.api.dependencies import get_container, optional_session, require_session
from daily_diet.api.schemas import CreateUserRequest, serialize_user
from daily_diet.containers import AppContainer
from daily_diet.domain.sessions import SessionContext

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the users registered under the caller's session."""
    users = container.user_service.list_users(session)
    return {"users": [serialize_user(user) for user in users]}


@router.get("/{user_id}")
async def get_user(
    user_id: UUID,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a single user owned by the caller's session."""
    user = container.access_service.authorize_user(user_id, session)
    return {"user": serialize_user(user)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: CreateUserRequest,
    session: SessionContext | None = Depends(optional_session),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Register a user, minting a session cookie for first-time callers."""
    resolved = container.session_service.resolve(
        session.session_id if session else None
    )
    response = Response(status_code=status.HTTP_201_CREATED)
    if resolved.is_new:
        response.set_cookie(
            container.settings.session_cookie_name,
            resolved.session_id,
            max_age=container.settings.session_max_age_seconds,
            path="/",
        )
    container.user_service.register(body.name, str(body.email), resolved)
    return response
