"""Request dependencies shared by the API routers."""

from fastapi import Depends, Request

from daily_diet.containers import AppContainer
from daily_diet.domain.sessions import SessionContext
from daily_diet.errors import MissingSessionError


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


async def optional_session(
    request: Request,
    container: AppContainer = Depends(get_container),
) -> SessionContext | None:
    """Return the session carried by the request cookie, if any."""
    session_id = request.cookies.get(container.settings.session_cookie_name)
    if not session_id:
        return None
    return SessionContext(session_id=session_id)


async def require_session(
    session: SessionContext | None = Depends(optional_session),
) -> SessionContext:
    """Reject requests that carry no session cookie."""
    if session is None:
        raise MissingSessionError()
    return session
