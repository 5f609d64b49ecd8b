"""Session token handling."""

import logging
from dataclasses import dataclass
from uuid import uuid4

from daily_diet.domain.sessions import SessionContext

_logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Resolves the session a request acts under."""

    def resolve(self, session_id: str | None) -> SessionContext:
        """Reuse the caller's token or mint a new one."""
        if session_id:
            return SessionContext(session_id=session_id)
        minted = SessionContext(session_id=str(uuid4()), is_new=True)
        _logger.info("Session minted")
        return minted
