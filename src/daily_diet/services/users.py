"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from daily_diet.domain.models import UserRecord
from daily_diet.domain.sessions import SessionContext

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def list_by_session(self, session_id: str) -> list[UserRecord]:
        """Return users registered under a session token."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def create_user(self, name: str, email: str, session_id: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def list_users(self, session: SessionContext) -> list[UserRecord]:
        """Return the users owned by the session."""
        return self.repository.list_by_session(session.session_id)

    def register(self, name: str, email: str, session: SessionContext) -> UserRecord:
        """Create a user bound to the session token."""
        user = self.repository.create_user(
            name=name, email=email, session_id=session.session_id
        )
        _logger.info("User registered: user_id=%s", user.id)
        return user
