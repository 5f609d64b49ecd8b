"""Ownership checks for session-scoped resources."""

from dataclasses import dataclass
from uuid import UUID

from daily_diet.domain.models import UserRecord
from daily_diet.domain.sessions import SessionContext
from daily_diet.errors import ForbiddenError, NotFoundError
from daily_diet.services.users import UserRepository


@dataclass
class AccessService:
    """Authorizes a session against a user id."""

    user_repository: UserRepository

    def authorize_user(self, user_id: UUID, session: SessionContext) -> UserRecord:
        """Return the user when the session owns it.

        Raises NotFoundError for unknown users and ForbiddenError when the
        user belongs to another session.
        """
        user = self.user_repository.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        if user.session_id != session.session_id:
            raise ForbiddenError("User belongs to another session")
        return user
