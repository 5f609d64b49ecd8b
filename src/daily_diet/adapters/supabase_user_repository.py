"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from daily_diet.domain.models import UserRecord
from daily_diet.services.users import UserRepository

_USER_COLUMNS = "id, name, email, session_id, created_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def list_by_session(self, session_id: str) -> list[UserRecord]:
        """Return users registered under a session token."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("session_id", session_id)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_user(row) for row in response.data or []]

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, name: str, email: str, session_id: str) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert({"name": name, "email": email, "session_id": session_id})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        email=str(row.get("email", "")),
        session_id=str(row.get("session_id", "")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
