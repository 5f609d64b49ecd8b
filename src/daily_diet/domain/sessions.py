"""Domain models for client sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionContext:
    """Session token attached to a request."""

    session_id: str
    is_new: bool = False
