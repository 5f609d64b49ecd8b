"""Tests for session ownership checks."""

from uuid import uuid4

import pytest

from daily_diet.domain.sessions import SessionContext
from daily_diet.errors import ForbiddenError, NotFoundError
from daily_diet.services.access import AccessService
from tests.conftest import InMemoryUserRepository


def test_authorize_user_returns_owned_user() -> None:
    repository = InMemoryUserRepository()
    user = repository.create_user("Ana", "ana@example.com", "session-a")

    authorized = AccessService(repository).authorize_user(
        user.id, SessionContext("session-a")
    )

    assert authorized == user


def test_authorize_user_rejects_other_session() -> None:
    repository = InMemoryUserRepository()
    user = repository.create_user("Ana", "ana@example.com", "session-a")

    with pytest.raises(ForbiddenError):
        AccessService(repository).authorize_user(user.id, SessionContext("session-b"))


def test_authorize_user_reports_missing_user() -> None:
    with pytest.raises(NotFoundError):
        AccessService(InMemoryUserRepository()).authorize_user(
            uuid4(), SessionContext("session-a")
        )
