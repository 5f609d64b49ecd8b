"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from daily_diet.api.app import create_app
from daily_diet.config import Settings
from daily_diet.containers import AppContainer
from daily_diet.domain.meals import MealDraft, MealRecord
from daily_diet.domain.models import UserRecord
from daily_diet.domain.stats import MealFlagRow
from daily_diet.services.access import AccessService
from daily_diet.services.meals import MealRepository, MealService
from daily_diet.services.sessions import SessionService
from daily_diet.services.stats import StatsRepository, StatsService
from daily_diet.services.users import UserRepository, UserService

_EPOCH = datetime(2026, 1, 1, tzinfo=UTC)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def list_by_session(self, session_id: str) -> list[UserRecord]:
        return [user for user in self.users.values() if user.session_id == session_id]

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def create_user(self, name: str, email: str, session_id: str) -> UserRecord:
        user = UserRecord(
            id=uuid4(),
            name=name,
            email=email,
            session_id=session_id,
            created_at=datetime.now(tz=UTC),
        )
        self.users[user.id] = user
        return user


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests.

    ``created_at`` advances one second per insert so creation order is stable.
    """

    meals: dict[UUID, MealRecord] = field(default_factory=dict)
    inserts: int = 0

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        return sorted(
            (meal for meal in self.meals.values() if meal.user_id == user_id),
            key=lambda meal: meal.created_at,
        )

    def get_meal(self, meal_id: UUID, user_id: UUID) -> MealRecord | None:
        meal = self.meals.get(meal_id)
        if meal is None or meal.user_id != user_id:
            return None
        return meal

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealRecord:
        self.inserts += 1
        meal = MealRecord(
            id=uuid4(),
            user_id=user_id,
            name=draft.name,
            description=draft.description,
            date=draft.date,
            fulfil_diet=draft.fulfil_diet,
            created_at=_EPOCH + timedelta(seconds=self.inserts),
        )
        self.meals[meal.id] = meal
        return meal

    def update_meal(
        self, meal_id: UUID, user_id: UUID, draft: MealDraft
    ) -> MealRecord | None:
        current = self.get_meal(meal_id, user_id)
        if current is None:
            return None
        updated = replace(
            current,
            name=draft.name,
            description=draft.description,
            date=draft.date,
            fulfil_diet=draft.fulfil_diet,
        )
        self.meals[meal_id] = updated
        return updated

    def delete_meal(self, meal_id: UUID, user_id: UUID) -> None:
        if self.get_meal(meal_id, user_id) is not None:
            del self.meals[meal_id]


@dataclass
class InMemoryStatsRepository(StatsRepository):
    """Stats repository reading from an in-memory meal store."""

    meal_repository: InMemoryMealRepository = field(
        default_factory=InMemoryMealRepository
    )
    rows: list[MealFlagRow] | None = None

    def list_meal_flags(self, user_id: UUID) -> list[MealFlagRow]:
        if self.rows is not None:
            return list(self.rows)
        return [
            MealFlagRow(
                created_at=meal.created_at,
                date=meal.date,
                fulfil_diet=meal.fulfil_diet,
            )
            for meal in self.meal_repository.meals.values()
            if meal.user_id == user_id
        ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    meal_repository: InMemoryMealRepository,
) -> AppContainer:
    access_service = AccessService(user_repository)

    return AppContainer(
        settings=settings,
        session_service=SessionService(),
        user_service=UserService(user_repository),
        access_service=access_service,
        meal_service=MealService(
            access_service=access_service, repository=meal_repository
        ),
        stats_service=StatsService(
            access_service=access_service,
            repository=InMemoryStatsRepository(meal_repository),
        ),
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def register_user(
    client: TestClient, name: str = "Ana", email: str = "ana@example.com"
) -> str:
    """Register a user through the API and return its id."""
    created = client.post("/users", json={"name": name, "email": email})
    assert created.status_code == 201
    listed = client.get("/users").json()["users"]
    return next(user["id"] for user in listed if user["email"] == email)


def future_iso(days: int = 1) -> str:
    return (datetime.now(tz=UTC) + timedelta(days=days)).isoformat()
