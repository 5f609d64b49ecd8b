"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from daily_diet.adapters.supabase_meal_repository import SupabaseMealRepository
from daily_diet.adapters.supabase_stats_repository import SupabaseStatsRepository
from daily_diet.adapters.supabase_user_repository import SupabaseUserRepository
from daily_diet.config import Settings
from daily_diet.services.access import AccessService
from daily_diet.services.meals import MealService
from daily_diet.services.sessions import SessionService
from daily_diet.services.stats import StatsService
from daily_diet.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    user_service: UserService
    access_service: AccessService
    meal_service: MealService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    stats_repository = SupabaseStatsRepository(supabase_client)
    access_service = AccessService(user_repository)

    return AppContainer(
        settings=resolved_settings,
        session_service=SessionService(),
        user_service=UserService(user_repository),
        access_service=access_service,
        meal_service=MealService(
            access_service=access_service, repository=meal_repository
        ),
        stats_service=StatsService(
            access_service=access_service, repository=stats_repository
        ),
    )
