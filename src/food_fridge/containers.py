"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import acreate_client

from food_fridge.adapters.supabase_food_repository import SupabaseFoodRepository
from food_fridge.adapters.supabase_identity_verifier import SupabaseIdentityVerifier
from food_fridge.config import Settings
from food_fridge.services.auth import AuthService
from food_fridge.services.foods import FoodService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_service: FoodService
    auth_service: AuthService
    close_resources: Callable[[], Awaitable[None]]


ContainerFactory = Callable[[Settings], Awaitable[AppContainer]]


async def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = await acreate_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(
        client=supabase_client,
        table=resolved_settings.foods_table,
        timeout_seconds=resolved_settings.storage_timeout_seconds,
    )
    identity_verifier = SupabaseIdentityVerifier(supabase_client)

    async def close_resources() -> None:
        await supabase_client.postgrest.aclose()
        await supabase_client.auth.close()

    return AppContainer(
        settings=resolved_settings,
        food_service=FoodService(food_repository),
        auth_service=AuthService(identity_verifier),
        close_resources=close_resources,
    )
