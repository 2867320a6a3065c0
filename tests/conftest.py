"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from food_fridge.api.app import create_app
from food_fridge.config import Settings
from food_fridge.containers import AppContainer
from food_fridge.domain.errors import InvalidCredentialError
from food_fridge.domain.foods import FoodItem
from food_fridge.domain.identity import VerifiedIdentity
from food_fridge.services.auth import AuthService, IdentityVerifier
from food_fridge.services.foods import FoodRepository, FoodService

ALICE_TOKEN = "alice-token"
BOB_TOKEN = "bob-token"
NO_EMAIL_TOKEN = "phone-only-token"


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: dict[UUID, FoodItem] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    fail: bool = False

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise RuntimeError("storage unavailable")

    async def insert_food(self, added_by: str, fields: dict[str, object]) -> UUID:
        self._record("insert_food")
        food = FoodItem(id=uuid4(), added_by=added_by, fields=dict(fields))
        self.foods[food.id] = food
        return food.id

    async def list_foods(self) -> list[FoodItem]:
        self._record("list_foods")
        return list(self.foods.values())

    async def list_foods_by_owner(self, added_by: str) -> list[FoodItem]:
        self._record("list_foods_by_owner")
        return [food for food in self.foods.values() if food.added_by == added_by]

    async def get_food(self, food_id: UUID) -> FoodItem | None:
        self._record("get_food")
        return self.foods.get(food_id)

    async def delete_owned_food(self, food_id: UUID, added_by: str) -> int:
        self._record("delete_owned_food")
        food = self.foods.get(food_id)
        if food is None or food.added_by != added_by:
            return 0
        del self.foods[food_id]
        return 1

    async def merge_owned_food(
        self, food_id: UUID, added_by: str, patch: dict[str, object]
    ) -> int:
        self._record("merge_owned_food")
        food = self.foods.get(food_id)
        if food is None or food.added_by != added_by:
            return 0
        merged = {**food.fields, **patch}
        if merged == food.fields:
            return 0
        self.foods[food_id] = FoodItem(
            id=food.id, added_by=food.added_by, fields=merged
        )
        return 1


@dataclass
class FakeIdentityVerifier(IdentityVerifier):
    """Identity verifier backed by a fixed token table."""

    identities: dict[str, VerifiedIdentity] = field(
        default_factory=lambda: {
            ALICE_TOKEN: VerifiedIdentity(email="a@x.com", claims={"sub": "alice"}),
            BOB_TOKEN: VerifiedIdentity(email="b@x.com", claims={"sub": "bob"}),
            NO_EMAIL_TOKEN: VerifiedIdentity(email=None, claims={"sub": "phone"}),
        }
    )
    verified: list[str] = field(default_factory=list)

    async def verify(self, token: str) -> VerifiedIdentity:
        self.verified.append(token)
        identity = self.identities.get(token)
        if identity is None:
            raise InvalidCredentialError("Invalid token")
        return identity


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def identity_verifier() -> FakeIdentityVerifier:
    return FakeIdentityVerifier()


@pytest.fixture
def food_service(food_repository: InMemoryFoodRepository) -> FoodService:
    return FoodService(food_repository)


@pytest.fixture
def container(
    settings: Settings,
    food_service: FoodService,
    identity_verifier: FakeIdentityVerifier,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_service=food_service,
        auth_service=AuthService(identity_verifier),
        close_resources=close_resources,
    )


@pytest.fixture
def client(settings: Settings, container: AppContainer) -> Iterator[TestClient]:
    async def container_factory(_settings: Settings) -> AppContainer:
        return container

    app = create_app(settings, container_factory=container_factory)
    with TestClient(app) as test_client:
        yield test_client


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
