"""Owner-scoped food item operations."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from food_fridge.domain.errors import (
    FoodNotFoundError,
    InvalidFoodIdError,
    MissingOwnerError,
)
from food_fridge.domain.foods import FoodItem, InsertResult, strip_reserved

_logger = logging.getLogger(__name__)

_NOT_UPDATED = "Food not found, unauthorized, or already up-to-date"


class FoodRepository(Protocol):
    """Persistence interface for food items."""

    async def insert_food(self, added_by: str, fields: dict[str, object]) -> UUID:
        """Insert a food item and return its storage-assigned id."""

    async def list_foods(self) -> list[FoodItem]:
        """Return every stored food item."""

    async def list_foods_by_owner(self, added_by: str) -> list[FoodItem]:
        """Return food items created by the given email."""

    async def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""

    async def delete_owned_food(self, food_id: UUID, added_by: str) -> int:
        """Delete a food item only when it is owned by added_by.

        Returns the number of deleted rows.
        """

    async def merge_owned_food(
        self, food_id: UUID, added_by: str, patch: dict[str, object]
    ) -> int:
        """Merge patch into a food item only when it is owned by added_by.

        Returns the number of rows whose fields actually changed.
        """


def parse_food_id(raw_id: str) -> UUID:
    """Parse a path id, rejecting anything that is not a UUID."""
    try:
        return UUID(raw_id)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidFoodIdError(raw_id) from exc


@dataclass
class FoodService:
    """Application service for the food item collection."""

    repository: FoodRepository

    async def create(
        self, payload: dict[str, object], added_by: str | None
    ) -> InsertResult:
        """Create a food item owned by the authenticated email."""
        if not added_by:
            raise MissingOwnerError("Missing user email (addedBy)")
        food_id = await self.repository.insert_food(added_by, strip_reserved(payload))
        _logger.info("Food created: food_id=%s", food_id)
        return InsertResult(inserted_id=food_id)

    async def list_public(self) -> list[FoodItem]:
        """Return every food item, regardless of owner."""
        return await self.repository.list_foods()

    async def list_own(self, added_by: str) -> list[FoodItem]:
        """Return food items created by the given email."""
        return await self.repository.list_foods_by_owner(added_by)

    async def get(self, raw_id: str) -> FoodItem:
        """Return a food item by id for any caller."""
        food_id = parse_food_id(raw_id)
        food = await self.repository.get_food(food_id)
        if food is None:
            raise FoodNotFoundError("Food not found")
        return food

    async def delete(self, raw_id: str, added_by: str) -> int:
        """Delete an owned food item and return the deleted count."""
        food_id = parse_food_id(raw_id)
        deleted = await self.repository.delete_owned_food(food_id, added_by)
        if deleted != 1:
            _logger.info("Delete matched no owned food: food_id=%s", food_id)
            raise FoodNotFoundError("Food not found or unauthorized")
        return deleted

    async def update(
        self, raw_id: str, patch: dict[str, object], added_by: str
    ) -> int:
        """Merge-patch an owned food item and return the modified count.

        Missing items, items owned by someone else, and patches that change
        nothing all surface as FoodNotFoundError.
        """
        fields = strip_reserved(patch)
        food_id = parse_food_id(raw_id)
        if not fields:
            _logger.info("Update skipped, empty patch: food_id=%s", food_id)
            raise FoodNotFoundError(_NOT_UPDATED)
        modified = await self.repository.merge_owned_food(food_id, added_by, fields)
        if modified < 1:
            _logger.info("Update modified no owned food: food_id=%s", food_id)
            raise FoodNotFoundError(_NOT_UPDATED)
        return modified
