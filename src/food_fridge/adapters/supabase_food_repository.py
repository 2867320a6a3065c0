"""Supabase implementation for food item storage."""

import asyncio
from dataclasses import dataclass
from uuid import UUID

from supabase import AsyncClient

from food_fridge.domain.foods import FoodItem
from food_fridge.services.foods import FoodRepository

MERGE_FUNCTION = "merge_food_item"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository storing each food as a jsonb document."""

    client: AsyncClient
    table: str = "foods"
    timeout_seconds: float = 10.0

    async def insert_food(self, added_by: str, fields: dict[str, object]) -> UUID:
        """Insert a food row and return its generated id."""
        response = await self._execute(
            self.client.table(self.table).insert(
                {"added_by": added_by, "data": fields}
            )
        )
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return UUID(response.data[0]["id"])

    async def list_foods(self) -> list[FoodItem]:
        """Return every food row."""
        response = await self._execute(
            self.client.table(self.table).select("id, added_by, data")
        )
        return [_parse_food(row) for row in response.data or []]

    async def list_foods_by_owner(self, added_by: str) -> list[FoodItem]:
        """Return food rows created by added_by."""
        response = await self._execute(
            self.client.table(self.table)
            .select("id, added_by, data")
            .eq("added_by", added_by)
        )
        return [_parse_food(row) for row in response.data or []]

    async def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food row by id, if present."""
        response = await self._execute(
            self.client.table(self.table)
            .select("id, added_by, data")
            .eq("id", str(food_id))
            .limit(1)
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    async def delete_owned_food(self, food_id: UUID, added_by: str) -> int:
        """Delete the row matching both id and owner in a single statement."""
        response = await self._execute(
            self.client.table(self.table)
            .delete()
            .eq("id", str(food_id))
            .eq("added_by", added_by)
        )
        return len(response.data or [])

    async def merge_owned_food(
        self, food_id: UUID, added_by: str, patch: dict[str, object]
    ) -> int:
        """Merge patch into the owned row via the merge_food_item function."""
        response = await self._execute(
            self.client.rpc(
                MERGE_FUNCTION,
                {"item_id": str(food_id), "owner": added_by, "patch": patch},
            )
        )
        return int(response.data or 0)

    async def _execute(self, query):  # type: ignore[no-untyped-def]
        return await asyncio.wait_for(query.execute(), timeout=self.timeout_seconds)


def _parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a food row into a domain model."""
    data = row.get("data")
    return FoodItem(
        id=UUID(str(row["id"])),
        added_by=str(row.get("added_by", "")),
        fields=dict(data) if isinstance(data, dict) else {},
    )
