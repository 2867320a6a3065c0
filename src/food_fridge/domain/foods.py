"""Domain models for food items."""

from dataclasses import dataclass, field
from uuid import UUID

RESERVED_FIELDS = frozenset({"id", "_id", "addedBy"})


@dataclass(frozen=True)
class FoodItem:
    """A stored food item: free-form fields owned by a single identity."""

    id: UUID
    added_by: str
    fields: dict[str, object] = field(default_factory=dict)

    def to_document(self) -> dict[str, object]:
        """Render the item the way API callers see it."""
        return {**self.fields, "id": str(self.id), "addedBy": self.added_by}


@dataclass(frozen=True)
class InsertResult:
    """Outcome of inserting a food item."""

    inserted_id: UUID

    def to_dict(self) -> dict[str, object]:
        return {"acknowledged": True, "insertedId": str(self.inserted_id)}


def strip_reserved(payload: dict[str, object]) -> dict[str, object]:
    """Drop keys callers are never allowed to set."""
    return {key: value for key, value in payload.items() if key not in RESERVED_FIELDS}
