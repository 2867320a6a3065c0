"""Domain errors raised by food fridge services."""


class FoodFridgeError(Exception):
    """Base class for expected, caller-facing failures."""


class InvalidFoodIdError(FoodFridgeError):
    """Raised when a food id is not a syntactically valid identifier."""

    def __init__(self, raw_id: str) -> None:
        super().__init__(f"Invalid food id: {raw_id!r}")
        self.raw_id = raw_id


class MissingOwnerError(FoodFridgeError):
    """Raised when an authenticated identity carries no email."""


class FoodNotFoundError(FoodFridgeError):
    """Raised when no food item matched, or none matched for this owner."""


class InvalidCredentialError(FoodFridgeError):
    """Raised when the identity provider rejects a token."""
