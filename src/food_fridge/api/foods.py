"""Food item endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from food_fridge.api.auth import require_identity
from food_fridge.api.dependencies import get_container
from food_fridge.containers import AppContainer
from food_fridge.domain.errors import (
    FoodNotFoundError,
    InvalidFoodIdError,
    MissingOwnerError,
)
from food_fridge.domain.identity import VerifiedIdentity

logger = logging.getLogger(__name__)

router = APIRouter(tags=["foods"])

_INVALID_ID = "Invalid ID format"


@router.post("/foods", status_code=status.HTTP_201_CREATED)
async def create_food(
    payload: dict[str, Any],
    identity: VerifiedIdentity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    """Create a food item owned by the caller."""
    try:
        result = await container.food_service.create(payload, identity.email)
    except MissingOwnerError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from None
    except Exception:
        logger.exception("Insert failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add food",
        ) from None
    return result.to_dict()


@router.get("/foods")
async def list_foods(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, Any]]:
    """Return every food item."""
    try:
        foods = await container.food_service.list_public()
    except Exception:
        logger.exception("Fetch failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get food items",
        ) from None
    return [food.to_document() for food in foods]


@router.get("/user-foods")
async def list_user_foods(
    identity: VerifiedIdentity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, Any]]:
    """Return the caller's own food items."""
    try:
        foods = await container.food_service.list_own(identity.email or "")
    except Exception:
        logger.exception("Fetch of user foods failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get user's food items",
        ) from None
    return [food.to_document() for food in foods]


@router.get("/foods/{food_id}")
async def get_food(
    food_id: str, container: AppContainer = Depends(get_container)
) -> dict[str, Any]:
    """Return a single food item to any caller."""
    try:
        food = await container.food_service.get(food_id)
    except InvalidFoodIdError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=_INVALID_ID
        ) from None
    except FoodNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from None
    except Exception:
        logger.exception("Error getting food")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get food",
        ) from None
    return food.to_document()


@router.delete("/foods/{food_id}")
async def delete_food(
    food_id: str,
    identity: VerifiedIdentity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    """Delete a food item owned by the caller."""
    try:
        deleted = await container.food_service.delete(food_id, identity.email or "")
    except InvalidFoodIdError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=_INVALID_ID
        ) from None
    except FoodNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"success": False, "message": str(exc)},
        ) from None
    except Exception:
        logger.exception("Delete failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete food",
        ) from None
    return {"success": True, "message": "Food deleted", "deletedCount": deleted}


@router.put("/foods/{food_id}")
async def update_food(
    food_id: str,
    payload: dict[str, Any],
    identity: VerifiedIdentity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    """Merge-patch a food item owned by the caller."""
    try:
        await container.food_service.update(food_id, payload, identity.email or "")
    except InvalidFoodIdError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=_INVALID_ID
        ) from None
    except FoodNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"success": False, "message": str(exc)},
        ) from None
    except Exception:
        logger.exception("Update failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update food",
        ) from None
    return {"success": True, "message": "Food updated"}
