"""Request-scoped dependencies shared by the API routers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status

if TYPE_CHECKING:
    from food_fridge.config import Settings
    from food_fridge.containers import AppContainer


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_container(request: Request) -> AppContainer:
    """Return the initialized container or reject the request as not ready."""
    container: AppContainer | None = request.app.state.container
    if container is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready",
        )
    return container
