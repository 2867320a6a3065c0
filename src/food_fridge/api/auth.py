"""Authentication gate and cookie session endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel

from food_fridge.api.dependencies import get_container, get_settings
from food_fridge.config import Settings
from food_fridge.containers import AppContainer
from food_fridge.domain.errors import InvalidCredentialError
from food_fridge.domain.identity import VerifiedIdentity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    """Login payload carrying an identity provider token."""

    token: object | None = None


def extract_credential(request: Request, cookie_name: str) -> str | None:
    """Return the bearer token from the Authorization header or the cookie."""
    authorization = request.headers.get("authorization")
    if authorization:
        scheme, _, credential = authorization.partition(" ")
        if scheme.lower() == "bearer" and credential.strip():
            return credential.strip()
    return request.cookies.get(cookie_name) or None


async def require_identity(
    request: Request,
    settings: Settings = Depends(get_settings),
    container: AppContainer = Depends(get_container),
) -> VerifiedIdentity:
    """Verify the request credential and bind the identity to the request."""
    token = extract_credential(request, settings.cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    try:
        identity = await container.auth_service.authenticate(token)
    except InvalidCredentialError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token"
        ) from None
    request.state.identity = identity
    return identity


@router.post("/login")
async def login(
    response: Response,
    payload: LoginRequest | None = None,
    settings: Settings = Depends(get_settings),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Verify a token and store it as the session cookie."""
    raw_token = payload.token if payload else None
    if not raw_token:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Token required"
        )
    token = str(raw_token)
    try:
        identity = await container.auth_service.authenticate(token)
    except InvalidCredentialError:
        logger.warning("Login rejected: token verification failed")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token"
        ) from None
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=settings.cookie_max_age_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="none",
    )
    return {"success": True, "email": identity.email}


@router.post("/logout")
async def logout(
    response: Response, settings: Settings = Depends(get_settings)
) -> dict[str, object]:
    """Clear the session cookie."""
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="none",
    )
    return {"success": True}
