"""Supabase Auth implementation of the identity verifier."""

import logging
from dataclasses import dataclass

from supabase import AsyncClient

from food_fridge.domain.errors import InvalidCredentialError
from food_fridge.domain.identity import VerifiedIdentity
from food_fridge.services.auth import IdentityVerifier

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityVerifier(IdentityVerifier):
    """Verifies access tokens against Supabase Auth."""

    client: AsyncClient

    async def verify(self, token: str) -> VerifiedIdentity:
        """Return the identity behind token or raise InvalidCredentialError."""
        try:
            user_response = await self.client.auth.get_user(token)
        except Exception as exc:
            _logger.warning("Token verification failed: %s", type(exc).__name__)
            raise InvalidCredentialError("Invalid token") from exc
        if not user_response or not user_response.user:
            raise InvalidCredentialError("Invalid token")
        user = user_response.user
        return VerifiedIdentity(
            email=user.email,
            claims={
                "sub": str(user.id),
                "user_metadata": dict(user.user_metadata or {}),
            },
        )
