"""Token verification for the authentication gate and login."""

from dataclasses import dataclass
from typing import Protocol

from food_fridge.domain.errors import InvalidCredentialError
from food_fridge.domain.identity import VerifiedIdentity


class IdentityVerifier(Protocol):
    """Interface to the external identity provider."""

    async def verify(self, token: str) -> VerifiedIdentity:
        """Return the identity for a token or raise InvalidCredentialError."""


@dataclass
class AuthService:
    """Application service wrapping the identity provider."""

    verifier: IdentityVerifier

    async def authenticate(self, token: str) -> VerifiedIdentity:
        """Verify a credential presented on a protected request."""
        if not token:
            raise InvalidCredentialError("Empty token")
        return await self.verifier.verify(token)
