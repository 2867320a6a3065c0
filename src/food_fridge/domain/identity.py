"""Domain models for verified identities."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VerifiedIdentity:
    """Identity returned by the identity provider for a valid token."""

    email: str | None
    claims: dict[str, object] = field(default_factory=dict)
