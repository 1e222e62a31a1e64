"""
Caller identity as seen by request handlers.

Handlers only ever ask two questions of a session: is it authenticated, and
what name should content be attributed to. ``TokenIdentity`` answers them from
verified session-token claims; ``ANONYMOUS`` answers for everyone else.
"""

from typing import Any, Dict, Mapping, Optional


class Identity:
    """Unauthenticated caller."""

    def is_authenticated(self) -> bool:
        return False

    def display_name(self) -> Optional[str]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {}


ANONYMOUS = Identity()


class TokenIdentity(Identity):
    """Identity backed by the claims of a verified session token."""

    def __init__(self, claims: Mapping[str, Any]):
        self.claims = dict(claims)

    def is_authenticated(self) -> bool:
        return True

    def display_name(self) -> Optional[str]:
        name = self.claims.get("name")
        return str(name) if name else None

    @property
    def subject(self) -> str:
        return str(self.claims.get("sub", ""))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.subject,
            "name": self.display_name(),
            "email": self.claims.get("email"),
            "provider": self.claims.get("provider"),
        }

    def __repr__(self) -> str:
        return f"TokenIdentity(sub={self.subject!r})"


def identity_from_claims(claims: Optional[Mapping[str, Any]]) -> Identity:
    """Wrap verified claims, or return ``ANONYMOUS`` when there are none."""
    if not claims:
        return ANONYMOUS
    return TokenIdentity(claims)
