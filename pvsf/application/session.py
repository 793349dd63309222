"""Session value and capability checks.

Authorization here is a predicate over the session, not a type hierarchy:
routes ask ``is_admin(session)`` rather than inspecting roles themselves.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pvsf.core.constants import ROLE_ADMIN, ROLE_USER


@dataclass(frozen=True)
class Session:
    """Authenticated caller, decoded from a session token."""

    user_id: str
    role: str = ROLE_USER
    name: str | None = None

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "Session":
        """Build a session from verified token claims (``sub`` is required)."""
        role = claims.get("role")
        name = claims.get("name")
        return cls(
            user_id=str(claims["sub"]),
            role=role if isinstance(role, str) and role else ROLE_USER,
            name=name if isinstance(name, str) else None,
        )


def is_authenticated(session: Session | None) -> bool:
    return session is not None and bool(session.user_id)


def is_admin(session: Session | None) -> bool:
    """True only for an authenticated session whose role is 'admin'."""
    return is_authenticated(session) and session.role == ROLE_ADMIN
