"""JWT session tokens.

Sessions are bearer JWTs carrying ``sub`` (user id), ``role`` and an
optional display ``name``. Uses pvsf.core.config for secret and algorithm.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from pvsf.core.config import get_settings


def create_session_token(
    user_id: str,
    role: str,
    *,
    name: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed session token.

    Args:
        user_id: Firestore user document id (becomes ``sub``).
        role: Session role, e.g. 'admin' or 'user'.
        name: Optional display name.
        expires_delta: Optional TTL; else uses settings.session_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.session_expire_minutes)
    claims: dict[str, Any] = {
        "sub": user_id,
        "role": role,
        "exp": datetime.now(UTC) + expires_delta,
    }
    if name:
        claims["name"] = name
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub. Raises ValueError if the token is
    invalid, expired, or missing required claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not payload.get("sub"):
        raise ValueError("Token missing required claim: sub")
    return payload
