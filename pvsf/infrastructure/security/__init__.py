"""Security: session token signing and verification."""

from pvsf.infrastructure.security.jwt import create_session_token, verify_token

__all__ = ["create_session_token", "verify_token"]
