"""Domain layer: exceptions shared by every route.

No dependencies on infrastructure or presentation.
"""

from pvsf.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    PvsfException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    "AuthenticationException",
    "AuthorizationException",
    "PvsfException",
    "ResourceNotFoundException",
    "ValidationException",
]
