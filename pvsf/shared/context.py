"""Request context management using contextvars.

Holds the id of the request being served so log lines written anywhere
below the middleware (error responder, repositories) can name it.

Usage:
    token = bind_request_id("abc-123")
    try:
        ...
        get_request_id()  # "abc-123"
    finally:
        reset_request_id(token)
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def bind_request_id(request_id: str) -> Token:
    """Set the request id for the current context; returns the reset token."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Request id of the request being served, or None outside a request."""
    return _current_request_id.get()
