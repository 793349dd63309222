"""Shared error responder for API routes.

Every route funnels its failures through handle_api_error so clients always
receive ``{"error": "<message>"}``. 5xx responses carry a generic message;
the detail only goes to the server log.

Responses are written through a ResponseSink, a single-use writer: the first
write wins and any later write is a silent no-op, so invoking the responder
twice for the same request never produces a second body.
"""

import functools
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from fastapi.responses import JSONResponse
from starlette.responses import Response

from pvsf.core.constants import INTERNAL_ERROR_MESSAGE
from pvsf.shared.context import get_request_id

logger = logging.getLogger(__name__)


class ResponseSink:
    """Guarded, single-use response holder."""

    def __init__(self) -> None:
        self._response: Response | None = None

    @property
    def headers_sent(self) -> bool:
        """True once a response has been written."""
        return self._response is not None

    @property
    def response(self) -> Response | None:
        return self._response

    def send(self, response: Response) -> bool:
        """Store response if nothing was written yet. Returns True if it was stored."""
        if self._response is not None:
            return False
        self._response = response
        return True

    def json(
        self,
        status_code: int,
        content: Any,
        headers: Mapping[str, str] | None = None,
    ) -> bool:
        """Write a JSON response (no-op when already sent)."""
        if self.headers_sent:
            return False
        return self.send(
            JSONResponse(status_code=status_code, content=content, headers=headers)
        )


def _status_for(error: BaseException) -> int:
    status = getattr(error, "status_code", None)
    if isinstance(status, int) and not isinstance(status, bool):
        return status
    return 500


def _client_message(error: BaseException) -> str:
    # Starlette HTTPException keeps the client message in .detail; str() adds the status.
    detail = getattr(error, "detail", None)
    if isinstance(detail, str) and detail:
        return detail
    return str(error) or "Unknown error"


def handle_api_error(
    sink: ResponseSink,
    error: BaseException,
    context: str = "",
    request_id: str | None = None,
) -> None:
    """Log error and write the JSON error envelope to sink.

    Status comes from ``error.status_code`` when it is an int, else 500.
    5xx responses use a generic message; 4xx use the error's own message.
    The log line names the request id (explicit, else the one bound by the
    request context middleware). Nothing is written when the sink has
    already sent a response.
    """
    request_id = request_id or get_request_id()
    prefix = f"[API Error] {context}" if context else "[API Error]"
    if request_id:
        prefix = f"{prefix} [request_id={request_id}]"
    prefix = f"{prefix}:"
    status = _status_for(error)
    if status >= 500:
        logger.error("%s %s", prefix, error, exc_info=error)
        message = INTERNAL_ERROR_MESSAGE
    else:
        logger.warning("%s %s", prefix, _client_message(error))
        message = _client_message(error)

    if sink.headers_sent:
        return
    headers = getattr(error, "headers", None)
    sink.json(status, {"error": message}, headers=headers)


def with_api_error_handler(
    context: str = "",
) -> Callable[
    [Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Any]]
]:
    """Decorate an async endpoint so any exception it raises becomes an error envelope.

    The wrapper keeps the endpoint signature (functools.wraps), so FastAPI
    still resolves its parameters and dependencies. Endpoint modules must not
    use ``from __future__ import annotations``: FastAPI evaluates string
    annotations against the wrapper's globals.
    """

    def decorator(
        endpoint: Callable[..., Awaitable[Any]],
    ) -> Callable[..., Awaitable[Any]]:
        @functools.wraps(endpoint)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await endpoint(*args, **kwargs)
            except Exception as exc:
                sink = ResponseSink()
                handle_api_error(sink, exc, context)
                return sink.response

        return wrapper

    return decorator
