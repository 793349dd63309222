"""Request context middleware.

One raw ASGI layer around the app that:

* resolves the request id (a well-formed client ``X-Request-ID`` is kept,
  anything else is replaced by a fresh UUID) and binds it to
  pvsf.shared.context for the lifetime of the request, so the error
  responder's log lines carry it;
* echoes the id and the JSON-API security headers on the response. Headers
  a route already set are left alone.
"""

import re
import uuid
from collections.abc import Mapping
from typing import Callable

from starlette.datastructures import Headers, MutableHeaders

from pvsf.shared.context import bind_request_id, reset_request_id

_REQUEST_ID = re.compile(r"[A-Za-z0-9_-]{1,64}")

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def resolve_request_id(raw: str | None) -> str:
    """Client id if it is safe to log verbatim, else a new UUID4."""
    candidate = (raw or "").strip()
    if _REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestContextMiddleware(
    app: Callable,
    header_name: str = "X-Request-ID",
    security_headers: Mapping[str, str] | None = None,
) -> Callable:
    """Bind the request id and decorate every HTTP response. Raw ASGI."""
    extra = dict(SECURITY_HEADERS if security_headers is None else security_headers)

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        request_id = resolve_request_id(Headers(scope=scope).get(header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_headers(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers[header_name] = request_id
                for name, value in extra.items():
                    headers.setdefault(name, value)
            await send(message)

        token = bind_request_id(request_id)
        try:
            await app(scope, receive, send_with_headers)
        finally:
            reset_request_id(token)

    return asgi_app
