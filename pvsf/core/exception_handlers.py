"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Errors raised outside a
route body (dependencies, routing, request validation) are mapped to the
same ``{"error": ...}`` envelope that routes produce via handle_api_error.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from pvsf.core.api_error import ResponseSink, handle_api_error
from pvsf.domain.exceptions import PvsfException, ValidationException

# Routing-level messages keep the wording the legacy frontend already handles.
_HTTP_MESSAGES: dict[int, str] = {
    404: "Not found",
    405: "Method not allowed",
}


def _respond(request: Request, exc: Exception) -> Response:
    # ServerErrorMiddleware runs outside the request context; read the id from scope state.
    sink = ResponseSink()
    handle_api_error(
        sink,
        exc,
        f"{request.method} {request.url.path}",
        request_id=request.scope.get("state", {}).get("request_id"),
    )
    assert sink.response is not None
    return sink.response


def _pvsf_exception_handler(request: Request, exc: PvsfException) -> Response:
    """Return the envelope with the exception's own status_code."""
    return _respond(request, exc)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    """Return 400; the message names the first offending parameter."""
    errors = exc.errors()
    field = None
    if errors:
        loc = [str(part) for part in errors[0].get("loc", ()) if part not in ("query", "path", "body")]
        field = ".".join(loc) or None
    message = f"Invalid parameter: {field}" if field else "Invalid request"
    return _respond(request, ValidationException(message, field=field))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Return JSON for Starlette HTTP exceptions (routing 404/405 and explicit raises)."""
    if exc.status_code in _HTTP_MESSAGES and exc.detail in (None, "", "Not Found", "Method Not Allowed"):
        exc = StarletteHTTPException(
            status_code=exc.status_code,
            detail=_HTTP_MESSAGES[exc.status_code],
            headers=exc.headers,
        )
    return _respond(request, exc)


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500 with a generic message; detail is logged only."""
    response = _respond(request, exc)
    assert isinstance(response, JSONResponse)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: PvsfException (and subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(PvsfException, _pvsf_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
