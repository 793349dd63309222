"""HTTP middleware: request context (request id + response headers)."""

from pvsf.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
