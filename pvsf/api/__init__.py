"""HTTP API: router, dependencies and endpoint modules."""

from pvsf.api.router import api_router

__all__ = ["api_router"]
