"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See pvsf.core.lifespan and pvsf.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pvsf.api import api_router
from pvsf.core.config import get_settings
from pvsf.core.exception_handlers import register_exception_handlers
from pvsf.core.lifespan import create_lifespan
from pvsf.middleware import RequestContextMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Middleware: first added = innermost. Request context wraps CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["Authorization", "Content-Type", settings.request_id_header],
    )
    app.add_middleware(RequestContextMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
