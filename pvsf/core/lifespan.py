"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, and the process-wide
Firestore client (its HTTP connection pool is closed on shutdown).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from pvsf.core.config import get_settings
from pvsf.infrastructure.firebase.client import close_firebase, init_firebase
from pvsf.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.firestore_ready = init_firebase()
    if not app.state.firestore_ready and settings.firestore_configured:
        logger.error("Firestore credentials are set but the client failed to start")
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    await close_firebase()
