"""Application lifespan: startup and shutdown.

Only wiring of infrastructure (logging, Firestore client); no business logic.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from siteops.infrastructure.firebase import close_firebase, init_firebase
from siteops.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and Firestore, yield, then close the Firestore client."""
    setup_logging()

    # ---- Startup ----
    app.state.firestore_ready = init_firebase()
    if not app.state.firestore_ready:
        logger.warning("Firestore not initialized; admin endpoints will return 503")

    yield

    # ---- Shutdown ----
    await close_firebase()
