"""
Main entrypoint for the Entrant API.

This module assembles the FastAPI application, sets up logging, binds
the record store and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn entrant_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .schemas.entrant import Entrant
from .services.entrant_store import EntrantStore, InMemoryEntrantStore


def sample_entrants() -> dict:
    """Entrants the service starts with when ``SEED_SAMPLE_ENTRANTS`` is on."""
    return {
        1: Entrant(id=1, first_name="First1", last_name="Last1"),
        2: Entrant(id=2, first_name="First2", last_name="Last2"),
    }


def create_app(store: Optional[EntrantStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[EntrantStore]
        Record store shared by all requests.  When omitted a new
        ``InMemoryEntrantStore`` is created, seeded with the sample
        entrants if ``settings.seed_sample_entrants`` is set.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the code below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = InMemoryEntrantStore(sample_entrants() if settings.seed_sample_entrants else None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.entrant_store = store

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
