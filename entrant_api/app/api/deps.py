"""
Shared FastAPI dependencies.

``get_entrant_store`` hands route handlers the record store bound to
the running application by ``create_app``.  Tests may replace it via
``app.dependency_overrides``.
"""

from fastapi import Request

from entrant_api.app.services.entrant_store import EntrantStore


def get_entrant_store(request: Request) -> EntrantStore:
    """Return the application's entrant store."""
    return request.app.state.entrant_store
