"""
Entrant endpoints for API v1.

These routes expose create, list, retrieve and delete operations over
the entrant record store.  Handlers hold no state: each one delegates
to the injected ``EntrantStore`` and maps its typed failures to HTTP
responses.  Handlers are plain functions so FastAPI runs them in its
threadpool and the store lock is never taken on the event loop.

* ``InvalidArgumentError`` -> 400, ``detail`` is the offending field.
* ``EntrantNotFoundError`` -> 404, ``detail`` is the requested id.
* anything else -> 500 with a generic message; the traceback is only
  logged.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from entrant_api.app.api.deps import get_entrant_store
from entrant_api.app.core.exceptions import EntrantNotFoundError, InvalidArgumentError
from entrant_api.app.schemas.entrant import Entrant, EntrantCreate
from entrant_api.app.services.entrant_store import EntrantStore

logger = logging.getLogger(__name__)

router = APIRouter()

INTERNAL_ERROR_DETAIL = "Internal server error"


def _internal_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL)


def _not_found(entrant_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=entrant_id)


@router.get("/", response_model=List[Entrant])
def list_entrants(store: EntrantStore = Depends(get_entrant_store)) -> List[Entrant]:
    """Return all entrants in no particular order."""
    logger.debug("start list_entrants")
    try:
        return store.get_all()
    except Exception:
        logger.exception("Error in list_entrants")
        raise _internal_error()
    finally:
        logger.debug("finish list_entrants")


@router.get("/{entrant_id}", response_model=Entrant)
def get_entrant(entrant_id: int, store: EntrantStore = Depends(get_entrant_store)) -> Entrant:
    """Retrieve a single entrant by ID.

    Returns HTTP 404 carrying the id if the entrant does not exist.
    """
    logger.debug("start get_entrant(%s)", entrant_id)
    try:
        return store.get_by_id(entrant_id)
    except EntrantNotFoundError:
        raise _not_found(entrant_id)
    except Exception:
        logger.exception("Error in get_entrant(%s)", entrant_id)
        raise _internal_error()
    finally:
        logger.debug("finish get_entrant(%s)", entrant_id)


@router.post("/", response_model=Entrant, status_code=status.HTTP_201_CREATED)
def create_entrant(
    entrant_in: EntrantCreate,
    request: Request,
    response: Response,
    store: EntrantStore = Depends(get_entrant_store),
) -> Entrant:
    """Create a new entrant.

    Both ``firstName`` and ``lastName`` must be non‑blank; otherwise
    HTTP 400 is returned with the name of the offending field.  The
    ``Location`` header of a successful response points at the new
    record.
    """
    logger.debug("start create_entrant")
    try:
        entrant = store.create(entrant_in)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.field)
    except Exception:
        logger.exception("Error in create_entrant")
        raise _internal_error()
    finally:
        logger.debug("finish create_entrant")
    response.headers["Location"] = str(request.url_for("get_entrant", entrant_id=entrant.id))
    return entrant


@router.delete("/{entrant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entrant(entrant_id: int, store: EntrantStore = Depends(get_entrant_store)) -> None:
    """Delete an entrant.

    Returns HTTP 404 carrying the id if the entrant does not exist.
    """
    logger.debug("start delete_entrant(%s)", entrant_id)
    try:
        store.delete(entrant_id)
    except EntrantNotFoundError:
        raise _not_found(entrant_id)
    except Exception:
        logger.exception("Error in delete_entrant(%s)", entrant_id)
        raise _internal_error()
    finally:
        logger.debug("finish delete_entrant(%s)", entrant_id)
    return None
