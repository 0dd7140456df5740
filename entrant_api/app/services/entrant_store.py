"""
Record store for entrants.

``EntrantStore`` is the capability the API layer depends on: create,
list, fetch by id and delete.  ``InMemoryEntrantStore`` keeps the
records in a dictionary keyed by id and allocates ids from a counter
that only ever grows, so an id freed by a delete is never handed out
again.

A single lock guards the dictionary and the counter together.  Every
operation, reads included, runs under that lock, which makes the store
safe to share between request threads without any locking by the
caller.  Nothing is persisted; the records live as long as the store
object.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional

from entrant_api.app.core.exceptions import (
    EntrantNotFoundError,
    EntrantStoreError,
    InvalidArgumentError,
)
from entrant_api.app.schemas.entrant import Entrant, EntrantCreate


logger = logging.getLogger(__name__)


class EntrantStore(ABC):
    """Abstract store of ``Entrant`` records."""

    @abstractmethod
    def create(self, candidate: Optional[EntrantCreate]) -> Entrant:
        """Store a new entrant and return it with its assigned id."""

    @abstractmethod
    def get_all(self) -> List[Entrant]:
        """Return all stored entrants in no particular order."""

    @abstractmethod
    def get_by_id(self, entrant_id: int) -> Entrant:
        """Return the entrant with ``entrant_id``."""

    @abstractmethod
    def delete(self, entrant_id: int) -> None:
        """Remove the entrant with ``entrant_id``."""


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class InMemoryEntrantStore(EntrantStore):
    """Thread-safe in-memory entrant store.

    Parameters
    ----------
    entrants : Optional[Mapping[int, Entrant]]
        Records to start with, keyed by id.  The mapping is copied, so
        later changes to it do not affect the store.  The id counter
        starts at the largest seeded id so new records never collide
        with seeded ones.

    Raises
    ------
    InvalidArgumentError
        If a seed key does not match its record's id.
    """

    def __init__(self, entrants: Optional[Mapping[int, Entrant]] = None) -> None:
        self._lock = threading.Lock()
        self._entrants: Dict[int, Entrant] = {}
        for key, entrant in (entrants or {}).items():
            if key != entrant.id:
                raise InvalidArgumentError("id", f"Seed key {key} does not match entrant id {entrant.id}")
            self._entrants[key] = entrant
        self._last_id = max(self._entrants, default=0)

    @property
    def last_id(self) -> int:
        """Highest id ever assigned or seeded; 0 for a fresh store."""
        with self._lock:
            return self._last_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._entrants)

    def create(self, candidate: Optional[EntrantCreate]) -> Entrant:
        """Validate ``candidate`` and store it under the next free id.

        The first name is checked before the last name.  Nothing is
        stored when validation fails.

        Raises
        ------
        InvalidArgumentError
            ``field`` is ``"entrant"`` for a missing candidate,
            otherwise ``"firstName"`` or ``"lastName"``.
        EntrantStoreError
            If the allocated id is already taken.
        """
        if candidate is None:
            raise InvalidArgumentError("entrant", "entrant is required")
        if _is_blank(candidate.first_name):
            raise InvalidArgumentError("firstName")
        if _is_blank(candidate.last_name):
            raise InvalidArgumentError("lastName")

        with self._lock:
            new_id = self._last_id + 1
            if new_id in self._entrants:
                logger.error("Create entrant failed: id %s already in use", new_id)
                raise EntrantStoreError(f"Entrant id {new_id} already in use")
            entrant = Entrant(id=new_id, first_name=candidate.first_name, last_name=candidate.last_name)
            self._entrants[new_id] = entrant
            self._last_id = new_id
        logger.info("Created entrant %s", new_id)
        return entrant

    def get_all(self) -> List[Entrant]:
        with self._lock:
            return list(self._entrants.values())

    def get_by_id(self, entrant_id: int) -> Entrant:
        with self._lock:
            entrant = self._entrants.get(entrant_id)
        if entrant is None:
            logger.info("Entrant %s not found", entrant_id)
            raise EntrantNotFoundError(entrant_id)
        return entrant

    def delete(self, entrant_id: int) -> None:
        with self._lock:
            removed = self._entrants.pop(entrant_id, None)
        if removed is None:
            logger.info("Delete failed: entrant %s not found", entrant_id)
            raise EntrantNotFoundError(entrant_id)
        logger.info("Deleted entrant %s", entrant_id)
