from __future__ import annotations

from typing import Dict

import pytest
from fastapi.testclient import TestClient

from entrant_api.app.main import create_app
from entrant_api.app.schemas.entrant import Entrant
from entrant_api.app.services.entrant_store import InMemoryEntrantStore


def make_entrants(*ids: int) -> Dict[int, Entrant]:
    return {i: Entrant(id=i, first_name=f"First{i}", last_name=f"Last{i}") for i in ids}


@pytest.fixture
def store() -> InMemoryEntrantStore:
    return InMemoryEntrantStore()


@pytest.fixture
def seeded_store() -> InMemoryEntrantStore:
    return InMemoryEntrantStore(make_entrants(1, 2))


@pytest.fixture
def client(seeded_store: InMemoryEntrantStore) -> TestClient:
    return TestClient(create_app(store=seeded_store))
