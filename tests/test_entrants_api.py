from __future__ import annotations

import asyncio
from typing import List, Optional

from fastapi.testclient import TestClient

from entrant_api.app.api.deps import get_entrant_store
from entrant_api.app.core.config import settings
from entrant_api.app.main import create_app
from entrant_api.app.schemas.entrant import Entrant, EntrantCreate
from entrant_api.app.services.entrant_store import EntrantStore, InMemoryEntrantStore

BASE = "/api/v1/entrants"


class FailingStore(EntrantStore):
    """Store whose every operation blows up with an untyped error."""

    def create(self, candidate: Optional[EntrantCreate]) -> Entrant:
        raise RuntimeError("secret internals")

    def get_all(self) -> List[Entrant]:
        raise RuntimeError("secret internals")

    def get_by_id(self, entrant_id: int) -> Entrant:
        raise RuntimeError("secret internals")

    def delete(self, entrant_id: int) -> None:
        raise RuntimeError("secret internals")


def test_list_returns_expected_entrants(client: TestClient) -> None:
    response = client.get(f"{BASE}/")

    assert response.status_code == 200
    assert sorted(response.json(), key=lambda e: e["id"]) == [
        {"id": 1, "firstName": "First1", "lastName": "Last1"},
        {"id": 2, "firstName": "First2", "lastName": "Last2"},
    ]


def test_list_on_empty_store() -> None:
    client = TestClient(create_app(store=InMemoryEntrantStore()))

    response = client.get(f"{BASE}/")

    assert response.status_code == 200
    assert response.json() == []


def test_get_by_id(client: TestClient) -> None:
    response = client.get(f"{BASE}/2")

    assert response.status_code == 200
    assert response.json() == {"id": 2, "firstName": "First2", "lastName": "Last2"}


def test_get_missing_entrant_returns_not_found(client: TestClient) -> None:
    response = client.get(f"{BASE}/9")

    assert response.status_code == 404
    assert response.json() == {"detail": 9}


def test_get_with_non_integer_id_is_rejected(client: TestClient) -> None:
    response = client.get(f"{BASE}/abc")

    assert response.status_code == 422


def test_create_returns_created_entrant(client: TestClient, seeded_store: InMemoryEntrantStore) -> None:
    response = client.post(f"{BASE}/", json={"firstName": "First3", "lastName": "Last3"})

    assert response.status_code == 201
    assert response.json() == {"id": 3, "firstName": "First3", "lastName": "Last3"}
    assert response.headers["location"].endswith(f"{BASE}/3")
    assert seeded_store.get_by_id(3).last_name == "Last3"


def test_create_ignores_client_supplied_id(client: TestClient) -> None:
    response = client.post(f"{BASE}/", json={"id": 99, "firstName": "a", "lastName": "b"})

    assert response.status_code == 201
    assert response.json()["id"] == 3


def test_create_with_blank_first_name_returns_bad_request(client: TestClient, seeded_store: InMemoryEntrantStore) -> None:
    response = client.post(f"{BASE}/", json={"firstName": "  ", "lastName": "Last"})

    assert response.status_code == 400
    assert response.json() == {"detail": "firstName"}
    assert len(seeded_store) == 2


def test_create_with_missing_last_name_returns_bad_request(client: TestClient, seeded_store: InMemoryEntrantStore) -> None:
    response = client.post(f"{BASE}/", json={"firstName": "First"})

    assert response.status_code == 400
    assert response.json() == {"detail": "lastName"}
    assert len(seeded_store) == 2


def test_create_with_non_object_body_is_rejected(client: TestClient) -> None:
    response = client.post(f"{BASE}/", json=["not", "an", "entrant"])

    assert response.status_code == 422


def test_delete_then_get_returns_not_found(client: TestClient) -> None:
    response = client.delete(f"{BASE}/1")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"{BASE}/1").status_code == 404


def test_delete_missing_entrant_returns_not_found(client: TestClient, seeded_store: InMemoryEntrantStore) -> None:
    response = client.delete(f"{BASE}/9")

    assert response.status_code == 404
    assert response.json() == {"detail": 9}
    assert len(seeded_store) == 2


def test_deleted_id_is_not_reused_over_http(client: TestClient) -> None:
    assert client.post(f"{BASE}/", json={"firstName": "First3", "lastName": "Last3"}).json()["id"] == 3
    assert client.delete(f"{BASE}/1").status_code == 204
    assert client.post(f"{BASE}/", json={"firstName": "First4", "lastName": "Last4"}).json()["id"] == 4

    ids = {e["id"] for e in client.get(f"{BASE}/").json()}
    assert ids == {2, 3, 4}


def test_unexpected_failures_return_generic_internal_error() -> None:
    client = TestClient(create_app(store=FailingStore()))

    responses = [
        client.get(f"{BASE}/"),
        client.get(f"{BASE}/1"),
        client.post(f"{BASE}/", json={"firstName": "a", "lastName": "b"}),
        client.delete(f"{BASE}/1"),
    ]

    for response in responses:
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert "secret" not in response.text


def test_store_can_be_overridden_with_dependency_override() -> None:
    app = create_app(store=InMemoryEntrantStore())
    replacement = InMemoryEntrantStore({5: Entrant(id=5, first_name="Over", last_name="Ride")})
    app.dependency_overrides[get_entrant_store] = lambda: replacement
    client = TestClient(app)

    response = client.get(f"{BASE}/")

    assert response.json() == [{"id": 5, "firstName": "Over", "lastName": "Ride"}]


def test_default_app_starts_with_sample_entrants(monkeypatch) -> None:
    monkeypatch.setattr(settings, "seed_sample_entrants", True)
    client = TestClient(create_app())

    ids = {e["id"] for e in client.get(f"{BASE}/").json()}

    assert ids == {1, 2}


def test_default_app_without_sample_entrants_is_empty(monkeypatch) -> None:
    monkeypatch.setattr(settings, "seed_sample_entrants", False)
    client = TestClient(create_app())

    assert client.get(f"{BASE}/").json() == []


def test_create_onto_an_occupied_id_returns_internal_error(client: TestClient, seeded_store: InMemoryEntrantStore) -> None:
    seeded_store._last_id = 1

    response = client.post(f"{BASE}/", json={"firstName": "First3", "lastName": "Last3"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert len(seeded_store) == 2


class LoopCheckingStore(InMemoryEntrantStore):
    """Records whether store calls happen while an event loop is running."""

    def __init__(self) -> None:
        super().__init__()
        self.calls_on_loop: List[str] = []

    def _note(self, name: str) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        self.calls_on_loop.append(name)

    def create(self, candidate: Optional[EntrantCreate]) -> Entrant:
        self._note("create")
        return super().create(candidate)

    def get_all(self) -> List[Entrant]:
        self._note("get_all")
        return super().get_all()

    def get_by_id(self, entrant_id: int) -> Entrant:
        self._note("get_by_id")
        return super().get_by_id(entrant_id)

    def delete(self, entrant_id: int) -> None:
        self._note("delete")
        super().delete(entrant_id)


def test_store_calls_run_off_the_event_loop() -> None:
    store = LoopCheckingStore()
    client = TestClient(create_app(store=store))

    created = client.post(f"{BASE}/", json={"firstName": "a", "lastName": "b"}).json()
    client.get(f"{BASE}/")
    client.get(f"{BASE}/{created['id']}")
    client.delete(f"{BASE}/{created['id']}")

    assert store.calls_on_loop == []
