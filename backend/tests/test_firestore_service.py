"""Tests for the Firestore insert service."""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from app.services import firestore_service
from app.services.firestore_service import FirestoreService, init_firestore


class _FakeCollection:
    def __init__(self, name: str, added: list) -> None:
        self.name = name
        self.added = added

    async def add(self, payload):
        doc_id = f"doc{len(self.added) + 1}"
        self.added.append((self.name, payload))
        return "update-time", SimpleNamespace(id=doc_id)


class _FakeClient:
    def __init__(self) -> None:
        self.added: list = []

    def collection(self, name: str) -> _FakeCollection:
        return _FakeCollection(name, self.added)


class TestFirestoreService:

    @pytest.mark.asyncio
    async def test_insert_returns_assigned_id(self) -> None:
        client = _FakeClient()
        service = FirestoreService(client)

        assert await service.insert_document("users", {"first_name": "John"}) == "doc1"
        assert await service.insert_document("users", {"first_name": "Jane"}) == "doc2"

    @pytest.mark.asyncio
    async def test_insert_stamps_server_timestamp(self) -> None:
        client = _FakeClient()
        data = {"name": "x", "created_at": "client-value"}

        await FirestoreService(client).insert_document("chargers", data)

        name, payload = client.added[0]
        assert name == "chargers"
        assert payload["created_at"] is firestore_service.firestore.SERVER_TIMESTAMP
        assert data["created_at"] == "client-value"


class TestInitFirestore:

    def test_initialises_named_app_once(self, monkeypatch) -> None:
        calls = []

        def _missing(name):
            raise ValueError(name)

        monkeypatch.setattr(firestore_service.firebase_admin, "get_app", _missing)
        monkeypatch.setattr(
            firestore_service.credentials, "Certificate", lambda path: ("cert", path)
        )

        def _initialize(cred, options, name):
            calls.append((cred, options, name))
            return "app"

        monkeypatch.setattr(firestore_service.firebase_admin, "initialize_app", _initialize)
        monkeypatch.setattr(
            firestore_service.firestore_async, "client", lambda app: ("client", app)
        )

        client = init_firestore("key.json", "evcharging-aef0c")

        assert client == ("client", "app")
        assert calls == [
            (("cert", "key.json"), {"projectId": "evcharging-aef0c"}, "ev-seeder")
        ]

    def test_reuses_existing_app(self, monkeypatch) -> None:
        monkeypatch.setattr(firestore_service.firebase_admin, "get_app", lambda name: "existing")
        monkeypatch.setattr(
            firestore_service.firestore_async, "client", lambda app: ("client", app)
        )

        assert init_firestore("missing.json", "p") == ("client", "existing")
