"""Shared fixtures for the seeder test suite."""
from __future__ import annotations

import itertools
from typing import Any

import pytest


class FakeStore:
    """In-memory stand-in for ``FirestoreService``.

    Records every insert as ``(collection, id, data)``.  ``fail_on`` maps a
    collection name to the 1-based insert number that should raise.
    """

    def __init__(self, fail_on: dict[str, int] | None = None) -> None:
        self.inserts: list[tuple[str, str, dict[str, Any]]] = []
        self.fail_on = fail_on or {}
        self._ids = itertools.count(1)

    async def insert_document(self, collection: str, data: dict[str, Any]) -> str:
        attempt = len(self.documents(collection)) + 1
        if self.fail_on.get(collection) == attempt:
            raise RuntimeError(f"insert into {collection} failed")
        doc_id = f"{collection}-{next(self._ids)}"
        self.inserts.append((collection, doc_id, dict(data)))
        return doc_id

    def documents(self, collection: str) -> list[dict[str, Any]]:
        return [data for name, _, data in self.inserts if name == collection]

    def ids(self, collection: str) -> list[str]:
        return [doc_id for name, doc_id, _ in self.inserts if name == collection]


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def make_store():
    """Factory for stores that fail on a given insert."""
    return FakeStore
