"""Firestore async insert service backed by ``firebase_admin``.

Provides a thin wrapper around ``google.cloud.firestore.AsyncClient`` so the
seeder works with plain ``str`` document ids and never has to know about
server-side timestamp sentinels.
"""

from __future__ import annotations

import logging
from typing import Any

import firebase_admin
from firebase_admin import credentials, firestore, firestore_async
from google.cloud.firestore import AsyncClient

logger = logging.getLogger(__name__)

_APP_NAME = "ev-seeder"


def init_firestore(credentials_path: str, project_id: str) -> AsyncClient:
    """Authenticate with a service-account key and return an async client.

    The ``firebase_admin`` app is registered under its own name so repeated
    calls in one process reuse it instead of raising.
    """
    try:
        app = firebase_admin.get_app(_APP_NAME)
    except ValueError:
        cred = credentials.Certificate(credentials_path)
        app = firebase_admin.initialize_app(
            cred, {"projectId": project_id}, name=_APP_NAME
        )
        logger.info("Firebase app initialised for project %s", project_id)
    return firestore_async.client(app)


class FirestoreService:
    """Async Firestore operations.

    Parameters
    ----------
    db:
        A ``google.cloud.firestore.AsyncClient`` instance, typically built by
        :func:`init_firestore`.
    """

    def __init__(self, db: AsyncClient) -> None:
        self._db = db

    async def insert_document(self, collection: str, data: dict[str, Any]) -> str:
        """Add *data* to *collection* and return the auto-assigned id.

        Stamps ``created_at`` with the server timestamp; any value already in
        *data* is overwritten.
        """
        payload = {**data, "created_at": firestore.SERVER_TIMESTAMP}
        _update_time, doc_ref = await self._db.collection(collection).add(payload)
        logger.debug("Inserted doc %s into %s", doc_ref.id, collection)
        return doc_ref.id
