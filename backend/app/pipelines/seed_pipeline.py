"""Sequential seeding pipeline for the EV-charging sample collections.

    STATIONS → (per station) CHARGERS_PER_STATION → USERS → TRANSACTIONS

Orchestrates:
1. Insert each station, capture its id, then insert that station's chargers
   with the captured id and the station's price.
2. Insert the users.
3. Insert the transactions (placeholder ``user_id`` values, stored as given).
4. Return a ``SeedSummary`` with every id the store assigned.

Every insert is awaited before the next one starts.  Errors are not caught
here: a failure stops the run and whatever was already inserted stays.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, Field

from app import seed_data
from app.config import Settings
from app.models.fixtures import (
    ChargerTemplate,
    Station,
    Transaction,
    User,
    to_document,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class DocumentStore(Protocol):
    """Anything that can insert a document and hand back its new id."""

    async def insert_document(self, collection: str, data: dict[str, Any]) -> str:
        ...


class SeedCollections(BaseModel):
    """Target collection names, defaulting to those in ``Settings``."""

    stations: str = Settings.model_fields["STATIONS_COLLECTION"].default
    chargers: str = Settings.model_fields["CHARGERS_COLLECTION"].default
    users: str = Settings.model_fields["USERS_COLLECTION"].default
    transactions: str = Settings.model_fields["TRANSACTIONS_COLLECTION"].default

    @classmethod
    def from_settings(cls, settings: Settings) -> SeedCollections:
        return cls(
            stations=settings.STATIONS_COLLECTION,
            chargers=settings.CHARGERS_COLLECTION,
            users=settings.USERS_COLLECTION,
            transactions=settings.TRANSACTIONS_COLLECTION,
        )


class SeedSummary(BaseModel):
    """Ids assigned by the store during one run."""

    station_ids: list[str] = Field(default_factory=list)
    charger_ids: list[str] = Field(default_factory=list)
    user_ids: list[str] = Field(default_factory=list)
    transaction_ids: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return (
            len(self.station_ids)
            + len(self.charger_ids)
            + len(self.user_ids)
            + len(self.transaction_ids)
        )


async def insert_all(
    store: DocumentStore,
    collection: str,
    records: Sequence[R],
    on_inserted: Callable[[R, str], None] | None = None,
) -> list[str]:
    """Insert *records* into *collection* one at a time, returning their ids.

    *on_inserted* is called with each record and its new id right after the
    insert completes.
    """
    ids: list[str] = []
    for record in records:
        doc_id = await store.insert_document(collection, to_document(record))
        ids.append(doc_id)
        if on_inserted is not None:
            on_inserted(record, doc_id)
    return ids


class SeedPipeline:
    """Load the fixture tables into a document store.

    Parameters
    ----------
    store:
        Object exposing ``insert_document(collection, data) -> str``;
        ``FirestoreService`` in production, an in-memory fake in tests.
    stations, chargers_per_station, users, transactions:
        Fixture tables.  Defaults come from ``app.seed_data``.
    collections:
        Target collection names.
    """

    def __init__(
        self,
        store: DocumentStore,
        *,
        stations: Sequence[Station] | None = None,
        chargers_per_station: Sequence[ChargerTemplate] | None = None,
        users: Sequence[User] | None = None,
        transactions: Sequence[Transaction] | None = None,
        collections: SeedCollections | None = None,
    ) -> None:
        self.store = store
        self.stations = seed_data.STATIONS if stations is None else stations
        self.chargers_per_station = (
            seed_data.CHARGERS_PER_STATION
            if chargers_per_station is None
            else chargers_per_station
        )
        self.users = seed_data.USERS if users is None else users
        self.transactions = (
            seed_data.TRANSACTIONS if transactions is None else transactions
        )
        self.collections = collections or SeedCollections()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def run(self) -> SeedSummary:
        """Insert every fixture in order and return the assigned ids."""
        summary = SeedSummary()
        await self._seed_stations(summary)
        await self._seed_users(summary)
        await self._seed_transactions(summary)
        return summary

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    async def _seed_stations(self, summary: SeedSummary) -> None:
        for station in self.stations:
            station_id = await self.store.insert_document(
                self.collections.stations, to_document(station)
            )
            summary.station_ids.append(station_id)
            logger.info("Created station: %s with ID: %s", station.name, station_id)

            chargers = [
                template.for_station(station_id, station)
                for template in self.chargers_per_station
            ]
            summary.charger_ids.extend(
                await insert_all(self.store, self.collections.chargers, chargers)
            )
            logger.info(
                "Created %d chargers for station: %s", len(chargers), station.name
            )

    async def _seed_users(self, summary: SeedSummary) -> None:
        summary.user_ids.extend(
            await insert_all(
                self.store,
                self.collections.users,
                self.users,
                lambda user, _id: logger.info("Created user: %s", user.full_name),
            )
        )

    async def _seed_transactions(self, summary: SeedSummary) -> None:
        summary.transaction_ids.extend(
            await insert_all(
                self.store,
                self.collections.transactions,
                self.transactions,
                lambda transaction, _id: logger.info(
                    "Created transaction: %s", transaction.description
                ),
            )
        )
