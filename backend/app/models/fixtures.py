"""Pydantic models for the sample records written to Firestore.

Each model mirrors one collection.  ``created_at`` is not part of the models:
it is stamped with the server timestamp by ``FirestoreService`` at insert time.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


TransactionType = Literal["credit", "debit"]


class Station(BaseModel):
    """A charging station.  ``available_spots <= total_spots`` is assumed."""

    name: str
    address: str
    latitude: float
    longitude: float
    total_spots: int
    available_spots: int
    power_output: str = Field(description="Display string, e.g. 'Up to 50 kW'")
    price_per_kwh: float
    is_available: bool = True


class ChargerTemplate(BaseModel):
    """Station-independent part of a charger fixture."""

    name: str
    type: str
    power: float = Field(description="Rated power in kW")
    is_available: bool = True

    def for_station(self, station_id: str, station: Station) -> Charger:
        """Bind this template to a created station, copying its price."""
        return Charger(
            station_id=station_id,
            price_per_kwh=station.price_per_kwh,
            **self.model_dump(),
        )


class Charger(ChargerTemplate):
    station_id: str
    price_per_kwh: float


class User(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone_number: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Transaction(BaseModel):
    """A wallet transaction.  ``user_id`` is stored as given, not resolved."""

    user_id: str
    amount: float
    transaction_type: TransactionType
    description: str
    status: str = "completed"


def to_document(record: BaseModel) -> dict[str, Any]:
    """Serialise a fixture model into a Firestore document payload."""
    return record.model_dump()
