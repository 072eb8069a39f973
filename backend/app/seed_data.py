"""Sample records loaded by the seeder.

Plain data tables, consumed in order by ``SeedPipeline``.
"""

from __future__ import annotations

from app.models.fixtures import ChargerTemplate, Station, Transaction, User

STATIONS: list[Station] = [
    Station(
        name="Central Mall EV Station",
        address="123 Main Street, City Center",
        latitude=3.1390,
        longitude=101.6869,
        total_spots=4,
        available_spots=3,
        power_output="Up to 50 kW",
        price_per_kwh=0.35,
    ),
    Station(
        name="Shopping Complex Charging Hub",
        address="456 Shopping Avenue, Downtown",
        latitude=3.1420,
        longitude=101.6880,
        total_spots=6,
        available_spots=4,
        power_output="Up to 75 kW",
        price_per_kwh=0.40,
    ),
]

# Every station gets one charger per template.
CHARGERS_PER_STATION: list[ChargerTemplate] = [
    ChargerTemplate(name="Charger 1", type="Type 2", power=22.0),
    ChargerTemplate(name="Charger 2", type="CCS", power=50.0),
]

USERS: list[User] = [
    User(
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
        phone_number="+60123456789",
    ),
    User(
        first_name="Jane",
        last_name="Smith",
        email="jane.smith@example.com",
        phone_number="+60123456790",
    ),
]

# user_id values are placeholders and do not point at the seeded users.
TRANSACTIONS: list[Transaction] = [
    Transaction(
        user_id="sample_user_id_1",
        amount=15.50,
        transaction_type="debit",
        description="Charging session at Central Mall EV Station",
    ),
    Transaction(
        user_id="sample_user_id_2",
        amount=25.00,
        transaction_type="credit",
        description="Wallet deposit",
    ),
]
