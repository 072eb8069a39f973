"""Populate Firestore with the EV-charging sample collections.

Usage:
    cd backend
    python -m scripts.seed_collections

Authenticates with the service-account key at ``FIREBASE_CREDENTIALS_PATH``,
then inserts two charging stations (two chargers each), two users and two
wallet transactions.  Every run appends new documents.

The process always exits explicitly: status 0 on success and
``SEED_FAILURE_EXIT_CODE`` (default 0) when anything fails.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

# Ensure the backend package is on sys.path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config import Settings, get_settings
from app.pipelines.seed_pipeline import SeedCollections, SeedPipeline, SeedSummary
from app.services.firestore_service import FirestoreService, init_firestore

logger = logging.getLogger("seed_collections")


async def seed_collections(settings: Settings) -> SeedSummary:
    """Authenticate once and run the seeding pipeline."""
    db = init_firestore(settings.FIREBASE_CREDENTIALS_PATH, settings.FIREBASE_PROJECT_ID)
    pipeline = SeedPipeline(
        FirestoreService(db),
        collections=SeedCollections.from_settings(settings),
    )
    return await pipeline.run()


def run(settings: Settings) -> int:
    """Run the seeder and return the process exit status."""
    logger.info("Setting up Firebase collections...")
    try:
        summary = asyncio.run(seed_collections(settings))
    except Exception:
        logger.exception("Error setting up Firebase collections")
        return settings.SEED_FAILURE_EXIT_CODE

    logger.info(
        "Firebase collections setup completed successfully! (%d documents)",
        summary.total,
    )
    return 0


def main() -> None:
    """Entry point for the seeding script."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    sys.exit(run(settings))


if __name__ == "__main__":
    main()
