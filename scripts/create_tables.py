"""
create_tables.py — idempotent table creation and sample-data seeding.
Run this before starting the service for the first time, or after schema changes.
Safe to run multiple times (DDL uses IF NOT EXISTS; existing rows are kept).

Usage:
    python scripts/create_tables.py
    python scripts/create_tables.py --no-seed
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

# Ensure the project root is on the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from reservation_agent.config import settings
from reservation_agent.database import AsyncSessionLocal, engine
from reservation_agent.models import Base  # noqa: F401  registers the models
from reservation_agent.seed import seed_sample_data
from reservation_agent.services.store import RecordStore


async def main(seed: bool) -> None:
    """Create all tables, then seed the default restaurant."""
    print("Creating tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("  ✓ All tables created (IF NOT EXISTS)")

    if seed:
        print(f"Seeding restaurant {settings.default_restaurant_id}...")
        async with AsyncSessionLocal() as session:
            written = await seed_sample_data(
                RecordStore(session), settings.default_restaurant_id
            )
        print(f"  ✓ {written} rows inserted")

    print("\nDone. Start the API with `uvicorn reservation_agent.main:app`.")
    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create tables and seed sample data.")
    parser.add_argument("--no-seed", action="store_true", help="skip sample data")
    args = parser.parse_args()
    asyncio.run(main(seed=not args.no_seed))
