"""
Seed the beer stock with a default set of beers.

Beers whose name already exists are left untouched.

Run from the backend directory:
  PYTHONPATH=. python scripts/seed_beers.py [--reset] [--dry-run]
"""

from __future__ import annotations

import argparse
import asyncio

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.logging import configure_logging
from db.beer import Beer
from db.database import async_session_maker, create_db_and_tables
from schemas.beer import BeerType


DEFAULT_BEERS = [
    {"name": "Brahma", "brand": "Ambev", "max": 50, "quantity": 10, "type": BeerType.LAGER},
    {"name": "Colorado Appia", "brand": "Colorado", "max": 40, "quantity": 12, "type": BeerType.WEISS},
    {"name": "Eisenbahn Pale Ale", "brand": "Eisenbahn", "max": 30, "quantity": 6, "type": BeerType.ALE},
    {"name": "Baden Baden IPA", "brand": "Baden Baden", "max": 24, "quantity": 8, "type": BeerType.IPA},
    {"name": "Guinness Draught", "brand": "Guinness", "max": 60, "quantity": 20, "type": BeerType.STOUT},
    {"name": "Hoegaarden", "brand": "AB InBev", "max": 36, "quantity": 0, "type": BeerType.WITBIER},
    {"name": "Brahma Malzbier", "brand": "Ambev", "max": 20, "quantity": 5, "type": BeerType.MALZBIER},
]


async def seed(db: AsyncSession, *, reset: bool = False, dry_run: bool = False) -> int:
    """Add missing default beers and return how many were created."""
    if reset:
        res = await db.execute(delete(Beer))
        print(f"Deleted beers: {int(getattr(res, 'rowcount', 0) or 0)}")

    res = await db.execute(select(Beer.name))
    existing = {name for name in res.scalars().all()}

    created = 0
    for data in DEFAULT_BEERS:
        if data["name"] in existing:
            continue
        db.add(Beer(**data))
        created += 1

    if dry_run:
        await db.rollback()
        print(f"[dry-run] Would create beers: {created}")
        return created

    await db.commit()
    print(f"Beers created: {created}. Skipped (already present): {len(DEFAULT_BEERS) - created}")
    return created


async def main(*, reset: bool, dry_run: bool) -> None:
    await create_db_and_tables()

    async with async_session_maker() as db:
        await seed(db, reset=reset, dry_run=dry_run)


if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("--reset", action="store_true", help="Delete all beers before seeding")
    p.add_argument("--dry-run", action="store_true", help="Do not commit, just print what would change")
    args = p.parse_args()

    configure_logging()
    asyncio.run(main(reset=args.reset, dry_run=args.dry_run))
