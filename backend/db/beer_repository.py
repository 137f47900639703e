from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .beer import Beer


class BeerRepository:
    """Persistence access for Beer rows over an async session"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_name(self, name: str) -> Optional[Beer]:
        result = await self.db.execute(select(Beer).where(Beer.name == name))
        return result.scalar_one_or_none()

    async def find_by_id(self, beer_id: int) -> Optional[Beer]:
        result = await self.db.execute(select(Beer).where(Beer.id == beer_id))
        return result.scalar_one_or_none()

    async def find_all(self) -> List[Beer]:
        result = await self.db.execute(select(Beer).order_by(Beer.id.asc()))
        return list(result.scalars().all())

    async def save(self, beer: Beer) -> Beer:
        self.db.add(beer)
        await self.db.commit()
        await self.db.refresh(beer)
        return beer

    async def delete_by_id(self, beer_id: int) -> None:
        beer = await self.find_by_id(beer_id)
        if beer is None:
            return
        await self.db.delete(beer)
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
