"""
Beer stock service.

Holds the business rules that sit between the HTTP layer and the repository:
- beer names are unique (duplicate creation is rejected)
- stock quantity stays within [0, max]; a rejected change leaves the row untouched
"""

from typing import List

import structlog
from sqlalchemy.exc import IntegrityError

from core.converters import model_to_schema, schema_to_model_data
from core.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
)
from db.beer import Beer
from db.beer_repository import BeerRepository
from schemas.beer import BeerCreate, BeerOut

logger = structlog.get_logger(__name__)


class BeerService:
    def __init__(self, repository: BeerRepository):
        self.repository = repository

    async def create_beer(self, payload: BeerCreate) -> BeerOut:
        await self._verify_not_registered(payload.name)
        try:
            beer = await self.repository.save(Beer(**schema_to_model_data(payload)))
        except IntegrityError:
            # Lost a race on the unique name constraint
            await self.repository.rollback()
            logger.warning("beer_already_registered", name=payload.name)
            raise BeerAlreadyRegisteredError(payload.name)
        logger.info("beer_created", beer_id=beer.id, name=beer.name, quantity=beer.quantity)
        return model_to_schema(beer)

    async def find_by_name(self, name: str) -> BeerOut:
        beer = await self.repository.find_by_name(name)
        if beer is None:
            raise BeerNotFoundError(name=name)
        return model_to_schema(beer)

    async def list_all(self) -> List[BeerOut]:
        beers = await self.repository.find_all()
        return [model_to_schema(b) for b in beers]

    async def delete_by_id(self, beer_id: int) -> None:
        await self._verify_exists(beer_id)
        await self.repository.delete_by_id(beer_id)
        logger.info("beer_deleted", beer_id=beer_id)

    async def increment(self, beer_id: int, quantity: int) -> BeerOut:
        beer = await self._verify_exists(beer_id)
        after = beer.quantity + quantity
        if after > beer.max:
            logger.warning(
                "stock_increment_rejected",
                beer_id=beer_id,
                quantity=quantity,
                current=beer.quantity,
                max=beer.max,
            )
            raise BeerStockExceededError(beer_id, quantity, "increment")
        return await self._update_quantity(beer, after)

    async def decrement(self, beer_id: int, quantity: int) -> BeerOut:
        beer = await self._verify_exists(beer_id)
        after = beer.quantity - quantity
        if after < 0:
            logger.warning(
                "stock_decrement_rejected",
                beer_id=beer_id,
                quantity=quantity,
                current=beer.quantity,
            )
            raise BeerStockExceededError(beer_id, quantity, "decrement")
        return await self._update_quantity(beer, after)

    async def _update_quantity(self, beer: Beer, quantity: int) -> BeerOut:
        before = beer.quantity
        beer.quantity = quantity
        saved = await self.repository.save(beer)
        logger.info("stock_updated", beer_id=saved.id, before=before, after=saved.quantity)
        return model_to_schema(saved)

    async def _verify_not_registered(self, name: str) -> None:
        existing = await self.repository.find_by_name(name)
        if existing is not None:
            logger.warning("beer_already_registered", name=name)
            raise BeerAlreadyRegisteredError(name)

    async def _verify_exists(self, beer_id: int) -> Beer:
        beer = await self.repository.find_by_id(beer_id)
        if beer is None:
            raise BeerNotFoundError(beer_id=beer_id)
        return beer
