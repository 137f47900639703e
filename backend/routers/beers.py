from fastapi import APIRouter, Depends, HTTPException, Path, status, Response
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Annotated, List

from core.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
)
from db.beer_repository import BeerRepository
from db.database import get_async_session
from schemas.beer import BeerCreate, BeerOut, QuantityRequest
from services.beer_service import BeerService

router = APIRouter()

# Ids are stored as signed 64-bit integers
BeerId = Annotated[int, Path(ge=1, le=2**63 - 1)]


def get_beer_service(db: AsyncSession = Depends(get_async_session)) -> BeerService:
    return BeerService(BeerRepository(db))


@router.post("/", response_model=BeerOut, status_code=status.HTTP_201_CREATED)
@router.post("", response_model=BeerOut, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_beer(beer: BeerCreate, service: BeerService = Depends(get_beer_service)):
    """Register a new beer"""
    try:
        return await service.create_beer(beer)
    except BeerAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)


@router.get("/", response_model=List[BeerOut])
@router.get("", response_model=List[BeerOut], include_in_schema=False)
async def list_beers(service: BeerService = Depends(get_beer_service)):
    """List all beers"""
    return await service.list_all()


@router.get("/{name}", response_model=BeerOut)
async def get_beer_by_name(name: str, service: BeerService = Depends(get_beer_service)):
    """Get a beer by its name"""
    try:
        return await service.find_by_name(name)
    except BeerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_beer(beer_id: BeerId, service: BeerService = Depends(get_beer_service)):
    """Delete a beer by id"""
    try:
        await service.delete_by_id(beer_id)
    except BeerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{beer_id}/increment", response_model=BeerOut)
async def increment_stock(
    beer_id: BeerId,
    payload: QuantityRequest,
    service: BeerService = Depends(get_beer_service),
):
    """Add `quantity` units to the beer's stock, up to its max"""
    try:
        return await service.increment(beer_id, payload.quantity)
    except BeerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)
    except BeerStockExceededError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)


@router.patch("/{beer_id}/decrement", response_model=BeerOut)
async def decrement_stock(
    beer_id: BeerId,
    payload: QuantityRequest,
    service: BeerService = Depends(get_beer_service),
):
    """Remove `quantity` units from the beer's stock, down to zero"""
    try:
        return await service.decrement(beer_id, payload.quantity)
    except BeerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)
    except BeerStockExceededError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)
