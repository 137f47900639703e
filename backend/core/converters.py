from typing import Dict
from db.beer import Beer
from schemas.beer import BeerCreate, BeerOut


def model_to_schema(beer_model: Beer) -> BeerOut:
    """Convert SQLAlchemy model to Pydantic schema"""
    return BeerOut.model_validate(beer_model)


def schema_to_model_data(beer_schema: BeerCreate) -> Dict:
    """Convert Pydantic schema to dict for model creation"""
    return {
        "name": beer_schema.name,
        "brand": beer_schema.brand,
        "max": beer_schema.max,
        "quantity": beer_schema.quantity,
        "type": beer_schema.type,
    }
