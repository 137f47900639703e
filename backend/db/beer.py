from sqlalchemy import Column, Enum, Integer, String

from schemas.beer import BeerType
from .database import Base


class Beer(Base):
    """Beer model - one inventory line per beer, unique by name"""
    __tablename__ = "beers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(200), nullable=False, unique=True, index=True)
    brand = Column(String(200), nullable=False)

    # Stock is kept within [0, max]
    max = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)

    type = Column(Enum(BeerType, name="beer_type"), nullable=False)
