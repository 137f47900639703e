"""Errors raised by the beer service layer"""

from typing import Optional


class BeerStockError(Exception):
    """Base class for beer stock errors. `detail` is safe to return to clients."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class BeerNotFoundError(BeerStockError):
    def __init__(self, name: Optional[str] = None, beer_id: Optional[int] = None):
        if beer_id is not None:
            detail = f"Beer with id {beer_id} not found in the system."
        else:
            detail = f"Beer with name {name} not found in the system."
        self.name = name
        self.beer_id = beer_id
        super().__init__(detail)


class BeerAlreadyRegisteredError(BeerStockError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Beer with name {name} already registered in the system.")


class BeerStockExceededError(BeerStockError):
    """Raised when a quantity change would leave stock outside [0, max]."""

    def __init__(self, beer_id: int, quantity: int, operation: str = "increment"):
        self.beer_id = beer_id
        self.quantity = quantity
        self.operation = operation
        super().__init__(
            f"Beers with {beer_id} ID to {operation} informed exceeds the max stock capacity: {quantity}"
        )
