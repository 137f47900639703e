from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BeerType(str, Enum):
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"


class BeerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    brand: str = Field(min_length=1, max_length=200)
    max: int = Field(ge=0, le=500)
    quantity: int = Field(ge=0, le=100)
    type: BeerType

    @field_validator("name", "brand", mode="before")
    @classmethod
    def _strip_required(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("field is required")
        return v

    @model_validator(mode="after")
    def _quantity_within_max(self):
        if self.quantity > self.max:
            raise ValueError("quantity cannot be greater than max")
        return self


class BeerOut(BaseModel):
    id: int
    name: str
    brand: str
    max: int
    quantity: int
    type: BeerType

    model_config = ConfigDict(from_attributes=True)


class QuantityRequest(BaseModel):
    quantity: int = Field(ge=1, le=100)
