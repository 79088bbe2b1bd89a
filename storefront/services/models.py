"""Storefront Models - Pydantic models for records crossing a service boundary."""
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.services.money import parse_price

ProductId = Union[int, str]


class Rating(BaseModel):
    """Catalog rating block."""
    rate: float = 0.0
    count: int = 0


class Product(BaseModel):
    """Catalog product record.

    Validated once when it arrives from the catalog service or the admin
    product table; everything downstream trusts its shape.
    """
    model_config = ConfigDict(extra="ignore")

    id: ProductId
    title: str = ""
    price: Decimal
    image: str = ""
    description: Optional[str] = None
    category: Optional[str] = None
    rating: Optional[Rating] = None

    @field_validator("price", mode="before")
    @classmethod
    def parse_price_strictly(cls, v):
        # non-numeric, negative and NaN/Infinity prices are rejected, never zeroed
        return parse_price(v)

    def to_dict(self) -> dict:
        """JSON-friendly dict (price as float)."""
        data = self.model_dump(exclude_none=True)
        data["price"] = float(self.price)
        return data


class AuthUser(BaseModel):
    """Signed-in account as held in AuthState."""
    uid: str
    email: str
    display_name: Optional[str] = None
    photo: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserProfile(BaseModel):
    """User profile document, keyed by email."""
    model_config = ConfigDict(extra="ignore")

    email: str
    display_name: Optional[str] = None
    photo: Optional[str] = None
    uid: Optional[str] = None
    updated_at: Optional[datetime] = None


class ShippingDetails(BaseModel):
    """Checkout shipping form (all fields required)."""
    full_name: str
    address: str
    city: str
    postal_code: str
    country: str
