"""
API Request Models

Request bodies shared by the routers. Form-style bodies (checkout,
register, admin) live next to their domain services.
"""
from typing import Optional, Union

from pydantic import BaseModel


# ==================== AUTH MODELS ====================

class LoginRequest(BaseModel):
    email: str
    password: str


class UpdateProfileRequest(BaseModel):
    display_name: Optional[str] = None
    photo: Optional[str] = None


# ==================== CART / WISHLIST MODELS ====================

class AddItemRequest(BaseModel):
    product_id: Union[int, str]


class UpdateQuantityRequest(BaseModel):
    quantity: int
