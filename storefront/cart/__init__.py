"""Cart package: models and in-memory store."""
from .models import LineItem, CartState
from .service import CartStore

__all__ = [
    "LineItem",
    "CartState",
    "CartStore",
]
