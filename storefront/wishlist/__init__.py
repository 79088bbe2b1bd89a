"""Wishlist package: in-memory store of saved products."""
from .service import WishlistState, WishlistStore

__all__ = [
    "WishlistState",
    "WishlistStore",
]
