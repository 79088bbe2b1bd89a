"""API routers."""
from .admin import router as admin_router
from .auth import router as auth_router
from .cart import router as cart_router
from .checkout import router as checkout_router
from .products import router as products_router
from .wishlist import router as wishlist_router

__all__ = [
    "admin_router",
    "auth_router",
    "cart_router",
    "checkout_router",
    "products_router",
    "wishlist_router",
]
