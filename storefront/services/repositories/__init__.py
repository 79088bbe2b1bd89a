"""
Repository Pattern for Supabase tables

- ProfileRepository: user profile documents keyed by email
- ProductRepository: admin-managed products
"""
from .user_repo import ProfileRepository
from .product_repo import ProductRepository

__all__ = [
    "ProfileRepository",
    "ProductRepository",
]
