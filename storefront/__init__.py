"""Storefront core: cart/wishlist state, catalog listing, accounts and admin."""

__version__ = "1.0.0"
