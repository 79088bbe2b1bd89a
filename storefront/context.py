"""
Storefront Context

One explicit state object per session. It is created empty and handed to
whatever needs to read or mutate state; there is no module-level store.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from storefront.cart import CartStore
from storefront.services.models import AuthUser, Product
from storefront.wishlist import WishlistStore


@dataclass
class CatalogState:
    """Fetched product list and its loading/error flags."""

    products: list[Product] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    selected_product: Optional[Product] = None
    loading: bool = False
    error: Optional[str] = None

    def set_products(self, products: list[Product]) -> None:
        self.products = list(products)
        self.loading = False
        self.error = None

    def set_categories(self, categories: list[str]) -> None:
        self.categories = list(categories)
        self.loading = False
        self.error = None

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    def set_error(self, error: Optional[str]) -> None:
        self.error = error
        self.loading = False

    def set_selected_product(self, product: Optional[Product]) -> None:
        self.selected_product = product


@dataclass
class AuthState:
    """Signed-in user, auth request flags and the session's own backend auth client."""

    user: Optional[AuthUser] = None
    is_authenticated: bool = False
    loading: bool = False
    error: Optional[str] = None
    # Supabase AsyncClient holding this user's sign-in; None while signed out
    client: Any = field(default=None, repr=False, compare=False)

    def set_user(self, user: Optional[AuthUser]) -> None:
        self.user = user
        self.is_authenticated = user is not None
        self.loading = False
        self.error = None

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    def set_error(self, error: Optional[str]) -> None:
        self.error = error
        self.loading = False

    def logout(self) -> None:
        self.user = None
        self.is_authenticated = False
        self.loading = False
        self.error = None
        self.client = None


@dataclass
class StorefrontContext:
    """All per-session state."""

    cart: CartStore = field(default_factory=CartStore)
    wishlist: WishlistStore = field(default_factory=WishlistStore)
    catalog: CatalogState = field(default_factory=CatalogState)
    auth: AuthState = field(default_factory=AuthState)


def create_context() -> StorefrontContext:
    """Create an empty context (empty cart, wishlist, catalog; signed out)."""
    return StorefrontContext()
