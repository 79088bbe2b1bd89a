"""In-memory wishlist store.

Re-adding a product that is already saved is a no-op (idempotent add);
removal is always an explicit, separate action.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Tuple, Union

from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.realtime import EVENT_WISHLIST_UPDATED, Listener, StateEmitter, StateEvent
from storefront.services.models import Product, ProductId

logger = get_logger(__name__)


@dataclass(frozen=True)
class WishlistState:
    """Read-only wishlist snapshot."""

    items: Tuple[Product, ...] = ()

    @property
    def count(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {"items": [item.to_dict() for item in self.items], "count": self.count}


class WishlistStore:
    """Saved product snapshots keyed by product id, insertion order preserved."""

    def __init__(self) -> None:
        self._items: dict[ProductId, Product] = {}
        self._emitter = StateEmitter()

    def __len__(self) -> int:
        return len(self._items)

    def contains(self, product_id: ProductId) -> bool:
        return product_id in self._items

    def snapshot(self) -> WishlistState:
        return WishlistState(items=tuple(p.model_copy() for p in self._items.values()))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with a wishlist.updated event after every change."""
        return self._emitter.subscribe(listener)

    def add_to_wishlist(self, product: Union[Product, Mapping[str, Any]]) -> bool:
        """Save a product snapshot.

        Args:
            product: Product record or a mapping with the product fields

        Returns:
            True if added, False if the product was already saved
        """
        snapshot = (
            product.model_copy() if isinstance(product, Product) else Product.model_validate(product)
        )
        if snapshot.id in self._items:
            return False

        self._items[snapshot.id] = snapshot
        self._commit("add", snapshot.id)
        return True

    def remove_from_wishlist(self, product_id: ProductId) -> bool:
        """Remove by id. Returns False (no-op) if absent."""
        if self._items.pop(product_id, None) is None:
            return False
        self._commit("remove", product_id)
        return True

    def clear_wishlist(self) -> None:
        """Empty the wishlist."""
        if not self._items:
            return
        self._items.clear()
        self._commit("clear", None)

    def _commit(self, action: str, product_id: ProductId | None) -> None:
        logger.debug(
            f"Wishlist {action} product={sanitize_id_for_logging(product_id)} count={len(self._items)}"
        )
        self._emitter.emit(
            StateEvent(event=EVENT_WISHLIST_UPDATED, action=action, data=self.snapshot())
        )
