"""In-memory cart store."""
from dataclasses import replace
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional, Union

from storefront.errors import ERROR_INVALID_QUANTITY
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.realtime import EVENT_CART_UPDATED, Listener, StateEmitter, StateEvent
from storefront.services.models import Product, ProductId
from .models import LineItem, CartState

logger = get_logger(__name__)

ProductSnapshot = Union[Product, Mapping[str, Any]]


def _line_item_from(product: ProductSnapshot) -> LineItem:
    """
    Copy the fields a line item needs out of a product snapshot.

    Raises:
        pydantic.ValidationError: Mapping without an id, or with a missing,
            non-numeric, negative or non-finite price
    """
    if not isinstance(product, Product):
        product = Product.model_validate(product)
    return LineItem(
        product_id=product.id,
        title=product.title,
        unit_price=product.price,
        image=product.image,
    )


class CartStore:
    """
    Cart line items keyed by product id, plus the derived total.

    Every mutation recomputes `total` before returning and before
    subscribers are notified, so a snapshot never shows a stale total.

    Usage:
        cart = CartStore()
        cart.add_item(product)
        cart.set_quantity(product.id, 3)
        cart.snapshot().total
    """

    def __init__(self) -> None:
        # dict keeps insertion order; mutations never reorder
        self._items: dict[ProductId, LineItem] = {}
        self._total = Decimal("0")
        self._emitter = StateEmitter()

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, product_id: ProductId) -> bool:
        return product_id in self._items

    def get_item(self, product_id: ProductId) -> Optional[LineItem]:
        """Copy of the line item for product_id, or None."""
        item = self._items.get(product_id)
        return replace(item) if item else None

    def snapshot(self) -> CartState:
        """Current items (copied) and total."""
        return CartState(
            items=tuple(replace(item) for item in self._items.values()),
            total=self._total,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with a cart.updated event after every change."""
        return self._emitter.subscribe(listener)

    def add_item(self, product: ProductSnapshot) -> CartState:
        """Add one unit of product; a product already in the cart gets quantity + 1."""
        item = _line_item_from(product)
        existing = self._items.get(item.product_id)

        if existing:
            existing.quantity += 1
        else:
            self._items[item.product_id] = item

        return self._commit("add", item.product_id)

    def remove_item(self, product_id: ProductId) -> CartState:
        """Remove the line for product_id. Absent id is a no-op."""
        if self._items.pop(product_id, None) is None:
            return self.snapshot()
        return self._commit("remove", product_id)

    def set_quantity(self, product_id: ProductId, quantity: int) -> CartState:
        """
        Set the quantity of an existing line.

        Raises:
            ValueError: If quantity is not an integer >= 1 (never clamped)
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError(ERROR_INVALID_QUANTITY)

        item = self._items.get(product_id)
        if item is None:
            return self.snapshot()

        item.quantity = quantity
        return self._commit("set_quantity", product_id)

    def _recompute_total(self) -> None:
        self._total = sum((item.line_total for item in self._items.values()), Decimal("0"))

    def _commit(self, action: str, product_id: ProductId) -> CartState:
        self._recompute_total()
        state = self.snapshot()
        logger.debug(
            f"Cart {action} product={sanitize_id_for_logging(product_id)} "
            f"lines={len(state.items)} total={state.total}"
        )
        self._emitter.emit(StateEvent(event=EVENT_CART_UPDATED, action=action, data=state))
        return state
