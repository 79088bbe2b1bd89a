"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Tuple

from storefront.services.models import ProductId


@dataclass
class LineItem:
    """Single product in the cart."""
    product_id: ProductId
    title: str
    unit_price: Decimal
    image: str = ""
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        """Price for all units of this line."""
        return self.unit_price * self.quantity

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.product_id,
            "title": self.title,
            "price": float(self.unit_price),
            "image": self.image,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class CartState:
    """Read-only cart snapshot handed to consumers."""
    items: Tuple[LineItem, ...] = ()
    total: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def item_count(self) -> int:
        """Total number of units in cart."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "items": [item.to_dict() for item in self.items],
            "total": float(self.total),
            "item_count": self.item_count,
        }
