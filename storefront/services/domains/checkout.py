"""Checkout Domain Service.

Validates the shipping form and places the order. Order placement is
simulated: nothing is sent to a backend and the cart is left as it is.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from storefront.context import StorefrontContext
from storefront.errors import ERROR_CART_EMPTY, ERROR_REQUIRED_FIELDS, ERROR_UNAUTHORIZED
from storefront.logging import get_logger
from storefront.services.models import ShippingDetails

logger = get_logger(__name__)

REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("full_name", "Full name is required"),
    ("address", "Address is required"),
    ("city", "City is required"),
    ("postal_code", "Postal code is required"),
    ("country", "Country is required"),
)


class ShippingForm(BaseModel):
    """Raw shipping form as submitted; blanks are allowed here and reported by validation."""
    full_name: str = ""
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""


@dataclass
class CheckoutResult:
    """Order placement result."""

    success: bool
    total: Decimal = Decimal("0")
    item_count: int = 0
    shipping: Optional[ShippingDetails] = None
    errors: dict[str, str] = field(default_factory=dict)
    reason: Optional[str] = None
    message: Optional[str] = None


def validate_shipping(form: ShippingForm) -> dict[str, str]:
    """Field -> message for every blank required field."""
    return {name: message for name, message in REQUIRED_FIELDS if not getattr(form, name).strip()}


def place_order(context: StorefrontContext, form: ShippingForm) -> CheckoutResult:
    """
    Place the order for the context's cart.

    Checks, in order: signed in, cart not empty, shipping form complete.
    """
    if not context.auth.is_authenticated:
        return CheckoutResult(success=False, reason=ERROR_UNAUTHORIZED)

    cart = context.cart.snapshot()
    if cart.is_empty:
        return CheckoutResult(success=False, reason=ERROR_CART_EMPTY)

    errors = validate_shipping(form)
    if errors:
        return CheckoutResult(success=False, errors=errors, reason=ERROR_REQUIRED_FIELDS)

    shipping = ShippingDetails(**form.model_dump())
    logger.info(f"Order placed: {cart.item_count} item(s), total {cart.total}")
    return CheckoutResult(
        success=True,
        total=cart.total,
        item_count=cart.item_count,
        shipping=shipping,
        message="Order placed successfully!",
    )
