"""Domain services used by the routers."""
from .admin import AdminService, ProductForm, UserForm
from .checkout import CheckoutResult, ShippingForm, place_order, validate_shipping

__all__ = [
    "AdminService",
    "ProductForm",
    "UserForm",
    "CheckoutResult",
    "ShippingForm",
    "place_order",
    "validate_shipping",
]
