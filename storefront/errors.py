"""
Common Errors

Centralized error messages and the exceptions raised by storefront services.
"""

# Auth errors
ERROR_UNAUTHORIZED = "Please log in to continue"
ERROR_NOT_ADMIN = "You do not have admin privileges"
ERROR_SESSION_EXPIRED = "Session expired"

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CATALOG_UNAVAILABLE = "Catalog service unavailable"

# Cart errors
ERROR_INVALID_QUANTITY = "Quantity must be at least 1"
ERROR_CART_EMPTY = "Your cart is empty"

# Form errors
ERROR_REQUIRED_FIELDS = "Please fill in all required fields"
ERROR_PASSWORDS_MISMATCH = "Passwords do not match"
ERROR_EMAILS_MISMATCH = "Emails do not match"
ERROR_PHOTO_TOO_LARGE = "File size must be less than 5MB"
ERROR_IMAGE_TOO_LARGE = "Image size must be less than 5MB"


class StorefrontError(Exception):
    """Base class for storefront service errors."""


class CatalogUnavailableError(StorefrontError):
    """Catalog fetch failed (transport error or non-2xx status)."""


class ProductNotFoundError(StorefrontError):
    """Catalog has no product with the requested id."""


class AuthError(StorefrontError):
    """Sign-up, sign-in or sign-out rejected by the identity backend."""


class PermissionDeniedError(StorefrontError):
    """Signed-in user lacks the required role."""


class FormValidationError(StorefrontError):
    """Form submission is missing fields or has inconsistent values."""

    def __init__(self, errors: dict[str, str], message: str = ERROR_REQUIRED_FIELDS):
        super().__init__(message)
        self.errors = errors
